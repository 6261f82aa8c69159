"""
Run the algolab exercises from the command line.

	disks: sort a fresh alternating row of 2N disks and report the swap counts.
	lis: find a longest increasing subsequence of a pseudorandom sequence, by brute force.
"""

import sys, argparse

from algolab.disks import DiskState, ALGORITHMS
from algolab.subsequence import random_sequence, sequence_to_string, longest_increasing_powerset
from algolab.support import pretty, timer
from algolab.support.failures import AlgolabError

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m algolab', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about how long each algorithm took.")
	commands = parser.add_subparsers(dest='command', required=True)

	disks = commands.add_parser('disks', help='sort a row of alternating disks')
	disks.add_argument('light_count', type=int, help='number of light disks (and of dark ones)')
	disks.add_argument('-a', '--algorithm', choices=sorted(ALGORITHMS)+['both'], default='both', help='which sorting algorithm to run')
	disks.add_argument('--table', action='store_true', help='tabulate swap counts for every size from 1 up to light_count')

	lis = commands.add_parser('lis', help='longest increasing subsequence of a random sequence')
	lis.add_argument('-n', '--size', type=int, default=12, help='length of the sequence')
	lis.add_argument('-s', '--seed', type=int, default=0, help='seed for the pseudorandom generator')
	lis.add_argument('-m', '--max', type=int, default=100, dest='max_element', help='largest possible element (inclusive)')
	return parser.parse_args(argv)

def selected_algorithms(args):
	if args.algorithm == 'both': return sorted(ALGORITHMS.items())
	return [(args.algorithm, ALGORITHMS[args.algorithm])]

def run_disks(args):
	algorithms = selected_algorithms(args)
	if args.table:
		grid = [['n'] + [name for name, _ in algorithms]]
		for n in range(1, args.light_count+1):
			before = DiskState(n)
			grid.append([n] + [sort(before).swap_count for _, sort in algorithms])
		pretty.print_grid(grid)
		return
	before = DiskState(args.light_count)
	print('before:', before)
	for name, sort in algorithms:
		with timer.Timer(name):
			result = sort(before)
		print('%s: %s (%d swaps)'%(name, result.after, result.swap_count))

def run_lis(args):
	seq = random_sequence(args.size, args.seed, args.max_element)
	print('sequence:', sequence_to_string(seq))
	with timer.Timer('longest_increasing_powerset'):
		best = longest_increasing_powerset(seq)
	print('longest increasing:', sequence_to_string(best), '(length %d)'%len(best))

COMMANDS = {'disks': run_disks, 'lis': run_lis}

def main(args):
	if args.verbose: timer.VERBOSE = True
	try: COMMANDS[args.command](args)
	except AlgolabError as e:
		print(e.args[0], file=sys.stderr)
		sys.exit(1)

if __name__ == '__main__': main(parse_arguments())
