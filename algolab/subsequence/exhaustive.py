"""
An exhaustive optimization algorithm for the longest increasing subsequence problem.

It tries every non-empty subsequence, so it takes time exponential in the length of the input.
That makes it useless for real work, but quite good as an oracle to check cleverer algorithms
against on small inputs.
"""

from .sequence import is_increasing

def index_selections(n:int):
	"""
	Generate and yield each of the 2^n - 1 non-empty strictly-increasing tuples of indices into
	a sequence of length n, lazily, in depth-first order: (0,), (0,1), (0,1,2) ... (1,), (1,2) ...
	
	The stack holds 1-based positions above a zero sentinel. While the top is below n, push its
	successor; otherwise pop and advance the new top. Whatever is on the stack above the sentinel
	after each step is the next selection. Once only the sentinel remains, every selection has
	been produced.
	"""
	if n <= 0: return
	stack = [0]
	while True:
		if stack[-1] < n:
			stack.append(stack[-1] + 1)
		else:
			stack.pop()
			stack[-1] += 1
		if len(stack) == 1: return
		yield tuple(position - 1 for position in stack[1:])

def longest_increasing_powerset(seq) -> list:
	"""
	Return a longest strictly-increasing subsequence of `seq`, found by brute force.
	Among equally long answers, the first one the enumeration reaches wins.
	"""
	best = []
	for selection in index_selections(len(seq)):
		candidate = [seq[i] for i in selection]
		if len(best) < len(candidate) and is_increasing(candidate): best = candidate
	return best
