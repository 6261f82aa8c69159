""" Plain integer sequences: rendering them, making them up, and telling if they go strictly uphill. """

import random

from ..support.failures import BadMaxElement, BadSequenceSize

def sequence_to_string(seq) -> str:
	""" Human-readable rendering, handy for pretty-printing or debugging: "[1, 2, 3]". """
	return "[%s]"%", ".join(str(x) for x in seq)

def random_sequence(size:int, seed:int, max_element:int, *, rng:random.Random=None) -> list:
	"""
	Generate a pseudorandom sequence of the given size, where every element is in the
	inclusive range [0, max_element]. The same (size, seed, max_element) always gives
	the same sequence, because the generator is seeded afresh for each call.
	
	If you already have a seeded generator you would rather draw from, pass it as `rng`;
	the seed is then ignored.
	"""
	if max_element < 0: raise BadMaxElement(max_element)
	if size < 0: raise BadSequenceSize(size)
	if rng is None: rng = random.Random(seed)
	return [rng.randint(0, max_element) for _ in range(size)]

def is_increasing(seq) -> bool:
	""" Each element strictly less than the next. Empty and singleton sequences qualify. """
	return all(a < b for a, b in zip(seq, seq[1:]))
