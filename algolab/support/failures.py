"""
Exception types which algolab deals in.

Everything here is a precondition violation on the caller's part. None of it is meant to be
recovered from inside the library: the exceptions just say clearly what went wrong.
"""

class AlgolabError(ValueError):
	""" Base class of all exceptions arising from this package. """

class BadDiskCount(AlgolabError):
	""" A row of disks needs at least one light/dark pair. """
	def __init__(self, light_count):
		super().__init__("light_count must be a positive integer, not %r"%(light_count,))
		self.light_count = light_count

class BadDiskIndex(AlgolabError, IndexError):
	"""
	Raised for an out-of-bounds disk position.
	Parameters are:
		the offending index.
		the number of disks in the row.
	"""
	def __init__(self, index, total_count):
		super().__init__("disk index %r is out of range for a row of %d disks"%(index, total_count))
		self.index, self.total_count = index, total_count

class BadMaxElement(AlgolabError):
	def __init__(self, max_element):
		super().__init__("max_element must be non-negative, not %r"%(max_element,))
		self.max_element = max_element

class BadSequenceSize(AlgolabError):
	def __init__(self, size):
		super().__init__("size must be non-negative, not %r"%(size,))
		self.size = size

class FrozenDiskState(AlgolabError):
	""" Raised by swap() on a row that has been frozen, such as the row inside a sort result. """
	def __init__(self):
		super().__init__("this row of disks is frozen; swap a copy() instead")
