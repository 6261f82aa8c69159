"""
The alternating disks problem works on a row of 2N disks, N light and N dark, which starts out
alternating dark/light from the left. The goal is to get all the light disks to the left end
and the dark disks to the right, using only swaps of adjacent disks.

This module gives the row itself and the (row, swap-count) pair that a sorting algorithm
produces. The algorithms are in `sorting.py`.
"""

from enum import Enum
from typing import NamedTuple

from ..support.failures import BadDiskCount, BadDiskIndex, FrozenDiskState

class DiskColor(Enum):
	LIGHT = 'L'
	DARK = 'D'

class DiskState:
	"""
	One row of disks. The length is fixed at construction to twice the light-count,
	so light and dark counts are always equal. Only adjacent swaps change it afterwards,
	and not even those once the row has been frozen.
	"""
	def __init__(self, light_count:int):
		if isinstance(light_count, bool) or not isinstance(light_count, int) or light_count < 1: raise BadDiskCount(light_count)
		self.__colors = [DiskColor.DARK, DiskColor.LIGHT] * light_count
		self.__frozen = False
	
	def __eq__(self, other):
		if not isinstance(other, DiskState): return NotImplemented
		return self.__colors == other.__colors
	
	__hash__ = None  # Mutable: swap() changes the value.
	
	def total_count(self) -> int: return len(self.__colors)
	def light_count(self) -> int: return self.total_count() // 2
	def dark_count(self) -> int: return self.light_count()
	
	def is_index(self, index:int) -> bool: return 0 <= index < self.total_count()
	
	def get(self, index:int) -> DiskColor:
		if not self.is_index(index): raise BadDiskIndex(index, self.total_count())
		return self.__colors[index]
	
	def swap(self, left_index:int):
		""" Exchange the disks at left_index and left_index+1. Both must be in bounds. """
		if self.__frozen: raise FrozenDiskState()
		right_index = left_index + 1
		for index in (left_index, right_index):
			if not self.is_index(index): raise BadDiskIndex(index, self.total_count())
		colors = self.__colors
		colors[left_index], colors[right_index] = colors[right_index], colors[left_index]
	
	def freeze(self):
		""" Refuse any further swaps. There is no thawing: take a copy() for a mutable row. """
		self.__frozen = True
	
	def is_frozen(self) -> bool: return self.__frozen
	
	def copy(self) -> "DiskState":
		other = DiskState(self.light_count())
		other.__colors[:] = self.__colors
		return other
	
	def to_string(self) -> str:
		return " ".join(color.value for color in self.__colors)
	
	__str__ = to_string
	def __repr__(self): return "%s(%r)"%(type(self).__name__, self.to_string())
	
	def is_alternating(self) -> bool:
		"""
		True when no pair starting at an even offset reads light-then-dark.
		A fresh row qualifies. Rows shorter than two disks do not.
		"""
		colors = self.__colors
		if len(colors) < 2: return False
		for j in range(0, len(colors), 2):
			if colors[j] is DiskColor.LIGHT and colors[j+1] is DiskColor.DARK: return False
		return True
	
	def is_sorted(self) -> bool:
		""" True when the left half is all light and the right half is all dark. """
		colors = self.__colors
		if len(colors) < 2: return True
		half = len(colors) // 2
		return (
			all(c is DiskColor.LIGHT for c in colors[:half])
			and all(c is DiskColor.DARK for c in colors[half:])
		)

class SortedDisks(NamedTuple):
	""" What a sorting algorithm hands back: the row after sorting (frozen), and how many swaps it took. """
	after: DiskState
	swap_count: int
