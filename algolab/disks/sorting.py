"""
Two algorithms for the alternating disks problem. Both are bubble-sorts at heart, and both
are written against the DiskState interface so they count exactly the swaps they make.

Neither mutates its argument: each works on a copy and returns a SortedDisks holding that
copy, frozen so it stays sorted.

The pass counts are fixed in advance, and they are enough for a row that starts out alternating
(which is the only kind DiskState builds). A row first rearranged by hand with swap() may come
out unsorted, and then the two algorithms need not agree.
"""

from .state import DiskColor, DiskState, SortedDisks

DARK, LIGHT = DiskColor.DARK, DiskColor.LIGHT

def sort_left_to_right(before:DiskState) -> SortedDisks:
	"""
	Repeated left-to-right passes, each swapping any dark disk that sits just left of a light one.
	Pass i scans from position i up to the (2N-i-1)th pair, so the window shrinks from both ends.
	N passes suffice for a row that starts out alternating. Other starting rows may not end up sorted,
	since the scan never looks left of position i again.
	"""
	row = before.copy()
	n = row.light_count()
	swaps = 0
	for i in range(n):
		for j in range(i, 2*n - i - 1):
			if row.get(j) is DARK and row.get(j+1) is LIGHT:
				row.swap(j)
				swaps += 1
	row.freeze()
	return SortedDisks(row, swaps)

def sort_lawnmower(before:DiskState) -> SortedDisks:
	"""
	Like mowing a lawn: sweep right, swapping dark-before-light, then sweep back left,
	swapping a light disk leftward past a dark one. Each round trip stops one place short
	of where the previous one started on the right. There are N//2 + 1 round trips, which is
	enough for an alternating row but not for every arrangement.
	"""
	row = before.copy()
	n = row.light_count()
	swaps = 0
	for i in range(n // 2 + 1):
		for j in range(2*n - i - 1):
			if row.get(j) is DARK and row.get(j+1) is LIGHT:
				row.swap(j)
				swaps += 1
		for k in range(2*n - i - 1, 0, -1):
			if row.get(k) is LIGHT and row.get(k-1) is DARK:
				row.swap(k-1)
				swaps += 1
	row.freeze()
	return SortedDisks(row, swaps)

ALGORITHMS = {
	'left-to-right': sort_left_to_right,
	'lawnmower': sort_lawnmower,
}
