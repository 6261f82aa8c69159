"""
A pair of small algorithm exercises kept side by side:

	* disks: sorting a row of alternating light and dark disks with adjacent swaps.
	* subsequence: an exhaustive search for a longest strictly-increasing subsequence.

Neither depends on the other. See the respective sub-packages.
"""
