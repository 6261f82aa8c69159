import unittest
from algolab.disks import DiskState, SortedDisks, sort_left_to_right, sort_lawnmower, ALGORITHMS
from algolab.support.failures import FrozenDiskState

BOTH = [sort_left_to_right, sort_lawnmower]

class TestSorting(unittest.TestCase):
	def test_00_three_pairs(self):
		before = DiskState(3)
		self.assertEqual("D L D L D L", str(before))
		for sort in BOTH:
			with self.subTest(sort=sort.__name__):
				result = sort(before)
				self.assertIsInstance(result, SortedDisks)
				self.assertEqual("L L L D D D", str(result.after))
				self.assertEqual(6, result.swap_count)
	
	def test_01_both_agree(self):
		for n in range(1, 16):
			with self.subTest(n=n):
				before = DiskState(n)
				left = sort_left_to_right(before)
				mower = sort_lawnmower(before)
				self.assertTrue(left.after.is_sorted())
				self.assertTrue(mower.after.is_sorted())
				self.assertEqual(left.after, mower.after)
	
	def test_02_swap_counts(self):
		# Every adjacent swap removes exactly one dark-before-light inversion, and a fresh row has n(n+1)/2 of them.
		for n in range(1, 16):
			for sort in BOTH:
				with self.subTest(n=n, sort=sort.__name__):
					swaps = sort(DiskState(n)).swap_count
					self.assertEqual(n*(n+1)//2, swaps)
					self.assertTrue(0 <= swaps <= n*n)
	
	def test_03_input_untouched(self):
		before = DiskState(4)
		for sort in BOTH:
			with self.subTest(sort=sort.__name__):
				sort(before)
				self.assertEqual(DiskState(4), before)
				self.assertTrue(before.is_alternating())
	
	def test_04_result_is_immutable(self):
		for sort in BOTH:
			with self.subTest(sort=sort.__name__):
				result = sort(DiskState(2))
				with self.assertRaises(AttributeError): result.swap_count = 0
				self.assertTrue(result.after.is_frozen())
				with self.assertRaises(FrozenDiskState): result.after.swap(1)
				self.assertEqual("L L D D", str(result.after))
				self.assertTrue(result.after.is_sorted())
	
	def test_05_sorting_a_sorted_result(self):
		result = sort_left_to_right(sort_lawnmower(DiskState(3)).after)
		self.assertEqual("L L L D D D", str(result.after))
		self.assertEqual(0, result.swap_count)
	
	def test_06_hand_arranged_row_is_out_of_reach(self):
		# Fixed pass counts only cover rows that start out alternating.
		before = DiskState(2)
		before.swap(1)
		self.assertEqual("D D L L", str(before))
		self.assertEqual("D L L D", str(sort_left_to_right(before).after))
	
	def test_07_registry(self):
		self.assertIs(sort_left_to_right, ALGORITHMS['left-to-right'])
		self.assertIs(sort_lawnmower, ALGORITHMS['lawnmower'])


if __name__ == '__main__':
	unittest.main()
