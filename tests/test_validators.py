import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortlab.validators import check_sort_result, is_permutation, is_sorted


class TestIsSorted(unittest.TestCase):

    def test_empty_is_sorted(self):
        self.assertTrue(is_sorted([]))

    def test_singleton_is_sorted(self):
        self.assertTrue(is_sorted([7]))

    def test_non_decreasing_with_duplicates(self):
        self.assertTrue(is_sorted([0, 0, 2, 2, 3, 3, 5, 6, 8, 9]))

    def test_unsorted(self):
        self.assertFalse(is_sorted([3, 2, 0, 5, 8, 9, 6, 3, 2, 0]))

    def test_violation_at_end(self):
        self.assertFalse(is_sorted([1, 2, 3, 4, 0]))

    def test_short_circuits_on_first_violation(self):
        class Probe:
            compared = 0

            def __init__(self, v):
                self.v = v

            def __gt__(self, other):
                Probe.compared += 1
                return self.v > other.v

        items = [Probe(v) for v in (2, 1, 3, 4, 5, 6)]
        self.assertFalse(is_sorted(items))
        self.assertEqual(Probe.compared, 1)

    def test_with_key(self):
        self.assertTrue(is_sorted(["a", "bb", "ccc"], key=len))
        self.assertFalse(is_sorted(["ccc", "a"], key=len))

    def test_tuple_input(self):
        self.assertTrue(is_sorted((1, 2, 2)))


class TestIsPermutation(unittest.TestCase):

    def test_same_multiset(self):
        self.assertTrue(is_permutation([3, 1, 2, 1], [1, 1, 2, 3]))

    def test_lost_duplicate(self):
        self.assertFalse(is_permutation([1, 1, 2], [1, 2, 2]))

    def test_length_mismatch(self):
        self.assertFalse(is_permutation([1, 2], [1, 2, 2]))

    def test_unhashable_elements(self):
        self.assertTrue(is_permutation([[2], [1]], [[1], [2]]))
        self.assertFalse(is_permutation([[2], [1]], [[1], [1]]))


class TestCheckSortResult(unittest.TestCase):

    def test_ok(self):
        self.assertEqual(check_sort_result([2, 1], [1, 2]), (True, "OK"))

    def test_not_ordered(self):
        ok, reason = check_sort_result([2, 1], [2, 1])
        self.assertFalse(ok)
        self.assertIn("order", reason)

    def test_altered_elements(self):
        ok, reason = check_sort_result([2, 1], [1, 3])
        self.assertFalse(ok)
        self.assertIn("lost", reason)


if __name__ == '__main__':
    unittest.main()
