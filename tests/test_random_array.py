import unittest
import random
import sys
import os
from unittest import mock

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortlab.generators.random_array import generate_random_array
from sortlab.sort_errors import (
    DEFAULT_ARRAY_SIZE,
    DEFAULT_QUADRATIC_LIMIT,
    InvalidBoundsError,
    resolve_array_size,
    resolve_quadratic_limit,
)


class TestGenerateRandomArray(unittest.TestCase):

    def test_length(self):
        self.assertEqual(len(generate_random_array(50, 0, 10)), 50)

    def test_zero_length(self):
        self.assertEqual(generate_random_array(0, 0, 10), [])

    def test_zero_length_ignores_bounds(self):
        self.assertEqual(generate_random_array(0, 5, 5), [])

    def test_half_open_bounds(self):
        values = generate_random_array(2000, -3, 3, rng=random.Random(5))
        self.assertTrue(all(-3 <= v < 3 for v in values))
        self.assertIn(-3, values)
        self.assertNotIn(3, values)

    def test_single_value_range(self):
        self.assertEqual(generate_random_array(4, 7, 8), [7, 7, 7, 7])

    def test_seeded_rng_is_reproducible(self):
        a = generate_random_array(30, 0, 1000, rng=random.Random(42))
        b = generate_random_array(30, 0, 1000, rng=random.Random(42))
        self.assertEqual(a, b)

    def test_returns_new_list_each_call(self):
        rng = random.Random(1)
        self.assertIsNot(generate_random_array(3, 0, 5, rng=rng),
                         generate_random_array(3, 0, 5, rng=rng))

    def test_negative_length(self):
        with self.assertRaises(InvalidBoundsError) as ctx:
            generate_random_array(-1, 0, 10)
        self.assertEqual(ctx.exception.length, -1)

    def test_empty_range(self):
        with self.assertRaises(ValueError) as ctx:
            generate_random_array(3, 10, 10)
        self.assertIsInstance(ctx.exception, InvalidBoundsError)
        self.assertEqual((ctx.exception.min_value, ctx.exception.max_value), (10, 10))

    def test_inverted_range(self):
        with self.assertRaises(InvalidBoundsError):
            generate_random_array(3, 10, 0)


class TestLimitResolution(unittest.TestCase):

    def test_explicit_value_wins(self):
        with mock.patch.dict(os.environ, {"SORTLAB_SIZE": "77"}):
            self.assertEqual(resolve_array_size(12), 12)

    def test_env_value(self):
        with mock.patch.dict(os.environ, {"SORTLAB_SIZE": "77"}):
            self.assertEqual(resolve_array_size(), 77)

    def test_default(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(resolve_array_size(), DEFAULT_ARRAY_SIZE)
            self.assertEqual(resolve_quadratic_limit(), DEFAULT_QUADRATIC_LIMIT)

    def test_invalid_values_fall_back(self):
        with mock.patch.dict(os.environ, {"SORTLAB_QUADRATIC_LIMIT": "lots"}):
            self.assertEqual(resolve_quadratic_limit(), DEFAULT_QUADRATIC_LIMIT)
        self.assertEqual(resolve_array_size(0), DEFAULT_ARRAY_SIZE)
        self.assertEqual(resolve_array_size(-5), DEFAULT_ARRAY_SIZE)


if __name__ == '__main__':
    unittest.main()
