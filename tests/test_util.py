"""Tests for util module."""

import sys
import unittest
from pathlib import Path

import numpy as np

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from glmath.util import is_power_of_2


class TestUtil(unittest.TestCase):
    """Test the power-of-two check."""

    def test_powers_of_two(self):
        for exponent in range(0, 31):
            self.assertTrue(is_power_of_2(2 ** exponent))
        self.assertTrue(is_power_of_2(np.int32(256)))

    def test_non_powers_of_two(self):
        for value in (3, 5, 6, 7, 12, 255, 1000):
            self.assertFalse(is_power_of_2(value))

    def test_zero_is_not_a_power_of_two(self):
        # The bare bit test would accept 0
        self.assertFalse(is_power_of_2(0))

    def test_negative_values(self):
        self.assertFalse(is_power_of_2(-8))
        self.assertFalse(is_power_of_2(-1))

    def test_rejects_floats(self):
        with self.assertRaises(TypeError):
            is_power_of_2(8.0)
        with self.assertRaises(TypeError):
            is_power_of_2(np.float64(4.0))


if __name__ == "__main__":
    unittest.main()
