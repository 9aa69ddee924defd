"""Tests for matrix module.

Checks transpose, the column-major flatten and 4x4 inversion against
numpy's reference implementations.
"""

import sys
import unittest
from pathlib import Path

import numpy as np

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from glmath import matrix, transform
from glmath.construct import mat3, mat4
from glmath.errors import IncompatibleOperands
from glmath.ops import mult


class TestMatrix(unittest.TestCase):
    """Test matrix operations."""

    def setUp(self):
        """Build a well-conditioned affine matrix and a random one."""
        m = transform.scale(mat4(1.0), (2.0, 3.0, 0.5))
        m = transform.rotate(m, 35.0, (0, 0, 1))
        m = transform.rotate(m, -20.0, (1, 0, 0))
        self.affine = transform.translate(m, (4.0, -1.0, 2.5))

        rng = np.random.default_rng(7)
        self.random = rng.uniform(-5, 5, 16)
        self.m3 = np.arange(9, dtype=float)

    def test_transpose_values(self):
        m = np.arange(16, dtype=float)
        result = matrix.transpose(m)
        for row in range(4):
            for col in range(4):
                self.assertEqual(result[row * 4 + col], m[col * 4 + row])

        np.testing.assert_array_equal(
            matrix.transpose(self.m3), [0, 3, 6, 1, 4, 7, 2, 5, 8]
        )

    def test_transpose_involution(self):
        for m in (self.m3, self.random, mat3(1), self.affine):
            np.testing.assert_array_equal(matrix.transpose(matrix.transpose(m)), m)

    def test_transpose_rejects_non_square(self):
        with self.assertRaises(IncompatibleOperands):
            matrix.transpose([1.0, 2.0, 3.0])
        with self.assertRaises(IncompatibleOperands):
            matrix.flatten(np.zeros(12))

    def test_flatten_is_column_major(self):
        expected = self.random.reshape(4, 4).ravel(order="F")
        np.testing.assert_array_equal(matrix.flatten(self.random), expected)
        np.testing.assert_array_equal(matrix.flatten(self.random), matrix.transpose(self.random))

    def test_flatten_mat3(self):
        m = np.arange(9.0)
        np.testing.assert_array_equal(matrix.flatten(m), m.reshape(3, 3).ravel(order="F"))
        np.testing.assert_array_equal(matrix.flatten(m), [0, 3, 6, 1, 4, 7, 2, 5, 8])

    def test_transpose_rejects_2d_arrays(self):
        square = np.arange(16.0).reshape(4, 4)
        with self.assertRaises(IncompatibleOperands):
            matrix.transpose(square)
        with self.assertRaises(IncompatibleOperands):
            matrix.flatten(square)
        with self.assertRaises(IncompatibleOperands):
            matrix.inverse(square)

    def test_flatten_translation_last(self):
        # Column-major layout puts the translation in elements 12, 13, 14
        m = transform.translate(mat4(1.0), (1.0, 2.0, 3.0))
        np.testing.assert_array_equal(matrix.flatten(m)[12:15], [1.0, 2.0, 3.0])

    def test_transpose_does_not_modify_input(self):
        original = self.random.copy()
        matrix.transpose(self.random)
        matrix.flatten(self.random)
        np.testing.assert_array_equal(self.random, original)

    def test_determinant(self):
        for m in (self.affine, self.random):
            self.assertAlmostEqual(
                matrix.determinant(m), np.linalg.det(m.reshape(4, 4)), delta=1e-9
            )
        self.assertEqual(matrix.determinant(mat4(2.0)), 16.0)

    def test_inverse_roundtrip(self):
        for m in (self.affine, self.random):
            inv = matrix.inverse(m)
            self.assertIsNotNone(inv)
            np.testing.assert_allclose(mult(m, inv), mat4(1.0), atol=1e-9)
            np.testing.assert_allclose(mult(inv, m), mat4(1.0), atol=1e-9)

    def test_inverse_matches_numpy(self):
        inv = matrix.inverse(self.random)
        expected = np.linalg.inv(self.random.reshape(4, 4)).ravel()
        np.testing.assert_allclose(inv, expected, rtol=1e-9, atol=1e-12)

    def test_inverse_of_translation(self):
        m = transform.translate(mat4(1.0), (1.0, 2.0, 3.0))
        expected = transform.translate(mat4(1.0), (-1.0, -2.0, -3.0))
        np.testing.assert_allclose(matrix.inverse(m), expected, atol=1e-15)

    def test_inverse_singular(self):
        self.assertIsNone(matrix.inverse(mat4()))

        # Singular input is an expected outcome, not a warning
        with self.assertLogs("glmath.matrix", level="DEBUG") as logs:
            matrix.inverse(mat4())
        self.assertTrue(all(record.levelname == "DEBUG" for record in logs.records))

        # Two equal rows
        m = np.arange(16, dtype=float)
        m[4:8] = m[0:4]
        self.assertIsNone(matrix.inverse(m))

    def test_inverse_requires_mat4(self):
        with self.assertRaises(IncompatibleOperands):
            matrix.inverse(mat3(1))
        with self.assertRaises(IncompatibleOperands):
            matrix.determinant([1.0, 2.0, 3.0, 4.0])


if __name__ == "__main__":
    unittest.main()
