"""Matrix operations: transpose, layout conversion and 4x4 inversion.

Matrices are stored row-major. ``flatten`` converts a matrix to the
column-major layout expected by OpenGL/WebGL style uniform uploads.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from .errors import IncompatibleOperands
from .shapes import ArrayLike, Shape, as_array, flat_size, shape_of

logger = logging.getLogger(__name__)


def _square_order(m: ArrayLike) -> int:
    size = flat_size(m)
    n = int(round(np.sqrt(size)))
    if n == 0 or n * n != size:
        raise IncompatibleOperands(f"Sequence of length {size} is not a square matrix")
    return n


def transpose(m: ArrayLike) -> np.ndarray:
    """Transpose an N x N matrix, N inferred from the length.

    ``result[row * N + col] = m[col * N + row]``.
    """
    n = _square_order(m)
    return as_array(m).reshape(n, n).T.ravel()


def flatten(m: ArrayLike) -> np.ndarray:
    """Convert a row-major matrix to column-major order for the GPU.

    The arithmetic is the same as ``transpose``. Call it on a matrix right
    before passing it to the rendering API, never in the middle of a
    computation.
    """
    n = _square_order(m)
    return as_array(m).reshape(n, n).ravel(order="F")


def _require_mat4(m: ArrayLike, op: str) -> None:
    if shape_of(m) is not Shape.MAT4:
        raise IncompatibleOperands(f"{op} is only defined for 4x4 matrices, got length {len(m)}")


def _cofactors(m: np.ndarray) -> List[float]:
    """Unscaled adjugate of a 4x4 row-major matrix."""
    inv = [0.0] * 16

    inv[0] = (m[5] * m[10] * m[15] - m[5] * m[11] * m[14] - m[9] * m[6] * m[15]
              + m[9] * m[7] * m[14] + m[13] * m[6] * m[11] - m[13] * m[7] * m[10])
    inv[4] = (-m[4] * m[10] * m[15] + m[4] * m[11] * m[14] + m[8] * m[6] * m[15]
              - m[8] * m[7] * m[14] - m[12] * m[6] * m[11] + m[12] * m[7] * m[10])
    inv[8] = (m[4] * m[9] * m[15] - m[4] * m[11] * m[13] - m[8] * m[5] * m[15]
              + m[8] * m[7] * m[13] + m[12] * m[5] * m[11] - m[12] * m[7] * m[9])
    inv[12] = (-m[4] * m[9] * m[14] + m[4] * m[10] * m[13] + m[8] * m[5] * m[14]
               - m[8] * m[6] * m[13] - m[12] * m[5] * m[10] + m[12] * m[6] * m[9])

    inv[1] = (-m[1] * m[10] * m[15] + m[1] * m[11] * m[14] + m[9] * m[2] * m[15]
              - m[9] * m[3] * m[14] - m[13] * m[2] * m[11] + m[13] * m[3] * m[10])
    inv[5] = (m[0] * m[10] * m[15] - m[0] * m[11] * m[14] - m[8] * m[2] * m[15]
              + m[8] * m[3] * m[14] + m[12] * m[2] * m[11] - m[12] * m[3] * m[10])
    inv[9] = (-m[0] * m[9] * m[15] + m[0] * m[11] * m[13] + m[8] * m[1] * m[15]
              - m[8] * m[3] * m[13] - m[12] * m[1] * m[11] + m[12] * m[3] * m[9])
    inv[13] = (m[0] * m[9] * m[14] - m[0] * m[10] * m[13] - m[8] * m[1] * m[14]
               + m[8] * m[2] * m[13] + m[12] * m[1] * m[10] - m[12] * m[2] * m[9])

    inv[2] = (m[1] * m[6] * m[15] - m[1] * m[7] * m[14] - m[5] * m[2] * m[15]
              + m[5] * m[3] * m[14] + m[13] * m[2] * m[7] - m[13] * m[3] * m[6])
    inv[6] = (-m[0] * m[6] * m[15] + m[0] * m[7] * m[14] + m[4] * m[2] * m[15]
              - m[4] * m[3] * m[14] - m[12] * m[2] * m[7] + m[12] * m[3] * m[6])
    inv[10] = (m[0] * m[5] * m[15] - m[0] * m[7] * m[13] - m[4] * m[1] * m[15]
               + m[4] * m[3] * m[13] + m[12] * m[1] * m[7] - m[12] * m[3] * m[5])
    inv[14] = (-m[0] * m[5] * m[14] + m[0] * m[6] * m[13] + m[4] * m[1] * m[14]
               - m[4] * m[2] * m[13] - m[12] * m[1] * m[6] + m[12] * m[2] * m[5])

    inv[3] = (-m[1] * m[6] * m[11] + m[1] * m[7] * m[10] + m[5] * m[2] * m[11]
              - m[5] * m[3] * m[10] - m[9] * m[2] * m[7] + m[9] * m[3] * m[6])
    inv[7] = (m[0] * m[6] * m[11] - m[0] * m[7] * m[10] - m[4] * m[2] * m[11]
              + m[4] * m[3] * m[10] + m[8] * m[2] * m[7] - m[8] * m[3] * m[6])
    inv[11] = (-m[0] * m[5] * m[11] + m[0] * m[7] * m[9] + m[4] * m[1] * m[11]
               - m[4] * m[3] * m[9] - m[8] * m[1] * m[7] + m[8] * m[3] * m[5])
    inv[15] = (m[0] * m[5] * m[10] - m[0] * m[6] * m[9] - m[4] * m[1] * m[10]
               + m[4] * m[2] * m[9] + m[8] * m[1] * m[6] - m[8] * m[2] * m[5])

    return inv


def _det_from_cofactors(m: np.ndarray, inv: List[float]) -> float:
    return float(m[0] * inv[0] + m[1] * inv[4] + m[2] * inv[8] + m[3] * inv[12])


def determinant(m: ArrayLike) -> float:
    """Determinant of a 4x4 matrix by cofactor expansion along row 0."""
    _require_mat4(m, "determinant")
    values = as_array(m)
    return _det_from_cofactors(values, _cofactors(values))


def inverse(m: ArrayLike) -> Optional[np.ndarray]:
    """Invert a 4x4 matrix.

    Builds the adjugate by cofactor expansion and divides it by the
    determinant.

    Args:
        m: Flat row-major 4x4 matrix

    Returns:
        The inverse as a flat row-major array, or None if the determinant
        is exactly zero
    """
    _require_mat4(m, "inverse")
    values = as_array(m)
    inv = _cofactors(values)
    det = _det_from_cofactors(values, inv)

    if det == 0:
        logger.debug("Matrix is singular (determinant is 0), no inverse exists")
        return None

    logger.debug(f"Inverting 4x4 matrix: det={det:.6g}")
    inv_det = 1.0 / det
    return np.array(inv, dtype=np.float64) * inv_det
