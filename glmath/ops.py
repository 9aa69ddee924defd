"""Elementwise and algebraic operations on vectors and matrices.

All functions accept flat numeric sequences and return new float64 arrays;
operands are never modified.
"""

from __future__ import annotations

import logging
import numbers
from typing import Callable, Dict, Tuple

import numpy as np

from .errors import DimensionMismatch, IncompatibleOperands
from .shapes import ArrayLike, Shape, as_array, shape_of

logger = logging.getLogger(__name__)


def _check_same_length(u: ArrayLike, v: ArrayLike, op: str) -> None:
    if len(u) != len(v):
        raise DimensionMismatch(
            f"Cannot {op} vectors/matrices of different sizes ({len(u)} and {len(v)})"
        )


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def add(u: ArrayLike, v: ArrayLike) -> np.ndarray:
    """Componentwise sum of two equally sized operands."""
    _check_same_length(u, v, "add")
    return as_array(u) + as_array(v)


def sub(u: ArrayLike, v: ArrayLike) -> np.ndarray:
    """Componentwise difference ``u - v`` of two equally sized operands."""
    _check_same_length(u, v, "subtract")
    return as_array(u) - as_array(v)


def _componentwise(u: np.ndarray, v: np.ndarray) -> np.ndarray:
    return u * v


def _mat4_vec4(m: np.ndarray, v: np.ndarray) -> np.ndarray:
    return m.reshape(4, 4) @ v


def _mat4_mat4(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return (a.reshape(4, 4) @ b.reshape(4, 4)).ravel()


_PRODUCTS: Dict[Tuple[Shape, Shape], Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    (Shape.VEC3, Shape.VEC3): _componentwise,
    (Shape.VEC4, Shape.VEC4): _componentwise,
    (Shape.MAT4, Shape.VEC4): _mat4_vec4,
    (Shape.MAT4, Shape.MAT4): _mat4_mat4,
}


def mult(u, v) -> np.ndarray:
    """Multiply two operands, dispatching on their shapes.

    Supported combinations:

    - Vector3 * Vector3, Vector4 * Vector4: componentwise product
    - Matrix4 * Vector4: matrix-vector product (each row dotted with v)
    - Matrix4 * Matrix4: row-major matrix product
    - scalar * any vector or matrix: every component scaled

    Args:
        u: Left operand (scalar, vector or matrix)
        v: Right operand (vector or matrix)

    Returns:
        New flat array holding the product

    Raises:
        IncompatibleOperands: For any other combination of shapes
    """
    if _is_scalar(u):
        if _is_scalar(v):
            raise IncompatibleOperands("Cannot multiply two scalars; expected a vector or matrix operand")
        shape_of(v)
        return as_array(v) * float(u)

    if _is_scalar(v):
        raise IncompatibleOperands("Scalar multiplication expects the scalar as the left operand")

    key = (shape_of(u), shape_of(v))
    product = _PRODUCTS.get(key)
    if product is None:
        raise IncompatibleOperands(
            f"Incompatible matrix/vector multiplication: {key[0].name} * {key[1].name}"
        )
    return product(as_array(u), as_array(v))


def dot(u: ArrayLike, v: ArrayLike) -> float:
    """Sum of componentwise products."""
    _check_same_length(u, v, "dot")
    result = 0.0
    for a, b in zip(u, v):
        result += float(a) * float(b)
    return result


def cross(u: ArrayLike, v: ArrayLike) -> np.ndarray:
    """Cross product of the x, y, z components of ``u`` and ``v``.

    Any fourth component is ignored, so Vector4 operands are accepted.
    """
    return np.array([
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    ], dtype=np.float64)


def _require_vector(u: ArrayLike, op: str) -> Shape:
    shape = shape_of(u)
    if shape.is_matrix:
        raise IncompatibleOperands(f"{op} expects a Vector3 or Vector4, got {shape.name}")
    return shape


def normalize(u: ArrayLike) -> np.ndarray:
    """Scale a Vector3 or Vector4 to unit length.

    All components, including w of a Vector4, take part in the length. A
    zero vector produces NaN components.
    """
    _require_vector(u, "normalize")
    mag = np.sqrt(dot(u, u))
    if mag == 0.0:
        logger.debug("Normalizing a zero-length vector")
    with np.errstate(divide="ignore", invalid="ignore"):
        return as_array(u) / mag


def mid(u: ArrayLike, v: ArrayLike) -> np.ndarray:
    """Midpoint of two Vector3 or two Vector4 operands."""
    _check_same_length(u, v, "average")
    _require_vector(u, "mid")
    return as_array(u) * 0.5 + as_array(v) * 0.5
