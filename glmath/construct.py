"""Constructors for vectors and matrices.

Named constructors build each kind of value explicitly. ``vec3``, ``vec4``,
``mat3`` and ``mat4`` dispatch on the number of positional arguments and
delegate to them.
"""

from __future__ import annotations

import numpy as np

from .errors import IncompatibleOperands
from .shapes import ArrayLike, Shape, as_array, shape_of


def zeros(shape: Shape) -> np.ndarray:
    """All-zero vector or matrix of the given shape."""
    return np.zeros(shape.size, dtype=np.float64)


def from_scalar_diagonal(shape: Shape, s: float) -> np.ndarray:
    """Matrix with ``s`` on the diagonal and zero elsewhere.

    Args:
        shape: Shape.MAT3 or Shape.MAT4
        s: Diagonal value

    Returns:
        Flat row-major matrix
    """
    if not shape.is_matrix:
        raise IncompatibleOperands(f"Diagonal constructor needs a matrix shape, got {shape.name}")
    n = shape.order
    return (np.eye(n, dtype=np.float64) * s).ravel()


def identity(shape: Shape) -> np.ndarray:
    return from_scalar_diagonal(shape, 1.0)


def from_components(*values: float) -> np.ndarray:
    """Vector or matrix holding exactly the given components."""
    shape_of(values)
    return as_array(values)


def from_vec3_and_scalar(v: ArrayLike, w: float) -> np.ndarray:
    """Vector4 made of the x, y, z of ``v`` followed by ``w``."""
    return np.array([v[0], v[1], v[2], w], dtype=np.float64)


def vec3(*args) -> np.ndarray:
    """Build a Vector3.

    ``vec3()`` is the zero vector, ``vec3(x, y, z)`` takes literal
    components and ``vec3(v)`` copies the first three components of ``v``.
    """
    if len(args) == 0:
        return zeros(Shape.VEC3)
    if len(args) == 1:
        v = args[0]
        return np.array([v[0], v[1], v[2]], dtype=np.float64)
    if len(args) == 3:
        return from_components(*args)
    raise TypeError(f"vec3() takes 0, 1 or 3 arguments ({len(args)} given)")


def vec4(*args) -> np.ndarray:
    """Build a Vector4.

    ``vec4()`` is the zero vector, ``vec4(x, y, z, w)`` takes literal
    components and ``vec4(v, w)`` extends a Vector3 with ``w``.
    """
    if len(args) == 0:
        return zeros(Shape.VEC4)
    if len(args) == 2:
        return from_vec3_and_scalar(args[0], args[1])
    if len(args) == 4:
        return from_components(*args)
    raise TypeError(f"vec4() takes 0, 2 or 4 arguments ({len(args)} given)")


def mat3(*args) -> np.ndarray:
    if len(args) == 0:
        return zeros(Shape.MAT3)
    if len(args) == 1:
        return from_scalar_diagonal(Shape.MAT3, args[0])
    raise TypeError(f"mat3() takes 0 or 1 arguments ({len(args)} given)")


def mat4(*args) -> np.ndarray:
    if len(args) == 0:
        return zeros(Shape.MAT4)
    if len(args) == 1:
        return from_scalar_diagonal(Shape.MAT4, args[0])
    raise TypeError(f"mat4() takes 0 or 1 arguments ({len(args)} given)")
