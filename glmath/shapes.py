"""Shape inference for flat vector and matrix sequences.

Vectors and matrices are plain 1-D arrays; their shape is implied by the
number of components alone.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Union

import numpy as np

from .errors import IncompatibleOperands

ArrayLike = Union[Sequence[float], np.ndarray]


class Shape(Enum):
    """Supported shapes, keyed by component count."""

    VEC3 = 3
    VEC4 = 4
    MAT3 = 9
    MAT4 = 16

    @property
    def size(self) -> int:
        return self.value

    @property
    def is_matrix(self) -> bool:
        return self in (Shape.MAT3, Shape.MAT4)

    @property
    def order(self) -> int:
        """Row count of a matrix shape, component count of a vector."""
        if self.is_matrix:
            return int(round(np.sqrt(self.value)))
        return self.value


def as_array(values: ArrayLike) -> np.ndarray:
    """Return ``values`` as a new flat float64 array.

    Always copies, so callers may write into the result freely.
    """
    return np.array(values, dtype=np.float64).ravel()


def flat_size(values: ArrayLike) -> int:
    """Number of components in a flat (1-D) sequence.

    Raises:
        IncompatibleOperands: If ``values`` is not a sequence or is not flat
    """
    try:
        len(values)
    except TypeError:
        raise IncompatibleOperands(
            f"Expected a vector or matrix sequence, got {type(values).__name__}"
        ) from None
    if np.ndim(values) != 1:
        raise IncompatibleOperands(
            f"Expected a flat sequence, got {np.ndim(values)}-dimensional input; "
            f"matrices are stored as flat row-major sequences"
        )
    return int(np.size(values))


def shape_of(values: ArrayLike) -> Shape:
    """Infer the shape of a flat sequence from its length.

    Args:
        values: Flat sequence of 3, 4, 9 or 16 numbers

    Returns:
        The matching Shape

    Raises:
        IncompatibleOperands: If the input is not flat or its length matches
            no supported shape
    """
    n = flat_size(values)
    try:
        return Shape(n)
    except ValueError:
        raise IncompatibleOperands(
            f"Sequence of length {n} is not a vector or matrix "
            f"(expected one of 3, 4, 9, 16)"
        ) from None
