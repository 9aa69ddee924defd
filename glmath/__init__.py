"""Vector and matrix math for a real-time rendering pipeline.

Vectors and matrices are flat numpy arrays. Matrices are row-major; call
``flatten`` on a matrix right before handing it to a column-major
rendering API such as WebGL or OpenGL.
"""

from __future__ import annotations

from .construct import (
    from_components,
    from_scalar_diagonal,
    from_vec3_and_scalar,
    identity,
    mat3,
    mat4,
    vec3,
    vec4,
    zeros,
)
from .errors import DimensionMismatch, GLMathError, IncompatibleOperands, UnsupportedAxis
from .matrix import determinant, flatten, inverse, transpose
from .ops import add, cross, dot, mid, mult, normalize, sub
from .shapes import Shape, as_array, shape_of
from .transform import look_at, ortho, perspective, rotate, scale, translate
from .util import is_power_of_2

__version__ = "0.1.0"

__all__ = [
    "Shape",
    "as_array",
    "shape_of",
    "zeros",
    "identity",
    "from_components",
    "from_scalar_diagonal",
    "from_vec3_and_scalar",
    "vec3",
    "vec4",
    "mat3",
    "mat4",
    "add",
    "sub",
    "mult",
    "dot",
    "cross",
    "normalize",
    "mid",
    "transpose",
    "flatten",
    "determinant",
    "inverse",
    "translate",
    "scale",
    "rotate",
    "look_at",
    "perspective",
    "ortho",
    "is_power_of_2",
    "GLMathError",
    "DimensionMismatch",
    "IncompatibleOperands",
    "UnsupportedAxis",
]
