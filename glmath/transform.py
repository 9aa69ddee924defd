"""Builders for transformation and projection matrices.

Each builder creates a primitive 4x4 matrix ``P`` and returns
``mult(P, input)``, so the new transform is composed on the left of the
one ``input`` already represents. All matrices are row-major; pass them
through ``flatten`` before uploading.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from .construct import mat4
from .errors import UnsupportedAxis
from .ops import cross, mult, normalize, sub
from .shapes import ArrayLike

logger = logging.getLogger(__name__)


def translate(input: ArrayLike, vec: ArrayLike) -> np.ndarray:
    """Compose a translation by ``vec`` (x, y, z) with ``input``."""
    result = mat4(1.0)
    result[3] = vec[0]
    result[7] = vec[1]
    result[11] = vec[2]
    return mult(result, input)


def scale(input: ArrayLike, vec: ArrayLike) -> np.ndarray:
    """Compose a non-uniform scale by ``vec`` (x, y, z) with ``input``."""
    result = mat4(1.0)
    result[0] = vec[0]
    result[5] = vec[1]
    result[10] = vec[2]
    return mult(result, input)


def rotate(input: ArrayLike, angle: float, axis: ArrayLike) -> np.ndarray:
    """Compose a right-handed rotation about a coordinate axis with ``input``.

    Args:
        input: 4x4 matrix to compose with
        angle: Rotation angle in degrees
        axis: One of (1,0,0), (0,1,0), (0,0,1); the first component
            equal to 1 selects the axis

    Returns:
        Rotated 4x4 matrix

    Raises:
        UnsupportedAxis: If no component of ``axis`` equals 1
    """
    result = mat4(1.0)
    rad = math.radians(angle)
    c = math.cos(rad)
    s = math.sin(rad)

    if axis[0] == 1:
        result[5] = c
        result[6] = -s
        result[9] = s
        result[10] = c
    elif axis[1] == 1:
        result[0] = c
        result[2] = s
        result[8] = -s
        result[10] = c
    elif axis[2] == 1:
        result[0] = c
        result[1] = -s
        result[4] = s
        result[5] = c
    else:
        raise UnsupportedAxis(
            f"Rotation axis must be a unit basis vector, got "
            f"({axis[0]}, {axis[1]}, {axis[2]})"
        )
    return mult(result, input)


def look_at(at: ArrayLike, eye: ArrayLike, up: ArrayLike) -> np.ndarray:
    """Build a view matrix for a camera at ``eye`` looking towards ``at``.

    The rotation rows are the camera's side, up and backward axes; the
    result then translates the world by ``-eye``.

    Args:
        at: Point the camera looks at
        eye: Camera position
        up: Approximate up direction

    Returns:
        4x4 view matrix
    """
    forward = normalize(sub(at, eye))
    side = cross(forward, normalize(up))
    true_up = cross(side, forward)

    matrix = mat4(1.0)
    matrix[0:3] = side
    matrix[4:7] = true_up
    matrix[8:11] = -forward

    logger.debug(
        f"Camera basis: side={np.round(side, 4)}, up={np.round(true_up, 4)}, "
        f"forward={np.round(forward, 4)}"
    )

    return translate(matrix, (-eye[0], -eye[1], -eye[2]))


def perspective(y_fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Build a perspective projection matrix.

    Args:
        y_fov: Vertical field of view in degrees
        aspect: Viewport width divided by height
        near: Distance to the near clipping plane
        far: Distance to the far clipping plane

    Returns:
        4x4 row-major projection matrix
    """
    f = 1.0 / math.tan(math.radians(y_fov) / 2.0)

    result = mat4()
    result[0] = f / aspect
    result[5] = f
    result[10] = -(far + near) / (far - near)
    result[11] = (-2.0 * far * near) / (far - near)
    result[14] = -1.0

    logger.debug(f"Perspective: fov={y_fov}, aspect={aspect:.4f}, near={near}, far={far}, f={f:.5f}")
    return result


def ortho(left: float, right: float, bottom: float, top: float,
          near: float, far: float) -> np.ndarray:
    """Build an orthographic projection matrix for the given view box."""
    dx = right - left
    dy = top - bottom
    dz = far - near

    result = mat4()
    result[0] = 2.0 / dx
    result[3] = -(right + left) / dx
    result[5] = 2.0 / dy
    result[7] = -(top + bottom) / dy
    result[10] = -2.0 / dz
    result[11] = -(far + near) / dz
    result[15] = 1.0
    return result
