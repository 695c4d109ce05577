"""
Projection matrix builders.

Both builders use the same row-major, row-vector convention as
``hxform.transform``: a view-space point ``[x, y, z, 1]`` multiplied by the
projection gives clip-space coordinates.

Functions:

- ``perspective()``: symmetric frustum, clip ``w`` taken from ``-z``.
- ``orthographic()``: axis-aligned box mapped onto the clip cube.
"""

from __future__ import annotations

import numpy as np

from hxform.errors import DegenerateProjectionError
from hxform.types import DTYPE, MATRIX4_SIZE, Matrix4, freeze
from hxform.validators import validate_number


def _check_extent(low_name: str, low: float, high_name: str, high: float) -> None:
    if low == high:
        raise DegenerateProjectionError(low_name, high_name, low)


@validate_number("fov_y_radians", "aspect_ratio", "near", "far")
def perspective(fov_y_radians: float, aspect_ratio: float, near: float, far: float) -> Matrix4:
    """Build a perspective projection matrix.

    A zero field of view or aspect ratio produces infinite entries rather
    than an error.

    :param fov_y_radians: Vertical field of view in radians
    :param aspect_ratio: Viewport width / height
    :param near: Distance to the near clipping plane
    :param far: Distance to the far clipping plane
    :returns: New Matrix4
    :raises DegenerateProjectionError: If near == far
    """
    _check_extent("near", near, "far", far)

    fov = np.float64(fov_y_radians)
    near = np.float64(near)
    far = np.float64(far)

    with np.errstate(divide="ignore", invalid="ignore"):
        f = np.float64(1.0) / np.tan(fov / 2)
        range_inv = 1 / (near - far)

        P = np.zeros((4, 4), dtype=DTYPE)
        P[0, 0] = f / np.float64(aspect_ratio)
        P[1, 1] = f
        P[2, 2] = (near + far) * range_inv
        P[2, 3] = -1.0
        P[3, 2] = near * far * range_inv * 2

    return freeze(P.reshape(MATRIX4_SIZE))


@validate_number("left", "right", "bottom", "top", "near", "far")
def orthographic(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Matrix4:
    """Build an orthographic projection matrix from the planes of a box.

    :param left: Left plane (x)
    :param right: Right plane (x)
    :param bottom: Bottom plane (y)
    :param top: Top plane (y)
    :param near: Near plane (z)
    :param far: Far plane (z)
    :returns: New Matrix4
    :raises DegenerateProjectionError: If any pair of opposite planes coincide
    """
    _check_extent("left", left, "right", right)
    _check_extent("bottom", bottom, "top", top)
    _check_extent("near", near, "far", far)

    lr = 1 / (left - right)
    bt = 1 / (bottom - top)
    nf = 1 / (near - far)

    P = np.eye(4, dtype=DTYPE)
    P[0, 0] = -2 * lr
    P[1, 1] = -2 * bt
    P[2, 2] = 2 * nf
    P[3, 0] = (left + right) * lr
    P[3, 1] = (top + bottom) * bt
    P[3, 2] = (far + near) * nf

    return freeze(P.reshape(MATRIX4_SIZE))
