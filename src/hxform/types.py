"""Type aliases and fixed-size value constructors for hxform.

Matrices, points and vectors are flat ``float64`` NumPy arrays with a fixed
shape. Values returned by the library are read-only snapshots; inputs may be
any sequence or array holding the right number of elements.

Layout is row-major: element ``(row, col)`` of a Matrix4 lives at index
``row * 4 + col``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

from hxform.errors import DimensionError

# Input types (what callers may pass)
ArrayLike: TypeAlias = Sequence[float] | np.ndarray

# Value types (what the library returns)
Matrix4: TypeAlias = NDArray[np.float64]  # shape (16,)
Matrix3: TypeAlias = NDArray[np.float64]  # shape (9,)
Point4: TypeAlias = NDArray[np.float64]  # shape (4,) x, y, z, w
Vector3: TypeAlias = NDArray[np.float64]  # shape (3,)
Point2: TypeAlias = NDArray[np.float64]  # shape (2,)

MATRIX4_SIZE = 16
MATRIX3_SIZE = 9
POINT4_SIZE = 4
VECTOR3_SIZE = 3
POINT2_SIZE = 2

DTYPE = np.float64


def freeze(array: np.ndarray) -> np.ndarray:
    """Mark a freshly allocated array read-only and return it."""
    array.setflags(write=False)
    return array


def coerce(value: ArrayLike, size: int, name: str, square: int | None = None) -> np.ndarray:
    """Convert ``value`` to a contiguous flat float64 array of ``size`` elements.

    Does not copy when ``value`` already is a suitable array, so the result
    must be treated as read-only by the caller.

    :param value: Sequence or array to convert
    :param size: Required number of elements
    :param name: Parameter name used in error messages
    :param square: Side length of an accepted 2-D square form (e.g. 4 for 4x4)
    :returns: Flat array of shape ``(size,)``
    :raises DimensionError: If the element count or shape is wrong
    :raises TypeError: If the elements are not numeric
    """
    try:
        arr = np.asarray(value)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"{name} must be a sequence of numbers") from exc

    # Strings, booleans and objects are rejected, as for scalar arguments
    if arr.dtype.kind not in "iuf":
        raise TypeError(f"{name} must be a sequence of numbers, got dtype {arr.dtype}")

    arr = arr.astype(DTYPE, copy=False)

    if arr.shape != (size,):
        if square is not None and arr.shape == (square, square):
            arr = arr.reshape(size)
        else:
            raise DimensionError(name, size, arr.shape)

    return np.ascontiguousarray(arr)


def as_matrix4(value: ArrayLike) -> Matrix4:
    """Create a read-only Matrix4 from 16 values or a 4x4 array (row-major)."""
    return freeze(coerce(value, MATRIX4_SIZE, "matrix", square=4).copy())


def as_matrix3(value: ArrayLike) -> Matrix3:
    """Create a read-only Matrix3 from 9 values or a 3x3 array (row-major)."""
    return freeze(coerce(value, MATRIX3_SIZE, "matrix3", square=3).copy())


def as_point4(value: ArrayLike) -> Point4:
    """Create a read-only homogeneous point ``(x, y, z, w)``."""
    return freeze(coerce(value, POINT4_SIZE, "point").copy())


def as_vector3(value: ArrayLike) -> Vector3:
    """Create a read-only 3-component vector."""
    return freeze(coerce(value, VECTOR3_SIZE, "vector").copy())


def as_point2(value: ArrayLike) -> Point2:
    """Create a read-only 2D point."""
    return freeze(coerce(value, POINT2_SIZE, "point2d").copy())
