"""
4x4 homogeneous matrix multiplication, affine builders and composition.

Points are row vectors multiplied on the left of the matrix, and matrices
are stored row-major, so translation lives in row 3 (indices 12-14).

Functions:

- ``multiply_matrix_and_point()``: apply a matrix to a homogeneous point.
- ``multiply_matrices()``: apply ``a`` to every row of ``b`` (``b @ a``).
- ``identity()``, ``translate()``, ``scale()``, ``rotate_x/y/z()``: builders.
- ``compose_all()``: left fold of ``multiply_matrices`` over a list.

Composition reads right to left. To scale, then translate, then rotate a
point, list the matrices as ``[rotate, translate, scale]``:

    >>> m = compose_all([rotate_z(math.pi / 2), translate(0, 200, 0), scale(0.8, 0.8, 0.8)])
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from hxform.errors import EmptyCompositionError
from hxform.transform.kernels import (
    compose_numba,
    multiply_matrices_numba,
    multiply_matrix_point_numba,
)
from hxform.types import DTYPE, MATRIX4_SIZE, ArrayLike, Matrix4, Point4, coerce, freeze
from hxform.validators import validate_dimensions, validate_number

# ============================================================================
# Multiplication
# ============================================================================


@validate_dimensions(matrix=16, point=4)
def multiply_matrix_and_point(matrix: ArrayLike, point: ArrayLike) -> Point4:
    """Multiply a homogeneous point (row vector) by a matrix.

    :param matrix: Matrix4 [16] row-major
    :param point: Point4 [4] (x, y, z, w)
    :returns: New Point4
    :raises DimensionError: If matrix or point has the wrong size
    """
    out = np.empty(4, dtype=DTYPE)
    multiply_matrix_point_numba(matrix, point, out)
    return freeze(out)


@validate_dimensions(a=16, b=16)
def multiply_matrices(a: ArrayLike, b: ArrayLike) -> Matrix4:
    """Multiply each row of ``b`` by ``a``.

    Equivalent to the row-major product ``b @ a``. Not commutative.

    :param a: Matrix applied to the rows of ``b``
    :param b: Matrix whose rows are transformed
    :returns: New Matrix4
    :raises DimensionError: If either input is not a Matrix4
    """
    out = np.empty(MATRIX4_SIZE, dtype=DTYPE)
    multiply_matrices_numba(a, b, out)
    return freeze(out)


# ============================================================================
# Affine builders
# ============================================================================


def identity() -> Matrix4:
    """Diagonal matrix of ones."""
    return freeze(np.eye(4, dtype=DTYPE).reshape(MATRIX4_SIZE))


@validate_number("x", "y", "z")
def translate(x: float, y: float, z: float) -> Matrix4:
    """Translation matrix with the offset stored in row 3."""
    T = np.eye(4, dtype=DTYPE)
    T[3, 0] = x
    T[3, 1] = y
    T[3, 2] = z
    return freeze(T.reshape(MATRIX4_SIZE))


@validate_number("w", "h", "d")
def scale(w: float, h: float, d: float) -> Matrix4:
    """Scale matrix for width (x), height (y) and depth (z)."""
    S = np.eye(4, dtype=DTYPE)
    S[0, 0] = w
    S[1, 1] = h
    S[2, 2] = d
    return freeze(S.reshape(MATRIX4_SIZE))


# No perspective term: a bare rotation only appears to shrink a flat object.


@validate_number("radians")
def rotate_x(radians: float) -> Matrix4:
    """Rotation about the X axis."""
    c = math.cos(radians)
    s = math.sin(radians)

    R = np.eye(4, dtype=DTYPE)
    R[1, 1] = c
    R[1, 2] = -s
    R[2, 1] = s
    R[2, 2] = c
    return freeze(R.reshape(MATRIX4_SIZE))


@validate_number("radians")
def rotate_y(radians: float) -> Matrix4:
    """Rotation about the Y axis."""
    c = math.cos(radians)
    s = math.sin(radians)

    R = np.eye(4, dtype=DTYPE)
    R[0, 0] = c
    R[0, 2] = s
    R[2, 0] = -s
    R[2, 2] = c
    return freeze(R.reshape(MATRIX4_SIZE))


@validate_number("radians")
def rotate_z(radians: float) -> Matrix4:
    """Rotation about the Z axis."""
    c = math.cos(radians)
    s = math.sin(radians)

    R = np.eye(4, dtype=DTYPE)
    R[0, 0] = c
    R[0, 1] = -s
    R[1, 0] = s
    R[1, 1] = c
    return freeze(R.reshape(MATRIX4_SIZE))


# ============================================================================
# Composition
# ============================================================================


def compose_all(matrices: Iterable[ArrayLike]) -> Matrix4:
    """Fold ``multiply_matrices`` left to right over ``matrices``.

    ``compose_all([a, b, c])`` is ``multiply_matrices(multiply_matrices(a, b), c)``,
    which applies ``c`` to a point first and ``a`` last. A single matrix is
    returned as a new copy.

    :param matrices: One or more Matrix4 values
    :returns: New Matrix4
    :raises EmptyCompositionError: If ``matrices`` is empty
    :raises DimensionError: If any entry is not a Matrix4
    """
    rows = [coerce(m, MATRIX4_SIZE, f"matrices[{i}]", square=4) for i, m in enumerate(matrices)]
    if not rows:
        raise EmptyCompositionError()

    out = np.empty(MATRIX4_SIZE, dtype=DTYPE)
    compose_numba(np.stack(rows), out)
    return freeze(out)
