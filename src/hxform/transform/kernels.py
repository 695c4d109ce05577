"""Numba-compiled kernels for 4x4 homogeneous matrix arithmetic.

All kernels operate on flat row-major float64 arrays and write into
pre-allocated output buffers. Fast-math is deliberately off: sums are
evaluated in the written order so results match plain IEEE arithmetic
bit for bit, including NaN and infinity propagation.
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


@njit(cache=True, nogil=True)
def multiply_matrix_point_numba(
    matrix: NDArray[np.float64], point: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """Row vector times matrix: ``out[j] = sum_i point[i] * matrix[i*4 + j]``.

    :param matrix: Matrix [16] row-major
    :param point: Point [4] (x, y, z, w)
    :param out: Output point [4]
    """
    x = point[0]
    y = point[1]
    z = point[2]
    w = point[3]

    for j in range(4):
        out[j] = (x * matrix[j]) + (y * matrix[4 + j]) + (z * matrix[8 + j]) + (w * matrix[12 + j])


@njit(cache=True, nogil=True)
def multiply_matrices_numba(
    a: NDArray[np.float64], b: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """Multiply every row of ``b`` by ``a`` (row-major product ``b @ a``).

    ``out`` must not alias ``a`` or ``b``.

    :param a: Matrix applied to each row [16]
    :param b: Matrix supplying the rows [16]
    :param out: Output matrix [16]
    """
    for row in range(4):
        start = row * 4
        multiply_matrix_point_numba(a, b[start : start + 4], out[start : start + 4])


@njit(cache=True, nogil=True)
def compose_numba(stack: NDArray[np.float64], out: NDArray[np.float64]) -> None:
    """Left fold of ``multiply_matrices_numba`` over a stack of matrices.

    :param stack: Matrices [N, 16], N >= 1
    :param out: Output matrix [16]
    """
    acc = stack[0].copy()
    tmp = np.empty(16, dtype=np.float64)

    for i in range(1, stack.shape[0]):
        multiply_matrices_numba(acc, stack[i], tmp)
        acc[:] = tmp

    out[:] = acc


@njit(cache=True, nogil=True)
def adjugate_numba(m: NDArray[np.float64], out: NDArray[np.float64]) -> float:
    """Adjugate of a 4x4 matrix by cofactor expansion.

    The determinant is row 0 of ``m`` dotted with column 0 of the adjugate.

    :param m: Matrix [16] row-major
    :param out: Output adjugate [16] row-major
    :returns: Determinant of ``m``
    """
    a00, a01, a02, a03 = m[0], m[1], m[2], m[3]
    a10, a11, a12, a13 = m[4], m[5], m[6], m[7]
    a20, a21, a22, a23 = m[8], m[9], m[10], m[11]
    a30, a31, a32, a33 = m[12], m[13], m[14], m[15]

    # 2x2 sub-determinants of rows 0-1 and rows 2-3
    b00 = a00 * a11 - a01 * a10
    b01 = a00 * a12 - a02 * a10
    b02 = a00 * a13 - a03 * a10
    b03 = a01 * a12 - a02 * a11
    b04 = a01 * a13 - a03 * a11
    b05 = a02 * a13 - a03 * a12
    b06 = a20 * a31 - a21 * a30
    b07 = a20 * a32 - a22 * a30
    b08 = a20 * a33 - a23 * a30
    b09 = a21 * a32 - a22 * a31
    b10 = a21 * a33 - a23 * a31
    b11 = a22 * a33 - a23 * a32

    out[0] = a11 * b11 - a12 * b10 + a13 * b09
    out[1] = a02 * b10 - a01 * b11 - a03 * b09
    out[2] = a31 * b05 - a32 * b04 + a33 * b03
    out[3] = a22 * b04 - a21 * b05 - a23 * b03
    out[4] = a12 * b08 - a10 * b11 - a13 * b07
    out[5] = a00 * b11 - a02 * b08 + a03 * b07
    out[6] = a32 * b02 - a30 * b05 - a33 * b01
    out[7] = a20 * b05 - a22 * b02 + a23 * b01
    out[8] = a10 * b10 - a11 * b08 + a13 * b06
    out[9] = a01 * b08 - a00 * b10 - a03 * b06
    out[10] = a30 * b04 - a31 * b02 + a33 * b00
    out[11] = a21 * b02 - a20 * b04 - a23 * b00
    out[12] = a11 * b07 - a10 * b09 - a12 * b06
    out[13] = a00 * b09 - a01 * b07 + a02 * b06
    out[14] = a31 * b01 - a30 * b03 - a32 * b00
    out[15] = a20 * b03 - a21 * b01 + a22 * b00

    return a00 * out[0] + a01 * out[4] + a02 * out[8] + a03 * out[12]


@njit(cache=True, nogil=True)
def normal_matrix_numba(m: NDArray[np.float64], out: NDArray[np.float64]) -> float:
    """Inverse-transpose of the upper-left 3x3 block of a 4x4 matrix.

    Only the block is read: the translation row and the projective column
    play no part. ``out`` is left untouched when the block's determinant is
    zero or NaN.

    :param m: Matrix [16] row-major
    :param out: Output matrix [9] row-major
    :returns: Determinant of the 3x3 block
    """
    a00, a01, a02 = m[0], m[1], m[2]
    a10, a11, a12 = m[4], m[5], m[6]
    a20, a21, a22 = m[8], m[9], m[10]

    # Cofactors of the block (signed 2x2 sub-determinants)
    c00 = a11 * a22 - a12 * a21
    c01 = a12 * a20 - a10 * a22
    c02 = a10 * a21 - a11 * a20
    c10 = a02 * a21 - a01 * a22
    c11 = a00 * a22 - a02 * a20
    c12 = a01 * a20 - a00 * a21
    c20 = a01 * a12 - a02 * a11
    c21 = a02 * a10 - a00 * a12
    c22 = a00 * a11 - a01 * a10

    det = a00 * c00 + a01 * c01 + a02 * c02

    if det == 0.0 or np.isnan(det):
        return det

    # inverse(B).T == cofactor(B) / det(B)
    out[0] = c00 / det
    out[1] = c01 / det
    out[2] = c02 / det

    out[3] = c10 / det
    out[4] = c11 / det
    out[5] = c12 / det

    out[6] = c20 / det
    out[7] = c21 / det
    out[8] = c22 / det

    return det


def warmup_kernels() -> None:
    """Trigger JIT compilation of all matrix kernels.

    Called on import to avoid first-call overhead. Public operations pass
    both caller-owned writable arrays and read-only library values, which
    Numba compiles as separate signatures, so both variants are warmed.
    """
    m = np.eye(4, dtype=np.float64).reshape(16)
    p = np.ones(4, dtype=np.float64)
    out4 = np.empty(4, dtype=np.float64)
    out9 = np.empty(9, dtype=np.float64)
    out16 = np.empty(16, dtype=np.float64)

    m_ro = m.copy()
    m_ro.setflags(write=False)
    p_ro = p.copy()
    p_ro.setflags(write=False)

    for matrix in (m, m_ro):
        for point in (p, p_ro):
            multiply_matrix_point_numba(matrix, point, out4)
        for other in (m, m_ro):
            multiply_matrices_numba(matrix, other, out16)
        adjugate_numba(matrix, out16)
        normal_matrix_numba(matrix, out9)

    compose_numba(np.stack([m, m]), out16)

    logger.debug("Matrix Numba kernels warmed up")


# Warmup on import
warmup_kernels()
