"""Determinant, inversion and normal-matrix derivation for 4x4 matrices.

``invert`` raises ``SingularMatrixError`` on a zero determinant, while
``normal_matrix`` returns ``None`` for the same input.
"""

from __future__ import annotations

import logging

import numpy as np

from hxform.errors import SingularMatrixError
from hxform.transform.kernels import adjugate_numba, normal_matrix_numba
from hxform.types import DTYPE, MATRIX3_SIZE, MATRIX4_SIZE, ArrayLike, Matrix3, Matrix4, freeze
from hxform.validators import validate_dimensions

logger = logging.getLogger(__name__)


@validate_dimensions(matrix=16)
def determinant(matrix: ArrayLike) -> float:
    """Determinant by cofactor expansion along row 0.

    :param matrix: Matrix4 [16] row-major
    :returns: Determinant
    """
    adjugate = np.empty(MATRIX4_SIZE, dtype=DTYPE)
    return float(adjugate_numba(matrix, adjugate))


@validate_dimensions(matrix=16)
def invert(matrix: ArrayLike) -> Matrix4:
    """Inverse of a 4x4 matrix as adjugate divided by determinant.

    Only an exactly zero determinant is treated as singular; a matrix whose
    determinant underflows to zero fails the same way.

    :param matrix: Matrix4 [16] row-major
    :returns: New Matrix4
    :raises SingularMatrixError: If the determinant is exactly zero
    """
    adjugate = np.empty(MATRIX4_SIZE, dtype=DTYPE)
    det = adjugate_numba(matrix, adjugate)

    if det == 0.0:
        logger.debug("[invert] Singular matrix, determinant is 0")
        raise SingularMatrixError(det)

    adjugate /= det
    return freeze(adjugate)


@validate_dimensions(matrix=16)
def normal_matrix(matrix: ArrayLike) -> Matrix3 | None:
    """Normal-transform matrix: inverse-transpose of the upper-left 3x3 block.

    Only the block is read, so translation and projective terms of
    ``matrix`` have no effect.

    :param matrix: Matrix4 [16] row-major
    :returns: New Matrix3 [9] row-major, or None if the block determinant is zero or NaN
    """
    out = np.empty(MATRIX3_SIZE, dtype=DTYPE)
    det = normal_matrix_numba(matrix, out)

    if det == 0.0 or np.isnan(det):
        logger.debug("[normal_matrix] Degenerate matrix (determinant %s), no normal matrix", det)
        return None

    return freeze(out)
