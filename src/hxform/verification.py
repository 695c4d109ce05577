"""Matrix comparison utilities.

Example:
    >>> from hxform.verification import MatrixVerifier
    >>>
    >>> MatrixVerifier.assert_inverse_pair(m, invert(m))
    >>> if MatrixVerifier.is_identity(compose_all([m, invert(m)])):
    ...     print("round trip ok")
"""

from __future__ import annotations

import logging

import numpy as np

from hxform.config import TOLERANCE_CONFIG
from hxform.transform.api import identity, multiply_matrices
from hxform.types import MATRIX4_SIZE, ArrayLike, coerce

logger = logging.getLogger(__name__)


class MatrixVerifier:
    """Utilities for comparing matrices within floating-point tolerance."""

    @staticmethod
    def is_identity(matrix: ArrayLike, atol: float | None = None) -> bool:
        """Check if a matrix equals the identity within tolerance.

        :param matrix: Matrix4 [16]
        :param atol: Absolute tolerance, defaults to CONFIG.tolerance.atol
        :return: True if every element is within ``atol`` of the identity
        """
        m = coerce(matrix, MATRIX4_SIZE, "matrix", square=4)
        atol = TOLERANCE_CONFIG.atol if atol is None else atol
        return bool(np.allclose(m, identity(), rtol=0.0, atol=atol))

    @staticmethod
    def assert_close(
        actual: ArrayLike,
        expected: ArrayLike,
        atol: float | None = None,
        rtol: float | None = None,
    ) -> None:
        """Assert two matrices are element-wise equal within tolerance.

        :param actual: Computed Matrix4
        :param expected: Reference Matrix4
        :param atol: Absolute tolerance, defaults to CONFIG.tolerance.atol
        :param rtol: Relative tolerance, defaults to CONFIG.tolerance.rtol
        :raises AssertionError: If any element differs by more than the tolerance

        Example:
            >>> MatrixVerifier.assert_close(compose_all([a, b]), expected, atol=1e-12)
        """
        a = coerce(actual, MATRIX4_SIZE, "actual", square=4)
        b = coerce(expected, MATRIX4_SIZE, "expected", square=4)
        np.testing.assert_allclose(
            a,
            b,
            rtol=TOLERANCE_CONFIG.rtol if rtol is None else rtol,
            atol=TOLERANCE_CONFIG.atol if atol is None else atol,
            err_msg="Matrices differ",
        )

    @staticmethod
    def assert_inverse_pair(matrix: ArrayLike, inverse: ArrayLike, atol: float | None = None) -> None:
        """Assert that ``matrix`` and ``inverse`` multiply to the identity.

        :param matrix: Matrix4
        :param inverse: Candidate inverse of ``matrix``
        :param atol: Absolute tolerance, defaults to CONFIG.tolerance.atol
        :raises AssertionError: If the product is not the identity
        """
        product = multiply_matrices(matrix, inverse)
        if not MatrixVerifier.is_identity(product, atol=atol):
            raise AssertionError(
                f"Product is not the identity:\n{MatrixVerifier.summary(product)}"
            )

        logger.debug("[MatrixVerifier] Inverse pair verified")

    @staticmethod
    def summary(matrix: ArrayLike) -> str:
        """Render a matrix as four rows of text.

        :param matrix: Matrix4 [16]
        :return: Row-major text rendering

        Example:
            >>> print(MatrixVerifier.summary(identity()))
            [1, 0, 0, 0]
            [0, 1, 0, 0]
            [0, 0, 1, 0]
            [0, 0, 0, 1]
        """
        m = coerce(matrix, MATRIX4_SIZE, "matrix", square=4)
        rows = []
        for row in range(4):
            values = ", ".join(f"{v:g}" for v in m[row * 4 : row * 4 + 4])
            rows.append(f"[{values}]")
        return "\n".join(rows)
