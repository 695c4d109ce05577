"""Exception types raised by hxform operations.

All errors derive from ``ValueError`` so code that already guards numeric
input with ``except ValueError`` keeps working.
"""

from __future__ import annotations


class HxformError(ValueError):
    """Base class for all hxform errors."""


class DimensionError(HxformError):
    """An input does not have its required fixed number of elements."""

    def __init__(self, name: str, expected: int, actual: tuple[int, ...]):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} must have exactly {expected} elements, got shape {actual}")


class SingularMatrixError(HxformError):
    """Matrix inversion was requested for a matrix with zero determinant."""

    def __init__(self, determinant: float = 0.0):
        self.determinant = determinant
        super().__init__(f"Can't invert matrix, determinant is {determinant}")


class DegenerateProjectionError(HxformError):
    """Projection extents collapse to zero width along one axis."""

    def __init__(self, low_name: str, high_name: str, value: float):
        self.low_name = low_name
        self.high_name = high_name
        self.value = value
        super().__init__(
            f"Degenerate projection: {low_name} == {high_name} == {value} divides by zero"
        )


class ZeroLengthVectorError(HxformError):
    """A zero vector has no direction to normalize to."""

    def __init__(self):
        super().__init__("Can't normalize a zero-length vector")


class EmptyCompositionError(HxformError):
    """Composition needs at least one matrix."""

    def __init__(self):
        super().__init__("compose_all requires at least one matrix")
