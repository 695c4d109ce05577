"""Tests for validation decorators.

Tests cover:
- validate_dimensions decorator
- validate_number decorator
"""

import numpy as np
import pytest

from hxform import DimensionError
from hxform.validators import validate_dimensions, validate_number


class TestValidateDimensions:
    """Test validate_dimensions decorator."""

    def test_valid_sequence_converted(self):
        """Lists are converted to float64 arrays."""
        @validate_dimensions(point=4)
        def func(point):
            return point

        result = func([1, 2, 3, 4])
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        assert result.tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_wrong_size_raises(self):
        """Wrong element count raises DimensionError naming the parameter."""
        @validate_dimensions(point=4)
        def func(point):
            return point

        with pytest.raises(DimensionError, match="point must have exactly 4 elements"):
            func([1, 2, 3])

    def test_square_form_accepted(self):
        """16-element parameters also accept 4x4 arrays."""
        @validate_dimensions(matrix=16)
        def func(matrix):
            return matrix

        assert func(np.eye(4)).shape == (16,)

    def test_kwarg_validation(self):
        """Keyword arguments are validated too."""
        @validate_dimensions(vector=3)
        def func(scale, vector=None):
            return vector

        assert func(1.0, vector=[1, 2, 3]).shape == (3,)
        with pytest.raises(DimensionError):
            func(1.0, vector=[1, 2])

    def test_no_value_provided(self):
        """Defaults are passed through unchecked."""
        @validate_dimensions(vector=3)
        def func(vector=None):
            return vector

        assert func() is None

    def test_checks_before_call(self):
        """The wrapped function never runs with bad input."""
        calls = []

        @validate_dimensions(a=16, b=16)
        def func(a, b):
            calls.append((a, b))

        with pytest.raises(DimensionError):
            func(np.zeros(16), np.zeros(15))
        assert calls == []

    def test_preserves_metadata(self):
        """functools.wraps keeps name and docstring."""
        @validate_dimensions(point=4)
        def documented(point):
            """Docstring."""
            return point

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


class TestValidateNumber:
    """Test validate_number decorator."""

    def test_int_converted_to_float(self):
        """Integers are converted to float."""
        @validate_number("value")
        def func(value):
            return value

        result = func(3)
        assert result == 3.0
        assert type(result) is float

    def test_non_numeric_raises(self):
        """Strings raise TypeError."""
        @validate_number("value")
        def func(value):
            return value

        with pytest.raises(TypeError, match="value must be a number, got str"):
            func("3")

    def test_bool_raises(self):
        """Booleans are rejected."""
        @validate_number("flag")
        def func(flag):
            return flag

        with pytest.raises(TypeError, match="got bool"):
            func(False)

    def test_multiple_names(self):
        """Each listed parameter is checked."""
        @validate_number("x", "y")
        def func(x, y):
            return x + y

        assert func(1, 2) == 3.0
        with pytest.raises(TypeError, match="y must be a number"):
            func(1, None)


class TestValidatorCombinations:
    """Test combinations of validators."""

    def test_multiple_decorators(self):
        """Dimension and number validators stack."""
        @validate_dimensions(point=4)
        @validate_number("factor")
        def func(point, factor):
            return point * factor

        result = func([1, 2, 3, 4], 2)
        assert result.tolist() == [2.0, 4.0, 6.0, 8.0]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
