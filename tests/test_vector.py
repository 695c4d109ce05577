"""Tests for vector and scalar utilities."""

import math

import numpy as np
import pytest

from hxform import (
    DimensionError,
    ZeroLengthVectorError,
    degrees_to_radians,
    distance_from_origin,
    normalize,
    polar_to_cartesian,
)


class TestNormalize:
    """Test normalize."""

    def test_literal_vector(self):
        """[3, 4, 0] normalizes to [0.6, 0.8, 0] exactly."""
        assert normalize([3, 4, 0]).tolist() == [0.6, 0.8, 0.0]

    def test_unit_length(self):
        """Result has unit length."""
        result = normalize([1.5, -2.0, 7.25])
        assert np.linalg.norm(result) == pytest.approx(1.0, abs=1e-15)

    def test_direction_preserved(self):
        """Result points the same way as the input."""
        v = np.array([2.0, -3.0, 6.0])
        np.testing.assert_allclose(normalize(v), v / 7.0, rtol=1e-15)

    def test_zero_vector_raises(self):
        """The zero vector has no direction."""
        with pytest.raises(ZeroLengthVectorError):
            normalize([0, 0, 0])

    def test_wrong_size_raises(self):
        """Only 3-component vectors are accepted."""
        with pytest.raises(DimensionError, match="vector must have exactly 3 elements"):
            normalize([1, 2, 3, 4])

    def test_read_only(self):
        """Result is read-only."""
        assert not normalize([1, 0, 0]).flags.writeable

    def test_tiny_vector(self):
        """Components whose squares underflow still normalize."""
        assert normalize([1e-200, 0, 0]).tolist() == [1.0, 0.0, 0.0]
        np.testing.assert_allclose(normalize([3e-200, 4e-200, 0]), [0.6, 0.8, 0.0], rtol=1e-15)

    def test_huge_vector(self):
        """Components whose squares overflow still normalize."""
        assert normalize([0, 1e200, 0]).tolist() == [0.0, 1.0, 0.0]
        np.testing.assert_allclose(normalize([3e200, 4e200, 0]), [0.6, 0.8, 0.0], rtol=1e-15)

    def test_string_components_rejected(self):
        """Numeric strings are rejected like string scalars."""
        with pytest.raises(TypeError, match="must be a sequence of numbers"):
            normalize(["3", "4", "0"])


class TestScalarHelpers:
    """Test distance_from_origin, degrees_to_radians and polar_to_cartesian."""

    def test_distance(self):
        """Distance of a 3-4-5 triangle."""
        assert distance_from_origin([3, 4]) == 5.0

    def test_distance_reference_point(self):
        """Distance of (10, 2)."""
        assert distance_from_origin((10, 2)) == pytest.approx(math.sqrt(104), rel=1e-15)

    def test_distance_extreme_magnitudes(self):
        """Distance does not underflow or overflow for extreme components."""
        assert distance_from_origin([1e-200, 0]) == 1e-200
        assert distance_from_origin([3e200, 4e200]) == pytest.approx(5e200, rel=1e-15)

    def test_distance_wrong_size_raises(self):
        """Only 2D points are accepted."""
        with pytest.raises(DimensionError):
            distance_from_origin([1, 2, 3])

    def test_degrees_to_radians(self):
        """Degrees convert as pi / 180 * angle."""
        assert degrees_to_radians(60) == math.pi / 180 * 60
        assert degrees_to_radians(180) == pytest.approx(math.pi)
        assert degrees_to_radians(0) == 0.0

    def test_degrees_to_radians_rejects_bool(self):
        """Booleans are not angles."""
        with pytest.raises(TypeError, match="angle must be a number"):
            degrees_to_radians(True)

    def test_polar_on_axis(self):
        """Angle zero lies on the positive X axis."""
        assert polar_to_cartesian(0.0, 5.0) == (5.0, 0.0)

    def test_polar_quarter_turn(self):
        """A quarter turn lies on the positive Y axis."""
        x, y = polar_to_cartesian(math.pi / 2, 2.0)
        assert x == pytest.approx(0.0, abs=1e-15)
        assert y == pytest.approx(2.0)

    def test_polar_round_trip(self):
        """Polar conversion preserves the distance."""
        x, y = polar_to_cartesian(degrees_to_radians(60), distance_from_origin([10, 2]))
        assert distance_from_origin([x, y]) == pytest.approx(math.sqrt(104))

    def test_polar_returns_floats(self):
        """Result is a tuple of plain floats."""
        result = polar_to_cartesian(1, 1)
        assert isinstance(result, tuple)
        assert all(type(v) is float for v in result)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
