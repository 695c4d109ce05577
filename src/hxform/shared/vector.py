"""Vector and scalar helpers: normalization, distances and angle conversion."""

from __future__ import annotations

import math

import numpy as np

from hxform.errors import ZeroLengthVectorError
from hxform.types import ArrayLike, Vector3, freeze
from hxform.validators import validate_dimensions, validate_number


@validate_dimensions(vector=3)
def normalize(vector: ArrayLike) -> Vector3:
    """Scale a 3-component vector to unit length.

    :param vector: Vector [3]
    :returns: New unit Vector3
    :raises ZeroLengthVectorError: If the vector has zero length
    """
    x, y, z = float(vector[0]), float(vector[1]), float(vector[2])
    length = math.hypot(x, y, z)

    if length == 0.0:
        raise ZeroLengthVectorError()

    return freeze(np.array([x / length, y / length, z / length], dtype=np.float64))


@validate_dimensions(point=2)
def distance_from_origin(point: ArrayLike) -> float:
    """Euclidean distance of a 2D point from the origin."""
    x, y = float(point[0]), float(point[1])
    return math.hypot(x, y)


@validate_number("angle")
def degrees_to_radians(angle: float) -> float:
    """Convert degrees to radians."""
    return math.pi / 180 * angle


@validate_number("radians", "distance")
def polar_to_cartesian(radians: float, distance: float) -> tuple[float, float]:
    """Point at ``distance`` from the origin along the direction ``radians``.

    :param radians: Angle from the positive X axis
    :param distance: Distance from the origin
    :returns: Tuple (x, y)
    """
    return (math.cos(radians) * distance, math.sin(radians) * distance)
