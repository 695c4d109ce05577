"""Shared vector and scalar utilities for hxform."""

from hxform.shared.vector import (
    degrees_to_radians,
    distance_from_origin,
    normalize,
    polar_to_cartesian,
)

__all__ = [
    "normalize",
    "distance_from_origin",
    "degrees_to_radians",
    "polar_to_cartesian",
]
