"""Worked examples of the matrix API.

``reference_transforms()`` evaluates the examples the library's conventions
were designed around and returns every intermediate value, which makes it a
convenient regression fixture and a readable tour of the API.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from hxform.shared.vector import degrees_to_radians, distance_from_origin, polar_to_cartesian
from hxform.transform.api import (
    compose_all,
    identity,
    multiply_matrices,
    multiply_matrix_and_point,
    rotate_x,
    rotate_y,
    rotate_z,
    scale,
    translate,
)
from hxform.types import Matrix4, Point4, as_matrix4


@dataclass(frozen=True)
class ReferenceTransforms:
    """Results of the worked examples."""

    identity_result: Point4
    some_matrix: Matrix4
    some_matrix_result: Matrix4
    axes: tuple[float, float, float]
    scales: tuple[float, float, float]
    translation_matrix: Matrix4
    scale_matrix: Matrix4
    point: tuple[float, float]
    distance: float
    angle: float
    radians: float
    transformed_point: tuple[float, float]
    rotate_x_matrix: Matrix4
    rotate_y_matrix: Matrix4
    rotate_z_matrix: Matrix4
    transform_matrix3: Matrix4
    transform_matrix6: Matrix4


def reference_transforms() -> ReferenceTransforms:
    """Evaluate the worked examples.

    :returns: ReferenceTransforms with every intermediate value
    """
    # Identity leaves a point unchanged
    identity_result = multiply_matrix_and_point(identity(), [4, 3, 2, 1])

    some_matrix = as_matrix4([
        4, 0, 0, 0,
        0, 3, 0, 0,
        0, 0, 5, 0,
        4, 8, 4, 1,
    ])
    some_matrix_result = multiply_matrices(identity(), some_matrix)

    axes = (50.0, 100.0, 0.0)
    translation_matrix = translate(*axes)

    scales = (1.5, 0.7, 1.0)  # width, height, depth
    scale_matrix = scale(*scales)

    # Rotating a 2D point about the origin without matrices
    point = (10.0, 2.0)
    distance = distance_from_origin(point)
    angle = 60.0
    radians = degrees_to_radians(angle)
    transformed_point = polar_to_cartesian(radians, distance)

    # Scale down, move down 200, rotate 90 degrees
    transform_matrix3 = compose_all([
        rotate_z(math.pi * 0.5),
        translate(0, 200, 0),
        scale(0.8, 0.8, 0.8),
    ])

    # ...then rotate back, move back up, scale back up
    transform_matrix6 = compose_all([
        scale(1.25, 1.25, 1.25),
        translate(0, -200, 0),
        rotate_z(-math.pi * 0.5),
        rotate_z(math.pi * 0.5),
        translate(0, 200, 0),
        scale(0.8, 0.8, 0.8),
    ])

    return ReferenceTransforms(
        identity_result=identity_result,
        some_matrix=some_matrix,
        some_matrix_result=some_matrix_result,
        axes=axes,
        scales=scales,
        translation_matrix=translation_matrix,
        scale_matrix=scale_matrix,
        point=point,
        distance=distance,
        angle=angle,
        radians=radians,
        transformed_point=transformed_point,
        rotate_x_matrix=rotate_x(radians),
        rotate_y_matrix=rotate_y(radians),
        rotate_z_matrix=rotate_z(radians),
        transform_matrix3=transform_matrix3,
        transform_matrix6=transform_matrix6,
    )
