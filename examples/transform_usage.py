"""
Example: homogeneous matrix transforms with hxform.

Demonstrates how to:
- Apply matrices to points and directions
- Compose scale, translate and rotate in the right order
- Invert a transform and derive its normal matrix
- Build projection matrices and project a point
- Handle the library's errors
"""

import logging
import math

from hxform import (
    DegenerateProjectionError,
    MatrixVerifier,
    SingularMatrixError,
    Transform,
    compose_all,
    invert,
    multiply_matrix_and_point,
    normal_matrix,
    perspective,
    rotate_z,
    scale,
    translate,
)

# Configure logging to see debug records from hxform
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(name)s: %(message)s")


def example_1_points_and_directions():
    """Example 1: Positions move with a translation, directions do not."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Points and Directions")
    print("=" * 70)

    m = translate(50, 100, 0)
    position = multiply_matrix_and_point(m, [10, 2, 0, 1])
    direction = multiply_matrix_and_point(m, [10, 2, 0, 0])

    print(f"Position [10, 2, 0, 1] -> {position.tolist()}")
    print(f"Direction [10, 2, 0, 0] -> {direction.tolist()}")


def example_2_composition_order():
    """Example 2: Scale, then translate, then rotate."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Composition Order")
    print("=" * 70)

    # compose_all reads right to left
    m = compose_all([rotate_z(math.pi / 2), translate(0, 200, 0), scale(0.8, 0.8, 0.8)])
    print(MatrixVerifier.summary(m))

    # The same transform with steps listed in the order they apply
    t = Transform().scale(0.8).translate(0, 200, 0).rotate_z(math.pi / 2)
    print(f"Pipeline: {t}")
    print(f"[10, 0, 0, 1] -> {t([10, 0, 0, 1]).round(6).tolist()}")


def example_3_inversion():
    """Example 3: Undo a transform and transform normals."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Inversion and Normal Matrix")
    print("=" * 70)

    m = Transform().scale(2, 1, 1).rotate_z(math.pi / 4).translate(3, 0, 0).to_matrix()
    inv = invert(m)
    MatrixVerifier.assert_inverse_pair(m, inv)
    print("invert(m) verified")

    normals = normal_matrix(m)
    print(f"Normal matrix: {normals.round(4).tolist()}")

    # Flattening transforms have no inverse
    flat = scale(1, 1, 0)
    try:
        invert(flat)
    except SingularMatrixError as exc:
        print(f"invert(flat) failed: {exc}")
    print(f"normal_matrix(flat) -> {normal_matrix(flat)}")


def example_4_projection():
    """Example 4: Project a view-space point."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Perspective Projection")
    print("=" * 70)

    proj = perspective(math.radians(60), 16 / 9, 0.1, 100.0)
    clip = multiply_matrix_and_point(proj, [1, 1, -5, 1])
    ndc = clip[:3] / clip[3]
    print(f"Clip: {clip.round(4).tolist()}")
    print(f"NDC: {ndc.round(4).tolist()}")

    try:
        perspective(math.radians(60), 1.0, 1.0, 1.0)
    except DegenerateProjectionError as exc:
        print(f"Degenerate projection rejected: {exc}")


if __name__ == "__main__":
    example_1_points_and_directions()
    example_2_composition_order()
    example_3_inversion()
    example_4_projection()
