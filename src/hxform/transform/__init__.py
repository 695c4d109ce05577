"""
Transform module - 4x4 homogeneous matrices built from Numba-compiled kernels.

Example:
    >>> from hxform.transform import Transform, compose_all, rotate_z, scale, translate
    >>> m = compose_all([rotate_z(math.pi / 2), translate(0, 200, 0), scale(0.8, 0.8, 0.8)])
    >>> same = Transform().scale(0.8).translate(0, 200, 0).rotate_z(math.pi / 2).to_matrix()
"""

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
from hxform.transform.inverse import determinant, invert, normal_matrix
from hxform.transform.kernels import warmup_kernels
from hxform.transform.pipeline import Step, Transform

__all__ = [
    "Transform",
    "Step",
    "multiply_matrix_and_point",
    "multiply_matrices",
    "identity",
    "translate",
    "scale",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "compose_all",
    "determinant",
    "invert",
    "normal_matrix",
    "warmup_kernels",
]
