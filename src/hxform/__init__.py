"""
hxform - Homogeneous 4x4 matrix transforms

Small, stateless matrix algebra for 3D spatial transforms, compiled with Numba.

Features:
- Point/matrix and matrix/matrix multiplication (row vectors, row-major storage)
- Affine builders: identity, translate, scale, rotate about X/Y/Z
- Composition of any number of matrices in a single fold
- Determinant, inversion and normal-matrix derivation
- Perspective and orthographic projection matrices
- Vector helpers: normalize, distance, degree/radian and polar conversion
- Immutable results: every operation returns a new read-only array

Example - Functions:
    >>> import math
    >>> from hxform import compose_all, invert, multiply_matrix_and_point, rotate_z, scale, translate
    >>>
    >>> # Scale down, move down 200, then rotate 90 degrees (listed in reverse)
    >>> m = compose_all([rotate_z(math.pi / 2), translate(0, 200, 0), scale(0.8, 0.8, 0.8)])
    >>> p = multiply_matrix_and_point(m, [10, 0, 0, 1])
    >>> back = multiply_matrix_and_point(invert(m), p)

Example - Transform pipeline:
    >>> from hxform import Transform
    >>>
    >>> # Steps listed in the order they apply
    >>> t = Transform().scale(0.8).translate(0, 200, 0).rotate_euler(0, 0, 90)
    >>> p = t([10, 0, 0, 1])

Errors:
    All errors subclass ``ValueError``: DimensionError, SingularMatrixError,
    DegenerateProjectionError, ZeroLengthVectorError, EmptyCompositionError.
    ``normal_matrix`` returns None for a singular matrix instead of raising.
"""

__version__ = "0.1.0"

from hxform.config import CONFIG, HxformConfig, OperationSpec, ToleranceConfig, TransformConfig
from hxform.errors import (
    DegenerateProjectionError,
    DimensionError,
    EmptyCompositionError,
    HxformError,
    SingularMatrixError,
    ZeroLengthVectorError,
)
from hxform.projection import orthographic, perspective
from hxform.reference import ReferenceTransforms, reference_transforms
from hxform.shared import degrees_to_radians, distance_from_origin, normalize, polar_to_cartesian
from hxform.transform import (
    Step,
    Transform,
    compose_all,
    determinant,
    identity,
    invert,
    multiply_matrices,
    multiply_matrix_and_point,
    normal_matrix,
    rotate_x,
    rotate_y,
    rotate_z,
    scale,
    translate,
    warmup_kernels,
)
from hxform.types import (
    ArrayLike,
    Matrix3,
    Matrix4,
    Point2,
    Point4,
    Vector3,
    as_matrix3,
    as_matrix4,
    as_point2,
    as_point4,
    as_vector3,
)
from hxform.verification import MatrixVerifier

__all__ = [
    "__version__",
    # Multiplication
    "multiply_matrix_and_point",
    "multiply_matrices",
    # Affine builders
    "identity",
    "translate",
    "scale",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    # Composition
    "compose_all",
    "Transform",
    "Step",
    # Inversion
    "determinant",
    "invert",
    "normal_matrix",
    # Projection
    "perspective",
    "orthographic",
    # Vector utilities
    "normalize",
    "distance_from_origin",
    "degrees_to_radians",
    "polar_to_cartesian",
    # Types
    "ArrayLike",
    "Matrix4",
    "Matrix3",
    "Point4",
    "Point2",
    "Vector3",
    "as_matrix4",
    "as_matrix3",
    "as_point4",
    "as_point2",
    "as_vector3",
    # Errors
    "HxformError",
    "DimensionError",
    "SingularMatrixError",
    "DegenerateProjectionError",
    "ZeroLengthVectorError",
    "EmptyCompositionError",
    # Config
    "CONFIG",
    "HxformConfig",
    "ToleranceConfig",
    "TransformConfig",
    "OperationSpec",
    # Utilities
    "MatrixVerifier",
    "ReferenceTransforms",
    "reference_transforms",
    "warmup_kernels",
]
