"""Fluent transform pipeline.

Steps are listed in the order they apply to a point, and ``to_matrix()``
reverses them for ``compose_all``, so callers never have to think about
composition order.

Example:
    >>> t = Transform().scale(0.8).translate(0, 200, 0).rotate_z(math.pi / 2)
    >>> t.to_matrix()  # same as compose_all([rotate_z, translate, scale])
    >>> t([10, 0, 0, 1])
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from hxform.config import TRANSFORM_CONFIG
from hxform.shared.vector import degrees_to_radians
from hxform.transform.api import (
    compose_all,
    identity,
    multiply_matrix_and_point,
    rotate_x,
    rotate_y,
    rotate_z,
    scale,
    translate,
)
from hxform.transform.inverse import invert
from hxform.types import ArrayLike, Matrix4, Point4, as_matrix4


@dataclass(frozen=True, eq=False)
class Step:
    """A single transform step.

    Attributes:
        kind: "scale", "translation", "rotation" or "matrix"
        params: Builder arguments (empty for "matrix" steps)
        matrix: The step's Matrix4
    """

    kind: str
    params: tuple[float, ...]
    matrix: Matrix4

    def is_neutral(self) -> bool:
        if self.kind == "matrix":
            return bool(np.array_equal(self.matrix, identity()))
        spec = TRANSFORM_CONFIG.get_spec(self.kind)
        return all(spec.is_neutral(value) for value in self.params)


class Transform:
    """Immutable sequence of transform steps.

    Every builder method returns a new Transform. ``a + b`` applies ``a``
    first, then ``b``.
    """

    __slots__ = ("_steps",)

    def __init__(self, steps: tuple[Step, ...] = ()):
        self._steps = tuple(steps)

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    def _then(self, step: Step) -> Transform:
        return Transform(self._steps + (step,))

    # Builder steps

    def scale(self, w: float, h: float | None = None, d: float | None = None) -> Transform:
        """Scale per axis; a single argument scales uniformly.

        :param w: X factor (or uniform factor)
        :param h: Y factor, defaults to ``w``
        :param d: Z factor, defaults to ``w``
        :returns: New Transform
        """
        h = w if h is None else h
        d = w if d is None else d
        return self._then(Step("scale", (w, h, d), scale(w, h, d)))

    def translate(self, x: float, y: float, z: float) -> Transform:
        """Move by ``(x, y, z)``."""
        return self._then(Step("translation", (x, y, z), translate(x, y, z)))

    def rotate_x(self, radians: float) -> Transform:
        """Rotate about the X axis."""
        return self._then(Step("rotation", (radians,), rotate_x(radians)))

    def rotate_y(self, radians: float) -> Transform:
        """Rotate about the Y axis."""
        return self._then(Step("rotation", (radians,), rotate_y(radians)))

    def rotate_z(self, radians: float) -> Transform:
        """Rotate about the Z axis."""
        return self._then(Step("rotation", (radians,), rotate_z(radians)))

    def rotate_euler(self, rx: float, ry: float, rz: float) -> Transform:
        """Rotate about X, then Y, then Z, with angles in degrees.

        :param rx: X rotation in degrees
        :param ry: Y rotation in degrees
        :param rz: Z rotation in degrees
        :returns: New Transform
        """
        return (
            self.rotate_x(degrees_to_radians(rx))
            .rotate_y(degrees_to_radians(ry))
            .rotate_z(degrees_to_radians(rz))
        )

    def matrix(self, matrix: ArrayLike) -> Transform:
        """Append an arbitrary Matrix4 step."""
        return self._then(Step("matrix", (), as_matrix4(matrix)))

    # Evaluation

    def to_matrix(self) -> Matrix4:
        """Compose all steps into one Matrix4 (identity when empty)."""
        if not self._steps:
            return identity()
        return compose_all(step.matrix for step in reversed(self._steps))

    def apply(self, point: ArrayLike) -> Point4:
        """Transform a homogeneous point."""
        return multiply_matrix_and_point(self.to_matrix(), point)

    def __call__(self, point: ArrayLike) -> Point4:
        return self.apply(point)

    def inverse(self) -> Transform:
        """Single-step Transform holding the inverse matrix.

        :raises SingularMatrixError: If the composed matrix is singular
        """
        return Transform((Step("matrix", (), invert(self.to_matrix())),))

    def is_neutral(self) -> bool:
        """Check if every step is an identity step."""
        return all(step.is_neutral() for step in self._steps)

    # Composition

    def __add__(self, other: Transform) -> Transform:
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(self._steps + other._steps)

    def __radd__(self, other):
        """Support sum() with initial value 0."""
        if other == 0:
            return self
        return NotImplemented

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        kinds = ", ".join(step.kind for step in self._steps)
        return f"Transform([{kinds}])"
