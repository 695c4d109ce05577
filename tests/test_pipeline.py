"""Tests for the fluent Transform pipeline."""

import math

import numpy as np
import pytest

from hxform import (
    SingularMatrixError,
    Transform,
    compose_all,
    identity,
    rotate_x,
    rotate_z,
    scale,
    translate,
)


class TestTransformBuild:
    """Test building and evaluating Transform pipelines."""

    def test_empty_is_identity(self):
        """An empty pipeline is the identity."""
        np.testing.assert_array_equal(Transform().to_matrix(), identity())

    def test_matches_compose_all(self):
        """Steps are composed in reverse listing order."""
        t = Transform().scale(0.8, 0.8, 0.8).translate(0, 200, 0).rotate_z(math.pi / 2)
        expected = compose_all([rotate_z(math.pi / 2), translate(0, 200, 0), scale(0.8, 0.8, 0.8)])
        np.testing.assert_array_equal(t.to_matrix(), expected)

    def test_uniform_scale(self):
        """A single scale argument scales every axis."""
        np.testing.assert_array_equal(Transform().scale(2).to_matrix(), scale(2, 2, 2))

    def test_apply_point(self):
        """Applying the pipeline transforms a point step by step."""
        t = Transform().scale(0.8).translate(0, 200, 0).rotate_z(math.pi / 2)
        np.testing.assert_allclose(t([10, 0, 0, 1]), [200, -8, 0, 1], atol=1e-12)
        np.testing.assert_array_equal(t.apply([10, 0, 0, 1]), t([10, 0, 0, 1]))

    def test_rotate_euler_degrees(self):
        """rotate_euler takes degrees."""
        t = Transform().rotate_euler(0, 0, 90)
        np.testing.assert_allclose(t.to_matrix(), rotate_z(math.pi / 2), atol=1e-15)

    def test_matrix_step(self):
        """Arbitrary matrices can be appended."""
        t = Transform().matrix(rotate_x(0.5)).translate(1, 0, 0)
        expected = compose_all([translate(1, 0, 0), rotate_x(0.5)])
        np.testing.assert_array_equal(t.to_matrix(), expected)

    def test_inverse(self):
        """The inverse pipeline undoes the transform."""
        t = Transform().scale(2, 3, 4).rotate_x(0.3).translate(5, -1, 2)
        point = np.array([1.0, 2.0, 3.0, 1.0])
        np.testing.assert_allclose(t.inverse()(t(point)), point, atol=1e-12)

    def test_inverse_singular_raises(self):
        """Inverting a flattening pipeline raises SingularMatrixError."""
        with pytest.raises(SingularMatrixError):
            Transform().scale(1, 0, 1).inverse()


class TestTransformComposition:
    """Test Transform immutability and composition."""

    def test_builders_return_new_instances(self):
        """Builder methods never modify the original."""
        base = Transform().translate(1, 0, 0)
        extended = base.scale(2)
        assert len(base) == 1
        assert len(extended) == 2

    def test_add_applies_left_first(self):
        """a + b applies a first, then b."""
        a = Transform().translate(1, 0, 0)
        b = Transform().scale(2)
        result = (a + b)([0, 0, 0, 1])
        assert result.tolist() == [2.0, 0.0, 0.0, 1.0]

    def test_sum(self):
        """sum() composes pipelines in order."""
        parts = [Transform().translate(1, 0, 0), Transform().translate(0, 2, 0)]
        total = sum(parts)
        assert total([0, 0, 0, 1]).tolist() == [1.0, 2.0, 0.0, 1.0]

    def test_add_non_transform(self):
        """Adding something else is unsupported."""
        with pytest.raises(TypeError):
            Transform() + 1

    def test_is_neutral(self):
        """Identity steps are recognised."""
        assert Transform().is_neutral()
        assert Transform().scale(1).translate(0, 0, 0).rotate_x(0).is_neutral()
        assert Transform().matrix(identity()).is_neutral()
        assert not Transform().scale(2).is_neutral()
        assert not Transform().rotate_z(0.1).is_neutral()

    def test_steps(self):
        """Steps record their kind and parameters."""
        t = Transform().scale(2).translate(1, 2, 3)
        assert [step.kind for step in t.steps] == ["scale", "translation"]
        assert t.steps[1].params == (1, 2, 3)

    def test_repr(self):
        """repr lists the step kinds."""
        assert repr(Transform().scale(2).rotate_x(1)) == "Transform([scale, rotation])"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
