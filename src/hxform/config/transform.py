"""Transform step configuration.

Defines the parameter specifications used by ``hxform.Transform`` to
recognise identity steps.
"""

from __future__ import annotations

from dataclasses import dataclass

from hxform.config.operations import OperationSpec


@dataclass(frozen=True)
class TransformConfig:
    """Configuration for all transform pipeline steps."""

    scale: OperationSpec = OperationSpec(
        name="scale",
        neutral=1.0,
        composition="multiplicative",
        description="Per-axis scale factor: 1.0=no change",
    )

    translation: OperationSpec = OperationSpec(
        name="translation",
        neutral=0.0,
        composition="additive",
        description="Per-axis offset: 0.0=no movement",
    )

    rotation: OperationSpec = OperationSpec(
        name="rotation",
        neutral=0.0,
        composition="additive",
        description="Rotation angle in radians about one axis: 0=no rotation",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get operation spec by name.

        :param name: Operation name
        :return: OperationSpec for the operation
        :raises AttributeError: If operation not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all operation specs as a dictionary.

        :return: Dictionary mapping operation names to specs
        """
        return {
            "scale": self.scale,
            "translation": self.translation,
            "rotation": self.rotation,
        }
