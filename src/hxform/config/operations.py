"""Operation specifications for transform builder steps.

An ``OperationSpec`` records the neutral (identity) value of a builder
parameter and how repeated steps of the same kind combine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class OperationSpec:
    """Specification for a transform step parameter.

    Attributes:
        name: Operation name (e.g., "scale", "translation")
        neutral: Value that causes no change (identity)
        composition: How consecutive steps combine ("multiplicative" or "additive")
        description: Human-readable description
    """

    name: str
    neutral: float
    composition: Literal["multiplicative", "additive"]
    description: str = ""

    def is_neutral(self, value: float) -> bool:
        """Check if a value is exactly neutral (no change).

        :param value: Value to check
        :returns: True if value equals the neutral value
        """
        return value == self.neutral

    def __repr__(self) -> str:
        return f"OperationSpec({self.name}, neutral={self.neutral}, {self.composition})"
