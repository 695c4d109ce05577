"""Unified hxform configuration.

Top-level frozen dataclass holding the comparison tolerances and the
transform step specifications. Nothing here is read from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hxform.config.transform import TransformConfig


@dataclass(frozen=True)
class ToleranceConfig:
    """Tolerances for approximate matrix comparison.

    Attributes:
        atol: Absolute tolerance per element
        rtol: Relative tolerance per element
    """

    atol: float = 1e-9
    rtol: float = 0.0


@dataclass(frozen=True)
class HxformConfig:
    """Top-level configuration.

    Provides hierarchical access:
        CONFIG.tolerance.atol
        CONFIG.transform.scale

    Attributes:
        tolerance: Default tolerances used by MatrixVerifier
        transform: Transform pipeline step specifications
    """

    tolerance: ToleranceConfig = field(default_factory=ToleranceConfig)
    transform: TransformConfig = field(default_factory=TransformConfig)


# Main singleton instance
CONFIG = HxformConfig()

TOLERANCE_CONFIG = CONFIG.tolerance
TRANSFORM_CONFIG = CONFIG.transform
