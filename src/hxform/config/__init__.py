"""Configuration for hxform."""

from hxform.config.config import (
    CONFIG,
    TOLERANCE_CONFIG,
    TRANSFORM_CONFIG,
    HxformConfig,
    ToleranceConfig,
)
from hxform.config.operations import OperationSpec
from hxform.config.transform import TransformConfig

__all__ = [
    "CONFIG",
    "TOLERANCE_CONFIG",
    "TRANSFORM_CONFIG",
    "HxformConfig",
    "ToleranceConfig",
    "TransformConfig",
    "OperationSpec",
]
