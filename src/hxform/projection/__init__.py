"""
Projection module - perspective and orthographic clip-space matrices.

Example:
    >>> from hxform.projection import perspective
    >>> proj = perspective(math.pi / 2, 16 / 9, 0.1, 100.0)
"""

from hxform.projection.api import orthographic, perspective

__all__ = [
    "perspective",
    "orthographic",
]
