"""Core data types.

Components:
    color: Immutable linear-light RGB color (Spectrum)
    image: HDR image pixel buffer and coordinate clamping helpers
"""

from .color import DEFAULT_COLOR, Color
from .image import HDRImage, clamp, clamp_unit

__all__ = [
    "Color",
    "DEFAULT_COLOR",
    "HDRImage",
    "clamp",
    "clamp_unit",
]
