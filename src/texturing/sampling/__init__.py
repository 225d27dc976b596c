"""Texture samplers.

Components:
    nearest: Single closest texel, no blending
    bilinear: Weighted blend of the four surrounding texels
    trilinear: Bilinear samples of two mip levels blended by level of detail

All samplers clamp texture coordinates to [0, 1], clamp texel addresses to
the image, and return the default color for zero-area images.
"""

from .bilinear import BilinearTap, bilinear_footprint, sample_bilinear
from .nearest import UV, nearest_texel, sample_nearest
from .trilinear import sample_trilinear, trilinear_levels

__all__ = [
    "UV",
    "BilinearTap",
    "nearest_texel",
    "sample_nearest",
    "bilinear_footprint",
    "sample_bilinear",
    "trilinear_levels",
    "sample_trilinear",
]
