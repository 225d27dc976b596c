"""Preview module for inspecting textures.

Components:
    display: Pyramid mosaics, texture resampling and Matplotlib figures

Matplotlib is imported only when a figure is shown, so the array helpers
work without it.

Example:
    >>> from src.texturing.preview import pyramid_mosaic
    >>> mosaic = pyramid_mosaic(texture.image, texture.levels)
"""

from src.texturing.preview.display import (
    pyramid_mosaic,
    resample_texture,
    show_pyramid,
    show_sampler_comparison,
)

__all__ = [
    "pyramid_mosaic",
    "resample_texture",
    "show_pyramid",
    "show_sampler_comparison",
]
