"""Nearest-texel (point) sampling.

Maps a normalized texture coordinate to the single texel whose footprint
contains it. No blending is performed, so the result is always exactly one
stored texel value.
"""

from __future__ import annotations

import math

from src.texturing.core.color import DEFAULT_COLOR, Color
from src.texturing.core.image import HDRImage, clamp_unit

# Type alias for normalized texture coordinates
UV = tuple[float, float]


def nearest_texel(width: int, height: int, uv: UV) -> tuple[int, int]:
    """Compute the (x, y) address of the texel containing uv.

    Args:
        width: Image width in texels (> 0).
        height: Image height in texels (> 0).
        uv: Normalized texture coordinate, clamped to [0, 1] per component.

    Returns:
        The integer texel address, always inside the image.
    """
    # Pixel space is [0, w] x [0, h]; texel i covers [i, i + 1)
    x = width * clamp_unit(uv[0])
    y = height * clamp_unit(uv[1])

    # uv == 1 maps to w (or h) and must be pulled back onto the last texel
    ix = min(max(math.floor(x), 0), width - 1)
    iy = min(max(math.floor(y), 0), height - 1)
    return ix, iy


def sample_nearest(image: HDRImage, uv: UV) -> Color:
    """Sample an image with nearest-texel filtering.

    Args:
        image: The image to sample.
        uv: Normalized texture coordinate. Components outside [0, 1] are
            clamped.

    Returns:
        The stored color of the texel containing uv, or the default color
        for a zero-area image.
    """
    if image.is_empty:
        return DEFAULT_COLOR
    ix, iy = nearest_texel(image.width, image.height, uv)
    return image.at(ix, iy)
