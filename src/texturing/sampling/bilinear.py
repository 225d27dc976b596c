"""Bilinear texture sampling.

Bilinear filtering reconstructs a continuous signal from the texel grid by
blending the four texels whose centers surround the sample point. Texel
centers sit at integer + 0.5 in pixel space, so a coordinate exactly on a
texel center returns that texel unchanged.

Addressing uses edge clamping: taps that fall outside the image reuse the
nearest edge or corner texel. The image never wraps around.

For a sample at continuous texel coordinates (cx, cy) with
x0 = floor(cx), y0 = floor(cy), tx = cx - x0, ty = cy - y0:

    result = (1 - tx)(1 - ty) * T(x0, y0) + tx(1 - ty) * T(x0 + 1, y0)
           + (1 - tx) ty * T(x0, y0 + 1) + tx ty * T(x0 + 1, y0 + 1)

The four weights are in [0, 1] and sum to one, so the result is always a
convex combination of at most four texels.

Example:
    >>> from src.texturing.core.color import Color
    >>> from src.texturing.core.image import HDRImage
    >>> from src.texturing.sampling.bilinear import sample_bilinear
    >>> image = HDRImage(2, 1)
    >>> image.set(1, 0, Color(1.0, 1.0, 1.0))
    >>> sample_bilinear(image, (0.5, 0.5))
    Color(r=0.5, g=0.5, b=0.5)
"""

from __future__ import annotations

import math

from src.texturing.core.color import DEFAULT_COLOR, Color
from src.texturing.core.image import HDRImage, clamp_unit
from src.texturing.sampling.nearest import UV

# A single bilinear tap: texel column, texel row, weight
BilinearTap = tuple[int, int, float]


def bilinear_footprint(width: int, height: int, uv: UV) -> list[BilinearTap]:
    """Compute the four texel taps and weights used to sample uv.

    Args:
        width: Image width in texels.
        height: Image height in texels.
        uv: Normalized texture coordinate, clamped to [0, 1] per component.

    Returns:
        A list of (x, y, weight) taps in the order (x0, y0), (x1, y0),
        (x0, y1), (x1, y1). Addresses are clamped into the image, so the
        same texel may appear more than once near edges. Empty for a
        zero-area image.
    """
    if width == 0 or height == 0:
        return []

    # Continuous texel coordinates, shifted so texel centers are integral
    cx = width * clamp_unit(uv[0]) - 0.5
    cy = height * clamp_unit(uv[1]) - 0.5

    x0 = math.floor(cx)
    y0 = math.floor(cy)
    tx = cx - x0
    ty = cy - y0

    # Clamp each axis independently (edge repeat)
    xa = min(max(x0, 0), width - 1)
    xb = min(max(x0 + 1, 0), width - 1)
    ya = min(max(y0, 0), height - 1)
    yb = min(max(y0 + 1, 0), height - 1)

    return [
        (xa, ya, (1.0 - tx) * (1.0 - ty)),
        (xb, ya, tx * (1.0 - ty)),
        (xa, yb, (1.0 - tx) * ty),
        (xb, yb, tx * ty),
    ]


def sample_bilinear(image: HDRImage, uv: UV) -> Color:
    """Sample an image with bilinear filtering.

    Args:
        image: The image to sample.
        uv: Normalized texture coordinate. Components outside [0, 1] are
            clamped.

    Returns:
        The weighted blend of the four texels surrounding uv, or the
        default color for a zero-area image.
    """
    if image.is_empty:
        return DEFAULT_COLOR

    r = g = b = 0.0
    for x, y, weight in bilinear_footprint(image.width, image.height, uv):
        if weight == 0.0:
            continue
        texel = image.at(x, y)
        r += weight * texel.r
        g += weight * texel.g
        b += weight * texel.b
    return Color(r, g, b)
