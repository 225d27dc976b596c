"""Trilinear (mip-mapped) texture sampling.

Trilinear filtering combines spatial bilinear filtering with linear
interpolation across two adjacent levels of a mip pyramid. The level of
detail (lod) selects the pyramid position: 0 is the full-resolution base
image, larger values are coarser, and fractional values blend between the
two bracketing levels so that detail fades smoothly instead of popping.

Level indexing follows the pyramid produced by generate_mipmap, where
levels[0] is the first half-resolution downsample of the base. An integral
lod k > 0 therefore samples levels[k] directly.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from src.texturing.core.color import Color
from src.texturing.core.image import HDRImage
from src.texturing.sampling.bilinear import sample_bilinear
from src.texturing.sampling.nearest import UV


def trilinear_levels(num_levels: int, lod: float) -> tuple[int, int, float] | None:
    """Select the pyramid levels bracketing lod.

    Args:
        num_levels: Number of levels in the mip pyramid.
        lod: Requested level of detail.

    Returns:
        A tuple (lo, hi, frac) where the result is
        (1 - frac) * levels[lo] + frac * levels[hi], or None if the base
        image should be sampled instead (lod <= 0, NaN lod, or an empty
        pyramid). Values of lod beyond the coarsest level saturate there.
    """
    # NaN fails this comparison and falls back to the base image
    if not lod > 0.0 or num_levels == 0:
        return None

    last = num_levels - 1
    lod = min(lod, float(last))
    lo = math.floor(lod)
    hi = math.ceil(lod)
    if lo == hi:
        return lo, hi, 0.0
    return lo, hi, lod - lo


def sample_trilinear(
    base: HDRImage,
    levels: Sequence[HDRImage],
    uv: UV,
    lod: float,
) -> Color:
    """Sample a mip-mapped image with trilinear filtering.

    Args:
        base: The full-resolution base image (lod 0).
        levels: The mip pyramid generated from base.
        uv: Normalized texture coordinate. Components outside [0, 1] are
            clamped.
        lod: Level of detail. Values <= 0 sample the base image; values
            beyond the last level clamp to the coarsest level.

    Returns:
        The filtered color.
    """
    bracket = trilinear_levels(len(levels), lod)
    if bracket is None:
        return sample_bilinear(base, uv)

    lo, hi, frac = bracket
    if lo == hi:
        return sample_bilinear(levels[lo], uv)

    fine = sample_bilinear(levels[lo], uv)
    coarse = sample_bilinear(levels[hi], uv)
    return fine * (1.0 - frac) + coarse * frac
