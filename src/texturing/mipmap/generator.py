"""Mip-map pyramid generation by box-filtered downsampling.

This module builds the mip pyramid used for trilinear filtering. Each level
is half the resolution of the previous one (rounded down, never below one
texel per axis), and each destination texel is the unweighted average of
the source texels it covers. Every source texel contributes to exactly one
destination texel, which makes the filter a true box filter: it preserves
the image mean for even dimensions and suppresses aliasing in the chain.

Block sizes per destination texel:
    - 2x2 in the interior (divided by 4)
    - 3x2 / 2x3 on the last column / row when the source width / height is
      odd (divided by 6)
    - 3x3 on the last corner when both source dimensions are odd (divided by 9)
    - 1 texel along an axis whose source length is 1

For a base image of size w x h the pyramid has floor(log2(max(w, h)))
levels and ends at 1x1. levels[0] is the first downsample; the base image
itself is not part of the returned sequence.

The per-texel averaging runs in a Taichi kernel, parallel over destination
texels. Levels are produced strictly in order since each one is filtered
from its predecessor.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.texturing.core.image import HDRImage
    >>> from src.texturing.mipmap.generator import generate_mipmap
    >>> levels = generate_mipmap(HDRImage(8, 4))
    >>> [(level.width, level.height) for level in levels]
    [(4, 2), (2, 1), (1, 1)]
"""

from collections.abc import Callable

import taichi as ti
import taichi.math as tm

from src.texturing.core.image import HDRImage

# Type alias for progress callback
# Callback receives (levels_completed, total_levels)
MipmapProgressCallback = Callable[[int, int], None]


def mipmap_level_count(width: int, height: int) -> int:
    """Number of pyramid levels for a base image, floor(log2(max(w, h))).

    Computed with integer arithmetic so it is exact for every size. Returns
    0 for 1x1 and zero-area images.
    """
    if width <= 0 or height <= 0:
        return 0
    return max(width, height).bit_length() - 1


def mipmap_level_sizes(width: int, height: int) -> list[tuple[int, int]]:
    """Compute the (width, height) of every pyramid level.

    Args:
        width: Base image width.
        height: Base image height.

    Returns:
        The level dimensions, from the first downsample down to 1x1.

    Raises:
        RuntimeError: If the halving schedule disagrees with the level count.
            This indicates a defect in the size arithmetic, never bad input.
    """
    num_levels = mipmap_level_count(width, height)
    if num_levels == 0:
        return []

    sizes = []
    level_w, level_h = width, height
    for _ in range(num_levels):
        if level_w == 1 and level_h == 1:
            raise RuntimeError(
                f"Mip chain for {width}x{height} reached 1x1 before "
                f"{num_levels} levels were allocated"
            )
        level_w = max(1, level_w // 2)
        level_h = max(1, level_h // 2)
        sizes.append((level_w, level_h))

    if (level_w, level_h) != (1, 1) or len(sizes) != num_levels:
        raise RuntimeError(
            f"Mip chain for {width}x{height} ended at {level_w}x{level_h} "
            f"after {len(sizes)} levels, expected 1x1 after {num_levels}"
        )
    return sizes


@ti.kernel
def _downsample_kernel(
    src: ti.types.ndarray(dtype=ti.f32, ndim=3),
    dst: ti.types.ndarray(dtype=ti.f32, ndim=3),
):
    """Box-filter src (H, W, 3) into dst (H', W', 3), one thread per texel."""
    for y, x in ti.ndrange(dst.shape[0], dst.shape[1]):
        x_start = 2 * x
        y_start = 2 * y
        x_end = x_start + 2
        y_end = y_start + 2
        # The last column / row absorbs the leftover texel of an odd axis
        # (or covers the single texel of a length-1 axis)
        if x == dst.shape[1] - 1:
            x_end = src.shape[1]
        if y == dst.shape[0] - 1:
            y_end = src.shape[0]

        total = tm.vec3(0.0, 0.0, 0.0)
        for sy in range(y_start, y_end):
            for sx in range(x_start, x_end):
                total += tm.vec3(src[sy, sx, 0], src[sy, sx, 1], src[sy, sx, 2])

        count = ti.cast((x_end - x_start) * (y_end - y_start), ti.f32)
        for c in ti.static(range(3)):
            dst[y, x, c] = total[c] / count


def downsample(src: HDRImage, dst: HDRImage) -> None:
    """Fill dst with the box-filtered half-resolution version of src.

    Args:
        src: The source level.
        dst: The destination level, already allocated at
            max(1, src.width // 2) x max(1, src.height // 2).

    Raises:
        ValueError: If dst does not have the halved dimensions of src.
    """
    expected_w = max(1, src.width // 2)
    expected_h = max(1, src.height // 2)
    if src.is_empty or dst.width != expected_w or dst.height != expected_h:
        raise ValueError(
            f"Cannot downsample {src.width}x{src.height} into "
            f"{dst.width}x{dst.height}, expected {expected_w}x{expected_h}"
        )
    _downsample_kernel(src.pixels, dst.pixels)


def generate_mipmap(
    base: HDRImage,
    progress: MipmapProgressCallback | None = None,
) -> list[HDRImage]:
    """Build the mip pyramid for a base image.

    All levels are allocated up front from the halving schedule, then filled
    in order, each from its predecessor (levels[0] from base).

    Args:
        base: The full-resolution image. It is read but never modified.
        progress: Optional callback invoked after each level is filled with
            (levels_completed, total_levels).

    Returns:
        The pyramid levels, from the first downsample to 1x1. Empty for 1x1
        and zero-area base images.

    Raises:
        RuntimeError: If the level allocation is internally inconsistent.
            No partial pyramid is returned.

    Example:
        >>> def report(done, total):
        ...     print(f"Mip level {done}/{total}")
        >>> levels = generate_mipmap(image, progress=report)
    """
    sizes = mipmap_level_sizes(base.width, base.height)
    levels = [HDRImage(level_w, level_h) for level_w, level_h in sizes]

    for i, dst in enumerate(levels):
        src = base if i == 0 else levels[i - 1]
        downsample(src, dst)
        if progress is not None:
            progress(i + 1, len(levels))

    return levels
