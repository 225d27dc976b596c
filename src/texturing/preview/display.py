"""Matplotlib-based preview of textures and mip pyramids.

This module turns textures into plain NumPy arrays for inspection and
optionally shows them with Matplotlib. Values are displayed as stored
(linear, clipped to [0, 1] by Matplotlib); no tone mapping or color-space
conversion is applied.

Features:
    - Mip pyramid mosaic (all levels side by side)
    - Texture resampling onto an arbitrary pixel grid
    - Side-by-side comparison of sampler modes

Example:
    >>> from src.texturing.preview.display import show_sampler_comparison
    >>> show_sampler_comparison(image, width=256, height=256)
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from src.texturing.core.image import HDRImage
from src.texturing.textures.texture import ImageTexture, SamplerMode, Texture


def pyramid_mosaic(
    base: HDRImage,
    levels: Sequence[HDRImage],
) -> npt.NDArray[np.float32]:
    """Lay out a base image and its mip levels left to right.

    Each level is placed at the top of its column, with zeros filling the
    unused area below it.

    Args:
        base: The full-resolution image.
        levels: The mip pyramid generated from base.

    Returns:
        Array of shape (base.height, base.width + sum of level widths, 3).
    """
    images = [base, *levels]
    total_width = sum(image.width for image in images)
    mosaic = np.zeros((base.height, total_width, 3), dtype=np.float32)

    x_offset = 0
    for image in images:
        mosaic[: image.height, x_offset : x_offset + image.width] = image.pixels
        x_offset += image.width
    return mosaic


def resample_texture(
    texture: Texture,
    width: int,
    height: int,
    lod: float = 0.0,
) -> npt.NDArray[np.float32]:
    """Evaluate a texture at the pixel centers of a width x height grid.

    Args:
        texture: Any texture variant.
        width: Output width in pixels.
        height: Output height in pixels.
        lod: Level of detail passed to every evaluation.

    Returns:
        Array of shape (height, width, 3) with dtype float32.

    Raises:
        ValueError: If width or height is negative.
    """
    if width < 0 or height < 0:
        raise ValueError(f"Output dimensions must be non-negative, got {width}x{height}")

    output = np.zeros((height, width, 3), dtype=np.float32)
    for y in range(height):
        v = (y + 0.5) / height
        for x in range(width):
            u = (x + 0.5) / width
            output[y, x] = texture.evaluate((u, v), lod).to_tuple()
    return output


def show_pyramid(
    texture: ImageTexture,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (12, 6),
    block: bool = True,
) -> None:
    """Display a texture's base image and mip pyramid as one mosaic.

    Args:
        texture: A texture, normally in trilinear mode.
        title: Custom title (default shows the level count).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    mosaic = pyramid_mosaic(texture.image, texture.levels)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(np.clip(mosaic, 0.0, 1.0), interpolation="nearest")
    ax.axis("off")

    if title is None:
        title = (
            f"Mip pyramid - {texture.width}x{texture.height}, "
            f"{len(texture.levels)} levels"
        )
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)


def show_sampler_comparison(
    image: HDRImage,
    *,
    width: int = 256,
    height: int = 256,
    lod: float = 0.0,
    modes: Sequence[SamplerMode] = tuple(SamplerMode),
    figsize: tuple[float, float] = (16, 6),
    block: bool = True,
) -> list[npt.NDArray[np.float32]]:
    """Display an image resampled with each sampler mode side by side.

    Args:
        image: The source image.
        width: Output width of each panel.
        height: Output height of each panel.
        lod: Level of detail for trilinear panels.
        modes: Sampler modes to compare, one panel each.
        figsize: Figure size in inches.
        block: Whether to block execution until figure is closed.

    Returns:
        The resampled arrays, one per mode, in the order of modes.

    Raises:
        ValueError: If modes is empty.
    """
    import matplotlib.pyplot as plt

    if not modes:
        raise ValueError("At least one sampler mode is required for comparison")

    panels = [
        resample_texture(ImageTexture(mode, image), width, height, lod=lod)
        for mode in modes
    ]

    fig, axes = plt.subplots(1, len(panels), figsize=figsize, squeeze=False)
    for ax, mode, panel in zip(axes[0], modes, panels):
        ax.imshow(np.clip(panel, 0.0, 1.0), interpolation="nearest")
        label = mode.name.lower()
        if mode == SamplerMode.TRILINEAR:
            label += f" (lod {lod:g})"
        ax.set_title(label)
        ax.axis("off")

    plt.tight_layout()
    plt.show(block=block)

    return panels
