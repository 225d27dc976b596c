"""Mip pyramid generation.

Components:
    generator: Level allocation schedule and box-filter downsampling

Downsampling runs in a Taichi kernel, so Taichi should be initialized
(ti.init) before generating pyramids.
"""

from .generator import (
    MipmapProgressCallback,
    downsample,
    generate_mipmap,
    mipmap_level_count,
    mipmap_level_sizes,
)

__all__ = [
    "MipmapProgressCallback",
    "downsample",
    "generate_mipmap",
    "mipmap_level_count",
    "mipmap_level_sizes",
]
