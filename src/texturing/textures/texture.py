"""Texture objects evaluated by the shading pipeline.

This module provides the two texture variants exposed to the renderer:

- ImageTexture: samples an owned HDR image with nearest, bilinear or
  trilinear filtering. For trilinear filtering it owns a cached mip pyramid
  that is rebuilt only when the owner asks for it (construction,
  set_source() or make_valid()).
- ConstantTexture: returns a fixed color times a scale factor everywhere.

Both variants share the evaluate(uv, lod) interface. The variant set is
closed; callers that need to tell them apart match on the concrete type.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.texturing.core.color import Color
    >>> from src.texturing.core.image import HDRImage
    >>> from src.texturing.textures.texture import ImageTexture, SamplerMode
    >>> image = HDRImage.filled(4, 4, Color(1.0, 1.0, 1.0))
    >>> texture = ImageTexture(SamplerMode.TRILINEAR, image)
    >>> texture.evaluate((0.5, 0.5), lod=1.5)
    Color(r=1.0, g=1.0, b=1.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from src.texturing.core.color import DEFAULT_COLOR, Color
from src.texturing.core.image import HDRImage
from src.texturing.mipmap.generator import MipmapProgressCallback, generate_mipmap
from src.texturing.sampling.bilinear import sample_bilinear
from src.texturing.sampling.nearest import UV, sample_nearest
from src.texturing.sampling.trilinear import sample_trilinear


class SamplerMode(IntEnum):
    """Enumeration of supported image filtering modes.

    Used by ImageTexture to select the sampler and to decide whether a mip
    pyramid is kept.
    """

    NEAREST = 0
    BILINEAR = 1
    TRILINEAR = 2

    @classmethod
    def from_name(cls, name: str) -> SamplerMode:
        """Parse a mode from its case-insensitive name (e.g. "bilinear").

        Raises:
            ValueError: If the name does not match any mode.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(mode.name.lower() for mode in cls)
            raise ValueError(f"Unknown sampler mode: {name!r} (expected one of {valid})") from None


# Color of a ConstantTexture built without arguments
DEFAULT_CONSTANT_COLOR = Color(1.0, 1.0, 1.0)


class ImageTexture:
    """An image-backed texture with a selectable filtering mode.

    The texture deep-copies its source image, so it never aliases storage
    owned by the caller. The mip pyramid is derived data owned exclusively
    by the texture: it is built eagerly whenever make_valid() runs and is
    never rebuilt implicitly by evaluate().

    The sampler and image attributes may be changed in place by the owner,
    who must then call make_valid() before the next evaluate(). The texture
    does not watch for such changes itself.

    Two image textures are equal when both their sampler modes and their
    images are equal, so switching the mode alone counts as a change.

    Attributes:
        sampler: The active filtering mode.
        image: The owned base image.
    """

    def __init__(
        self,
        sampler: SamplerMode,
        image: HDRImage,
        *,
        progress: MipmapProgressCallback | None = None,
    ) -> None:
        """Create a texture from a copy of image.

        Args:
            sampler: The filtering mode.
            image: The source image. It is copied, not referenced.
            progress: Optional callback receiving (levels_completed,
                total_levels) whenever the mip pyramid is rebuilt.

        Raises:
            RuntimeError: If the mip pyramid allocation is inconsistent.
        """
        self.sampler = SamplerMode(sampler)
        self.image = image.copy()
        self._progress = progress
        self._levels: list[HDRImage] = []
        self.make_valid()

    @property
    def levels(self) -> tuple[HDRImage, ...]:
        """The cached mip pyramid (empty unless the mode is trilinear)."""
        return tuple(self._levels)

    @property
    def width(self) -> int:
        """Get the base image width."""
        return self.image.width

    @property
    def height(self) -> int:
        """Get the base image height."""
        return self.image.height

    def set_source(self, image: HDRImage) -> None:
        """Replace the base image with a copy of image and revalidate."""
        self.image = image.copy()
        self.make_valid()

    def make_valid(self) -> None:
        """Rebuild derived data after the image or sampler changed.

        Regenerates the mip pyramid in trilinear mode and drops it otherwise.
        The old pyramid is only replaced once the new one is complete.
        """
        if self.sampler == SamplerMode.TRILINEAR:
            self._levels = generate_mipmap(self.image, progress=self._progress)
        else:
            self._levels = []

    def evaluate(self, uv: UV, lod: float = 0.0) -> Color:
        """Sample the texture.

        Args:
            uv: Normalized texture coordinate. Components outside [0, 1] are
                clamped.
            lod: Level of detail, only used in trilinear mode.

        Returns:
            The filtered color, or the default color for a zero-area image.
        """
        if self.image.is_empty:
            return DEFAULT_COLOR

        if self.sampler == SamplerMode.NEAREST:
            return sample_nearest(self.image, uv)
        elif self.sampler == SamplerMode.BILINEAR:
            return sample_bilinear(self.image, uv)
        else:
            return sample_trilinear(self.image, self._levels, uv, lod)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageTexture):
            return NotImplemented
        return self.sampler == other.sampler and self.image == other.image

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ImageTexture(sampler={self.sampler.name.lower()}, "
            f"width={self.width}, height={self.height}, levels={len(self._levels)})"
        )


@dataclass(frozen=True)
class ConstantTexture:
    """A texture returning the same color for every coordinate.

    Attributes:
        color: The base color.
        scale: Multiplier applied to color on evaluation.
    """

    color: Color = DEFAULT_CONSTANT_COLOR
    scale: float = 1.0

    def evaluate(self, uv: UV, lod: float = 0.0) -> Color:
        """Return color * scale, independent of uv and lod."""
        return self.color * self.scale


# Closed set of texture variants
Texture = ImageTexture | ConstantTexture
