"""HDR image pixel buffer with bounds-checked texel access.

This module provides HDRImage, a row-major grid of linear-light RGB texels
stored in a NumPy float32 array of shape (H, W, 3), plus the coordinate
clamping helpers shared by all samplers.

Texel addressing follows the (x, y) convention of the samplers: x is the
column in [0, width) and y is the row in [0, height). Access outside that
range is a caller bug and raises IndexError; samplers always clamp before
reading.

Example:
    >>> from src.texturing.core.color import Color
    >>> from src.texturing.core.image import HDRImage
    >>> image = HDRImage(4, 2)
    >>> image.set(3, 1, Color(1.0, 0.5, 0.25))
    >>> image.at(3, 1)
    Color(r=1.0, g=0.5, b=0.25)
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from src.texturing.core.color import DEFAULT_COLOR, Color


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into the closed range [lo, hi]."""
    return max(lo, min(value, hi))


def clamp_unit(value: float) -> float:
    """Clamp a texture coordinate component into [0, 1].

    NaN is mapped to 0 so that it can never reach integer pixel addressing.
    """
    if math.isnan(value):
        return 0.0
    return clamp(value, 0.0, 1.0)


class HDRImage:
    """A width x height grid of linear-light RGB texels.

    The buffer is always exactly width * height texels. A zero-area image
    (width or height equal to 0) is valid and holds no texels.

    Attributes:
        width: Number of texel columns.
        height: Number of texel rows.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        """Create a zero-initialized image.

        Args:
            width: Image width in texels (>= 0).
            height: Image height in texels (>= 0).

        Raises:
            ValueError: If either dimension is negative.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Image dimensions must be non-negative, got {width}x{height}")
        self._pixels = np.zeros((height, width, 3), dtype=np.float32)

    @classmethod
    def from_array(cls, array: npt.ArrayLike) -> HDRImage:
        """Create an image from an (H, W, 3) array.

        The data is always copied; the image never aliases the caller's array.

        Raises:
            ValueError: If the array is not of shape (H, W, 3).
        """
        data = np.asarray(array, dtype=np.float32)
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Expected an array of shape (H, W, 3), got {data.shape}")
        image = cls.__new__(cls)
        image._pixels = np.array(data, dtype=np.float32, order="C", copy=True)
        return image

    @classmethod
    def filled(cls, width: int, height: int, color: Color) -> HDRImage:
        """Create an image with every texel set to color."""
        image = cls(width, height)
        image.fill(color)
        return image

    @property
    def width(self) -> int:
        """Get the image width in texels."""
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        """Get the image height in texels."""
        return int(self._pixels.shape[0])

    @property
    def is_empty(self) -> bool:
        """True if the image has zero area."""
        return self.width == 0 or self.height == 0

    @property
    def pixels(self) -> npt.NDArray[np.float32]:
        """The live (H, W, 3) texel buffer.

        Writing through this array mutates the image in place. Textures built
        from this image must be revalidated by their owner afterwards.
        """
        return self._pixels

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Texel ({x}, {y}) is outside image bounds {self.width}x{self.height}"
            )

    def at(self, x: int, y: int) -> Color:
        """Read the texel at column x, row y.

        Raises:
            IndexError: If (x, y) is outside [0, width) x [0, height).
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(float(r), float(g), float(b))

    def set(self, x: int, y: int, color: Color) -> None:
        """Write the texel at column x, row y.

        Raises:
            IndexError: If (x, y) is outside [0, width) x [0, height).
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = (color.r, color.g, color.b)

    def fill(self, color: Color) -> None:
        """Set every texel to color."""
        self._pixels[...] = (color.r, color.g, color.b)

    def copy(self) -> HDRImage:
        """Return an independent deep copy of this image."""
        return HDRImage.from_array(self._pixels)

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return a copy of the texels as an (H, W, 3) float32 array."""
        return self._pixels.copy()

    def mean(self) -> Color:
        """Average of all texels, or the default color for an empty image."""
        if self.is_empty:
            return DEFAULT_COLOR
        r, g, b = self._pixels.astype(np.float64).mean(axis=(0, 1))
        return Color(float(r), float(g), float(b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HDRImage):
            return NotImplemented
        return self._pixels.shape == other._pixels.shape and bool(
            np.array_equal(self._pixels, other._pixels)
        )

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HDRImage(width={self.width}, height={self.height})"
