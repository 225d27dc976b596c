"""Linear-light RGB color value type.

This module provides the Color dataclass used throughout the texturing
engine for texel values and sampler results. Colors are immutable and carry
unbounded (HDR) floating-point channel intensities; no clamping or
color-space conversion is ever applied.

Example:
    >>> from src.texturing.core.color import Color
    >>> a = Color(0.2, 0.4, 0.6)
    >>> b = Color(1.0, 1.0, 1.0)
    >>> (a + b) * 0.5
    Color(r=0.6, g=0.7, b=0.8)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Color:
    """An immutable RGB triple of linear-light intensities.

    Attributes:
        r: Red channel intensity.
        g: Green channel intensity.
        b: Blue channel intensity.
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: float | Color) -> Color:
        """Scale by a scalar, or modulate componentwise by another color."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Color:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Color(self.r / scalar, self.g / scalar, self.b / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def to_tuple(self) -> tuple[float, float, float]:
        """Return the channels as an (R, G, B) tuple."""
        return (self.r, self.g, self.b)

    @classmethod
    def from_tuple(cls, rgb: tuple[float, float, float]) -> Color:
        """Build a color from an (R, G, B) tuple or any 3-element sequence."""
        r, g, b = rgb
        return cls(float(r), float(g), float(b))


# Returned by every sampler for zero-area images
DEFAULT_COLOR = Color(0.0, 0.0, 0.0)
