"""Texture variants exposed to the shading pipeline.

Components:
    texture: ImageTexture (sampled image with cached mip pyramid),
        ConstantTexture and the SamplerMode enumeration
"""

from .texture import (
    DEFAULT_CONSTANT_COLOR,
    ConstantTexture,
    ImageTexture,
    SamplerMode,
    Texture,
)

__all__ = [
    "SamplerMode",
    "ImageTexture",
    "ConstantTexture",
    "Texture",
    "DEFAULT_CONSTANT_COLOR",
]
