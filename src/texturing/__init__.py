"""Texture sampling and mip-map pyramid engine.

This package turns HDR images into filtered colors for arbitrary texture
coordinates, with support for:
- Nearest, bilinear and trilinear (mip-mapped) filtering
- Box-filtered mip pyramid generation with exact odd-dimension handling
- Image and constant-color texture variants for the shading pipeline

Subpackages:
    core: Color value type and HDR image pixel buffer
    sampling: Nearest, bilinear and trilinear samplers
    mipmap: Mip pyramid allocation and Taichi downsampling kernel
    textures: Texture objects exposed to the renderer
    preview: Array and Matplotlib previews of textures and pyramids
"""

__version__ = "0.1.0"
