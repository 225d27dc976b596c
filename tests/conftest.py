"""Pytest configuration for texturing tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    The mip downsampling kernel needs an initialized runtime. Using session
    scope prevents multiple ti.init() calls, which reset compiled kernels.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def gradient_image():
    """An 8x4 image whose texels encode their own (x, y) address."""
    import numpy as np

    from src.texturing.core.image import HDRImage

    height, width = 4, 8
    ys, xs = np.mgrid[0:height, 0:width]
    pixels = np.stack([xs, ys, xs + 10 * ys], axis=-1).astype(np.float32)
    return HDRImage.from_array(pixels)


@pytest.fixture
def random_image():
    """A 6x5 image of reproducible random HDR texels."""
    import numpy as np

    from src.texturing.core.image import HDRImage

    rng = np.random.default_rng(7)
    return HDRImage.from_array(rng.uniform(0.0, 4.0, size=(5, 6, 3)))
