"""Shared fixtures for pixelpalette tests."""
import numpy as np
import pytest


@pytest.fixture
def gradient_4x4():
    """4x4 opaque image whose red channel is 10*x + 40*y."""
    arr = np.zeros((4, 4, 4), dtype=np.uint8)
    for y in range(4):
        for x in range(4):
            arr[y, x] = (10 * x + 40 * y, 0, 0, 255)
    return arr


@pytest.fixture
def noisy_image():
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(13, 17, 4), dtype=np.uint8)
    arr[:, :, 3] = 255
    return arr


@pytest.fixture
def bw_palette():
    return [(0, 0, 0), (255, 255, 255)]
