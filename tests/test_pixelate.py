"""Tests for nearest-neighbor resizing and pixelation."""
import numpy as np

from pixelpalette.utils.pixelate import pixelate
from pixelpalette.utils.resize import resize_nearest


def test_block_size_one_is_a_noop(noisy_image):
    out = pixelate(noisy_image, 1)
    np.testing.assert_array_equal(out, noisy_image)
    assert out is not noisy_image


def test_block_two_samples_block_centres(gradient_4x4):
    out = pixelate(gradient_4x4, 2)
    # Downsample picks source pixels (1,1), (3,1), (1,3), (3,3)
    expected = np.array(
        [
            [50, 50, 70, 70],
            [50, 50, 70, 70],
            [130, 130, 150, 150],
            [130, 130, 150, 150],
        ],
        dtype=np.uint8,
    )
    np.testing.assert_array_equal(out[:, :, 0], expected)
    assert (out[:, :, 3] == 255).all()
    assert out.shape == gradient_4x4.shape


def test_pixelate_does_not_average(gradient_4x4):
    out = pixelate(gradient_4x4, 2)
    block = gradient_4x4[0:2, 0:2, 0].astype(float)
    assert out[0, 0, 0] != block.mean()


def test_axis_smaller_than_block_collapses():
    arr = np.zeros((3, 8, 4), dtype=np.uint8)
    arr[:, :, 0] = np.arange(8)[None, :] * 20
    arr[:, :, 1] = np.arange(3)[:, None] * 50
    out = pixelate(arr, 4)
    # Height collapses to one band, width to two blocks
    assert (out[:, :, 1] == out[0, 0, 1]).all()
    assert len(np.unique(out[:, :, 0])) == 2


def test_resize_nearest_upscale_repeats():
    arr = np.array([[[1], [2]]], dtype=np.uint8)
    out = resize_nearest(arr, 2, 4)
    np.testing.assert_array_equal(out[:, :, 0], [[1, 1, 2, 2], [1, 1, 2, 2]])
