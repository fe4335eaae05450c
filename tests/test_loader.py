"""Tests for Pillow I/O and flat-bytes conversion."""
import numpy as np
import pytest
from PIL import Image

from pixelpalette.utils.loader import from_bytes, load_image, save_image, to_bytes


def test_from_bytes_layout():
    data = bytes(range(16))
    arr = from_bytes(data, 2, 2)
    assert arr.shape == (2, 2, 4)
    assert arr[0, 1].tolist() == [4, 5, 6, 7]
    assert arr[1, 0].tolist() == [8, 9, 10, 11]
    assert to_bytes(arr) == data


def test_from_bytes_length_mismatch():
    with pytest.raises(ValueError):
        from_bytes(bytes(15), 2, 2)


def test_save_and_load_png(tmp_path, noisy_image):
    path = tmp_path / "out.png"
    save_image(noisy_image, path)
    back = load_image(path)
    np.testing.assert_array_equal(back, noisy_image)


def test_load_rgb_becomes_rgba(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new("RGB", (3, 2), (10, 20, 30)).save(path)
    arr = load_image(path)
    assert arr.shape == (2, 3, 4)
    assert arr[0, 0].tolist() == [10, 20, 30, 255]


def test_save_rejects_rgb(tmp_path):
    with pytest.raises(ValueError):
        save_image(np.zeros((2, 2, 3), dtype=np.uint8), tmp_path / "x.png")
