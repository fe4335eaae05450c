"""Tests for per-pixel colour lookup and usage reports."""
import numpy as np

from pixelpalette.colorinfo import color_usage, pixel_color_at


def _image():
    arr = np.zeros((2, 3, 4), dtype=np.uint8)
    arr[:, :] = (255, 255, 255, 255)
    arr[1, 2] = (255, 0, 0, 255)
    arr[0, 0] = (1, 2, 3, 255)
    return arr


def test_pixel_color_at_maps_zoomed_coordinates():
    info = pixel_color_at(_image(), 5, 3, zoom=2)
    assert (info.x, info.y) == (2, 1)
    assert info.hex == "#ff0000"
    assert info.name == "Red"


def test_pixel_color_at_unnamed_and_outside():
    info = pixel_color_at(_image(), 0.5, 0.9)
    assert info.hex == "#010203"
    assert info.name is None
    assert pixel_color_at(_image(), 6, 0, zoom=2) is None
    assert pixel_color_at(_image(), -1, 0) is None


def test_color_usage_sorted_by_count():
    report = color_usage(_image())
    assert report[0] == ("#ffffff", "White", 4)
    assert sorted(report[1:]) == [("#010203", None, 1), ("#ff0000", "Red", 1)]
