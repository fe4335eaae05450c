"""Nearest-palette search and plain (undithered) quantization."""
from __future__ import annotations

from typing import Iterable

import numpy as np
from numba import njit

from ..palette import ColorSpec, RGBTuple, as_palette_array

Array = np.ndarray


@njit(cache=True)
def _nearest_index(r, g, b, palette) -> int:
    """Index of the palette row closest to (r, g, b) in squared RGB distance.

    Only a strictly smaller distance replaces the current best, so the first
    of several equidistant entries wins.
    """
    best = 0
    best_dist = -1
    for i in range(palette.shape[0]):
        dr = r - palette[i, 0]
        dg = g - palette[i, 1]
        db = b - palette[i, 2]
        d = dr * dr + dg * dg + db * db
        if best_dist < 0 or d < best_dist:
            best_dist = d
            best = i
    return best


def nearest_palette_color(r: int, g: int, b: int, palette: Iterable[ColorSpec]) -> RGBTuple:
    """Return the palette colour nearest to (r, g, b).

    >>> nearest_palette_color(5, 5, 5, [(0, 0, 0), (10, 10, 10)])
    (0, 0, 0)
    """
    pal = as_palette_array(palette)
    i = _nearest_index(int(r), int(g), int(b), pal)
    return (int(pal[i, 0]), int(pal[i, 1]), int(pal[i, 2]))


def quantize_nearest(arr: Array, palette: Iterable[ColorSpec]) -> Array:
    """Replace every pixel's RGB with its nearest palette colour, in place.

    Parameters
    ----------
    arr : np.ndarray
        RGBA image (H, W, 4), dtype=uint8. Alpha is not touched.
    palette : sequence
        Non-empty list of RGB triples or hex strings.

    Returns
    -------
    np.ndarray
        The same array, for chaining.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError("arr must be an RGBA image with shape (H, W, 4)")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    pal = as_palette_array(palette)

    H, W, _ = arr.shape
    rgb = arr[:, :, :3].reshape(-1, 3).astype(np.int64)
    # Row-chunked so each distance table holds about 4M pixel/palette pairs
    chunk = max(1, (1 << 22) // len(pal))
    for start in range(0, rgb.shape[0], chunk):
        block = rgb[start:start + chunk]
        diff = block[:, None, :] - pal[None, :, :]
        dist = (diff * diff).sum(axis=2)
        # argmin keeps the first minimum, matching _nearest_index
        rgb[start:start + chunk] = pal[np.argmin(dist, axis=1)]
    arr[:, :, :3] = rgb.reshape(H, W, 3).astype(np.uint8)
    return arr
