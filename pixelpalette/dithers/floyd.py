"""Floyd–Steinberg error diffusion dithering against an arbitrary palette.

The per-pixel loop is compiled with Numba. The working copy behaves like an
8-bit clamped buffer: every time error lands on a neighbor the channel is
clamped to [0, 255] and rounded (half to even) to an integer before that
neighbor is itself quantized.
"""
from __future__ import annotations

from typing import Iterable

import numpy as np
from numba import njit

from ..palette import ColorSpec, as_palette_array
from .nearest import _nearest_index

Array = np.ndarray


@njit(cache=True)
def _spread(work, y, x, err0, err1, err2, weight) -> None:
    e = (err0, err1, err2)
    for c in range(3):
        v = work[y, x, c] + e[c] * weight
        if v < 0.0:
            v = 0.0
        elif v > 255.0:
            v = 255.0
        work[y, x, c] = int(np.rint(v))


@njit(cache=True)
def _floyd_impl(work, out, palette) -> None:
    H, W, _ = work.shape
    for y in range(H):
        for x in range(W):
            old0 = work[y, x, 0]
            old1 = work[y, x, 1]
            old2 = work[y, x, 2]
            i = _nearest_index(old0, old1, old2, palette)
            new0 = palette[i, 0]
            new1 = palette[i, 1]
            new2 = palette[i, 2]
            out[y, x, 0] = new0
            out[y, x, 1] = new1
            out[y, x, 2] = new2
            out[y, x, 3] = 255
            err0 = old0 - new0
            err1 = old1 - new1
            err2 = old2 - new2

            # Floyd–Steinberg kernel (normalized by 16):
            #   *   7
            #  3  5  1
            if x + 1 < W:
                _spread(work, y, x + 1, err0, err1, err2, 7.0 / 16.0)
            if y + 1 < H:
                if x > 0:
                    _spread(work, y + 1, x - 1, err0, err1, err2, 3.0 / 16.0)
                _spread(work, y + 1, x, err0, err1, err2, 5.0 / 16.0)
                if x + 1 < W:
                    _spread(work, y + 1, x + 1, err0, err1, err2, 1.0 / 16.0)


def dither_floyd(arr: Array, palette: Iterable[ColorSpec]) -> Array:
    """Apply Floyd–Steinberg dithering, snapping every pixel to ``palette``.

    Pixels are visited once in raster order (top to bottom, left to right).
    Error is only pushed to neighbors not yet visited; neighbors outside the
    image are skipped.

    Parameters
    ----------
    arr : np.ndarray
        Input RGBA image (H, W, 4), dtype=uint8. Not modified.
    palette : sequence
        Non-empty list of RGB triples or hex strings.

    Returns
    -------
    np.ndarray
        New dithered image (H, W, 4), dtype=uint8, fully opaque.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError("arr must be an RGBA image with shape (H, W, 4)")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    pal = as_palette_array(palette)

    work = arr[:, :, :3].astype(np.int64)
    out = np.empty(arr.shape, dtype=np.uint8)
    _floyd_impl(work, out, pal)
    return out
