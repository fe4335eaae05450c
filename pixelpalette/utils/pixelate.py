"""Pixelation utilities operating on NumPy arrays.

Pixelation shrinks the image by ``block_size`` with nearest-neighbor sampling
and scales it straight back up, also nearest-neighbor. Every block ends up a
single flat colour taken from one representative source pixel; blocks are
sampled, not averaged.
"""
from __future__ import annotations

import numpy as np

from .resize import resize_nearest

Array = np.ndarray


def pixelate(arr: Array, block_size: int) -> Array:
    """Pixelate an RGBA (or RGB) image array into ``block_size`` squares.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, C), dtype=uint8.
    block_size : int
        Edge length of each block in source pixels. Values <= 1 leave the
        image unchanged.

    Returns
    -------
    np.ndarray
        Pixelated image with the same shape and dtype as the input.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3:
        raise ValueError("arr must be an image with shape (H, W, C)")
    if block_size <= 1:
        return arr.copy()

    H, W, _ = arr.shape
    # An axis shorter than one block collapses to a single band
    small_h = max(1, H // block_size)
    small_w = max(1, W // block_size)

    small = resize_nearest(arr, small_h, small_w)
    return resize_nearest(small, H, W)
