"""Block-aligned sizing and centered cropping."""
from __future__ import annotations

from typing import NamedTuple

import numpy as np

Array = np.ndarray


class AdjustedSize(NamedTuple):
    width: int
    height: int


def adjust_image_size(width: int, height: int, block_size: int) -> AdjustedSize:
    """Round (width, height) down to whole blocks, keeping at least one block.

    Both returned dimensions are multiples of ``block_size`` and never smaller
    than it, even when the source is smaller than a single block.
    """
    if block_size < 1:
        raise ValueError("block_size must be >= 1")
    adjusted_w = (width // block_size) * block_size
    adjusted_h = (height // block_size) * block_size
    return AdjustedSize(max(adjusted_w, block_size), max(adjusted_h, block_size))


def _axis_window(src: int, dst: int) -> tuple[int, int, int]:
    """Return (dst_start, src_start, length) of the overlap along one axis."""
    offset = int((src - dst) / 2)
    src_start = max(offset, 0)
    dst_start = src_start - offset
    length = max(0, min(src, offset + dst) - src_start)
    return dst_start, src_start, length


def crop_centered(arr: Array, width: int, height: int) -> Array:
    """Cut a ``width`` x ``height`` window from the middle of ``arr``.

    The window offset on each axis is ``(original - target) / 2`` truncated
    toward zero. Where the window reaches past the source (target larger than
    the image) the output is transparent black, which alpha flattening later
    turns white. RGB input gains an opaque alpha channel.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 3) or (H, W, 4), dtype=uint8.
    width, height : int
        Output size (>=1), normally from :func:`adjust_image_size`.

    Returns
    -------
    np.ndarray
        New RGBA array of shape (height, width, 4).
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError("arr must be an RGB or RGBA image with shape (H, W, 3|4)")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if width < 1 or height < 1:
        raise ValueError("width and height must be >= 1")

    H, W, C = arr.shape
    out = np.zeros((height, width, 4), dtype=np.uint8)

    dy, sy, lh = _axis_window(H, height)
    dx, sx, lw = _axis_window(W, width)
    if lh == 0 or lw == 0:
        return out

    region = arr[sy:sy + lh, sx:sx + lw]
    out[dy:dy + lh, dx:dx + lw, :C] = region
    if C == 3:
        out[dy:dy + lh, dx:dx + lw, 3] = 255
    return out
