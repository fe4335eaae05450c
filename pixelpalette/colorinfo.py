"""Per-pixel colour lookup and colour usage reporting for finished images."""
from __future__ import annotations

import math
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from .palette import COLOR_NAME_MAP, rgb_to_hex


class PixelInfo(NamedTuple):
    x: int
    y: int
    hex: str
    name: Optional[str]


def pixel_color_at(arr: np.ndarray, x: float, y: float, zoom: float = 1.0) -> Optional[PixelInfo]:
    """Colour under a point given in zoomed view coordinates.

    The point is mapped back to image space with ``floor(coord / zoom)``.
    Returns None when it lands outside the image.
    """
    if zoom <= 0:
        raise ValueError("zoom must be > 0")
    ix = math.floor(x / zoom)
    iy = math.floor(y / zoom)
    H, W = arr.shape[:2]
    if ix < 0 or ix >= W or iy < 0 or iy >= H:
        return None
    hx = rgb_to_hex(arr[iy, ix, :3])
    return PixelInfo(ix, iy, hx, COLOR_NAME_MAP.get(hx))


def color_usage(arr: np.ndarray) -> List[Tuple[str, Optional[str], int]]:
    """Return (hex, name, count) for every colour in ``arr``, most used first."""
    flat = arr[:, :, :3].reshape(-1, 3)
    if flat.shape[0] == 0:
        return []
    uniques, counts = np.unique(flat, axis=0, return_counts=True)
    report: List[Tuple[str, Optional[str], int]] = []
    for rgb_row, count in sorted(zip(uniques, counts), key=lambda x: -int(x[1])):
        hx = rgb_to_hex(rgb_row)
        report.append((hx, COLOR_NAME_MAP.get(hx), int(count)))
    return report
