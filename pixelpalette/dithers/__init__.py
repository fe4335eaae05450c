"""Colour reduction against a fixed palette and a unified entry-point.

Exported API
------------
- apply_dither(image_array, palette, method="floyd")
- dither_floyd(image_array, palette)
- quantize_nearest(image_array, palette)
- nearest_palette_color(r, g, b, palette)

Supported methods
-----------------
- "none"  : no dithering; each pixel snaps to its nearest palette colour
- "floyd" : Floyd–Steinberg error diffusion

Implementation notes
--------------------
Both methods share one nearest-colour rule: smallest squared RGB distance,
first palette entry on a tie. Palettes may be RGB triples or hex strings.
"""
from __future__ import annotations

from typing import Iterable, Literal

import numpy as np

from ..palette import ColorSpec
from .floyd import dither_floyd
from .nearest import nearest_palette_color, quantize_nearest

Array = np.ndarray


def apply_dither(
    image_array: Array,
    palette: Iterable[ColorSpec],
    method: Literal["none", "floyd"] = "floyd",
) -> Array:
    """Reduce an RGBA image to ``palette`` with the selected method.

    Parameters
    ----------
    image_array : np.ndarray
        RGBA image array of shape (H, W, 4), dtype=uint8. Not modified.
    palette : sequence
        Non-empty list of RGB triples or hex strings.
    method : str
        Reduction method to apply.

    Returns
    -------
    np.ndarray
        New reduced image array, dtype=uint8.
    """
    m = method.lower()
    if m == "none":
        return quantize_nearest(image_array.copy(), palette)
    if m == "floyd":
        return dither_floyd(image_array, palette)

    raise ValueError(f"Unknown dithering method: {method}")


__all__ = [
    "apply_dither",
    "dither_floyd",
    "nearest_palette_color",
    "quantize_nearest",
]
