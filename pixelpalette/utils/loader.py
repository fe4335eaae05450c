"""Image loading and saving utilities using Pillow, with NumPy arrays.

All processing in this project happens on NumPy ``uint8`` RGBA arrays of shape
(H, W, 4). These helpers only convert between Pillow images, flat RGBA byte
strings and those arrays.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

Array = np.ndarray

DEFAULT_OUTPUT_NAME = "pixelated_image.png"


def load_image(path: Union[str, Path]) -> Array:
    """Load an image file into an RGBA NumPy array (uint8).

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Returns
    -------
    np.ndarray
        Array of shape (H, W, 4), dtype=uint8, in RGBA order.
    """
    p = Path(path)
    with Image.open(p) as im:
        im = im.convert("RGBA")
        arr = np.array(im, dtype=np.uint8)
    logger.debug("Loaded %s size=%sx%s", p, arr.shape[1], arr.shape[0])
    return arr


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save an RGBA NumPy array (uint8) to an image file via Pillow.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W, 4), dtype=uint8.
    path : str | Path
        Output file path. The format is inferred from the extension.
    """
    check_rgba(arr)
    p = Path(path)
    im = Image.fromarray(arr)
    im.save(p)
    logger.debug("Saved %s size=%sx%s", p, arr.shape[1], arr.shape[0])


def check_rgba(arr: Array) -> Array:
    """Validate a uint8 (H, W, 4) array and return it unchanged."""
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError("arr must have shape (H, W, 4)")
    return arr


def from_bytes(data: Union[bytes, bytearray, memoryview], width: int, height: int) -> Array:
    """Build an RGBA array from a flat row-major byte sequence.

    The byte length must be exactly ``width * height * 4``.
    """
    if width < 1 or height < 1:
        raise ValueError("width and height must be >= 1")
    expected = width * height * 4
    if len(data) != expected:
        raise ValueError(
            f"buffer length {len(data)} does not match {width}x{height}x4={expected}"
        )
    return np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, 4).copy()


def to_bytes(arr: Array) -> bytes:
    """Flatten an RGBA array to its row-major byte sequence."""
    return np.ascontiguousarray(check_rgba(arr)).tobytes()
