"""Utility functions for pixelpalette.

Modules:
- adjust: Block-aligned sizing and centered cropping.
- alpha: Alpha flattening onto white.
- loader: Load/save Pillow <-> NumPy conversion and flat-bytes helpers.
- pixelate: Pixelation via nearest downscale then nearest upscale.
- resize: Nearest-neighbor resizing to arbitrary sizes.
"""
from .adjust import AdjustedSize, adjust_image_size, crop_centered
from .alpha import flatten_alpha
from .loader import check_rgba, from_bytes, load_image, save_image, to_bytes
from .pixelate import pixelate
from .resize import resize_nearest

__all__ = [
    "AdjustedSize",
    "adjust_image_size",
    "crop_centered",
    "flatten_alpha",
    "check_rgba",
    "from_bytes",
    "load_image",
    "save_image",
    "to_bytes",
    "pixelate",
    "resize_nearest",
]
