"""pixelpalette: turn images into palette-limited pixel art.

Re-exports the public API so callers can ``from pixelpalette import ...``.
"""
from __future__ import annotations

from .colorinfo import PixelInfo, color_usage, pixel_color_at  # noqa: F401
from .dithers import apply_dither, dither_floyd, nearest_palette_color, quantize_nearest  # noqa: F401
from .palette import (  # noqa: F401
    COLOR_NAME_MAP,
    DEFAULT_COLORS,
    SELECTABLE_COLORS,
    as_palette_array,
    build_palette,
    color_name,
    hex_to_rgb,
    rgb_to_hex,
)
from .pipeline import PipelineConfig, PipelineResult, process_image  # noqa: F401
from .utils.adjust import AdjustedSize, adjust_image_size, crop_centered  # noqa: F401
from .utils.alpha import flatten_alpha  # noqa: F401
from .utils.loader import from_bytes, load_image, save_image, to_bytes  # noqa: F401
from .utils.pixelate import pixelate  # noqa: F401
from .utils.resize import resize_nearest  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "AdjustedSize",
    "COLOR_NAME_MAP",
    "DEFAULT_COLORS",
    "PipelineConfig",
    "PipelineResult",
    "PixelInfo",
    "SELECTABLE_COLORS",
    "adjust_image_size",
    "apply_dither",
    "as_palette_array",
    "build_palette",
    "color_name",
    "color_usage",
    "crop_centered",
    "dither_floyd",
    "flatten_alpha",
    "from_bytes",
    "hex_to_rgb",
    "load_image",
    "nearest_palette_color",
    "pixel_color_at",
    "pixelate",
    "process_image",
    "quantize_nearest",
    "resize_nearest",
    "rgb_to_hex",
    "save_image",
    "to_bytes",
]
