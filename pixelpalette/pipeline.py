"""The full image-to-pixel-art pipeline.

adjust size -> centered crop -> pixelate -> flatten alpha -> quantize or dither

Every call works on freshly allocated arrays; the caller's image is never
modified and nothing is kept between calls.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from .dithers import dither_floyd, quantize_nearest
from .palette import RGBTuple, as_palette_array, build_palette
from .utils.adjust import adjust_image_size, crop_centered
from .utils.alpha import flatten_alpha
from .utils.pixelate import pixelate

logger = logging.getLogger(__name__)


def _default_palette() -> Tuple[RGBTuple, ...]:
    return tuple(build_palette())


@dataclass(frozen=True)
class PipelineConfig:
    block_size: int = 4
    dither: bool = False
    skip_pixelation: bool = False
    palette: Tuple[RGBTuple, ...] = field(default_factory=_default_palette)

    @property
    def effective_block_size(self) -> int:
        """Dithering and skip-pixelation both force single-pixel blocks."""
        if self.dither or self.skip_pixelation:
            return 1
        return self.block_size

    def validate(self) -> None:
        if self.block_size < 1:
            raise ValueError("block_size must be >= 1")
        as_palette_array(self.palette)


@dataclass(frozen=True)
class PipelineResult:
    image: np.ndarray
    block_size: int


def process_image(image: np.ndarray, config: PipelineConfig) -> PipelineResult:
    """Run the whole pipeline on an RGB or RGBA ``uint8`` image.

    Returns the fully opaque RGBA result together with the block size that
    was actually used.
    """
    if not isinstance(image, np.ndarray):
        raise TypeError("image must be a NumPy array")
    config.validate()
    palette = as_palette_array(config.palette)
    block = config.effective_block_size

    H, W = image.shape[:2]
    size = adjust_image_size(W, H, block)
    logger.debug("Adjusted %sx%s -> %sx%s (block=%s)", W, H, size.width, size.height, block)
    work = crop_centered(image, size.width, size.height)

    if not config.skip_pixelation:
        work = pixelate(work, block)

    flatten_alpha(work)

    if config.dither:
        logger.debug("Dithering with %s palette colours", len(palette))
        work = dither_floyd(work, palette)
    else:
        logger.debug("Quantizing with %s palette colours", len(palette))
        quantize_nearest(work, palette)

    return PipelineResult(image=work, block_size=block)
