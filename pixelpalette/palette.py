"""Named colours, palette building and hex/RGB conversion.

The output palette is always ``DEFAULT_COLORS`` followed by whichever
``SELECTABLE_COLORS`` are switched on (all of them unless told otherwise).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

RGBTuple = Tuple[int, int, int]
ColorSpec = Union[str, Sequence[int]]


@dataclass(frozen=True)
class NamedColor:
    name: str
    hex: str

    @property
    def rgb(self) -> RGBTuple:
        return hex_to_rgb(self.hex)


DEFAULT_COLORS: List[NamedColor] = [
    NamedColor("Black", "#000000"),
    NamedColor("White", "#ffffff"),
]

SELECTABLE_COLORS: List[NamedColor] = [
    NamedColor("Red", "#ff0000"),
    NamedColor("Orange", "#ff8000"),
    NamedColor("Yellow", "#ffff00"),
    NamedColor("Green", "#00c000"),
    NamedColor("Cyan", "#00ffff"),
    NamedColor("Blue", "#0000ff"),
    NamedColor("Purple", "#8000c0"),
    NamedColor("Pink", "#ff80c0"),
    NamedColor("Brown", "#804000"),
    NamedColor("Gray", "#808080"),
]

COLOR_NAME_MAP: Dict[str, str] = {
    c.hex: c.name for c in DEFAULT_COLORS + SELECTABLE_COLORS
}


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive, '#' optional) into an RGB tuple."""
    s = hex_str.strip().lower().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        raise ValueError(f"hex colour must be '#rrggbb' or '#rgb': {hex_str!r}")
    try:
        return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
    except ValueError:
        raise ValueError(f"invalid hex colour: {hex_str!r}") from None


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """RGB triple to lowercase hex string '#rrggbb'."""
    return f"#{int(rgb[0]):02x}{int(rgb[1]):02x}{int(rgb[2]):02x}"


def color_name(rgb: Sequence[int]) -> Optional[str]:
    """Human-readable name of a palette colour, or None if it has none."""
    return COLOR_NAME_MAP.get(rgb_to_hex(rgb))


def build_palette(selected: Optional[Iterable[str]] = None) -> List[RGBTuple]:
    """Default colours plus the selected named colours, in declaration order.

    ``selected`` holds colour names (case-insensitive); None selects every
    selectable colour.
    """
    if selected is None:
        chosen = list(SELECTABLE_COLORS)
    else:
        wanted = {name.strip().lower(): name.strip() for name in selected}
        known = {c.name.lower() for c in SELECTABLE_COLORS}
        unknown = [wanted[key] for key in sorted(wanted) if key not in known]
        if unknown:
            raise ValueError(f"Unknown colour name(s): {', '.join(unknown)}")
        chosen = [c for c in SELECTABLE_COLORS if c.name.lower() in wanted]
    return [c.rgb for c in DEFAULT_COLORS + chosen]


def as_palette_array(palette: Iterable[ColorSpec]) -> np.ndarray:
    """Normalise a palette of hex strings or RGB triples to an int64 (P, 3) array.

    Raises ValueError for an empty palette, a malformed entry or a channel
    outside 0..255.
    """
    if isinstance(palette, np.ndarray):
        rows = palette.tolist()
    else:
        rows = [hex_to_rgb(c) if isinstance(c, str) else c for c in palette]
    if len(rows) == 0:
        raise ValueError("palette must contain at least one colour")
    try:
        arr = np.asarray(rows, dtype=np.int64)
    except (TypeError, ValueError):
        raise ValueError("palette entries must be RGB triples or hex strings") from None
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError("palette entries must be RGB triples")
    if arr.min() < 0 or arr.max() > 255:
        raise ValueError("palette channels must be within 0..255")
    return arr
