"""Command-line entry point for pixelpalette.

This tool loads an image, crops it to whole blocks, pixelates it, flattens
transparency onto white, reduces it to a fixed colour palette (optionally with
Floyd–Steinberg dithering), and saves the result as a PNG.

All processing occurs on NumPy arrays; Pillow is used only for
loading and saving.

Usage example:
    python -m pixelpalette -i input.png -o output.png --block 6 --colors red blue
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .colorinfo import color_usage
from .palette import DEFAULT_COLORS, SELECTABLE_COLORS, build_palette, hex_to_rgb
from .pipeline import PipelineConfig, process_image
from .utils.loader import DEFAULT_OUTPUT_NAME, load_image, save_image


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="pixelpalette",
        description=(
            "Turn images into pixel art: block pixelation plus palette "
            "quantization or Floyd–Steinberg dithering."
        ),
    )

    parser.add_argument("-i", "--input", help="Path to input image file")
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_NAME,
        help=f"Path to output PNG file (default: {DEFAULT_OUTPUT_NAME})",
    )
    parser.add_argument(
        "--block",
        type=int,
        default=4,
        help="Pixel block size (>=1). Ignored (forced to 1) with --dither or --no-pixelate.",
    )
    parser.add_argument(
        "--dither",
        action="store_true",
        help="Use Floyd–Steinberg dithering instead of plain nearest-colour mapping",
    )
    parser.add_argument(
        "--no-pixelate",
        action="store_true",
        help="Skip the pixelation step",
    )
    parser.add_argument(
        "--colors",
        nargs="+",
        metavar="NAME",
        default=None,
        help="Selectable colours to add to black and white (default: all). See --list-colors.",
    )
    parser.add_argument(
        "--palette",
        nargs="+",
        metavar="HEX",
        default=None,
        help="Explicit palette as hex colours (e.g. '#000000 #ff0000'); overrides --colors",
    )
    parser.add_argument(
        "--list-colors",
        action="store_true",
        help="Print the named colours and exit",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print how many pixels use each colour after processing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if not ns.input:
        raise ValueError("--input is required")
    if ns.block < 1:
        raise ValueError("--block must be an integer >= 1")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def build_config(ns: argparse.Namespace) -> PipelineConfig:
    """Translate parsed arguments into a pipeline configuration."""
    if ns.palette:
        palette = tuple(hex_to_rgb(h) for h in ns.palette)
    else:
        palette = tuple(build_palette(ns.colors))
    return PipelineConfig(
        block_size=ns.block,
        dither=ns.dither,
        skip_pixelation=ns.no_pixelate,
        palette=palette,
    )


def _print_colors() -> None:
    for c in DEFAULT_COLORS:
        print(f"{c.hex}  {c.name} (always on)")
    for c in SELECTABLE_COLORS:
        print(f"{c.hex}  {c.name}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s [%(name)s] %(message)s")

    if args.list_colors:
        _print_colors()
        return 0

    try:
        validate_args(args)
        config = build_config(args)
        config.validate()
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    # 1) Load (Pillow -> NumPy RGBA uint8)
    img = load_image(args.input)

    # 2) Crop, pixelate, flatten, reduce
    result = process_image(img, config)

    # 3) Save (NumPy -> Pillow)
    save_image(result.image, args.output)
    h, w = result.image.shape[:2]
    print(f"Wrote {args.output} ({w}x{h}, block {result.block_size})")

    if args.report:
        for hx, name, count in color_usage(result.image):
            print(f"{hx}  {name or '-':<8} {count}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
