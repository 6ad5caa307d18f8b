#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
img2ftvappicons: generate the Fire TV icon set from an input image

Produces OUTPUT_DIR/banner_320x180.png (App Banner) and
OUTPUT_DIR/launcher_108x108.png (Launcher Icon).
"""

import sys
import argparse
import logging
from typing import List, Optional

from ftvicons.config.settings import ToolSettings
from ftvicons.imaging.background import parse_color
from ftvicons.imaging.compositor import IconSetOptions, generate_icon_set, parse_scale
from ftvicons.utils.constants import APP_NAME, APP_VERSION, DEFAULT_SCALE_PERCENT
from ftvicons.utils.errors import IconToolError, InputNotFound, ToolMissing, UsageError
from ftvicons.utils.logger import setup_logger

EXIT_CODES = {
    UsageError: 2,
    InputNotFound: 3,
    ToolMissing: 4,
}


def _scale_arg(value: str) -> int:
    try:
        return parse_scale(value)
    except UsageError as e:
        raise argparse.ArgumentTypeError(str(e))


def _color_arg(value: str):
    try:
        return parse_color(value)
    except UsageError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="img2ftvappicons",
        description="Generate a Fire TV icon set (banner_320x180.png, launcher_108x108.png) from an image.",
    )
    parser.add_argument("input", metavar="INPUT_IMAGE", help="Source image")
    parser.add_argument("output_dir", metavar="OUTPUT_DIR", help="Directory for the generated icons")
    parser.add_argument(
        "-s", "--scale",
        type=_scale_arg,
        default=DEFAULT_SCALE_PERCENT,
        help="Scale input around its center. Accepts percent (e.g. 120) or multiplier (e.g. 1.2). Default: 100",
    )
    parser.add_argument(
        "-y", "--vshift", "--vshift-px",
        dest="vshift",
        type=int,
        default=0,
        help="Vertical shift in pixels applied after centering (positive moves image down). Default: 0",
    )
    parser.add_argument(
        "-x", "--hshift", "--hshift-px",
        dest="hshift",
        type=int,
        default=0,
        help="Horizontal shift in pixels applied after centering (positive moves image right). Default: 0",
    )
    parser.add_argument(
        "--background",
        type=_color_arg,
        default=None,
        help="Canvas color (default: top-left pixel of the input, white if transparent)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s ({APP_NAME}) {APP_VERSION}")
    return parser


def _exit_code(error: IconToolError) -> int:
    for error_type, code in EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point"""
    args = build_parser().parse_args(argv)

    settings = ToolSettings()
    setup_logger(verbose=args.verbose, log_to_file=bool(settings.get("logging.file", True)))
    logger = logging.getLogger(__name__)
    logger.debug(f"img2ftvappicons v{APP_VERSION}")

    options = IconSetOptions(
        scale_percent=args.scale,
        h_shift=args.hshift,
        v_shift=args.vshift,
        background=args.background,
    )

    try:
        written = generate_icon_set(args.input, args.output_dir, options)
    except IconToolError as e:
        logger.debug("Icon set generation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return _exit_code(e)
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Generated:")
    for path in written:
        print(f" - {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
