#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
img2vd: convert a raster image to an Android Vector Drawable XML

Requires ImageMagick ('magick' or 'convert') and svg2vectordrawable (or npx).
"""

import sys
import argparse
import logging
from typing import List, Optional

from ftvicons.config.settings import ToolSettings
from ftvicons.imaging.background import parse_color
from ftvicons.utils.constants import APP_NAME, APP_VERSION
from ftvicons.utils.errors import IconToolError, UsageError
from ftvicons.utils.logger import setup_logger
from ftvicons.vector.annotator import parse_size
from ftvicons.vector.tracer import VectorOptions, VectorTracer, generate_vector_drawable

EPILOG = """
--size accepts either WIDTHxHEIGHT (e.g. 512x512) or the aliases banner and icon:
  --size banner  -> 320x180, tagged with an intended-usage comment
  --size icon    -> 108x108, tagged with an intended-usage comment

Examples:
  %(prog)s input.png output.xml
  %(prog)s input.png banner.xml --size banner
  %(prog)s input.png output.xml --background white --svg
"""


def _color_arg(value: str):
    try:
        return parse_color(value)
    except UsageError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="img2vd",
        description="Produce an Android Vector Drawable XML from a raster image.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument("input", metavar="INPUT_IMAGE", help="Source image")
    parser.add_argument("output", metavar="OUTPUT_PATH", help="Vector Drawable XML to write")
    parser.add_argument(
        "--size",
        default=None,
        help="Set android:width/height and viewport: WIDTHxHEIGHT, banner or icon",
    )
    parser.add_argument(
        "--svg",
        action="store_true",
        help="Also keep the intermediate SVG next to the output (same name, .svg)",
    )
    parser.add_argument(
        "--background",
        type=_color_arg,
        default=None,
        help="Flatten onto this color before tracing (default: keep transparency)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s ({APP_NAME}) {APP_VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point"""
    args = build_parser().parse_args(argv)

    settings = ToolSettings()
    setup_logger(verbose=args.verbose, log_to_file=bool(settings.get("logging.file", True)))
    logger = logging.getLogger(__name__)
    logger.debug(f"img2vd v{APP_VERSION}")

    try:
        size = None
        usage_label = None
        if args.size:
            width, height, usage_label = parse_size(args.size)
            size = (width, height)

        options = VectorOptions(
            size=size,
            usage_label=usage_label,
            keep_svg=args.svg,
            background=args.background,
        )
        tracer = VectorTracer(settings)
        generate_vector_drawable(args.input, args.output, options, tracer)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except IconToolError as e:
        logger.debug("Vector drawable generation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
