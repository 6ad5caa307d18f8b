#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Background colour inference for icon canvases
"""

import logging
from typing import Tuple

from PIL import ImageColor

from ftvicons.imaging.image_io import ImageSource, load_image
from ftvicons.utils.constants import DEFAULT_BACKGROUND
from ftvicons.utils.errors import UsageError

Color = Tuple[int, int, int, int]

logger = logging.getLogger(__name__)


def infer_background(source: ImageSource) -> Color:
    """
    Pick a canvas colour from the top-left pixel of the first frame

    A fully transparent sample carries no usable colour, so white is used
    instead. Any other sample is returned as-is, alpha included.

    Args:
        source: Path to an image file, or a loaded image

    Returns:
        Color: RGBA tuple
    """
    image = load_image(source)
    pixel = tuple(image.getpixel((0, 0)))

    if pixel[3] == 0:
        logger.debug("Top-left pixel is transparent, using white background")
        return DEFAULT_BACKGROUND

    logger.debug(f"Inferred background {pixel}")
    return pixel


def parse_color(value: str) -> Color:
    """Parse a colour name or #hex / rgb() string into an RGBA tuple"""
    try:
        return ImageColor.getcolor(value.strip(), "RGBA")
    except (ValueError, AttributeError) as e:
        raise UsageError(f"Invalid color: {value!r}") from e
