#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Loading and saving raster images with Pillow
"""

import os
import logging
import tempfile
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError, features

from ftvicons.utils.errors import InputNotFound, ToolMissing, UsageError

logger = logging.getLogger(__name__)

ImageSource = Union[str, os.PathLike, Image.Image]


def require_png_support():
    """
    Make sure this Pillow build can read and write PNG files

    Raises:
        ToolMissing: If Pillow was built without zlib
    """
    if not features.check_codec("zlib"):
        raise ToolMissing("Pillow was built without zlib support; PNG images cannot be processed.")


def load_image(source: ImageSource) -> Image.Image:
    """
    Load the first frame of an image as RGBA

    Args:
        source: Path to an image file, or an already loaded image

    Returns:
        Image.Image: A new RGBA image; the source is never modified
    """
    if isinstance(source, Image.Image):
        return source.convert("RGBA")

    path = Path(source)
    if not path.is_file():
        raise InputNotFound(path)

    try:
        with Image.open(path) as im:
            im.seek(0)
            return im.convert("RGBA")
    except UnidentifiedImageError as e:
        raise UsageError(f"Cannot read image {path}: {str(e)}") from e


def save_png(image: Image.Image, path: Union[str, os.PathLike]) -> Path:
    """
    Write an image as PNG, replacing the destination only once fully written

    Returns:
        Path: The destination path
    """
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(suffix=".png", dir=path.parent)
    os.close(fd)
    try:
        image.save(tmp_name, format="PNG")
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise

    logger.debug(f"Saved {image.size[0]}x{image.size[1]} PNG to {path}")
    return path
