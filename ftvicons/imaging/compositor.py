#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Canvas compositor for fixed-size icon images

Places a resized copy of the source image on a canvas of fixed size:
fit (landscape) or cover (square/portrait) resize, an optional extra
uniform scale, then a centred composite shifted by a pixel offset.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from PIL import Image

from ftvicons.imaging.background import Color, infer_background
from ftvicons.imaging.image_io import ImageSource, load_image, require_png_support, save_png
from ftvicons.utils.constants import (
    BANNER_FILENAME,
    BANNER_SIZE,
    DEFAULT_SCALE_PERCENT,
    LAUNCHER_FILENAME,
    LAUNCHER_SIZE,
)
from ftvicons.utils.errors import UsageError

logger = logging.getLogger(__name__)

ScaleValue = Union[int, float, str]


@dataclass(frozen=True)
class IconSetOptions:
    """Options for one icon set run"""
    scale_percent: int = DEFAULT_SCALE_PERCENT
    h_shift: int = 0
    v_shift: int = 0
    background: Optional[Color] = None


def parse_scale(value: ScaleValue) -> int:
    """
    Normalise a scale value to a whole percentage

    A value containing a decimal point is a multiplier ("1.2" -> 120);
    anything else is a percentage ("120" -> 120).

    Raises:
        UsageError: If the value is not a positive number
    """
    text = str(value).strip()
    try:
        if "." in text:
            percent = int(round(float(text) * 100))
        else:
            percent = int(text)
    except ValueError as e:
        raise UsageError(f"Invalid scale: {value!r}") from e

    if percent <= 0:
        raise UsageError(f"Scale must be positive: {value!r}")
    return percent


def _resize(image: Image.Image, size: Tuple[int, int]) -> Image.Image:
    if image.size == size:
        return image.copy()
    return image.resize(size, Image.Resampling.LANCZOS)


def fit_to_canvas(image: Image.Image, width: int, height: int) -> Image.Image:
    """
    Resize for a canvas of the given size, preserving aspect ratio

    Landscape canvases get the image's height matched to the canvas height
    (the width may overflow and is clipped later). Square and portrait
    canvases get a cover resize, so both sides are at least the target.
    """
    src_w, src_h = image.size
    if width > height:
        size = (max(1, round(src_w * height / src_h)), height)
    else:
        factor = max(width / src_w, height / src_h)
        size = (max(1, round(src_w * factor)), max(1, round(src_h * factor)))
    return _resize(image, size)


def apply_scale(image: Image.Image, scale_percent: int) -> Image.Image:
    """Uniformly resize by a percentage; 100 returns the image unchanged"""
    if scale_percent == 100:
        return image
    src_w, src_h = image.size
    size = (
        max(1, round(src_w * scale_percent / 100)),
        max(1, round(src_h * scale_percent / 100)),
    )
    return _resize(image, size)


def composite_centered(image: Image.Image, width: int, height: int, background: Color,
                       h_shift: int = 0, v_shift: int = 0) -> Image.Image:
    """
    Composite an image centred on a fresh canvas, then offset by a shift

    Positive shifts move right/down. Parts falling outside the canvas are
    clipped; uncovered canvas keeps the background colour.
    """
    canvas = Image.new("RGBA", (width, height), background)
    layer = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    x = (width - image.size[0]) // 2 + h_shift
    y = (height - image.size[1]) // 2 + v_shift
    layer.paste(image, (x, y))

    return Image.alpha_composite(canvas, layer)


def compose(source: ImageSource, width: int, height: int,
            scale_percent: ScaleValue = DEFAULT_SCALE_PERCENT,
            h_shift: int = 0, v_shift: int = 0,
            background: Optional[Color] = None) -> Image.Image:
    """
    Build a width x height image from the source

    Args:
        source: Path to the input image, or a loaded image
        width: Canvas width in pixels
        height: Canvas height in pixels
        scale_percent: Extra scale, normalised by parse_scale (120 and
            "120" are percentages, 1.2 and "1.2" multipliers)
        h_shift: Horizontal shift in pixels (positive moves right)
        v_shift: Vertical shift in pixels (positive moves down)
        background: Canvas colour; inferred from the source when None

    Returns:
        Image.Image: New RGBA image of exactly width x height
    """
    scale_percent = parse_scale(scale_percent)
    image = load_image(source)
    require_png_support()
    if background is None:
        background = infer_background(image)

    fitted = fit_to_canvas(image, width, height)
    scaled = apply_scale(fitted, scale_percent)
    logger.debug(
        f"Compose {image.size} -> {fitted.size} -> {scaled.size} on {width}x{height}, "
        f"shift=({h_shift:+d}, {v_shift:+d}), background={background}"
    )
    return composite_centered(scaled, width, height, background, h_shift, v_shift)


def generate_icon_set(input_path: ImageSource, output_dir: Union[str, Path],
                      options: IconSetOptions = IconSetOptions()) -> List[Path]:
    """
    Write the Fire TV banner and launcher icon for an input image

    Returns:
        List[Path]: Paths of the generated files, banner first
    """
    image = load_image(input_path)
    require_png_support()
    background = options.background or infer_background(image)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for (width, height), filename in ((BANNER_SIZE, BANNER_FILENAME),
                                      (LAUNCHER_SIZE, LAUNCHER_FILENAME)):
        icon = compose(image, width, height, options.scale_percent,
                       options.h_shift, options.v_shift, background)
        written.append(save_png(icon, output_dir / filename))
        logger.info(f"Generated {output_dir / filename}")

    return written
