#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Raster to Android Vector Drawable pipeline

The raster image is prepared with Pillow (dark-image inversion and optional
flattening), traced to SVG by ImageMagick and converted to a Vector Drawable
by svg2vectordrawable.
"""

import re
import shutil
import logging
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from PIL import Image, ImageOps, ImageStat

from ftvicons.config.settings import ToolSettings
from ftvicons.imaging.background import Color
from ftvicons.imaging.image_io import ImageSource, load_image
from ftvicons.utils.constants import (
    BLACK_FILLS,
    CONVERTED_XML,
    DARK_LUMINANCE_THRESHOLD,
    INTERMEDIATE_RASTER,
    INTERMEDIATE_SVG,
    INVERTED_FILL,
)
from ftvicons.utils.errors import UsageError
from ftvicons.utils.tools import require_command, run_command
from ftvicons.vector.annotator import annotate
from ftvicons.vector.document import VectorDocument

logger = logging.getLogger(__name__)

# Keep transparent regions transparent in the traced SVG
PRESERVE_ALPHA_ARGS = ["-alpha", "set", "-background", "none"]

_BLACK_FILL_RE = re.compile(
    r"""(\bfill\s*=\s*)(["'])(?:%s)\2""" % "|".join(re.escape(c) for c in BLACK_FILLS),
    re.IGNORECASE,
)


@dataclass(frozen=True)
class VectorOptions:
    """Options for one vector drawable run"""
    size: Optional[Tuple[int, int]] = None
    usage_label: Optional[str] = None
    keep_svg: bool = False
    background: Optional[Color] = None


@dataclass
class TraceResult:
    """Outcome of tracing one image to SVG"""
    svg_path: Path
    svg_text: str
    inverted: bool
    mean_luminance: float


def mean_luminance(image: Image.Image) -> float:
    """Mean grayscale value of the image, normalised to 0..1"""
    return ImageStat.Stat(image.convert("L")).mean[0] / 255.0


def invert_rgb(image: Image.Image) -> Image.Image:
    """Negate the colour channels, keeping alpha as is"""
    r, g, b, a = image.convert("RGBA").split()
    inverted = ImageOps.invert(Image.merge("RGB", (r, g, b)))
    return Image.merge("RGBA", (*inverted.split(), a))


def flatten(image: Image.Image, background: Color) -> Image.Image:
    """Composite onto a solid background, dropping transparency"""
    canvas = Image.new("RGBA", image.size, background)
    return Image.alpha_composite(canvas, image.convert("RGBA")).convert("RGB")


def swap_black_fills(svg_text: str) -> str:
    """Replace fill="#000000" / fill="#000" (any case) with white"""
    return _BLACK_FILL_RE.sub(lambda m: f"{m.group(1)}{m.group(2)}{INVERTED_FILL}{m.group(2)}", svg_text)


class VectorTracer:
    """
    Runs the external tracer and converter for vector drawable output
    """

    def __init__(self, settings: Optional[ToolSettings] = None):
        """
        Initialize the tracer

        Args:
            settings: Tool settings; loaded from the user config when None

        Raises:
            ToolMissing: If ImageMagick or svg2vectordrawable is unavailable
        """
        self.settings = settings or ToolSettings()
        self.imagemagick = require_command(
            self.settings.get("tools.imagemagick"),
            "ImageMagick",
            env_var="FTVICONS_IMAGEMAGICK",
        )
        self.svg2vd = require_command(
            self.settings.get("tools.svg2vectordrawable"),
            "svg2vectordrawable",
            env_var="FTVICONS_SVG2VD",
        )

    def trace_to_svg(self, source: ImageSource, workdir: Path,
                     background: Optional[Color] = None) -> TraceResult:
        """
        Trace a raster image to an SVG document inside workdir

        Dark images (mean luminance below 0.5) are inverted before tracing so
        the artwork is traced rather than the background; the black fills
        this produces are turned back to white afterwards.

        Args:
            source: Input image path or loaded image
            workdir: Directory for intermediate files
            background: Flatten onto this colour first; keep alpha when None

        Returns:
            TraceResult: The traced SVG and what was done to produce it
        """
        image = load_image(source)
        luminance = mean_luminance(image)
        inverted = luminance < DARK_LUMINANCE_THRESHOLD
        logger.debug(f"Mean luminance {luminance:.3f}")

        if inverted:
            logger.info("Inverting colors for better tracing (detected dark image)...")
            image = invert_rgb(image)

        trace_args = []
        if background is not None:
            image = flatten(image, background)
        else:
            trace_args = PRESERVE_ALPHA_ARGS

        raster_path = workdir / INTERMEDIATE_RASTER
        svg_path = workdir / INTERMEDIATE_SVG
        image.save(raster_path, format="PNG")

        logger.info("Converting image -> temporary SVG...")
        run_command(self.imagemagick + [str(raster_path)] + trace_args + [str(svg_path)])

        svg_text = svg_path.read_text(encoding="utf-8")
        if inverted:
            svg_text = swap_black_fills(svg_text)
            svg_path.write_text(svg_text, encoding="utf-8")

        return TraceResult(svg_path, svg_text, inverted, luminance)

    def convert_to_vector(self, svg_path: Path, xml_path: Path) -> Path:
        """Convert an SVG file to an Android Vector Drawable file"""
        logger.info("Running svg2vectordrawable to produce Android Vector Drawable...")
        run_command(self.svg2vd + ["-i", str(svg_path), "-o", str(xml_path)])
        return xml_path

    def trace_to_vector(self, source: ImageSource, background: Optional[Color] = None) -> VectorDocument:
        """Trace an image and return the resulting Vector Drawable document"""
        with tempfile.TemporaryDirectory(prefix="ftvicons-") as tmp:
            workdir = Path(tmp)
            result = self.trace_to_svg(source, workdir, background)
            xml_path = self.convert_to_vector(result.svg_path, workdir / CONVERTED_XML)
            return VectorDocument.load(xml_path)


def svg_output_path(output: Union[str, Path]) -> Path:
    """Where --svg keeps the intermediate SVG for an output path"""
    return Path(output).with_suffix(".svg")


def generate_vector_drawable(input_path: Union[str, Path], output: Union[str, Path],
                             options: VectorOptions = VectorOptions(),
                             tracer: Optional[VectorTracer] = None) -> List[Path]:
    """
    Produce an Android Vector Drawable XML file from a raster image

    Everything is built in a temporary directory; the output (and the SVG,
    with keep_svg) is only written once all steps succeeded.

    Returns:
        List[Path]: Written files, the vector drawable first
    """
    tracer = tracer or VectorTracer()
    output = Path(output)

    image = load_image(input_path)

    if options.keep_svg and svg_output_path(output).resolve() == output.resolve():
        raise UsageError(f"Output {output} would be overwritten by the intermediate SVG")

    with tempfile.TemporaryDirectory(prefix="ftvicons-") as tmp:
        workdir = Path(tmp)
        result = tracer.trace_to_svg(image, workdir, options.background)
        xml_path = tracer.convert_to_vector(result.svg_path, workdir / CONVERTED_XML)

        if options.size is not None:
            width, height = options.size
            logger.info(f"Annotating Vector Drawable (size {width}x{height})...")
            doc = VectorDocument.load(xml_path)
            annotate(doc, width, height, options.usage_label)
            doc.save(xml_path)

        if not output.parent.exists():
            output.parent.mkdir(parents=True, exist_ok=True)

        written = []
        if options.keep_svg:
            svg_copy = svg_output_path(output)
            logger.info(f"Saving intermediate SVG -> '{svg_copy}'...")
            shutil.copyfile(result.svg_path, svg_copy)
            written.append(svg_copy)

        shutil.copyfile(xml_path, output)
        written.insert(0, output)

    logger.info(f"Done: {output}")
    return written
