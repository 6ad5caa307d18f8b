#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Size and intended-usage annotation for Android Vector Drawables
"""

import re
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from ftvicons.utils.constants import SIZE_ALIASES, USAGE_COMMENT_PREFIX
from ftvicons.utils.errors import InvalidSize
from ftvicons.vector.document import VectorDocument

logger = logging.getLogger(__name__)

_SIZE_RE = re.compile(r"(\d+)x(\d+)")


def parse_size(value: str) -> Tuple[int, int, Optional[str]]:
    """
    Parse a --size value

    Args:
        value: "WIDTHxHEIGHT", or one of the aliases "banner" / "icon"

    Returns:
        Tuple: (width, height, usage label). The label is set for aliases only.

    Raises:
        InvalidSize: For anything else
    """
    if value in SIZE_ALIASES:
        width, height = SIZE_ALIASES[value]
        return width, height, value

    match = _SIZE_RE.fullmatch(value or "")
    if not match:
        raise InvalidSize(
            f"Invalid size format {value!r}. Use WIDTHxHEIGHT or 'banner'/'icon' aliases"
        )
    return int(match.group(1)), int(match.group(2)), None


def _dimension(value, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidSize(f"Invalid {name}: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise InvalidSize(f"Invalid {name}: {value!r} (must not be negative)")
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise InvalidSize(f"Invalid {name}: {value!r} (must be a non-negative integer)")


def annotate(doc: VectorDocument, width, height, usage_label: Optional[str] = None) -> VectorDocument:
    """
    Set the size attributes of the root element and tag its intended usage

    android:width/height are set in px and android:viewportWidth/Height to
    the same numbers. Existing attributes are replaced, missing ones are
    appended, so repeating the call gives the same attributes. A usage label
    adds an "intended-usage" comment after the declaration on every call.

    Raises:
        InvalidSize: If width or height is not a non-negative integer; the
            document is left untouched
    """
    width = _dimension(width, "width")
    height = _dimension(height, "height")

    if doc.root_name != "vector":
        logger.warning(f"Annotating <{doc.root_name}> root, expected <vector>")

    if usage_label:
        doc.insert_comment(f" {USAGE_COMMENT_PREFIX} {usage_label} ")

    doc.set("width", f"{width}px")
    doc.set("height", f"{height}px")
    doc.set("viewportWidth", str(width))
    doc.set("viewportHeight", str(height))

    return doc


def annotate_file(path: Union[str, Path], width, height, usage_label: Optional[str] = None) -> Path:
    """Annotate a vector drawable file in place"""
    doc = VectorDocument.load(path)
    annotate(doc, width, height, usage_label)
    doc.save(path)
    logger.info(f"Annotated {path} (size {width}x{height})")
    return Path(path)
