#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
In-memory model of an Android Vector Drawable document
"""

import re
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Union

from ftvicons.utils.constants import AAPT_NS, ANDROID_NS
from ftvicons.utils.errors import VectorDocumentError

logger = logging.getLogger(__name__)

ET.register_namespace("android", ANDROID_NS)
ET.register_namespace("aapt", AAPT_NS)

DEFAULT_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

_DECLARATION_RE = re.compile(r"\s*(<\?xml\s.*?\?>)", re.DOTALL)
_PROLOG_ITEM_RE = re.compile(
    r"\s*(?:<!--(?P<comment>.*?)-->|<!DOCTYPE[^>]*>|<\?(?!xml\s).*?\?>)",
    re.DOTALL,
)


class VectorDocument:
    """
    A parsed vector document: declaration, prolog comments and root element

    Comments inside the root element are kept in the element tree; comments
    between the declaration and the root are kept in `comments`, in order.
    """

    def __init__(self, root: ET.Element, comments: Optional[List[str]] = None,
                 declaration: str = DEFAULT_DECLARATION):
        self.root = root
        self.comments = list(comments or [])
        self.declaration = declaration

    @classmethod
    def parse(cls, text: str) -> "VectorDocument":
        """Parse document text"""
        text = text.lstrip("\ufeff")

        declaration = DEFAULT_DECLARATION
        pos = 0
        match = _DECLARATION_RE.match(text)
        if match:
            declaration = match.group(1)
            pos = match.end()

        comments = []
        while True:
            match = _PROLOG_ITEM_RE.match(text, pos)
            if not match:
                break
            if match.group("comment") is not None:
                comments.append(match.group("comment"))
            pos = match.end()

        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        try:
            root = ET.fromstring(text, parser=parser)
        except ET.ParseError as e:
            raise VectorDocumentError(f"Malformed vector document: {str(e)}") from e

        return cls(root, comments, declaration)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "VectorDocument":
        """Read and parse a document file"""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise VectorDocumentError(f"Cannot read {path}: {str(e)}") from e
        logger.debug(f"Loaded vector document {path}")
        return cls.parse(text)

    @property
    def root_name(self) -> str:
        """Local name of the root element, without namespace"""
        return self.root.tag.rsplit("}", 1)[-1]

    def get(self, name: str, namespace: Optional[str] = ANDROID_NS) -> Optional[str]:
        return self.root.get(_qualify(name, namespace))

    def set(self, name: str, value: str, namespace: Optional[str] = ANDROID_NS):
        """Set a root attribute; an existing one keeps its position"""
        self.root.set(_qualify(name, namespace), value)

    def insert_comment(self, text: str):
        """Add a comment directly after the XML declaration"""
        self.comments.insert(0, text)

    def to_string(self) -> str:
        parts = [self.declaration]
        parts.extend(f"<!--{comment}-->" for comment in self.comments)
        parts.append(ET.tostring(self.root, encoding="unicode"))
        return "\n".join(parts) + "\n"

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.write_text(self.to_string(), encoding="utf-8")
        return path


def _qualify(name: str, namespace: Optional[str]) -> str:
    return f"{{{namespace}}}{name}" if namespace else name
