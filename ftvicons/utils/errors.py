#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Error types shared by the icon tools

Library code raises these; the command-line entry points map each kind to
the process exit code documented for that tool.
"""

from typing import Optional, Sequence


class IconToolError(Exception):
    """Base class for all icon tool failures"""


class UsageError(IconToolError):
    """Bad or missing command-line arguments"""


class InputNotFound(IconToolError):
    """The input image does not exist"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Input file not found: {path}")


class ToolMissing(IconToolError):
    """A required external capability is unavailable"""


class InvalidSize(IconToolError):
    """A size value is not WIDTHxHEIGHT of non-negative integers"""


class TraceFailure(IconToolError):
    """An external tracer or converter exited with a non-zero status"""

    def __init__(self, command: Sequence[str], returncode: int, output: Optional[str] = None):
        self.command = list(command)
        self.returncode = returncode
        self.output = (output or "").strip()
        message = f"'{' '.join(self.command)}' failed with exit status {returncode}"
        if self.output:
            message = f"{message}: {self.output}"
        super().__init__(message)


class VectorDocumentError(IconToolError):
    """A vector document could not be parsed"""
