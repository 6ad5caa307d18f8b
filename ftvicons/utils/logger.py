#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Logging utilities for the icon tools
"""

import os
import sys
import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from datetime import datetime

# Marks handlers installed by setup_logger so repeated calls replace them
_HANDLER_TAG = "_ftvicons_handler"


def setup_logger(verbose: bool = False, log_to_file: bool = True):
    """
    Configure application logging

    Args:
        verbose: Show debug messages on the console
        log_to_file: Also write a rotating log file in the user log directory
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    # Create formatters
    console_format = logging.Formatter('%(levelname)s - %(message)s')
    file_format = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # Create console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(console_format)
    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)

    if not log_to_file:
        return

    # Create file handler
    log_dir = _get_log_directory()
    log_file = log_dir / f"ftvicons_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(file_format)
    setattr(file_handler, _HANDLER_TAG, True)
    root_logger.addHandler(file_handler)

    logging.debug(f"Logging initialized. Log file: {log_file}")


def _get_log_directory() -> Path:
    """Get the log directory path"""
    # Use AppData for Windows
    app_data = os.environ.get("APPDATA")
    if app_data:
        log_dir = Path(app_data) / "FireTVIconTools" / "logs"
    else:
        # Fallback to user home directory
        log_dir = Path.home() / ".ftvicons" / "logs"

    # Ensure log directory exists
    if not log_dir.exists():
        log_dir.mkdir(parents=True, exist_ok=True)

    return log_dir
