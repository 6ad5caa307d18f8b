#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tool settings management
"""

import os
import copy
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from ftvicons.utils.constants import IMAGEMAGICK_COMMANDS, SVG2VD_COMMANDS


DEFAULT_SETTINGS: Dict[str, Any] = {
    "tools": {
        "imagemagick": IMAGEMAGICK_COMMANDS,
        "svg2vectordrawable": SVG2VD_COMMANDS,
    },
    "logging": {
        "file": True,
    },
}


class ToolSettings:
    """
    Read-only settings for the icon tools

    Values come from the built-in defaults, overlaid with the user's
    settings.json when one exists. The file is never written.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self.logger = logging.getLogger(__name__)
        self.settings: Dict[str, Any] = copy.deepcopy(DEFAULT_SETTINGS)
        self.config_dir = Path(config_dir) if config_dir else self._get_config_dir()
        self.config_file = self.config_dir / "settings.json"

        self._load_settings()

    def _get_config_dir(self) -> Path:
        """Get the configuration directory path"""
        override = os.environ.get("FTVICONS_CONFIG_DIR")
        if override:
            return Path(override)

        # Use AppData for Windows
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data) / "FireTVIconTools"

        # Fallback to user home directory
        return Path.home() / ".ftvicons"

    def _load_settings(self):
        """Overlay settings from the config file, if present"""
        if not self.config_file.exists():
            return

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                user_settings = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Ignoring unreadable settings file {self.config_file}: {str(e)}")
            return

        if not isinstance(user_settings, dict):
            self.logger.warning(f"Ignoring settings file {self.config_file}: top level must be an object")
            return

        _merge(self.settings, user_settings)
        self.logger.debug(f"Settings loaded from {self.config_file}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value using dot notation (e.g., 'tools.imagemagick')"""
        parts = key.split(".")
        current = self.settings

        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]

        return current


def _merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> None:
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
