#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Constants for the Fire TV icon tools
"""

# Application information
APP_NAME = "Fire TV Icon Tools"
APP_VERSION = "0.1.0"

# Icon set targets (width, height)
BANNER_SIZE = (320, 180)  # android:banner
LAUNCHER_SIZE = (108, 108)  # android:icon
BANNER_FILENAME = "banner_320x180.png"
LAUNCHER_FILENAME = "launcher_108x108.png"

# Aliases accepted by --size, mapped to (width, height)
SIZE_ALIASES = {
    "banner": BANNER_SIZE,
    "icon": LAUNCHER_SIZE,
}

# Compositing
DEFAULT_SCALE_PERCENT = 100
DEFAULT_BACKGROUND = (255, 255, 255, 255)  # White, used for transparent samples

# Tracing
DARK_LUMINANCE_THRESHOLD = 0.5  # Mean luminance below this is treated as dark
BLACK_FILLS = ("#000000", "#000")
INVERTED_FILL = "#ffffff"
INTERMEDIATE_RASTER = "processed.png"
INTERMEDIATE_SVG = "converted.svg"
CONVERTED_XML = "converted.xml"

# Android Vector Drawable
ANDROID_NS = "http://schemas.android.com/apk/res/android"
AAPT_NS = "http://schemas.android.com/aapt"
USAGE_COMMENT_PREFIX = "intended-usage:"

# External tools, in order of preference
IMAGEMAGICK_COMMANDS = [["magick"], ["convert"]]
SVG2VD_COMMANDS = [["svg2vectordrawable"], ["npx", "svg2vectordrawable"]]
