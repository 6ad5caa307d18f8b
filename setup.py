#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Setup script for the Fire TV icon tools.
Installs the img2ftvappicons and img2vd command-line tools.
"""

from setuptools import setup, find_namespace_packages
import os

# Read the long description from README.md
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Read version from constants
version = "0.1.0"  # Default version
constants_path = os.path.join("ftvicons", "utils", "constants.py")
if os.path.exists(constants_path):
    with open(constants_path, "r", encoding="utf-8") as f:
        for line in f:
            if line.startswith("APP_VERSION"):
                version = line.split("=")[1].strip().strip('"\'')
                break

# Define dependencies
install_requires = [
    "pillow>=9.1.0",
]

# Development dependencies
extras_require = {
    "dev": [
        "pytest>=6.0.0",
        "black>=21.5b2",
        "flake8>=3.9.2",
        "isort>=5.9.1",
        "mypy>=0.812",
    ],
}

setup(
    name="ftvicons",
    version=version,
    author="FTV Icons Team",
    author_email="your_email@example.com",
    description="Generate Fire TV / Android icon sets and Vector Drawables from raster images",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["ftvicons", "ftvicons.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Graphics :: Graphics Conversion",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Environment :: Console",
    ],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "img2ftvappicons=ftvicons.cli.img2ftvappicons:main",
            "img2vd=ftvicons.cli.img2vd:main",
        ],
    },
)
