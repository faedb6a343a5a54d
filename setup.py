#!/usr/bin/env python
"""Minimal setup.py for ReadTheDocs compatibility."""

from setuptools import setup, find_packages

# Read version from the package (simple parsing)
import re

with open("textables/__init__.py", "r") as f:
    content = f.read()
    version_match = re.search(r'^__version__ = "(.+)"', content, re.MULTILINE)
    version = version_match.group(1) if version_match else "0.1.0"

setup(
    name="textables",
    version=version,
    description="Hierarchical ASCII and LaTeX tables for regression and summary output",
    packages=find_packages(include=["textables", "textables.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.26",
        "pandas>=2.2",
        "scipy>=1.11.0",
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
        "docs": [
            "sphinx>=7.0",
            "sphinx-rtd-theme>=2.0",
            "myst-parser>=2.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
