#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/utils/__init__.py
"""Utility modules for the mdlatex package.

This package contains the escaping, image-reference and dependency-checking
helpers shared by the parser and the renderer.
"""

from mdlatex.utils.escape import escape_latex, escape_latex_text, needs_backslash
from mdlatex.utils.images import is_remote_image, strip_extension

__all__ = [
    "escape_latex",
    "escape_latex_text",
    "needs_backslash",
    "is_remote_image",
    "strip_extension",
]
