#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the mdlatex parser and renderer.

Each component has its own frozen Options dataclass; use
``create_updated`` to derive a modified copy.
"""

from __future__ import annotations

from mdlatex.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdlatex.options.latex import LatexRendererOptions
from mdlatex.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "LatexRendererOptions",
    "MarkdownParserOptions",
]
