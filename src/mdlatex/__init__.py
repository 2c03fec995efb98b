#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/__init__.py
"""mdlatex - render markdown documents as LaTeX.

The package is built from three layers:

- ``mdlatex.parsers``: the mistune-based markdown front end producing an AST
- ``mdlatex.renderers``: the traversal engine and the LaTeX construct renderer
- ``mdlatex.api``: one-call helpers tying the two together

Examples
--------
    >>> from mdlatex import markdown_to_latex
    >>> latex = markdown_to_latex("# Intro\\n\\nSome *text*.")

"""

from __future__ import annotations

from mdlatex.api import markdown_to_latex, render_latex
from mdlatex.exceptions import (
    DependencyError,
    InvalidOptionsError,
    MdLatexError,
    ParsingError,
    RenderingError,
    UnsupportedConstructError,
    ValidationError,
)
from mdlatex.options import LatexRendererOptions, MarkdownParserOptions
from mdlatex.parsers.markdown import MarkdownToAstConverter, markdown_to_ast
from mdlatex.renderers import BaseRenderer, LatexRenderer, RenderWalker
from mdlatex.sink import ItemSink, OutputSink

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "markdown_to_latex",
    "render_latex",
    "markdown_to_ast",
    "MarkdownToAstConverter",
    "BaseRenderer",
    "LatexRenderer",
    "RenderWalker",
    "OutputSink",
    "ItemSink",
    "LatexRendererOptions",
    "MarkdownParserOptions",
    "MdLatexError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "UnsupportedConstructError",
    "DependencyError",
]
