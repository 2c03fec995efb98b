#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdlatex/parsers/__init__.py
"""Front ends that turn source text into the mdlatex AST."""

from mdlatex.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = [
    "MarkdownToAstConverter",
    "markdown_to_ast",
]
