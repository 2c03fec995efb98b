#  Copyright (c) 2025 Tom Villani, Ph.D.

# mdlatex/options/latex.py
"""Configuration options for LaTeX rendering.

This module defines the immutable per-document configuration of the LaTeX
renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdlatex.constants import (
    DEFAULT_LATEX_AUTHOR,
    DEFAULT_LATEX_DOCUMENT_CLASS,
    DEFAULT_LATEX_FAIL_ON_UNSUPPORTED,
    DEFAULT_LATEX_FLAGS,
    DEFAULT_LATEX_TITLE,
)
from mdlatex.options.base import BaseRendererOptions


@dataclass(frozen=True)
class LatexRendererOptions(BaseRendererOptions):
    r"""Configuration options for markdown-to-LaTeX rendering.

    Parameters
    ----------
    title : str, default ""
        Document title written to the preamble. A non-empty title also makes
        the title block emit ``\maketitle``.
    author : str, default ""
        Document author written to the preamble.
    flags : int, default 0
        Reserved bitset of renderer behaviour switches. No flag is defined
        yet; the value is only carried and reported.
    document_class : str, default "article"
        LaTeX document class used in ``\documentclass``.
    fail_on_unsupported : bool, default False
        Raise UnsupportedConstructError for footnotes and entity references
        instead of logging and degrading them.

    """

    title: str = field(
        default=DEFAULT_LATEX_TITLE,
        metadata={"help": "Document title for the preamble", "type": str, "importance": "core"},
    )
    author: str = field(
        default=DEFAULT_LATEX_AUTHOR,
        metadata={"help": "Document author for the preamble", "type": str, "importance": "core"},
    )
    flags: int = field(
        default=DEFAULT_LATEX_FLAGS,
        metadata={"help": "Reserved renderer flag bitset", "type": int, "importance": "advanced"},
    )
    document_class: str = field(
        default=DEFAULT_LATEX_DOCUMENT_CLASS,
        metadata={"help": "LaTeX document class (article, report, book, etc.)", "type": str, "importance": "core"},
    )
    fail_on_unsupported: bool = field(
        default=DEFAULT_LATEX_FAIL_ON_UNSUPPORTED,
        metadata={
            "help": "Raise an error on footnotes and entity references instead of degrading them",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate field values for LaTeX renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.flags < 0:
            raise ValueError(f"flags must be non-negative, got {self.flags}")

        if not self.document_class.strip():
            raise ValueError("document_class must not be empty")
