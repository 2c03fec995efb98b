#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

This module defines which mistune extensions the markdown front end enables.
"""
# src/mdlatex/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from mdlatex.constants import (
    DEFAULT_MARKDOWN_PARSE_FOOTNOTES,
    DEFAULT_MARKDOWN_PARSE_MATH,
    DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH,
    DEFAULT_MARKDOWN_PARSE_TABLES,
    DEFAULT_MARKDOWN_PARSE_TITLE_BLOCK,
    DEFAULT_MARKDOWN_PARSE_URLS,
)
from mdlatex.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_math : bool, default True
        Whether to parse inline ($...$) and block ($$...$$) math.
    parse_urls : bool, default False
        Whether to turn bare URLs in running text into autolinks.
    parse_title_block : bool, default True
        Whether to read a leading Pandoc-style ``%`` title block
        (title, author, date) into document metadata.

    """

    parse_tables: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "cli_name": "no-parse-tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "cli_name": "no-parse-strikethrough",
            "importance": "core",
        },
    )
    parse_footnotes: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_FOOTNOTES,
        metadata={
            "help": "Parse footnote references and definitions",
            "cli_name": "no-parse-footnotes",
            "importance": "core",
        },
    )
    parse_math: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_MATH,
        metadata={
            "help": "Parse inline and block math ($...$ and $$...$$)",
            "cli_name": "no-parse-math",
            "importance": "core",
        },
    )
    parse_urls: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_URLS,
        metadata={"help": "Turn bare URLs into autolinks", "cli_name": "parse-urls", "importance": "advanced"},
    )
    parse_title_block: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_TITLE_BLOCK,
        metadata={
            "help": "Read a leading % title block (title, author, date) into metadata",
            "cli_name": "no-parse-title-block",
            "importance": "advanced",
        },
    )
