#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdlatex library.

This module centralizes the fixed markup fragments, character sets and
default configuration values used across mdlatex.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Escaping - Reserved characters of the target markup
3. LaTeX Markup - Wrapper commands and preamble content
4. Renderer Defaults - Default option values
5. Parser Defaults - Markdown front-end settings
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

Alignment = Literal["left", "center", "right"]
ListKind = Literal["ordered", "unordered"]
LinkKind = Literal["normal", "email"]

# =============================================================================
# Escaping
# =============================================================================

# Characters that must be preceded by LATEX_ESCAPE_CHAR in running text
LATEX_RESERVED_CHARS = "_{}%$&\\~#"
LATEX_ESCAPE_CHAR = "\\"

# =============================================================================
# LaTeX Markup
# =============================================================================

# Sectioning commands indexed by markdown heading level
LATEX_HEADING_COMMANDS: dict[int, str] = {
    1: "section",
    2: "subsection",
    3: "subsubsection",
    4: "paragraph",
    5: "subparagraph",
    6: "textbf",
}

LATEX_ALIGNMENT_LETTERS: dict[str, str] = {
    "left": "l",
    "right": "r",
}
LATEX_DEFAULT_ALIGNMENT_LETTER = "c"

LATEX_CELL_SEPARATOR = " & "
LATEX_ROW_SEPARATOR = " \\\\\n"

REMOTE_IMAGE_PREFIXES = ("http://", "https://")
EMAIL_LINK_PREFIX = "mailto:"

# (options, package) pairs loaded before the unicode substitutions
LATEX_FONT_PACKAGES: list[tuple[str, str]] = [
    ("utf8", "inputenc"),
    ("T1", "fontenc"),
    ("", "lmodern"),
    ("", "marvosym"),
    ("", "textcomp"),
]

# (code point, replacement) pairs for \DeclareUnicodeCharacter
LATEX_UNICODE_SUBSTITUTIONS: list[tuple[str, str]] = [
    ("20AC", "\\EUR{}"),
    ("2260", "\\neq"),
    ("2264", "\\leq"),
    ("2265", "\\geq"),
    ("22C5", "\\cdot"),
    ("A0", "~"),
    ("B1", "\\pm"),
    ("D7", "\\times"),
]

LATEX_CONTENT_PACKAGES: list[tuple[str, str]] = [
    ("", "amsmath"),
    ("", "graphicx"),
    ("", "listings"),
    ("margin=1in", "geometry"),
    ("", "verbatim"),
    ("normalem", "ulem"),
    ("", "hyperref"),
]

LATEX_HYPERSETUP_ENTRIES: list[str] = [
    "colorlinks",
    "citecolor=black",
    "filecolor=black",
    "linkcolor=black",
    "urlcolor=black",
    "pdfstartview=FitH",
    "breaklinks=true",
]

LATEX_HRULE_DEFINITION = "\\newcommand{\\HRule}{\\rule{\\linewidth}{0.5mm}}\n"
LATEX_PARAGRAPH_SPACING = "\\addtolength{\\parskip}{0.5\\baselineskip}\n\\parindent=0pt\n"

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_CREATOR = "mdlatex"  # Written as pdfauthor in the hyperref setup
DEFAULT_LATEX_TITLE = ""
DEFAULT_LATEX_AUTHOR = ""
DEFAULT_LATEX_FLAGS = 0
DEFAULT_LATEX_DOCUMENT_CLASS = "article"
DEFAULT_LATEX_FAIL_ON_UNSUPPORTED = False

# =============================================================================
# Parser Defaults
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

DEFAULT_MARKDOWN_PARSE_TABLES = True
DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH = True
DEFAULT_MARKDOWN_PARSE_FOOTNOTES = True
DEFAULT_MARKDOWN_PARSE_MATH = True
DEFAULT_MARKDOWN_PARSE_URLS = False
DEFAULT_MARKDOWN_PARSE_TITLE_BLOCK = True

TITLE_BLOCK_MARKER = "%"
TITLE_BLOCK_FIELDS = ("title", "author", "date")
