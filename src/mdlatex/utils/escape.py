#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/utils/escape.py
"""LaTeX text escaping utilities.

Every reserved LaTeX character in running text is preceded by a backslash;
everything else is copied verbatim. This is the only escaping path in the
renderer: plain text, code spans and the preamble title/author all go
through it.

"""

from __future__ import annotations

import re
from typing import Protocol

from mdlatex.constants import LATEX_ESCAPE_CHAR, LATEX_RESERVED_CHARS
from mdlatex.sink import OutputSink

_RESERVED_PATTERN = re.compile(f"[{re.escape(LATEX_RESERVED_CHARS)}]")


class TextWriter(Protocol):
    """Anything with a ``write(str)`` method (OutputSink, io.StringIO)."""

    def write(self, text: str, /) -> object: ...


def needs_backslash(char: str) -> bool:
    """Return whether a single character is reserved in LaTeX text.

    Parameters
    ----------
    char : str
        Character to classify

    Returns
    -------
    bool
        True if the character must be escaped

    Examples
    --------
        >>> needs_backslash("_")
        True
        >>> needs_backslash("a")
        False

    """
    return len(char) == 1 and char in LATEX_RESERVED_CHARS


def escape_latex(out: TextWriter, text: str) -> None:
    r"""Write ``text`` to ``out`` with reserved LaTeX characters escaped.

    Maximal runs of ordinary characters are written in one call; each
    reserved character is written as a backslash pair.

    Parameters
    ----------
    out : TextWriter
        Destination sink
    text : str
        Raw text to escape

    Examples
    --------
        >>> out = OutputSink()
        >>> escape_latex(out, "50% of $x")
        >>> out.getvalue()
        '50\\% of \\$x'

    """
    pos = 0
    for match in _RESERVED_PATTERN.finditer(text):
        start = match.start()
        if start > pos:
            out.write(text[pos:start])
        out.write(LATEX_ESCAPE_CHAR + match.group())
        pos = match.end()

    if pos < len(text):
        out.write(text[pos:])


def escape_latex_text(text: str) -> str:
    """Return ``text`` with reserved LaTeX characters escaped.

    Parameters
    ----------
    text : str
        Raw text to escape

    Returns
    -------
    str
        Escaped text

    """
    if not text:
        return text

    out = OutputSink()
    escape_latex(out, text)
    return out.getvalue()
