#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_escape.py
"""Unit tests for LaTeX text escaping.

Tests cover:
- Reserved character detection
- Escaping of each reserved character
- Run-based writes to the sink
- Property: text without reserved characters is unchanged
- Property: every reserved character gains exactly one backslash

"""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdlatex.constants import LATEX_RESERVED_CHARS
from mdlatex.sink import OutputSink
from mdlatex.utils.escape import escape_latex, escape_latex_text, needs_backslash

plain_text = st.text(alphabet=st.characters(blacklist_characters=LATEX_RESERVED_CHARS))


def unescape(text: str) -> str:
    """Drop the backslash in front of every escaped reserved character."""
    return re.sub(r"\\(.)", r"\1", text, flags=re.DOTALL)


class RecordingWriter:
    """Writer that records every write call."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def write(self, text: str) -> None:
        self.calls.append(text)


@pytest.mark.unit
class TestNeedsBackslash:
    """Tests for the reserved character predicate."""

    @pytest.mark.parametrize("char", list(LATEX_RESERVED_CHARS))
    def test_reserved_characters(self, char: str) -> None:
        """Test that every reserved character is detected."""
        assert needs_backslash(char)

    @pytest.mark.parametrize("char", ["a", " ", "^", "\n", "é", "["])
    def test_ordinary_characters(self, char: str) -> None:
        """Test that ordinary characters are not reserved."""
        assert not needs_backslash(char)


@pytest.mark.unit
class TestEscapeLatex:
    """Tests for escape_latex and escape_latex_text."""

    def test_mixed_text(self) -> None:
        """Test escaping text with several reserved characters."""
        assert escape_latex_text("50% of $x & y_1") == "50\\% of \\$x \\& y\\_1"

    def test_backslash_and_braces(self) -> None:
        """Test escaping of backslash, braces, tilde and hash."""
        assert escape_latex_text("\\{~#}") == "\\\\\\{\\~\\#\\}"

    def test_empty_text(self) -> None:
        """Test that empty input produces empty output."""
        out = OutputSink()
        escape_latex(out, "")
        assert out.getvalue() == ""
        assert escape_latex_text("") == ""

    def test_runs_written_in_one_call(self) -> None:
        """Test that ordinary runs are not split into single characters."""
        writer = RecordingWriter()
        escape_latex(writer, "abc_def")
        assert writer.calls == ["abc", "\\_", "def"]

    def test_writes_to_sink(self) -> None:
        """Test escaping straight into an output sink."""
        out = OutputSink()
        out.write("x=")
        escape_latex(out, "#1")
        assert out.getvalue() == "x=\\#1"

    @given(plain_text)
    def test_plain_text_unchanged(self, text: str) -> None:
        """Property: text without reserved characters is left alone."""
        assert escape_latex_text(text) == text

    @given(st.text())
    def test_one_backslash_per_reserved_char(self, text: str) -> None:
        """Property: output grows by exactly one character per reserved character."""
        reserved = sum(1 for char in text if char in LATEX_RESERVED_CHARS)
        assert len(escape_latex_text(text)) == len(text) + reserved

    @given(st.text())
    def test_unescape_recovers_input(self, text: str) -> None:
        """Property: removing the added backslashes gives back the input."""
        assert unescape(escape_latex_text(text)) == text
