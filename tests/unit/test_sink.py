#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_sink.py
"""Unit tests for output sinks.

Tests cover:
- Appending and reading back
- Mark and truncate, including chunks straddling the mark
- First-item tracking in ItemSink

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdlatex.sink import ItemSink, OutputSink


@pytest.mark.unit
class TestOutputSink:
    """Tests for OutputSink."""

    def test_write_and_read(self) -> None:
        """Test that writes are concatenated in order."""
        out = OutputSink()
        out.write("ab")
        out.write("")
        out.write("cd")
        assert out.getvalue() == "abcd"
        assert str(out) == "abcd"
        assert len(out) == 4

    def test_empty(self) -> None:
        """Test a fresh sink."""
        out = OutputSink()
        assert out.getvalue() == ""
        assert len(out) == 0
        assert out.mark() == 0

    def test_truncate_to_mark(self) -> None:
        """Test discarding everything after a mark."""
        out = OutputSink()
        out.write("keep")
        marker = out.mark()
        out.write("drop")
        out.write("this too")
        out.truncate(marker)
        assert out.getvalue() == "keep"
        assert len(out) == 4

    def test_truncate_straddling_chunk(self) -> None:
        """Test truncating in the middle of a written chunk."""
        out = OutputSink()
        out.write("intro draft")
        out.truncate(6)
        assert out.getvalue() == "intro "

    def test_truncate_at_end_is_noop(self) -> None:
        """Test truncating at the current length."""
        out = OutputSink()
        out.write("text")
        out.truncate(len(out))
        assert out.getvalue() == "text"

    @pytest.mark.parametrize("mark", [-1, 5])
    def test_truncate_out_of_range(self, mark: int) -> None:
        """Test that marks outside the buffer are rejected."""
        out = OutputSink()
        out.write("abcd")
        with pytest.raises(ValueError):
            out.truncate(mark)

    def test_written_since(self) -> None:
        """Test reading the text written after a mark."""
        out = OutputSink()
        out.write("head")
        marker = out.mark()
        out.write("tail")
        assert out.written_since(marker) == "tail"

    @given(st.lists(st.text()), st.lists(st.text()))
    def test_truncate_restores_prefix(self, before: list[str], after: list[str]) -> None:
        """Property: truncating to a mark restores exactly the earlier content."""
        out = OutputSink()
        for chunk in before:
            out.write(chunk)
        marker = out.mark()
        for chunk in after:
            out.write(chunk)
        out.truncate(marker)
        assert out.getvalue() == "".join(before)


@pytest.mark.unit
class TestItemSink:
    """Tests for ItemSink."""

    def test_first_item_detection(self) -> None:
        """Test that only the first begun item reports True."""
        sink = ItemSink()
        assert sink.begin_item() is True
        assert sink.begin_item() is False
        assert sink.begin_item() is False
        assert sink.item_count == 3

    def test_counter_independent_of_content(self) -> None:
        """Test that prior content does not count as an item."""
        sink = ItemSink()
        sink.write("preexisting")
        assert sink.begin_item() is True

    def test_empty_first_item(self) -> None:
        """Test that an empty first item still counts."""
        sink = ItemSink()
        sink.begin_item()
        assert len(sink) == 0
        assert sink.begin_item() is False
