#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/sink.py
"""Append-only output buffers shared across a render pass.

The renderer never owns a sink; the traversal engine hands one to every
callback. Text is kept as a list of chunks, the way the renderers build
their output, and joined once when the pass is finished.

"""

from __future__ import annotations


class OutputSink:
    """Append-only text buffer with length marks and rollback.

    A mark is the buffer length at some point in time. ``truncate`` may only
    shrink the buffer back to such a mark; it never grows it.

    Examples
    --------
        >>> out = OutputSink()
        >>> out.write("intro ")
        >>> marker = out.mark()
        >>> out.write("draft")
        >>> out.truncate(marker)
        >>> out.getvalue()
        'intro '

    """

    def __init__(self) -> None:
        """Create an empty sink."""
        self._chunks: list[str] = []
        self._length = 0

    def __len__(self) -> int:
        """Return the number of characters written so far."""
        return self._length

    def __str__(self) -> str:
        """Return the buffer content."""
        return self.getvalue()

    def write(self, text: str) -> None:
        """Append text to the sink.

        Parameters
        ----------
        text : str
            Text to append; empty strings are ignored

        """
        if text:
            self._chunks.append(text)
            self._length += len(text)

    def mark(self) -> int:
        """Return the current length, for a later ``truncate`` or ``written_since``."""
        return self._length

    def truncate(self, mark: int) -> None:
        """Discard everything written after ``mark``.

        Parameters
        ----------
        mark : int
            A length previously returned by ``mark()``

        Raises
        ------
        ValueError
            If mark is negative or past the end of the buffer

        """
        if mark < 0 or mark > self._length:
            raise ValueError(f"cannot truncate sink of length {self._length} to {mark}")

        while self._length > mark:
            last = self._chunks.pop()
            self._length -= len(last)
            if self._length < mark:
                # Keep the head of a chunk that straddles the mark
                keep = last[: mark - self._length]
                self._chunks.append(keep)
                self._length += len(keep)

    def written_since(self, mark: int) -> str:
        """Return the text written after ``mark``."""
        return self.getvalue()[mark:]

    def getvalue(self) -> str:
        """Return the full buffer content."""
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""


class ItemSink(OutputSink):
    """Sink holding a separator-joined sequence of items.

    Table rows and cells are joined with separators written *between*
    items. Whether an item is the first one is tracked by an explicit
    counter rather than inferred from the buffer length, so the sink may
    safely be created with other content already in it.

    """

    def __init__(self) -> None:
        """Create an empty item sink."""
        super().__init__()
        self.item_count = 0

    def begin_item(self) -> bool:
        """Register a new item and report whether it is the first one.

        Returns
        -------
        bool
            True for the first item begun on this sink, False afterwards

        """
        first = self.item_count == 0
        self.item_count += 1
        return first
