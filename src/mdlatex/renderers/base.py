#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/renderers/base.py
"""Base class for callback-driven renderers.

A renderer exposes one method per markdown construct. A traversal engine
walks the document and calls these methods in document order, handing each
one the shared output sink. Leaf and inline constructs receive their
already-rendered child text; heading, list and paragraph receive a
continuation that renders their children into the same sink and reports
whether anything was written.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

from mdlatex.constants import Alignment, LinkKind, ListKind
from mdlatex.exceptions import InvalidOptionsError
from mdlatex.options.base import BaseRendererOptions
from mdlatex.sink import ItemSink, OutputSink

#: Renders a block's children into the shared sink; True if anything was written.
BodyProducer = Callable[[], bool]


class BaseRenderer(ABC):
    """Abstract base class for all construct renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @property
    @abstractmethod
    def flags(self) -> int:
        """Behaviour flags of this renderer."""

    # Block-level callbacks

    @abstractmethod
    def block_code(self, out: OutputSink, text: str, lang: str) -> None:
        """Render a fenced or indented code block."""

    @abstractmethod
    def block_quote(self, out: OutputSink, text: str) -> None:
        """Render a block quote around pre-rendered content."""

    @abstractmethod
    def block_html(self, out: OutputSink, text: str) -> None:
        """Render a raw HTML block."""

    @abstractmethod
    def heading(self, out: OutputSink, produce_body: BodyProducer, level: int, identifier: str = "") -> None:
        """Render a heading whose text is produced by ``produce_body``."""

    @abstractmethod
    def hrule(self, out: OutputSink) -> None:
        """Render a horizontal rule."""

    @abstractmethod
    def list(self, out: OutputSink, produce_body: BodyProducer, kind: ListKind) -> None:
        """Render a list whose items are produced by ``produce_body``."""

    @abstractmethod
    def list_item(self, out: OutputSink, text: str, kind: ListKind) -> None:
        """Render one pre-rendered list item."""

    @abstractmethod
    def paragraph(self, out: OutputSink, produce_body: BodyProducer) -> None:
        """Render a paragraph whose text is produced by ``produce_body``."""

    @abstractmethod
    def table(self, out: OutputSink, header: str, body: str, alignments: Sequence[Alignment | None]) -> None:
        """Render a table from its joined header and body rows."""

    @abstractmethod
    def table_row(self, out: ItemSink, text: str) -> None:
        """Append one pre-rendered row to a table's header or body."""

    @abstractmethod
    def table_header_cell(self, out: ItemSink, text: str, align: Alignment | None) -> None:
        """Append one header cell to a row."""

    @abstractmethod
    def table_cell(self, out: ItemSink, text: str, align: Alignment | None) -> None:
        """Append one body cell to a row."""

    @abstractmethod
    def footnotes(self, out: OutputSink, text: str) -> None:
        """Render the group of footnote definitions."""

    @abstractmethod
    def footnote_item(self, out: OutputSink, name: str, text: str, flags: int = 0) -> None:
        """Render one footnote definition."""

    @abstractmethod
    def title_block(self, out: OutputSink, text: str) -> None:
        """Render the document title block."""

    # Inline callbacks

    @abstractmethod
    def autolink(self, out: OutputSink, link: str, kind: LinkKind) -> None:
        """Render an autolink."""

    @abstractmethod
    def code_span(self, out: OutputSink, text: str) -> None:
        """Render inline code from raw text."""

    @abstractmethod
    def double_emphasis(self, out: OutputSink, text: str) -> None:
        """Render strong emphasis."""

    @abstractmethod
    def emphasis(self, out: OutputSink, text: str) -> None:
        """Render emphasis."""

    @abstractmethod
    def triple_emphasis(self, out: OutputSink, text: str) -> None:
        """Render combined strong and emphasis."""

    @abstractmethod
    def strikethrough(self, out: OutputSink, text: str) -> None:
        """Render deleted text."""

    @abstractmethod
    def image(self, out: OutputSink, link: str, title: str, alt: str) -> None:
        """Render an image reference."""

    @abstractmethod
    def line_break(self, out: OutputSink) -> None:
        """Render a hard line break."""

    @abstractmethod
    def link(self, out: OutputSink, link: str, title: str, content: str) -> None:
        """Render a hyperlink around pre-rendered content."""

    @abstractmethod
    def raw_html_tag(self, out: OutputSink, tag: str) -> None:
        """Render an inline HTML tag."""

    @abstractmethod
    def footnote_ref(self, out: OutputSink, ref: str, index: int) -> None:
        """Render a footnote reference."""

    @abstractmethod
    def entity(self, out: OutputSink, entity: str) -> None:
        """Render a named entity reference."""

    @abstractmethod
    def normal_text(self, out: OutputSink, text: str) -> None:
        """Render a plain text run."""

    @abstractmethod
    def math(self, out: OutputSink, equation: str, inline: bool) -> None:
        """Render a math expression."""

    # Document lifecycle

    @abstractmethod
    def document_header(self, out: OutputSink) -> None:
        """Render everything that precedes the document body."""

    @abstractmethod
    def document_footer(self, out: OutputSink) -> None:
        """Render everything that follows the document body."""
