#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/renderers/walker.py
"""Depth-first traversal driving a construct renderer.

RenderWalker visits an AST and calls the renderer callback for every node in
document order. Inline content and the bodies of most blocks are rendered
into scratch sinks and handed over as text; headings, lists and paragraphs
instead get a one-shot continuation that renders their children straight
into the shared sink, so the renderer can roll the construct back when it
turns out to be empty.

"""

from __future__ import annotations

import logging
from typing import Sequence

from mdlatex.ast.nodes import (
    AutoLink,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    EntityReference,
    FootnoteDefinition,
    FootnoteReference,
    Footnotes,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    MathBlock,
    MathInline,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    StrongEmphasis,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from mdlatex.ast.visitors import NodeVisitor
from mdlatex.constants import Alignment, ListKind
from mdlatex.exceptions import RenderingError
from mdlatex.renderers.base import BaseRenderer, BodyProducer
from mdlatex.sink import ItemSink, OutputSink

logger = logging.getLogger(__name__)


class RenderWalker(NodeVisitor):
    """Walk an AST and feed it to a construct renderer.

    Parameters
    ----------
    renderer : BaseRenderer
        Renderer receiving the callbacks

    Examples
    --------
        >>> from mdlatex.renderers.latex import LatexRenderer
        >>> walker = RenderWalker(LatexRenderer())
        >>> latex = walker.render_to_string(document)

    """

    def __init__(self, renderer: BaseRenderer):
        """Initialize the walker for one renderer."""
        self.renderer = renderer
        self._out: OutputSink = OutputSink()
        self._alignments: Sequence[Alignment | None] = ()
        self._in_header = False
        self._list_kind: ListKind = "unordered"

    def render_to_string(self, document: Document) -> str:
        """Render a whole document, preamble to end marker.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Rendered output

        """
        self._out = OutputSink()
        self._alignments = ()
        self._in_header = False
        self._list_kind = "unordered"

        logger.debug(
            "Rendering document with %d top-level blocks via %s", len(document.children), type(self.renderer).__name__
        )
        document.accept(self)
        return self._out.getvalue()

    def _render_nodes(self, nodes: Sequence[Node]) -> str:
        """Render nodes into a scratch sink and return the text."""
        saved_out = self._out
        self._out = OutputSink()
        try:
            for node in nodes:
                node.accept(self)
            return self._out.getvalue()
        finally:
            self._out = saved_out

    def _continuation(self, nodes: Sequence[Node], construct: str) -> BodyProducer:
        """Build a one-shot continuation rendering ``nodes`` into the current sink.

        The continuation reports True when it wrote anything other than
        whitespace.
        """
        out = self._out
        used = False

        def produce_body() -> bool:
            nonlocal used
            if used:
                raise RenderingError(f"{construct} body rendered more than once", rendering_stage=construct)
            used = True

            marker = out.mark()
            saved_out = self._out
            self._out = out
            try:
                for node in nodes:
                    node.accept(self)
            finally:
                self._out = saved_out
            return bool(out.written_since(marker).strip())

        return produce_body

    # ------------------------------------------------------------------
    # Block-level nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        self.renderer.document_header(self._out)
        self.renderer.title_block(self._out, node.metadata.get("title_block", ""))
        for child in node.children:
            child.accept(self)
        self.renderer.document_footer(self._out)

    def visit_heading(self, node: Heading) -> None:
        self.renderer.heading(self._out, self._continuation(node.content, "heading"), node.level, node.identifier)

    def visit_paragraph(self, node: Paragraph) -> None:
        if node.tight:
            # Tight list items carry bare text without paragraph spacing
            for child in node.content:
                child.accept(self)
            return
        self.renderer.paragraph(self._out, self._continuation(node.content, "paragraph"))

    def visit_code_block(self, node: CodeBlock) -> None:
        self.renderer.block_code(self._out, node.content, node.language or "")

    def visit_block_quote(self, node: BlockQuote) -> None:
        self.renderer.block_quote(self._out, self._render_nodes(node.children))

    def visit_list(self, node: List) -> None:
        kind: ListKind = "ordered" if node.ordered else "unordered"
        saved_kind = self._list_kind
        self._list_kind = kind
        try:
            self.renderer.list(self._out, self._continuation(node.items, "list"), kind)
        finally:
            self._list_kind = saved_kind

    def visit_list_item(self, node: ListItem) -> None:
        self.renderer.list_item(self._out, self._render_nodes(node.children), self._list_kind)

    def visit_table(self, node: Table) -> None:
        saved_out = self._out
        self._alignments = node.alignments

        header = ItemSink()
        body = ItemSink()
        try:
            if node.header is not None:
                self._out = header
                self._in_header = True
                node.header.accept(self)

            self._out = body
            self._in_header = False
            for row in node.rows:
                row.accept(self)
        finally:
            self._out = saved_out
            self._in_header = False
            self._alignments = ()

        self.renderer.table(self._out, header.getvalue(), body.getvalue(), node.alignments)

    def visit_table_row(self, node: TableRow) -> None:
        table_out = self._out
        if not isinstance(table_out, ItemSink):
            raise RenderingError("table row rendered outside of a table", rendering_stage="table_row")

        row = ItemSink()
        self._out = row
        try:
            for column, cell in enumerate(node.cells):
                self._render_cell(row, cell, column)
        finally:
            self._out = table_out

        self.renderer.table_row(table_out, row.getvalue())

    def visit_table_cell(self, node: TableCell) -> None:
        row = self._out
        if not isinstance(row, ItemSink):
            raise RenderingError("table cell rendered outside of a table row", rendering_stage="table_cell")
        self._render_cell(row, node, row.item_count)

    def _render_cell(self, row: ItemSink, cell: TableCell, column: int) -> None:
        align = cell.alignment
        if align is None and column < len(self._alignments):
            align = self._alignments[column]

        text = self._render_nodes(cell.content)
        if self._in_header:
            self.renderer.table_header_cell(row, text, align)
        else:
            self.renderer.table_cell(row, text, align)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self.renderer.hrule(self._out)

    def visit_html_block(self, node: HTMLBlock) -> None:
        self.renderer.block_html(self._out, node.content)

    def visit_math_block(self, node: MathBlock) -> None:
        self.renderer.math(self._out, node.content, inline=False)

    def visit_footnotes(self, node: Footnotes) -> None:
        self.renderer.footnotes(self._out, self._render_nodes(node.items))

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        self.renderer.footnote_item(self._out, node.identifier, self._render_nodes(node.content))

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        self.renderer.normal_text(self._out, node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        self.renderer.emphasis(self._out, self._render_nodes(node.content))

    def visit_strong(self, node: Strong) -> None:
        self.renderer.double_emphasis(self._out, self._render_nodes(node.content))

    def visit_strong_emphasis(self, node: StrongEmphasis) -> None:
        self.renderer.triple_emphasis(self._out, self._render_nodes(node.content))

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self.renderer.strikethrough(self._out, self._render_nodes(node.content))

    def visit_code(self, node: Code) -> None:
        self.renderer.code_span(self._out, node.content)

    def visit_link(self, node: Link) -> None:
        self.renderer.link(self._out, node.url, node.title or "", self._render_nodes(node.content))

    def visit_autolink(self, node: AutoLink) -> None:
        self.renderer.autolink(self._out, node.url, node.kind)

    def visit_image(self, node: Image) -> None:
        self.renderer.image(self._out, node.url, node.title or "", node.alt_text)

    def visit_line_break(self, node: LineBreak) -> None:
        if node.soft:
            self.renderer.normal_text(self._out, "\n")
        else:
            self.renderer.line_break(self._out)

    def visit_html_inline(self, node: HTMLInline) -> None:
        self.renderer.raw_html_tag(self._out, node.content)

    def visit_entity_reference(self, node: EntityReference) -> None:
        self.renderer.entity(self._out, node.content)

    def visit_math_inline(self, node: MathInline) -> None:
        self.renderer.math(self._out, node.content, inline=True)

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        self.renderer.footnote_ref(self._out, node.identifier, node.index)
