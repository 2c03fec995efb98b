#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/parsers/markdown.py
"""Markdown to AST converter.

This module provides conversion from Markdown documents to the mdlatex AST
using the mistune parser. mistune is run without a renderer so that it hands
back its token stream, which is then mapped onto AST nodes.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Union

from mdlatex.ast import (
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
from mdlatex.constants import DEPS_MARKDOWN, EMAIL_LINK_PREFIX, TITLE_BLOCK_FIELDS, TITLE_BLOCK_MARKER
from mdlatex.exceptions import InvalidOptionsError, ParsingError
from mdlatex.options.markdown import MarkdownParserOptions
from mdlatex.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

# Named and numeric character references left in text by mistune
_ENTITY_PATTERN = re.compile(r"&(?:[A-Za-z][A-Za-z0-9]*|#[0-9]{1,7}|#[xX][0-9A-Fa-f]{1,6});")


class MarkdownToAstConverter:
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    Without tables:

        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> doc = MarkdownToAstConverter(options).parse(markdown_text)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                converter_name="markdown",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str or bytes
            Markdown source; bytes are decoded as UTF-8

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If bytes input is not valid UTF-8

        """
        markdown_content = self._load_text_content(input_data)

        metadata: dict[str, Any] = {}
        if self.options.parse_title_block:
            markdown_content, metadata = self._extract_title_block(markdown_content)

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_math:
            plugins.append("math")
        if self.options.parse_urls:
            plugins.append("url")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        tokens, _state = markdown.parse(markdown_content)

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        logger.debug("Parsed markdown into %d top-level blocks (plugins: %s)", len(children), ", ".join(plugins))
        return Document(children=children, metadata=metadata)

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes]) -> str:
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, (bytes, bytearray)):
            try:
                return bytes(input_data).decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParsingError(
                    f"Markdown input is not valid UTF-8: {e}", parsing_stage="decoding", original_error=e
                ) from e
        raise ParsingError(
            f"Unsupported markdown input type: {type(input_data).__name__}", parsing_stage="input_processing"
        )

    @staticmethod
    def _extract_title_block(content: str) -> tuple[str, dict[str, Any]]:
        """Remove a leading ``%`` title block and return it as metadata.

        Up to three leading lines starting with ``%`` are read as title,
        author and date, in that order.

        Parameters
        ----------
        content : str
            Markdown content that may start with a title block

        Returns
        -------
        tuple[str, dict]
            Content with the title block removed, and the extracted metadata

        """
        if not content.startswith(TITLE_BLOCK_MARKER):
            return content, {}

        lines = content.splitlines(keepends=True)
        block: list[str] = []
        for line in lines[: len(TITLE_BLOCK_FIELDS)]:
            if not line.startswith(TITLE_BLOCK_MARKER):
                break
            block.append(line[len(TITLE_BLOCK_MARKER) :].strip())

        metadata: dict[str, Any] = {"title_block": "\n".join(block)}
        for name, value in zip(TITLE_BLOCK_FIELDS, block):
            if value:
                metadata[name] = value

        return "".join(lines[len(block) :]), metadata

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Map one block-level mistune token to an AST node.

        Returns None for tokens without a counterpart in the AST.
        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type == "paragraph":
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_text":
            # Tight list items carry bare text instead of paragraphs
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])), tight=True)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))
        elif token_type == "block_math":
            return MathBlock(content=token.get("raw", ""))
        elif token_type == "footnotes":
            return self._process_footnotes(token)
        elif token_type == "blank_line":
            return None

        logger.debug("Skipping unsupported markdown block token: %s", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process a fenced or indented code block.

        The language is the first word of the fence info string.
        """
        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None

        language = None
        if info_string:
            words = info_string.split()
            if words:
                language = words[0]

        return CodeBlock(content=token.get("raw", ""), language=language)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if child.get("type") == "list_item"
        ]
        return List(ordered=ordered, items=items, start=start, tight=tight)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process a table token into header, body rows and column alignments."""
        header = None
        rows = []
        alignments = []

        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                # Header cells are direct children of table_head
                cells = self._process_table_cells(part)
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif part_type == "table_body":
                for row_token in part.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token)))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_cells(self, row_token: dict[str, Any]) -> list[TableCell]:
        cells = []
        for cell_token in row_token.get("children", []):
            if cell_token.get("type") != "table_cell":
                continue
            attrs = cell_token.get("attrs", {})
            align = attrs.get("align") if isinstance(attrs, dict) else None
            cells.append(
                TableCell(content=self._process_inline_tokens(cell_token.get("children", [])), alignment=align)
            )
        return cells

    def _process_footnotes(self, token: dict[str, Any]) -> Footnotes:
        items = []
        for item in token.get("children", []):
            attrs = item.get("attrs", {})
            if not isinstance(attrs, dict):
                attrs = {}
            items.append(
                FootnoteDefinition(
                    identifier=str(attrs.get("key", "")),
                    content=self._process_tokens(item.get("children", [])),
                    index=attrs.get("index", 0),
                )
            )
        return Footnotes(items=items)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                if isinstance(node, list):
                    nodes.extend(node)
                else:
                    nodes.append(node)
        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
            "inline_math": self._handle_inline_math_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug("Skipping unsupported markdown inline token: %s", token_type)
        return None

    def _handle_text_token(self, token: dict[str, Any]) -> list[Node]:
        """Handle text token, splitting character references out as EntityReference nodes."""
        raw = token.get("raw", "")
        nodes: list[Node] = []
        pos = 0
        for match in _ENTITY_PATTERN.finditer(raw):
            if match.start() > pos:
                nodes.append(Text(content=raw[pos : match.start()]))
            nodes.append(EntityReference(content=match.group()))
            pos = match.end()
        if pos < len(raw) or not nodes:
            nodes.append(Text(content=raw[pos:]))
        return nodes

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong | StrongEmphasis:
        """Handle strong token; strong around a lone emphasis collapses to StrongEmphasis."""
        children = token.get("children", [])
        if len(children) == 1 and children[0].get("type") == "emphasis":
            return StrongEmphasis(content=self._process_inline_tokens(children[0].get("children", [])))
        return Strong(content=self._process_inline_tokens(children))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis | StrongEmphasis:
        """Handle emphasis token; emphasis around a lone strong collapses to StrongEmphasis."""
        children = token.get("children", [])
        if len(children) == 1 and children[0].get("type") == "strong":
            return StrongEmphasis(content=self._process_inline_tokens(children[0].get("children", [])))
        return Emphasis(content=self._process_inline_tokens(children))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link | AutoLink:
        """Handle link token.

        A link whose only text is its own scheme-qualified target (such as
        ``http://...``) is an autolink; for ``mailto:`` targets the
        displayed address is compared instead.
        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        url = attrs.get("url", "")
        title = attrs.get("title")
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        text = self._plain_text(children)
        if text is not None and not title:
            if url.startswith(EMAIL_LINK_PREFIX) and text == url[len(EMAIL_LINK_PREFIX) :]:
                return AutoLink(url=text, kind="email")
            # Only scheme-qualified targets are autolinks; relative paths stay escaped links
            if text == url and "://" in url:
                return AutoLink(url=url)

        return Link(url=url, content=self._process_inline_tokens(children), title=title)

    @staticmethod
    def _plain_text(children: list[dict[str, Any]]) -> str | None:
        """Return the concatenated text of ``children`` if they are all text tokens."""
        if not children or any(child.get("type") != "text" for child in children):
            return None
        return "".join(child.get("raw", "") for child in children)

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        # Alt text is in children, not attrs
        alt_parts = [
            child.get("raw", "")
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "text"
        ]
        return Image(url=attrs.get("url", ""), alt_text="".join(alt_parts), title=attrs.get("title"))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak()

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _handle_inline_math_token(self, token: dict[str, Any]) -> MathInline:
        return MathInline(content=token.get("raw", ""))

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return FootnoteReference(identifier=str(token.get("raw", "")), index=attrs.get("index", 0))


def markdown_to_ast(markdown_content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to AST.

    This is a convenience function that creates a converter and parses
    the markdown in one step.

    Parameters
    ----------
    markdown_content : str or bytes
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from mdlatex.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
