#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The node classes describe the markdown constructs the LaTeX backend renders;
the visitor base class dispatches over them.

Examples
--------
Basic usage:

    >>> from mdlatex.ast import Document, Heading, Text
    >>> from mdlatex.api import render_latex
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> latex = render_latex(doc)

"""

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

__all__ = [
    "AutoLink",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "EntityReference",
    "FootnoteDefinition",
    "FootnoteReference",
    "Footnotes",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "MathBlock",
    "MathInline",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "StrongEmphasis",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
]
