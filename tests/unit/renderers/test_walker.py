#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_walker.py
"""Unit tests for the render walker.

Tests cover:
- Whole-document output (header, body, footer)
- Rollback of empty headings, paragraphs and lists
- Tight and loose list items
- Table header, body and column alignment
- Inline nesting
- One-shot continuations
- Unsupported constructs reaching the renderer

"""

import pytest

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
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    MathBlock,
    MathInline,
    Paragraph,
    Strong,
    StrongEmphasis,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from mdlatex.exceptions import RenderingError, UnsupportedConstructError
from mdlatex.options.latex import LatexRendererOptions
from mdlatex.renderers.latex import LatexRenderer
from mdlatex.renderers.walker import RenderWalker
from mdlatex.sink import OutputSink

END = "\n\\end{document}\n"


def body_of(result: str) -> str:
    """Helper to strip the preamble and the end marker from rendered output.

    Parameters
    ----------
    result : str
        Complete rendered document

    Returns
    -------
    str
        Text between ``\\begin{document}`` and the end marker

    """
    start = result.index("\\begin{document}\n") + len("\\begin{document}\n")
    assert result.endswith(END)
    return result[start : -len(END)]


def render_body(*children, options: LatexRendererOptions | None = None) -> str:
    """Helper to render block nodes and return the document body."""
    walker = RenderWalker(LatexRenderer(options))
    return body_of(walker.render_to_string(Document(children=list(children))))


def para(*inlines) -> Paragraph:
    """Helper to build a paragraph from inline nodes or strings."""
    return Paragraph(content=[Text(content=i) if isinstance(i, str) else i for i in inlines])


def cell(text: str, alignment=None) -> TableCell:
    """Helper to build a single-text table cell."""
    return TableCell(content=[Text(content=text)], alignment=alignment)


class DoubleBodyRenderer(LatexRenderer):
    """Renderer that illegally runs a paragraph continuation twice."""

    def paragraph(self, out: OutputSink, produce_body) -> None:
        produce_body()
        produce_body()


@pytest.mark.unit
class TestDocumentRendering:
    """Tests for whole-document rendering."""

    def test_simple_document(self, walker: RenderWalker, simple_document: Document) -> None:
        """Test the body of a one-paragraph document."""
        result = walker.render_to_string(simple_document)
        assert result.startswith("\\documentclass{article}\n")
        assert body_of(result) == "\nHello, World!\n"

    def test_empty_document(self, walker: RenderWalker) -> None:
        """Test that an empty document is still complete."""
        result = walker.render_to_string(Document())
        assert "\\begin{document}\n" in result
        assert body_of(result) == ""

    def test_walker_reusable(self, walker: RenderWalker, simple_document: Document) -> None:
        """Test that consecutive passes produce identical output."""
        first = walker.render_to_string(simple_document)
        second = walker.render_to_string(simple_document)
        assert first == second

    def test_title_block_with_title(self) -> None:
        """Test that a configured title is typeset first."""
        result = render_body(para("x"), options=LatexRendererOptions(title="T"))
        assert result == "\\maketitle\n\nx\n"

    def test_text_escaped(self) -> None:
        """Test that paragraph text is escaped."""
        assert render_body(para("a_b & c")) == "\na\\_b \\& c\n"


@pytest.mark.unit
class TestRollback:
    """Tests for empty constructs leaving no trace."""

    def test_empty_heading(self) -> None:
        """Test that a heading without content is dropped."""
        assert render_body(Heading(level=1, content=[]), para("x")) == "\nx\n"

    def test_heading_with_only_inline_html(self) -> None:
        """Test that a heading whose content renders to nothing is dropped."""
        assert render_body(Heading(level=2, content=[HTMLInline(content="<br>")])) == ""

    def test_empty_paragraph(self) -> None:
        """Test that an empty paragraph is dropped."""
        assert render_body(Paragraph(content=[])) == ""

    def test_empty_list(self) -> None:
        """Test that a list without items is dropped."""
        assert render_body(List(ordered=True, items=[])) == ""

    def test_heading(self) -> None:
        """Test a non-empty heading."""
        assert render_body(Heading(level=3, content=[Text(content="Part")])) == "\n\\subsubsection{Part}\n"


@pytest.mark.unit
class TestListRendering:
    """Tests for lists."""

    def test_tight_list(self) -> None:
        """Test that tight items carry bare text."""
        items = [
            ListItem(children=[Paragraph(content=[Text(content="a")], tight=True)]),
            ListItem(children=[Paragraph(content=[Text(content="b")], tight=True)]),
        ]
        result = render_body(List(ordered=False, items=items))
        assert result == "\n\\begin{itemize}\n\n\\item a\n\\item b\n\\end{itemize}\n"

    def test_loose_list(self) -> None:
        """Test that loose items keep paragraph spacing."""
        result = render_body(List(ordered=True, items=[ListItem(children=[para("a")])], tight=False))
        assert result == "\n\\begin{enumerate}\n\n\\item \na\n\n\\end{enumerate}\n"

    def test_nested_list_kind_restored(self) -> None:
        """Test that a nested list does not change its parent's kind."""
        inner = List(ordered=True, items=[ListItem(children=[Paragraph(content=[Text(content="i")], tight=True)])])
        outer = List(
            ordered=False,
            items=[
                ListItem(children=[Paragraph(content=[Text(content="o")], tight=True), inner]),
                ListItem(children=[Paragraph(content=[Text(content="p")], tight=True)]),
            ],
        )
        result = render_body(outer)
        assert result.startswith("\n\\begin{itemize}\n")
        assert "\\begin{enumerate}\n\n\\item i\n\\end{enumerate}\n" in result
        assert result.endswith("\n\\item p\n\\end{itemize}\n")


@pytest.mark.unit
class TestTableRendering:
    """Tests for tables."""

    def test_table_with_header(self) -> None:
        """Test header, body and column spec."""
        table = Table(
            header=TableRow(cells=[cell("h1"), cell("h2")], is_header=True),
            rows=[TableRow(cells=[cell("a"), cell("b")]), TableRow(cells=[cell("c"), cell("d")])],
            alignments=["left", "right"],
        )
        result = render_body(table)
        assert result == "\n\\begin{tabular}{lr}\nh1 & h2 \\\\\n\\hline\na & b \\\\\nc & d\n\\end{tabular}\n"

    def test_table_without_header(self) -> None:
        """Test a table with only body rows."""
        table = Table(rows=[TableRow(cells=[cell("a"), cell("b")])], alignments=[None, None])
        assert render_body(table) == "\n\\begin{tabular}{cc}\n \\\\\n\\hline\na & b\n\\end{tabular}\n"

    def test_cell_text_escaped(self) -> None:
        """Test that cell content is escaped."""
        table = Table(rows=[TableRow(cells=[cell("50%"), cell("$5")])], alignments=["center", "center"])
        assert "50\\% & \\$5" in render_body(table)


@pytest.mark.unit
class TestInlineRendering:
    """Tests for inline nodes inside paragraphs."""

    def test_nested_emphasis(self) -> None:
        """Test that inline wrappers nest."""
        node = Strong(content=[Text(content="bold "), Emphasis(content=[Text(content="both")])])
        assert render_body(para(node)) == "\n\\textbf{bold \\textit{both}}\n"

    def test_strong_emphasis(self) -> None:
        """Test combined strong and emphasis."""
        assert render_body(para(StrongEmphasis(content=[Text(content="x")]))) == "\n\\textbf{\\textit{x}}\n"

    def test_code_and_math(self) -> None:
        """Test inline code and inline math."""
        result = render_body(para(Code(content="a_b"), " and ", MathInline(content="x_1")))
        assert result == "\n\\texttt{a\\_b} and \\(x_1\\)\n"

    def test_links_and_images(self) -> None:
        """Test link, autolinks and images."""
        result = render_body(
            para(
                Link(url="http://a.org", content=[Text(content="site")]),
                " ",
                AutoLink(url="me@a.org", kind="email"),
                " ",
                Image(url="http://x/y.png", alt_text="cap"),
                " ",
                Image(url="pics/photo.jpg"),
            )
        )
        assert "\\href{http://a.org}{site}" in result
        assert "\\href{mailto:me@a.org}{me@a.org}" in result
        assert "\\href{http://x/y.png}{cap}" in result
        assert "\\includegraphics{pics/photo}" in result

    def test_line_breaks(self) -> None:
        """Test hard and soft line breaks."""
        result = render_body(para("a", LineBreak(), "b", LineBreak(soft=True), "c"))
        assert result == "\na \\\\\nb\nc\n"


@pytest.mark.unit
class TestBlockRendering:
    """Tests for the remaining blocks."""

    def test_code_block(self) -> None:
        """Test code block with language."""
        result = render_body(CodeBlock(content="fmt.Println()", language="go"))
        assert result == "\n\\begin{lstlisting}[language=go]\nfmt.Println()\n\\end{lstlisting}\n"

    def test_block_quote(self) -> None:
        """Test block quote around a paragraph."""
        assert render_body(BlockQuote(children=[para("q")])) == "\n\\begin{quotation}\n\nq\n\n\\end{quotation}\n"

    def test_thematic_break_and_math(self) -> None:
        """Test rule and display math."""
        assert render_body(ThematicBreak(), MathBlock(content="a^2")) == "\n\\HRule\n\\[a^2\\]"


@pytest.mark.unit
class TestContinuations:
    """Tests for continuation semantics."""

    def test_continuation_is_one_shot(self) -> None:
        """Test that running a continuation twice raises."""
        walker = RenderWalker(DoubleBodyRenderer())
        with pytest.raises(RenderingError):
            walker.render_to_string(Document(children=[para("x")]))


@pytest.mark.unit
class TestUnsupportedNodes:
    """Tests for footnotes and entities reaching the renderer."""

    def test_footnotes_degraded(self) -> None:
        """Test that footnotes and references produce no output."""
        result = render_body(
            para("see", FootnoteReference(identifier="n", index=1)),
            Footnotes(items=[FootnoteDefinition(identifier="n", content=[para("note")], index=1)]),
        )
        assert result == "\nsee\n"

    def test_entity_passthrough(self) -> None:
        """Test that entity references are written verbatim."""
        assert render_body(para("a ", EntityReference(content="&copy;"))) == "\na &copy;\n"

    def test_fail_on_unsupported(self) -> None:
        """Test that footnote references raise when configured to."""
        options = LatexRendererOptions(fail_on_unsupported=True)
        with pytest.raises(UnsupportedConstructError):
            render_body(para("x", FootnoteReference(identifier="n")), options=options)
