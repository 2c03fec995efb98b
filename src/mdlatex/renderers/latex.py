#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/renderers/latex.py
"""LaTeX rendering backend.

This module provides the LatexRenderer class, which receives one callback
per markdown construct from a traversal engine and writes the matching
LaTeX markup to the shared output sink.

Headings, lists and paragraphs are written speculatively: the opening
markup goes out first, the continuation renders the children, and if it
reports that nothing was produced the sink is truncated back to where the
construct started. Empty wrappers therefore never reach the output.

"""

from __future__ import annotations

import logging
from typing import Sequence

from mdlatex.constants import (
    EMAIL_LINK_PREFIX,
    LATEX_ALIGNMENT_LETTERS,
    LATEX_CELL_SEPARATOR,
    LATEX_CONTENT_PACKAGES,
    LATEX_DEFAULT_ALIGNMENT_LETTER,
    LATEX_FONT_PACKAGES,
    LATEX_HEADING_COMMANDS,
    LATEX_HRULE_DEFINITION,
    LATEX_HYPERSETUP_ENTRIES,
    LATEX_PARAGRAPH_SPACING,
    LATEX_ROW_SEPARATOR,
    LATEX_UNICODE_SUBSTITUTIONS,
    Alignment,
    LinkKind,
    ListKind,
)
from mdlatex.exceptions import UnsupportedConstructError, ValidationError
from mdlatex.options.latex import LatexRendererOptions
from mdlatex.renderers.base import BaseRenderer, BodyProducer
from mdlatex.sink import ItemSink, OutputSink
from mdlatex.utils.escape import escape_latex, escape_latex_text
from mdlatex.utils.images import is_remote_image, strip_extension

logger = logging.getLogger(__name__)


class LatexRenderer(BaseRenderer):
    r"""Render markdown constructs as LaTeX.

    Parameters
    ----------
    options : LatexRendererOptions or None, default = None
        LaTeX rendering options (title, author, flags, creator)

    Examples
    --------
    Driving the renderer by hand:

        >>> from mdlatex.sink import OutputSink
        >>> renderer = LatexRenderer()
        >>> out = OutputSink()
        >>> renderer.emphasis(out, "word")
        >>> out.getvalue()
        '\\textit{word}'

    """

    def __init__(self, options: LatexRendererOptions | None = None):
        """Initialize the LaTeX renderer with options."""
        BaseRenderer._validate_options_type(options, LatexRendererOptions, "latex")
        options = options or LatexRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: LatexRendererOptions = options

    @property
    def flags(self) -> int:
        """Return the configured flag bitset (no flag alters output yet)."""
        return self.options.flags

    def _wrap_speculatively(self, out: OutputSink, produce_body: BodyProducer, opening: str, closing: str) -> bool:
        """Write ``opening``, the body, then ``closing``; roll back if the body is empty.

        Returns
        -------
        bool
            True if the construct was kept

        """
        marker = out.mark()
        out.write(opening)
        if not produce_body():
            out.truncate(marker)
            return False
        out.write(closing)
        return True

    def _unsupported(self, construct: str, detail: str) -> None:
        if self.options.fail_on_unsupported:
            raise UnsupportedConstructError(construct)
        logger.debug("LaTeX output has no rendering for %s: %s", construct, detail)

    # ------------------------------------------------------------------
    # Block-level constructs
    # ------------------------------------------------------------------

    def block_code(self, out: OutputSink, text: str, lang: str) -> None:
        """Render a code block in verbatim, or lstlisting when a language is given.

        The language is copied verbatim since it must match a listings
        language name.
        """
        if not lang:
            out.write("\n\\begin{verbatim}\n")
        else:
            out.write("\n\\begin{lstlisting}[language=")
            out.write(lang)
            out.write("]\n")

        out.write(text)

        if not lang:
            out.write("\n\\end{verbatim}\n")
        else:
            out.write("\n\\end{lstlisting}\n")

    def title_block(self, out: OutputSink, text: str) -> None:
        r"""Emit ``\maketitle`` when a title is configured.

        The title itself lives in the preamble, which is written before the
        title block is reached; ``text`` is therefore not used.
        """
        if self.options.title:
            out.write("\\maketitle\n")

    def block_quote(self, out: OutputSink, text: str) -> None:
        """Render a quotation environment."""
        out.write("\n\\begin{quotation}\n")
        out.write(text)
        out.write("\n\\end{quotation}\n")

    def block_html(self, out: OutputSink, text: str) -> None:
        """Render raw HTML literally in a verbatim environment."""
        out.write("\n\\begin{verbatim}\n")
        out.write(text)
        out.write("\n\\end{verbatim}\n")

    def heading(self, out: OutputSink, produce_body: BodyProducer, level: int, identifier: str = "") -> None:
        """Render a heading as a sectioning command.

        Levels 1-5 map to section through subparagraph; level 6 has no
        sectioning command and is set in bold.

        Raises
        ------
        ValidationError
            If level is not between 1 and 6

        """
        command = LATEX_HEADING_COMMANDS.get(level)
        if command is None:
            raise ValidationError(
                f"Heading level must be 1-6, got {level}", parameter_name="level", parameter_value=level
            )

        self._wrap_speculatively(out, produce_body, f"\n\\{command}{{", "}\n")

    def hrule(self, out: OutputSink) -> None:
        r"""Render the ``\HRule`` command defined in the preamble."""
        out.write("\n\\HRule\n")

    def list(self, out: OutputSink, produce_body: BodyProducer, kind: ListKind) -> None:
        """Render an enumerate or itemize environment."""
        env_name = "enumerate" if kind == "ordered" else "itemize"
        self._wrap_speculatively(out, produce_body, f"\n\\begin{{{env_name}}}\n", f"\n\\end{{{env_name}}}\n")

    def list_item(self, out: OutputSink, text: str, kind: ListKind) -> None:
        out.write("\n\\item ")
        out.write(text)

    def paragraph(self, out: OutputSink, produce_body: BodyProducer) -> None:
        """Render a paragraph separated by blank lines."""
        self._wrap_speculatively(out, produce_body, "\n", "\n")

    def table(self, out: OutputSink, header: str, body: str, alignments: Sequence[Alignment | None]) -> None:
        """Render a tabular environment.

        Parameters
        ----------
        out : OutputSink
            Destination sink
        header : str
            Header row, as joined by table_row
        body : str
            Body rows, as joined by table_row
        alignments : sequence
            Column alignments in column order; anything other than 'left' or
            'right' is centered

        """
        out.write("\n\\begin{tabular}{")
        out.write(self.column_spec(alignments))
        out.write("}\n")
        out.write(header)
        out.write(" \\\\\n\\hline\n")
        out.write(body)
        out.write("\n\\end{tabular}\n")

    @staticmethod
    def column_spec(alignments: Sequence[Alignment | None]) -> str:
        """Return the tabular column specification, one letter per column.

        Examples
        --------
            >>> LatexRenderer.column_spec(["left", "center", "right"])
            'lcr'

        """
        return "".join(
            LATEX_ALIGNMENT_LETTERS.get(align, LATEX_DEFAULT_ALIGNMENT_LETTER)  # type: ignore[arg-type]
            for align in alignments
        )

    def table_row(self, out: ItemSink, text: str) -> None:
        """Append a row, separated from the previous one by a row break."""
        if not out.begin_item():
            out.write(LATEX_ROW_SEPARATOR)
        out.write(text)

    def table_header_cell(self, out: ItemSink, text: str, align: Alignment | None) -> None:
        """Append a header cell; headers are set like body cells."""
        self.table_cell(out, text, align)

    def table_cell(self, out: ItemSink, text: str, align: Alignment | None) -> None:
        """Append a cell, separated from the previous one by a column separator.

        Alignment is expressed per column in the table specification, so
        ``align`` does not change the cell itself.
        """
        if not out.begin_item():
            out.write(LATEX_CELL_SEPARATOR)
        out.write(text)

    def footnotes(self, out: OutputSink, text: str) -> None:
        """Drop the footnote group; LaTeX footnotes are not rendered yet."""
        if self.options.fail_on_unsupported:
            raise UnsupportedConstructError("footnotes")
        if text:
            logger.warning("Footnotes are not supported in LaTeX output; %d characters dropped", len(text))

    def footnote_item(self, out: OutputSink, name: str, text: str, flags: int = 0) -> None:
        """Drop a footnote definition."""
        self._unsupported("footnote_item", name)

    # ------------------------------------------------------------------
    # Inline constructs
    # ------------------------------------------------------------------

    def autolink(self, out: OutputSink, link: str, kind: LinkKind) -> None:
        """Render an autolink; email addresses get a mailto: target."""
        out.write("\\href{")
        if kind == "email":
            out.write(EMAIL_LINK_PREFIX)
        out.write(link)
        out.write("}{")
        out.write(link)
        out.write("}")

    def code_span(self, out: OutputSink, text: str) -> None:
        """Render inline code in typewriter type.

        Verbatim environments are reserved for code blocks, so the raw code
        text is escaped here.
        """
        out.write("\\texttt{")
        escape_latex(out, text)
        out.write("}")

    def double_emphasis(self, out: OutputSink, text: str) -> None:
        out.write("\\textbf{")
        out.write(text)
        out.write("}")

    def emphasis(self, out: OutputSink, text: str) -> None:
        out.write("\\textit{")
        out.write(text)
        out.write("}")

    def triple_emphasis(self, out: OutputSink, text: str) -> None:
        out.write("\\textbf{\\textit{")
        out.write(text)
        out.write("}}")

    def strikethrough(self, out: OutputSink, text: str) -> None:
        # \sout comes from ulem, loaded with normalem in the preamble
        out.write("\\sout{")
        out.write(text)
        out.write("}")

    def image(self, out: OutputSink, link: str, title: str, alt: str) -> None:
        """Render an image.

        Remote images cannot be embedded and become a hyperlink on the alt
        text. Local images are included without their file extension so
        LaTeX can pick the format it supports.
        """
        if is_remote_image(link):
            out.write("\\href{")
            out.write(link)
            out.write("}{")
            out.write(alt)
            out.write("}")
        else:
            out.write("\\includegraphics{")
            out.write(strip_extension(link))
            out.write("}")

    def line_break(self, out: OutputSink) -> None:
        out.write(" \\\\\n")

    def link(self, out: OutputSink, link: str, title: str, content: str) -> None:
        """Render a hyperlink; the link title has no LaTeX counterpart."""
        out.write("\\href{")
        out.write(link)
        out.write("}{")
        out.write(content)
        out.write("}")

    def raw_html_tag(self, out: OutputSink, tag: str) -> None:
        """Drop inline HTML, which has no meaning in LaTeX."""
        logger.debug("Dropping inline HTML tag %r", tag)

    def footnote_ref(self, out: OutputSink, ref: str, index: int) -> None:
        """Drop a footnote reference."""
        self._unsupported("footnote_ref", ref)

    def entity(self, out: OutputSink, entity: str) -> None:
        """Write an entity reference unchanged.

        Entities are not decoded yet; the reference text is passed through
        as-is.
        """
        self._unsupported("entity", entity)
        out.write(entity)

    def normal_text(self, out: OutputSink, text: str) -> None:
        escape_latex(out, text)

    def math(self, out: OutputSink, equation: str, inline: bool) -> None:
        """Render math in inline or display delimiters; the equation is not escaped."""
        out.write("\\(" if inline else "\\[")
        out.write(equation)
        out.write("\\)" if inline else "\\]")

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------

    def document_header(self, out: OutputSink) -> None:
        """Write the preamble through ``\\begin{document}``.

        Title, author and creator are escaped; the title is only typeset
        later by title_block.
        """
        out.write(f"\\documentclass{{{self.options.document_class}}}\n")
        self._write_packages(out, LATEX_FONT_PACKAGES)
        for code_point, replacement in LATEX_UNICODE_SUBSTITUTIONS:
            out.write(f"\\DeclareUnicodeCharacter{{{code_point}}}{{{replacement}}}\n")
        out.write("\n")
        self._write_packages(out, LATEX_CONTENT_PACKAGES)

        out.write("\n\\title{")
        escape_latex(out, self.options.title)
        out.write("}\n\\author{")
        escape_latex(out, self.options.author)
        out.write("}\n\n")

        self._write_hypersetup(out)

        out.write("\n")
        out.write(LATEX_HRULE_DEFINITION)
        out.write(LATEX_PARAGRAPH_SPACING)
        out.write("\n\\begin{document}\n")

    @staticmethod
    def _write_packages(out: OutputSink, packages: Sequence[tuple[str, str]]) -> None:
        for package_options, package in packages:
            if package_options:
                out.write(f"\\usepackage[{package_options}]{{{package}}}\n")
            else:
                out.write(f"\\usepackage{{{package}}}\n")

    def _write_hypersetup(self, out: OutputSink) -> None:
        entries = [f"{entry},%" for entry in LATEX_HYPERSETUP_ENTRIES]
        if self.options.creator is not None:
            entries.append("pdfauthor={" + escape_latex_text(self.options.creator) + "}")
        else:
            # The last entry must not end with a comma
            entries[-1] = entries[-1].rstrip(",%")

        out.write("\\hypersetup{")
        out.write("\n  ".join(entries))
        out.write("}\n")

    def document_footer(self, out: OutputSink) -> None:
        out.write("\n\\end{document}\n")
