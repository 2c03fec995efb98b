#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/api.py
"""High-level entry points.

render_latex turns an existing AST into a LaTeX document;
markdown_to_latex runs the markdown front end first.

"""

from __future__ import annotations

import logging
from typing import Union

from mdlatex.ast.nodes import Document
from mdlatex.options.latex import LatexRendererOptions
from mdlatex.options.markdown import MarkdownParserOptions
from mdlatex.parsers.markdown import MarkdownToAstConverter
from mdlatex.renderers.latex import LatexRenderer
from mdlatex.renderers.walker import RenderWalker

logger = logging.getLogger(__name__)


def render_latex(document: Document, options: LatexRendererOptions | None = None) -> str:
    """Render an AST document as a complete LaTeX file.

    Parameters
    ----------
    document : Document
        Document to render
    options : LatexRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        LaTeX source, preamble through ``\\end{document}``

    """
    return RenderWalker(LatexRenderer(options)).render_to_string(document)


def markdown_to_latex(
    source: Union[str, bytes],
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: LatexRendererOptions | None = None,
) -> str:
    """Convert markdown source to a complete LaTeX file.

    A title or author found in a leading ``%`` title block fills in the
    corresponding renderer option when that option is left empty.

    Parameters
    ----------
    source : str or bytes
        Markdown source
    parser_options : MarkdownParserOptions or None, default = None
        Markdown front-end options
    renderer_options : LatexRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        LaTeX source

    Examples
    --------
        >>> latex = markdown_to_latex("% Notes\\n\\nHello *world*")
        >>> "\\\\title{Notes}" in latex
        True

    """
    document = MarkdownToAstConverter(parser_options).parse(source)

    options = renderer_options or LatexRendererOptions()
    updates = {}
    for name in ("title", "author"):
        value = document.metadata.get(name)
        if value and not getattr(options, name):
            updates[name] = value
    if updates:
        logger.debug("Taking %s from the title block", ", ".join(sorted(updates)))
        options = options.create_updated(**updates)

    return render_latex(document, options)
