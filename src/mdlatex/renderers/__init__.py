#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdlatex/renderers/__init__.py
"""Construct renderers and the traversal engine that drives them.

- BaseRenderer: callback interface, one method per markdown construct
- LatexRenderer: LaTeX implementation of that interface
- RenderWalker: walks an AST and invokes the renderer callbacks

Examples
--------
Render an AST to LaTeX:

    >>> from mdlatex.renderers import LatexRenderer, RenderWalker
    >>> latex = RenderWalker(LatexRenderer()).render_to_string(doc)

"""

from mdlatex.renderers.base import BaseRenderer, BodyProducer
from mdlatex.renderers.latex import LatexRenderer
from mdlatex.renderers.walker import RenderWalker

__all__ = [
    "BaseRenderer",
    "BodyProducer",
    "LatexRenderer",
    "RenderWalker",
]
