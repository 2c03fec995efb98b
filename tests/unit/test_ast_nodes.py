#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for AST node classes and visitor dispatch."""

import inspect

import pytest

from mdlatex import ast
from mdlatex.ast import Document, Heading, NodeVisitor, Text


@pytest.mark.unit
class TestNodes:
    """Tests for node construction."""

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_validated(self, level: int) -> None:
        """Test that headings outside 1-6 cannot be built."""
        with pytest.raises(ValueError):
            Heading(level=level)

    def test_default_containers_not_shared(self) -> None:
        """Test that default lists are per instance."""
        first, second = Document(), Document()
        first.children.append(Text(content="x"))
        assert second.children == []


@pytest.mark.unit
class TestVisitorDispatch:
    """Tests for accept/visit dispatch."""

    def test_every_node_has_a_visit_method(self) -> None:
        """Test that each concrete node dispatches to an abstract visitor method."""
        abstract = NodeVisitor.__abstractmethods__
        node_classes = [
            obj
            for name, obj in vars(ast).items()
            if inspect.isclass(obj) and issubclass(obj, ast.Node) and obj is not ast.Node
        ]
        assert node_classes

        class Recorder:
            def __getattr__(self, name: str):
                return lambda node: name

        for cls in node_classes:
            params = inspect.signature(cls).parameters
            kwargs = {
                name: (1 if name == "level" else False if name == "ordered" else "")
                for name, p in params.items()
                if p.default is inspect.Parameter.empty
            }
            visited = cls(**kwargs).accept(Recorder())
            assert visited in abstract, cls.__name__

    def test_incomplete_visitor_cannot_be_built(self) -> None:
        """Test that a visitor must handle every node type."""

        class Partial(NodeVisitor):
            def visit_text(self, node):
                return node.content

        with pytest.raises(TypeError):
            Partial()  # type: ignore[abstract]
