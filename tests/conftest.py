"""Pytest configuration and shared fixtures for the mdlatex test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from mdlatex.ast import Document, Paragraph, Text
from mdlatex.renderers import LatexRenderer, RenderWalker

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def renderer() -> LatexRenderer:
    """Provide a LaTeX renderer with default options."""
    return LatexRenderer()


@pytest.fixture
def walker(renderer: LatexRenderer) -> RenderWalker:
    """Provide a walker driving the default LaTeX renderer."""
    return RenderWalker(renderer)


@pytest.fixture
def simple_document() -> Document:
    """Provide a one-paragraph document."""
    return Document(children=[Paragraph(content=[Text(content="Hello, World!")])])
