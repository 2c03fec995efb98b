#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for parser and renderer options.

This module defines the foundation classes for the options used by the
markdown front end and the LaTeX renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdlatex.constants import DEFAULT_CREATOR


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    creator : str or None, default "mdlatex"
        Creator application name embedded in the rendered document metadata.
        Set to None to leave the creator out.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    creator: str | None = field(
        default=DEFAULT_CREATOR,
        metadata={
            "help": "Creator application name for document metadata (e.g., 'mdlatex'). "
            "Set to None to disable creator metadata.",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options (nothing to check at this level)."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate base parser options (nothing to check at this level)."""
        pass
