#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/utils/images.py
"""Image reference helpers for the LaTeX renderer."""

from __future__ import annotations

import posixpath

from mdlatex.constants import REMOTE_IMAGE_PREFIXES


def is_remote_image(url: str) -> bool:
    """Return whether an image reference points at an http(s) URL.

    Remote images cannot be embedded with ``\\includegraphics`` and are
    rendered as hyperlinks instead.

    Examples
    --------
        >>> is_remote_image("https://example.com/a.png")
        True
        >>> is_remote_image("pics/a.png")
        False

    """
    return url.startswith(REMOTE_IMAGE_PREFIXES)


def strip_extension(path: str) -> str:
    """Return an image path without its final file extension.

    LaTeX picks the best available graphics format itself, so the source
    extension is dropped. Dot-files and paths whose last component has no
    dot are returned unchanged.

    Parameters
    ----------
    path : str
        Image path as written in the markdown source

    Returns
    -------
    str
        Path without extension

    Examples
    --------
        >>> strip_extension("pics/photo.jpg")
        'pics/photo'
        >>> strip_extension("archive.v2/figure")
        'archive.v2/figure'

    """
    # Leading dots are part of the name, so ".hidden" keeps its full name
    root, _ext = posixpath.splitext(path)
    return root
