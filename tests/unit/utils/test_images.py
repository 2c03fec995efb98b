#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_images.py
"""Unit tests for image path helpers."""

import pytest

from mdlatex.utils.images import is_remote_image, strip_extension


@pytest.mark.unit
class TestIsRemoteImage:
    """Tests for remote image detection."""

    @pytest.mark.parametrize("url", ["http://x/y.png", "https://example.com/a.jpg"])
    def test_remote(self, url: str) -> None:
        """Test that http and https URLs are remote."""
        assert is_remote_image(url)

    @pytest.mark.parametrize("url", ["pics/photo.jpg", "/abs/img.png", "ftp://host/a.png", "httpx.png", ""])
    def test_local(self, url: str) -> None:
        """Test that everything else is local."""
        assert not is_remote_image(url)


@pytest.mark.unit
class TestStripExtension:
    """Tests for extension stripping."""

    def test_strips_last_extension(self) -> None:
        """Test that only the final extension is removed."""
        assert strip_extension("pics/photo.jpg") == "pics/photo"
        assert strip_extension("fig.tar.gz") == "fig.tar"

    def test_no_extension(self) -> None:
        """Test paths without an extension."""
        assert strip_extension("figure") == "figure"
        assert strip_extension("archive.v2/figure") == "archive.v2/figure"

    def test_dot_file_unchanged(self) -> None:
        """Test that dot-files keep their name."""
        assert strip_extension(".hidden") == ".hidden"
        assert strip_extension("dir/.hidden") == "dir/.hidden"
