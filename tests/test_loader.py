"""Tests for the filesystem content loader."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from snippetfinder.ingestion.loader import FileContentLoader


class TestFileContentLoader:
    """Test FileContentLoader."""

    def test_excerpt_first_lines_lowercased(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Excerpts hold the leading lines in lower case."""
        path = make_file(tmp_path / "a.md", "Title\r\nSecond LINE\nthird\n")

        excerpt, error = FileContentLoader().load_excerpt(path, 2)

        assert error is None
        assert excerpt == "title\nsecond line"

    def test_excerpt_zero_lines(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Zero lines skips reading."""
        path = make_file(tmp_path / "a.md", "content")

        assert FileContentLoader().load_excerpt(path, 0) == ("", None)

    def test_excerpt_error_is_returned(self, tmp_path: Path) -> None:
        """Failures come back as the second tuple item."""
        excerpt, error = FileContentLoader().load_excerpt(tmp_path / "missing.md", 3)

        assert excerpt == ""
        assert isinstance(error, FileNotFoundError)

    def test_read_head_is_bounded(self, tmp_path: Path) -> None:
        """read_head never returns more than requested."""
        path = tmp_path / "big.bin"
        path.write_bytes(b"0123456789" * 10)

        assert FileContentLoader().read_head(path, 15) == b"012345678901234"

    def test_read_head_missing_raises(self, tmp_path: Path) -> None:
        """Missing files raise OSError from read_head."""
        with pytest.raises(OSError):
            FileContentLoader().read_head(tmp_path / "missing", 10)

    def test_load_content_unwraps_fence(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Fenced snippets are returned without the fence lines."""
        path = make_file(tmp_path / "cmd.md", "```bash\necho hi\nls\n```\n")

        assert FileContentLoader().load_content(path) == "echo hi\nls"

    def test_load_content_plain(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Unfenced content is returned unchanged."""
        path = make_file(tmp_path / "plain.txt", "just text\n")

        assert FileContentLoader().load_content(path) == "just text\n"
