"""Tests for file utility functions."""

from __future__ import annotations

import hashlib
from pathlib import Path
from unittest.mock import patch

from snippetfinder.utils.files import (
    contract_home_directory,
    entry_id,
    expand_home_directory,
    is_hidden,
    relative_folder,
)


class TestEntryId:
    """Test entry_id function."""

    def test_md5_of_path(self) -> None:
        """The id is the MD5 hex digest of the path string."""
        assert entry_id("/a/b.md") == hashlib.md5(b"/a/b.md").hexdigest()

    def test_path_and_string_agree(self) -> None:
        """Path objects hash like their string form."""
        assert entry_id(Path("/a/b.md")) == entry_id("/a/b.md")

    def test_distinct_paths(self) -> None:
        """Different paths give different ids."""
        assert entry_id("/a/b.md") != entry_id("/a/c.md")


class TestIsHidden:
    """Test is_hidden function."""

    def test_dot_prefix(self) -> None:
        """Only leading dots count."""
        assert is_hidden(".git")
        assert not is_hidden("notes.md")


class TestHomeDirectory:
    """Test home expansion helpers."""

    def test_expand(self, tmp_path: Path) -> None:
        """~ and ~/x are expanded; other paths are untouched."""
        with patch("snippetfinder.utils.files.Path.home", return_value=tmp_path):
            assert expand_home_directory("~") == str(tmp_path)
            assert expand_home_directory("~/snips") == str(tmp_path / "snips")
            assert expand_home_directory("/abs/~") == "/abs/~"

    def test_contract(self, tmp_path: Path) -> None:
        """The home prefix is shown as ~."""
        with patch("snippetfinder.utils.files.Path.home", return_value=tmp_path):
            assert contract_home_directory(tmp_path / "a.md") == "~/a.md"
            assert contract_home_directory("/elsewhere/a.md") == "/elsewhere/a.md"

    def test_contract_ignores_sibling_prefix(self, tmp_path: Path) -> None:
        """A directory that merely shares the prefix is not contracted."""
        with patch("snippetfinder.utils.files.Path.home", return_value=tmp_path):
            assert contract_home_directory(f"{tmp_path}-other/a.md") == f"{tmp_path}-other/a.md"


class TestRelativeFolder:
    """Test relative_folder function."""

    def test_top_level(self) -> None:
        """Files directly under the root report '.'."""
        assert relative_folder(Path("/r"), Path("/r/a.md")) == "."

    def test_nested(self) -> None:
        """Nested files report the path between root and file."""
        assert relative_folder(Path("/r"), Path("/r/x/y/a.md")) == "x/y"
