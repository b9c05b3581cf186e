"""Tests for the shared library state."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable

from snippetfinder.config import AppConfig
from snippetfinder.library import SnippetLibrary


class TestSnippetLibrary:
    """Test SnippetLibrary."""

    def test_reload_publishes_new_index(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Reload replaces the current index wholesale."""
        make_file(tmp_path / "a.md")
        library = SnippetLibrary(AppConfig(folder_path=tmp_path))

        first = asyncio.run(library.reload())
        make_file(tmp_path / "b.md")
        second = asyncio.run(library.reload())

        assert library.current is second
        assert len(first.entries) == 1
        assert len(second.entries) == 2

    def test_reload_with_explicit_roots(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Explicit roots override the configured ones."""
        make_file(tmp_path / "other" / "x.txt")
        library = SnippetLibrary(AppConfig(folder_path=tmp_path / "unused"))

        result = asyncio.run(library.reload([str(tmp_path / "other")]))

        assert [entry.name for entry in result.entries] == ["x"]
        assert result.errors == ()

    def test_filter_and_get(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Filtering works on the published index and ids resolve to entries."""
        make_file(tmp_path / "shell" / "compose.md", "docker compose up")
        make_file(tmp_path / "git" / "rebase.md", "git rebase -i")
        library = SnippetLibrary(AppConfig(folder_path=tmp_path))
        asyncio.run(library.reload())

        matches = library.filter(None, "docker up")

        assert [entry.name for entry in matches] == ["compose"]
        assert library.get(matches[0].id) == matches[0]
        assert [entry.name for entry in library.filter("folder:git", "")] == ["rebase"]

    def test_preview_cache_is_shared(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Previews land in the library-wide cache."""
        make_file(tmp_path / "a.md", "hello")
        library = SnippetLibrary(AppConfig(folder_path=tmp_path, cache_capacity=3))
        result = asyncio.run(library.reload())
        entry = result.entries[0]

        assert asyncio.run(library.preview(entry)) == "hello"
        assert entry.id in library.cache
        assert library.cache.capacity == 3

    def test_content(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """Full content is paste-ready."""
        make_file(tmp_path / "a.md", "```\nrm -rf build\n```")
        library = SnippetLibrary(AppConfig(folder_path=tmp_path))
        entry = asyncio.run(library.reload()).entries[0]

        assert library.content(entry) == "rm -rf build"
