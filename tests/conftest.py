"""Shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, List, Tuple

import pytest

from snippetfinder.utils.text import get_pastable_content


class CountingLoader:
    """In-memory content loader that records every read."""

    def __init__(self, files: dict[str, bytes] | None = None, *, fail: bool = False) -> None:
        self.files = files or {}
        self.fail = fail
        self.head_reads: List[Tuple[Path, int]] = []

    def load_excerpt(self, path: Path, lines: int) -> Tuple[str, Exception | None]:
        text = self.files.get(str(path), b"").decode("utf-8")
        return "\n".join(text.split("\n")[:lines]).lower(), None

    def read_head(self, path: Path, max_bytes: int) -> bytes:
        self.head_reads.append((Path(path), max_bytes))
        if self.fail:
            raise PermissionError(13, "Permission denied", str(path))
        try:
            return self.files[str(path)][:max_bytes]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", str(path)) from None

    def load_content(self, path: Path) -> str:
        return get_pastable_content(self.files[str(path)].decode("utf-8"))


@pytest.fixture
def counting_loader() -> CountingLoader:
    return CountingLoader()


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Create a file with optional content and modification time."""

    def _make(path: Path, content: str = "", mtime: float | None = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _make
