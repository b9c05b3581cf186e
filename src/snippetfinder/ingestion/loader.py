"""Filesystem-backed content loading.

The crawler and the preview loader never open files themselves; they go
through a ``ContentLoader`` so tests (and other front ends) can substitute
their own source of bytes.
"""

from __future__ import annotations

import logging
from itertools import islice
from pathlib import Path
from typing import Protocol, Tuple

from snippetfinder.utils.text import get_pastable_content, normalize_excerpt

LOGGER = logging.getLogger(__name__)

ENCODING = "utf-8"


class ContentLoader(Protocol):
    def load_excerpt(self, path: Path, lines: int) -> Tuple[str, Exception | None]:
        ...

    def read_head(self, path: Path, max_bytes: int) -> bytes:
        ...

    def load_content(self, path: Path) -> str:
        ...


class FileContentLoader:
    """Reads entries straight from disk as UTF-8 text."""

    def load_excerpt(self, path: Path, lines: int) -> Tuple[str, Exception | None]:
        """Return the first ``lines`` lines lower-cased, or ``("", error)`` on failure."""
        if lines <= 0:
            return "", None
        try:
            with Path(path).open("r", encoding=ENCODING, errors="replace") as handle:
                return normalize_excerpt(islice(handle, lines)), None
        except OSError as exc:
            LOGGER.debug("Could not read excerpt from %s: %s", path, exc)
            return "", exc

    def read_head(self, path: Path, max_bytes: int) -> bytes:
        with Path(path).open("rb") as handle:
            return handle.read(max_bytes)

    def load_content(self, path: Path) -> str:
        """Full text of the entry, unwrapped from a surrounding code fence."""
        text = Path(path).read_text(encoding=ENCODING, errors="replace")
        return get_pastable_content(text)
