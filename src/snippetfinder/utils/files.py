"""Utility helpers for working with files and paths."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

HIDDEN_PREFIX = "."


def entry_id(full_path: Path | str) -> str:
    """Stable identity for an entry: MD5 hex digest of its absolute path string."""
    return hashlib.md5(str(full_path).encode("utf-8"), usedforsecurity=False).hexdigest()


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def expand_home_directory(path: str) -> str:
    """Expand a leading ``~`` to the current user's home directory."""
    if path.startswith("~"):
        rest = path[1:].lstrip("/\\")
        return os.path.join(str(Path.home()), rest) if rest else str(Path.home())
    return path


def contract_home_directory(path: Path | str) -> str:
    """Replace the home directory prefix with ``~`` for display."""
    text = str(path)
    home = str(Path.home())
    if home and home != "/" and (text == home or text.startswith(home + os.sep)):
        return "~" + text[len(home):]
    return text


def relative_folder(root: Path, full_path: Path) -> str:
    """Folder of ``full_path`` relative to ``root``; ``"."`` for files directly under it."""
    return Path(os.path.relpath(full_path, root)).parent.as_posix()
