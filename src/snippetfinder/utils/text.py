"""Text helpers for previews and copy-ready content."""

from __future__ import annotations

from typing import Iterable

FENCE = "```"


def get_pastable_content(content: str) -> str:
    """Strip a surrounding code fence so the snippet body can be pasted as-is."""
    if not content:
        return ""
    stripped = content.strip()
    if stripped.startswith(FENCE) and stripped.endswith(FENCE):
        lines = stripped.split("\n")
        return "\n".join(lines[1:-1])
    return content


def first_lines(text: str, limit: int) -> str:
    """Keep at most ``limit`` newline-separated lines of ``text``."""
    return "\n".join(text.split("\n")[:limit])


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f}KB"
    return f"{size / (1024 * 1024):.1f}MB"


def normalize_excerpt(lines: Iterable[str]) -> str:
    """Lower-case and join excerpt lines for case-insensitive matching."""
    return "\n".join(line.rstrip("\r\n") for line in lines).lower()
