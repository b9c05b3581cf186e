"""Folder and free-text filtering over a published index."""

from __future__ import annotations

from typing import List, Sequence

from snippetfinder.models import Entry

ALL_FOLDERS = "all"
FOLDER_PREFIX = "folder:"


def query_words(query: str) -> List[str]:
    return query.lower().split()


def matches(entry: Entry, query: str) -> bool:
    """True when the name or folder contains the whole query, or the excerpt holds every word."""
    needle = query.lower()
    if needle in entry.name.lower() or needle in entry.folder.lower():
        return True
    excerpt = entry.excerpt.lower()
    words = query_words(query)
    return bool(words) and all(word in excerpt for word in words)


def filter_by_query(entries: Sequence[Entry], query: str) -> List[Entry]:
    if not query.strip():
        return list(entries)
    return [entry for entry in entries if matches(entry, query)]


def filter_by_folder(entries: Sequence[Entry], folder: str | None) -> List[Entry]:
    """Keep entries whose folder equals ``folder``.

    ``None``, ``""`` and ``"all"`` leave the entries untouched; a ``"folder:"``
    prefix, as produced by folder pickers, is accepted and stripped.
    """
    if not folder or folder == ALL_FOLDERS:
        return list(entries)
    if folder.startswith(FOLDER_PREFIX):
        folder = folder[len(FOLDER_PREFIX):]
    return [entry for entry in entries if entry.folder == folder]


def filter_index(entries: Sequence[Entry], folder: str | None, query: str) -> List[Entry]:
    """Narrow an already ranked index by folder, then by query, without reordering."""
    return filter_by_query(filter_by_folder(entries, folder), query)
