"""Default presentation order for an index."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from snippetfinder.models import Entry


def extension_priority(priority_order: Sequence[str]) -> Dict[str, int]:
    """Map each extension to its rank; the first occurrence of a duplicate wins."""
    priority: Dict[str, int] = {}
    for index, extension in enumerate(priority_order):
        priority.setdefault(extension, index)
    return priority


def rank_entries(entries: Iterable[Entry], priority_order: Sequence[str]) -> List[Entry]:
    """Sort by extension priority, then newest modification first.

    Extensions missing from ``priority_order`` rank after all listed ones.
    The sort is stable, so fully tied entries keep their input order.
    """
    priority = extension_priority(priority_order)
    lowest = len(priority_order)
    return sorted(
        entries,
        key=lambda entry: (priority.get(entry.extension, lowest), -entry.modified_time),
    )
