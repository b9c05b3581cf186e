"""Core SnippetFinder data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Tuple

from snippetfinder.errors import ScanError


@dataclass(frozen=True, slots=True)
class Entry:
    """Metadata describing one discovered document. Holds no content."""

    id: str
    name: str
    folder: str
    full_path: Path
    file_size: int
    modified_time: float
    excerpt: str = ""

    @property
    def extension(self) -> str:
        return self.full_path.suffix

    @property
    def modified(self) -> datetime:
        return datetime.fromtimestamp(self.modified_time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "folder": self.folder,
            "full_path": str(self.full_path),
            "file_size": self.file_size,
            "modified_time": self.modified_time,
        }


@dataclass(frozen=True, slots=True)
class ScanResult:
    """One published index together with the errors gathered while building it."""

    entries: Tuple[Entry, ...] = ()
    errors: Tuple[ScanError, ...] = ()
    roots: Tuple[str, ...] = ()
    _by_id: Dict[str, Entry] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_id", {entry.id: entry for entry in self.entries})

    @property
    def folders(self) -> List[str]:
        return list(dict.fromkeys(entry.folder for entry in self.entries))

    def get(self, entry_id: str) -> Entry | None:
        return self._by_id.get(entry_id)

    def summary(self) -> str:
        if self.errors:
            return f"Loaded {len(self.entries)} snippets with {len(self.errors)} errors"
        return f"Loaded {len(self.entries)} snippets"


@dataclass(slots=True)
class CrawlResult:
    """Mutable accumulator used while walking a single root."""

    entries: List[Entry] = field(default_factory=list)
    errors: List[ScanError] = field(default_factory=list)
