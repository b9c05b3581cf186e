"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Mapping, Sequence, Tuple

from snippetfinder.errors import ConfigurationError
from snippetfinder.utils.files import expand_home_directory

DEFAULT_EXTENSIONS = "md,txt,yaml,yml,json,sh"

ENV_PREFIX = "SNIPPETFINDER_"


def parse_extensions(value: str | Iterable[str]) -> Tuple[str, ...]:
    """Turn ``"md, txt"`` (or an iterable of items) into ``(".md", ".txt")``."""
    items = value.split(",") if isinstance(value, str) else value
    extensions: list[str] = []
    for item in items:
        item = item.strip()
        if not item:
            continue
        extension = item if item.startswith(".") else "." + item
        if extension not in extensions:
            extensions.append(extension)
    return tuple(extensions)


def split_paths(value: str | Sequence[str] | None) -> List[str]:
    if value is None:
        return []
    items = value.split(",") if isinstance(value, str) else list(value)
    return [item.strip() for item in items if item and item.strip()]


def resolve_roots(paths: Iterable[str | Path]) -> List[str]:
    """Home-expand roots and drop exact-string duplicates, keeping first occurrence."""
    return list(dict.fromkeys(expand_home_directory(str(path)) for path in paths))


def _int_setting(environ: Mapping[str, str], name: str, default: int | None) -> int | None:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(ENV_PREFIX + name, f"expected an integer, got {raw!r}") from exc


@dataclass(slots=True)
class AppConfig:
    folder_path: Path | None = None
    secondary_folder_paths: List[str] = field(default_factory=list)
    supported_extensions: Tuple[str, ...] = parse_extensions(DEFAULT_EXTENSIONS)
    priority_extensions: Tuple[str, ...] | None = None
    search_index_lines: int = 3
    cache_capacity: int = 50
    preview_bytes: int = 2048
    preview_lines: int = 50
    large_file_bytes: int = 1024 * 1024
    max_concurrency: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.secondary_folder_paths, str):
            self.secondary_folder_paths = split_paths(self.secondary_folder_paths)
        self.supported_extensions = parse_extensions(self.supported_extensions)
        if self.priority_extensions is None:
            self.priority_extensions = self.supported_extensions
        else:
            self.priority_extensions = parse_extensions(self.priority_extensions)
        if self.max_concurrency is not None and self.max_concurrency < 1:
            self.max_concurrency = None

    def root_paths(self) -> List[str]:
        paths: list[str] = []
        if self.folder_path is not None:
            paths.append(str(self.folder_path))
        paths.extend(self.secondary_folder_paths)
        return resolve_roots(paths)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        environ = os.environ if environ is None else environ
        folder = environ.get(ENV_PREFIX + "FOLDER")
        return cls(
            folder_path=Path(folder) if folder else None,
            secondary_folder_paths=split_paths(environ.get(ENV_PREFIX + "SECONDARY_FOLDERS")),
            supported_extensions=parse_extensions(
                environ.get(ENV_PREFIX + "EXTENSIONS") or DEFAULT_EXTENSIONS
            ),
            search_index_lines=_int_setting(environ, "SEARCH_LINES", 3),
            cache_capacity=_int_setting(environ, "CACHE_SIZE", 50),
            max_concurrency=_int_setting(environ, "MAX_CONCURRENCY", None),
        )
