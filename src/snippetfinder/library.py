"""Process-level state shared by the presentation layers."""

from __future__ import annotations

import logging
from typing import Iterable, List

from snippetfinder.config import AppConfig
from snippetfinder.index.cache import LRUCache
from snippetfinder.index.indexer import Indexer
from snippetfinder.index.search import filter_index
from snippetfinder.ingestion.loader import ContentLoader, FileContentLoader
from snippetfinder.ingestion.preview import PreviewLoader
from snippetfinder.models import Entry, ScanResult

LOGGER = logging.getLogger(__name__)


class SnippetLibrary:
    """Owns the current index and the preview cache.

    The cache is created once and lives as long as the library. Every reload
    publishes a fresh :class:`ScanResult`; readers holding the previous one keep
    a consistent view. Overlapping reloads are not cancelled, the last one to
    finish is the one that stays published.
    """

    def __init__(self, config: AppConfig | None = None, *, loader: ContentLoader | None = None) -> None:
        self.config = config or AppConfig()
        self.loader = loader or FileContentLoader()
        self.cache: LRUCache[str, str] = LRUCache(self.config.cache_capacity)
        self.previews = PreviewLoader(
            self.cache,
            self.loader,
            max_bytes=self.config.preview_bytes,
            max_lines=self.config.preview_lines,
            large_file_bytes=self.config.large_file_bytes,
        )
        self.current = ScanResult()

    async def reload(self, root_paths: Iterable[str] | None = None) -> ScanResult:
        roots = list(root_paths) if root_paths is not None else self.config.root_paths()
        result = await Indexer.from_config(self.config, loader=self.loader).ascan(roots)
        self.current = result
        return result

    def filter(self, folder: str | None, query: str) -> List[Entry]:
        return filter_index(self.current.entries, folder, query)

    def get(self, entry_id: str) -> Entry | None:
        return self.current.get(entry_id)

    async def preview(self, entry: Entry) -> str:
        return await self.previews.preview(entry)

    def content(self, entry: Entry) -> str:
        return self.loader.load_content(entry.full_path)
