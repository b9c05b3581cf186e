"""Bounded, cached previews of entry content."""

from __future__ import annotations

import asyncio
import logging

from snippetfinder.errors import PreviewReadError
from snippetfinder.index.cache import LRUCache
from snippetfinder.ingestion.loader import ENCODING, ContentLoader, FileContentLoader
from snippetfinder.models import Entry
from snippetfinder.utils.text import first_lines

LOGGER = logging.getLogger(__name__)

PREVIEW_BYTES = 2048
PREVIEW_LINES = 50
LARGE_FILE_BYTES = 1024 * 1024
LARGE_FILE_NOTICE = "\n\n[... Large file - use copy action for full content ...]"
ERROR_PREFIX = "Error loading preview: "


class PreviewLoader:
    """Serves previews from ``cache`` and reads at most ``max_bytes`` on a miss.

    Read failures are returned (and cached) as text, so a broken entry is not
    re-read until it falls out of the cache. Concurrent requests for the same
    entry may both read; the last one to finish wins the cache slot.
    """

    def __init__(
        self,
        cache: LRUCache[str, str],
        loader: ContentLoader | None = None,
        *,
        max_bytes: int = PREVIEW_BYTES,
        max_lines: int = PREVIEW_LINES,
        large_file_bytes: int = LARGE_FILE_BYTES,
    ) -> None:
        self.cache = cache
        self.loader = loader or FileContentLoader()
        self.max_bytes = max_bytes
        self.max_lines = max_lines
        self.large_file_bytes = large_file_bytes

    async def preview(self, entry: Entry) -> str:
        cached = self.cache.get(entry.id)
        if cached is not None:
            return cached

        try:
            head = await asyncio.to_thread(self.loader.read_head, entry.full_path, self.max_bytes)
        except Exception as exc:
            error = PreviewReadError(entry.full_path, exc)
            LOGGER.warning("%s", error)
            text = ERROR_PREFIX + error.reason
        else:
            text = self.render(head, entry.file_size)

        self.cache.set(entry.id, text)
        return text

    def preview_sync(self, entry: Entry) -> str:
        return asyncio.run(self.preview(entry))

    def render(self, head: bytes, file_size: int) -> str:
        # The byte budget may split a multi-byte character at the end.
        text = first_lines(head.decode(ENCODING, errors="replace"), self.max_lines)
        if file_size > self.large_file_bytes:
            text += LARGE_FILE_NOTICE
        return text
