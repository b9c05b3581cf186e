"""Concurrent directory crawler producing metadata-only entries."""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import nullcontext
from pathlib import Path
from stat import S_ISREG
from typing import Any, Callable, Iterable, List, Tuple, TypeVar

from snippetfinder.errors import (
    ConfigurationError,
    DirectoryReadError,
    ExcerptReadError,
    FileStatError,
)
from snippetfinder.ingestion.loader import ContentLoader, FileContentLoader
from snippetfinder.models import CrawlResult, Entry
from snippetfinder.utils.files import entry_id, is_hidden, relative_folder

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def list_directory(path: Path) -> List[Tuple[str, bool]]:
    """Return ``(name, is_directory)`` pairs for the children of ``path``.

    Symlinked directories are reported as non-directories so links cannot
    create cycles; symlinked files are still picked up by extension.
    """
    with os.scandir(path) as entries:
        return [(item.name, item.is_dir(follow_symlinks=False)) for item in entries]


def make_entry(root: Path, full_path: Path, stat: os.stat_result, excerpt: str = "") -> Entry:
    return Entry(
        id=entry_id(full_path),
        name=full_path.stem,
        folder=relative_folder(root, full_path),
        full_path=full_path,
        file_size=stat.st_size,
        modified_time=stat.st_mtime,
        excerpt=excerpt,
    )


class Crawler:
    """Walks one root directory, fanning out one task per child at every level.

    I/O failures never propagate out of :meth:`crawl`; they are recorded as
    scan errors next to whatever entries could be produced. Pass a shared
    ``asyncio.Semaphore`` as ``limiter`` to cap in-flight filesystem calls.
    """

    def __init__(
        self,
        extensions: Iterable[str],
        *,
        loader: ContentLoader | None = None,
        excerpt_lines: int = 0,
    ) -> None:
        self.extensions = frozenset(extensions)
        self.loader = loader or FileContentLoader()
        self.excerpt_lines = excerpt_lines

    async def crawl(self, root: str | Path, *, limiter: asyncio.Semaphore | None = None) -> CrawlResult:
        result = CrawlResult()
        if not str(root).strip():
            result.errors.append(ConfigurationError(str(root), "empty root path"))
            return result

        root_path = Path(os.path.abspath(root))
        if not os.path.exists(root_path):
            result.errors.append(ConfigurationError(root_path, "root directory does not exist"))
            return result
        if not os.path.isdir(root_path):
            result.errors.append(ConfigurationError(root_path, "root path is not a directory"))
            return result

        await _Walk(self, root_path, result, limiter).read_directory(root_path)
        LOGGER.debug(
            "Crawled %s: %d entries, %d errors", root_path, len(result.entries), len(result.errors)
        )
        return result


class _Walk:
    """State for a single crawl of one root."""

    def __init__(
        self,
        crawler: Crawler,
        root: Path,
        result: CrawlResult,
        limiter: asyncio.Semaphore | None,
    ) -> None:
        self.crawler = crawler
        self.root = root
        self.result = result
        self.limiter = limiter

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        async with self.limiter if self.limiter is not None else nullcontext():
            return await asyncio.to_thread(func, *args)

    async def read_directory(self, directory: Path) -> None:
        try:
            children = await self._run(list_directory, directory)
        except OSError as exc:
            error = DirectoryReadError(directory, exc)
            LOGGER.warning("%s", error)
            self.result.errors.append(error)
            return

        pending = []
        for name, is_directory in children:
            if is_hidden(name):
                continue
            full_path = directory / name
            if is_directory:
                pending.append(self.read_directory(full_path))
            elif full_path.suffix in self.crawler.extensions:
                pending.append(self.process_file(full_path))
        await asyncio.gather(*pending)

    async def process_file(self, full_path: Path) -> None:
        try:
            stat = await self._run(os.stat, full_path)
        except OSError as exc:
            error = FileStatError(full_path, exc)
            LOGGER.warning("%s", error)
            self.result.errors.append(error)
            return

        # Links to directories (or devices) that happen to carry an accepted extension.
        if not S_ISREG(stat.st_mode):
            LOGGER.debug("Skipping non-regular file %s", full_path)
            return

        excerpt = ""
        if self.crawler.excerpt_lines > 0:
            try:
                excerpt, failure = await self._run(
                    self.crawler.loader.load_excerpt, full_path, self.crawler.excerpt_lines
                )
            except Exception as exc:
                excerpt, failure = "", exc
            if failure is not None:
                error = ExcerptReadError(full_path, failure)
                LOGGER.warning("%s", error)
                self.result.errors.append(error)

        self.result.entries.append(make_entry(self.root, full_path, stat, excerpt))
