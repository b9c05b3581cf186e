"""Multi-root scanning pipeline."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Sequence

from snippetfinder.config import AppConfig, resolve_roots
from snippetfinder.index.crawler import Crawler
from snippetfinder.index.ranking import rank_entries
from snippetfinder.ingestion.loader import ContentLoader
from snippetfinder.models import ScanResult

LOGGER = logging.getLogger(__name__)


class Indexer:
    """Crawls every configured root concurrently and publishes one ranked index.

    Each call builds a brand-new :class:`ScanResult`; nothing is merged with a
    previous scan, and entries from overlapping roots are kept as-is.
    """

    def __init__(
        self,
        extensions: Iterable[str],
        *,
        priority_order: Sequence[str] | None = None,
        loader: ContentLoader | None = None,
        excerpt_lines: int = 3,
        max_concurrency: int | None = None,
    ) -> None:
        self.extensions = tuple(extensions)
        self.priority_order = tuple(priority_order) if priority_order is not None else self.extensions
        self.crawler = Crawler(self.extensions, loader=loader, excerpt_lines=excerpt_lines)
        self.max_concurrency = max_concurrency

    @classmethod
    def from_config(cls, config: AppConfig, *, loader: ContentLoader | None = None) -> "Indexer":
        return cls(
            config.supported_extensions,
            priority_order=config.priority_extensions,
            loader=loader,
            excerpt_lines=config.search_index_lines,
            max_concurrency=config.max_concurrency,
        )

    async def ascan(self, root_paths: Iterable[str]) -> ScanResult:
        roots = resolve_roots(root_paths)
        limiter = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None
        results = await asyncio.gather(*(self.crawler.crawl(root, limiter=limiter) for root in roots))

        entries = [entry for result in results for entry in result.entries]
        errors = [error for result in results for error in result.errors]
        scan = ScanResult(
            entries=tuple(rank_entries(entries, self.priority_order)),
            errors=tuple(errors),
            roots=tuple(roots),
        )
        LOGGER.info("%s from %d roots", scan.summary(), len(roots))
        return scan

    def scan(self, root_paths: Iterable[str]) -> ScanResult:
        return asyncio.run(self.ascan(root_paths))


def scan(
    root_paths: Sequence[str],
    accepted_extensions: Sequence[str],
    priority_order: Sequence[str] | None = None,
    *,
    loader: ContentLoader | None = None,
    excerpt_lines: int = 3,
    max_concurrency: int | None = None,
) -> ScanResult:
    """Scan ``root_paths`` and return the ranked index alongside every scan error."""
    indexer = Indexer(
        accepted_extensions,
        priority_order=priority_order,
        loader=loader,
        excerpt_lines=excerpt_lines,
        max_concurrency=max_concurrency,
    )
    return indexer.scan(root_paths)
