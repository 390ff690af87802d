"""
Crawl orchestration: one independent unit of work per seed URL.
"""
from __future__ import annotations

import asyncio
import sys
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Iterable, Optional, Tuple

from seedcrawler.config import NO_URLS_MESSAGE, ConfigurationError
from seedcrawler.extractor import HtmlExtractor
from seedcrawler.fetcher import ContentFetcher
from seedcrawler.models import CrawlStats, ExtractedUrlSet, FetchFailure
from seedcrawler.reporter import Reporter
from seedcrawler.sink import LogSink


def print_scan_line(url: str, status: str, new_links: int = 0) -> None:
    """Print single scan result line."""
    sys.stderr.write(f"  → {status} {url} (+{new_links} links)\n")
    sys.stderr.flush()


class Crawler:
    """
    Fetches every seed URL concurrently and records what each page links to.

    Extracted URLs are logged and collected but never fetched. A failure in
    one URL's unit is logged and does not affect the others.
    """

    def __init__(
        self,
        sink: LogSink,
        fetcher: Optional[ContentFetcher] = None,
        extractor: Optional[HtmlExtractor] = None,
        reporter: Optional[Reporter] = None,
        verbose: bool = False,
    ) -> None:
        self.sink = sink
        self.fetcher = fetcher if fetcher is not None else ContentFetcher(sink)
        self.extractor = extractor if extractor is not None else HtmlExtractor(sink)
        self.reporter = reporter if reporter is not None else Reporter(sink)
        self.verbose = verbose

    async def crawl(self, seed_urls: Iterable[str]) -> Tuple[ExtractedUrlSet, CrawlStats]:
        """
        Process every seed URL and wait for all of them to finish.

        Args:
            seed_urls: URLs to fetch. Must not be empty.

        Returns:
            Tuple of (extracted URLs, crawl statistics).

        Raises:
            ConfigurationError: If *seed_urls* is empty.
        """
        urls = list(seed_urls)
        if not urls:
            raise ConfigurationError(NO_URLS_MESSAGE)

        found = ExtractedUrlSet()
        stats = CrawlStats(seeds=len(urls))

        # One worker per seed: every fetch can be in flight at once
        with ThreadPoolExecutor(max_workers=len(urls), thread_name_prefix="fetch") as pool:
            async with asyncio.TaskGroup() as group:
                for url in urls:
                    group.create_task(self._process_url(url, pool, found, stats))

        return found, stats

    async def _process_url(
        self,
        url: str,
        pool: Executor,
        found: ExtractedUrlSet,
        stats: CrawlStats,
    ) -> None:
        try:
            loop = asyncio.get_running_loop()
            result = await loop.run_in_executor(pool, self.fetcher.fetch, url)

            if isinstance(result, FetchFailure):
                # Already logged by the fetcher
                stats.fetch_failures += 1
                if self.verbose:
                    print_scan_line(url, "ERR")
                return

            if not result.body:
                self.sink.warning(f"No content found for URL {url}")
                stats.empty_pages += 1
                if self.verbose:
                    print_scan_line(url, "EMPTY")
                return

            metadata = self.extractor.extract_metadata(result.body, url)
            if metadata is not None:
                self.reporter.report(metadata)
                stats.pages_reported += 1

            links = self.extractor.extract_links(result.body)
            for link in links:
                self.sink.url(link)
                found.add(link)
            stats.urls_extracted += len(links)

            if self.verbose:
                print_scan_line(url, "OK", len(links))

        except Exception as e:
            self.sink.error(f"Error processing URL {url}: {e}")
            stats.processing_errors += 1


def run(crawler: Crawler, seed_urls: Iterable[str]) -> Tuple[ExtractedUrlSet, CrawlStats]:
    """Run :meth:`Crawler.crawl` to completion from synchronous code."""
    return asyncio.run(crawler.crawl(seed_urls))
