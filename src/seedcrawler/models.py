"""
Data structures shared by the fetch, extract and report stages.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple, Union

DEFAULT_TITLE = "No Title"
DEFAULT_DESCRIPTION = "No Description"


@dataclass(slots=True, frozen=True)
class FetchSuccess:
    """Body of a page that was fetched with a success status."""
    body: str


@dataclass(slots=True, frozen=True)
class FetchFailure:
    """A fetch that failed for any reason (status, transport, timeout)."""
    reason: str


FetchResult = Union[FetchSuccess, FetchFailure]


@dataclass(slots=True)
class PageMetadata:
    """Metadata extracted from a single fetched page."""
    url: str
    title: str = DEFAULT_TITLE
    meta_description: str = DEFAULT_DESCRIPTION
    headings: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def heading_lines(self) -> List[str]:
        return [f"{tag}: {text}" for tag, text in self.headings]


class ExtractedUrlSet:
    """
    Thread-safe, append-only collection of extracted URLs.

    Duplicates are kept: the same URL found twice is stored twice.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._urls: List[str] = []

    def add(self, url: str) -> None:
        with self._lock:
            self._urls.append(url)

    def snapshot(self) -> List[str]:
        """Return a copy of the URLs collected so far."""
        with self._lock:
            return list(self._urls)

    def count(self, url: str) -> int:
        with self._lock:
            return self._urls.count(url)

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls


@dataclass(slots=True)
class CrawlStats:
    """Statistics collected during a crawl for summary output."""
    seeds: int = 0
    pages_reported: int = 0
    fetch_failures: int = 0
    empty_pages: int = 0
    processing_errors: int = 0
    urls_extracted: int = 0
