"""Shared fixtures: a fresh log sink per test and helpers for reading its files."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Dict, List

import pytest
import requests

from seedcrawler.models import FetchFailure, FetchResult
from seedcrawler.sink import ERROR_LOG_NAME, URL_LOG_NAME, LogSink


def read_records(path: Path) -> List[str]:
    """Return the non-empty lines of a log file."""
    return [line for line in path.read_text(encoding="utf-8").splitlines() if line]


def make_response(url: str, status_code: int = 200, body: str = "") -> requests.Response:
    """Build a real ``requests.Response`` so ``raise_for_status`` behaves normally."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.encoding = "utf-8"
    resp._content = body.encode("utf-8")
    return resp


class StubFetcher:
    """Returns canned results per URL and records every call."""

    def __init__(self, results: Dict[str, FetchResult]) -> None:
        self.results = results
        self.calls: List[str] = []
        self._lock = threading.Lock()

    def fetch(self, url: str) -> FetchResult:
        with self._lock:
            self.calls.append(url)
        return self.results.get(url, FetchFailure(reason="not stubbed"))


@pytest.fixture
def sink(tmp_path: Path) -> LogSink:
    return LogSink(tmp_path / ERROR_LOG_NAME, tmp_path / URL_LOG_NAME)

