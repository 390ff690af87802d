"""
HTTP fetching of seed pages.
"""
from __future__ import annotations

from typing import Optional

import requests

from seedcrawler.models import FetchFailure, FetchResult, FetchSuccess
from seedcrawler.sink import LogSink

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.3"
)
DEFAULT_TIMEOUT_S = 100.0


class ContentFetcher:
    """Fetches page bodies with one GET per URL over a shared session."""

    def __init__(
        self,
        sink: LogSink,
        session: Optional[requests.Session] = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.sink = sink
        self.timeout_s = timeout_s
        self.session = session if session is not None else requests.Session()
        self.session.headers["User-Agent"] = user_agent

    def fetch(self, url: str) -> FetchResult:
        """
        Fetch *url* and return its body.

        Any non-2xx status, connection errors and timeouts all become a
        FetchFailure, logged once here. There is no retry.
        """
        try:
            resp = self.session.get(url, timeout=self.timeout_s, allow_redirects=True)
            resp.raise_for_status()
            # raise_for_status lets unfollowed 1xx/3xx responses through
            if not 200 <= resp.status_code < 300:
                raise requests.HTTPError(
                    f"{resp.status_code} Non-Success Status: {resp.reason} for url: {resp.url}",
                    response=resp,
                )
            return FetchSuccess(body=resp.text)
        except requests.RequestException as e:
            self.sink.error(f"Failed to fetch content from {url}: {e}")
            return FetchFailure(reason=str(e))
