"""
Loading of the seed URL list from a JSON settings file.

Expected shape::

    {"WebCrawlerSettings": {"Urls": ["https://example.com"], "TimeoutSeconds": 100}}
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from seedcrawler.fetcher import DEFAULT_TIMEOUT_S

DEFAULT_CONFIG_NAME = "appsettings.json"
SETTINGS_SECTION = "WebCrawlerSettings"

NO_URLS_MESSAGE = "No URLs Found in The Configuration."
NOT_FOUND_MESSAGE = "Configuration File Not Found."


class ConfigurationError(Exception):
    """The seed source is missing or unusable; the crawl cannot start."""


@dataclass(slots=True)
class CrawlSettings:
    urls: List[str] = field(default_factory=list)
    timeout_s: float = DEFAULT_TIMEOUT_S


def load_settings(path: Path) -> CrawlSettings:
    """
    Read crawl settings from *path*.

    Raises:
        ConfigurationError: If the file is missing, unreadable, malformed,
            or lists no URLs.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(NOT_FOUND_MESSAGE)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Failed to Load Configuration: {e}") from e

    section = data.get(SETTINGS_SECTION) if isinstance(data, dict) else None
    if section is None:
        raise ConfigurationError(NO_URLS_MESSAGE)
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Failed to Load Configuration: '{SETTINGS_SECTION}' must be an object"
        )

    urls = section.get("Urls")
    if urls is not None and (
        not isinstance(urls, list) or not all(isinstance(u, str) for u in urls)
    ):
        raise ConfigurationError("Failed to Load Configuration: 'Urls' must be a list of strings")
    if not urls:
        raise ConfigurationError(NO_URLS_MESSAGE)

    timeout = section.get("TimeoutSeconds", DEFAULT_TIMEOUT_S)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigurationError(
            "Failed to Load Configuration: 'TimeoutSeconds' must be a positive number"
        )

    return CrawlSettings(urls=list(urls), timeout_s=float(timeout))
