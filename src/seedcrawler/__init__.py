"""
Fetches a list of seed pages concurrently and logs each page's metadata
and the link and image URLs it contains. Extracted URLs are never followed.
"""
from seedcrawler.core import Crawler, run
from seedcrawler.models import CrawlStats, ExtractedUrlSet, PageMetadata
from seedcrawler.sink import LogSink

__version__ = "1.0.0"
__all__ = ["Crawler", "run", "CrawlStats", "ExtractedUrlSet", "PageMetadata", "LogSink"]
