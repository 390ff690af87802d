"""
Command-line interface for the crawler.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from seedcrawler.config import DEFAULT_CONFIG_NAME, ConfigurationError, load_settings
from seedcrawler.core import Crawler, run
from seedcrawler.fetcher import USER_AGENT, ContentFetcher
from seedcrawler.models import CrawlStats
from seedcrawler.sink import ERROR_LOG_NAME, URL_LOG_NAME, LogSink


def print_summary(stats: CrawlStats) -> None:
    """Print crawl summary to stderr."""
    sys.stderr.write("=" * 50 + "\n")
    sys.stderr.write("CRAWL SUMMARY\n")
    sys.stderr.write("=" * 50 + "\n\n")

    sys.stderr.write(f"Seed URLs:              {stats.seeds}\n")
    sys.stderr.write(f"Pages reported:         {stats.pages_reported}\n")
    sys.stderr.write(f"URLs extracted:         {stats.urls_extracted}\n\n")

    failures = stats.fetch_failures + stats.empty_pages + stats.processing_errors
    if failures:
        sys.stderr.write("Failures by type:\n")
        sys.stderr.write(f"  Fetch failures: {stats.fetch_failures}\n")
        sys.stderr.write(f"  Empty pages: {stats.empty_pages}\n")
        sys.stderr.write(f"  Processing errors: {stats.processing_errors}\n")
    else:
        sys.stderr.write("No errors encountered.\n")

    sys.stderr.write("\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the crawler CLI."""
    parser = argparse.ArgumentParser(
        description="Fetch the seed URLs from a settings file and log page metadata and extracted URLs."
    )
    parser.add_argument(
        "--base-dir",
        help="Directory holding Error.log, Urls.log and the settings file (default: current directory)",
    )
    parser.add_argument(
        "--config",
        help=f"Settings file path (default: {DEFAULT_CONFIG_NAME} in the base directory)",
    )
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (overrides the settings file)")
    parser.add_argument("--user-agent", default=USER_AGENT, help="User-Agent header")
    parser.add_argument("--verbose", action="store_true", help="Show progress and summary")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the crawler CLI."""
    args = build_parser().parse_args(argv)

    base_dir = Path(args.base_dir) if args.base_dir else Path.cwd()
    config_path = Path(args.config) if args.config else base_dir / DEFAULT_CONFIG_NAME

    # Logs are truncated before settings are read so a bad config is logged to a fresh file
    sink = LogSink(base_dir / ERROR_LOG_NAME, base_dir / URL_LOG_NAME)

    try:
        settings = load_settings(config_path)
    except ConfigurationError as e:
        sys.stderr.write(f"{e}\n")
        sink.error(str(e))
        return 1

    timeout_s = args.timeout if args.timeout is not None else settings.timeout_s
    fetcher = ContentFetcher(sink, timeout_s=timeout_s, user_agent=args.user_agent)
    crawler = Crawler(sink, fetcher=fetcher, verbose=args.verbose)

    if args.verbose:
        sys.stderr.write(f"Crawling {len(settings.urls)} seed URLs\n\n")

    _, stats = run(crawler, settings.urls)

    if args.verbose:
        print_summary(stats)

    print("Crawling Completed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
