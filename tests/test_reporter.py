"""Tests for metadata reporting."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

from conftest import read_records

from seedcrawler.models import PageMetadata
from seedcrawler.reporter import MAGENTA, RESET, Reporter, format_report
from seedcrawler.sink import LogSink

_METADATA = PageMetadata(
    url="https://example.com/",
    title="Example",
    meta_description="An example page",
    headings=[("h1", "Welcome"), ("h2", "Details")],
)


def test_format_report_fields() -> None:
    assert format_report(_METADATA).splitlines() == [
        "Website URL: https://example.com/",
        "Title: Example",
        "Meta Description: An example page",
        "Headings:",
        "  - h1: Welcome",
        "  - h2: Details",
    ]


def test_report_writes_one_info_record(sink: LogSink) -> None:
    Reporter(sink, stream=io.StringIO()).report(_METADATA)

    text = sink.url_log_path.read_text(encoding="utf-8")
    assert text.count("[INFO]") == 1
    assert "[INFO] Website URL: https://example.com/" in text
    assert "\nTitle: Example\n" in text
    assert "\nMeta Description: An example page\n" in text
    assert "\nHeadings:\n" in text
    assert read_records(sink.error_log_path) == []


def test_console_plain_when_not_a_tty(sink: LogSink) -> None:
    stream = io.StringIO()
    Reporter(sink, stream=stream).report(_METADATA)
    assert stream.getvalue() == format_report(_METADATA) + "\n"


def test_console_colored_when_requested(sink: LogSink) -> None:
    stream = io.StringIO()
    Reporter(sink, stream=stream, color=True).report(_METADATA)
    output = stream.getvalue()
    assert output.startswith(MAGENTA + "Website URL: https://example.com/")
    assert RESET in output


def test_console_failure_is_logged(sink: LogSink) -> None:
    stream = MagicMock()
    stream.write.side_effect = OSError("stdout closed")

    Reporter(sink, stream=stream, color=False).report(_METADATA)

    [line] = read_records(sink.error_log_path)
    assert "[ERROR] Failed to display website details for URL https://example.com/: stdout closed" in line
