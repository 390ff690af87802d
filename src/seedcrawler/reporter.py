"""
Console and URL-log output of page metadata.
"""
from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from seedcrawler.models import PageMetadata
from seedcrawler.sink import LogSink

MAGENTA = "\033[35m"
GREEN = "\033[32m"
RESET = "\033[0m"


def report_lines(metadata: PageMetadata) -> List[str]:
    """Labelled lines of a metadata report, headings last."""
    lines = [
        f"Website URL: {metadata.url}",
        f"Title: {metadata.title}",
        f"Meta Description: {metadata.meta_description}",
        "Headings:",
    ]
    lines.extend(f"  - {heading}" for heading in metadata.heading_lines)
    return lines


def format_report(metadata: PageMetadata) -> str:
    """Plain multi-line block written to the URL log as one INFO record."""
    return "\n".join(report_lines(metadata))


class Reporter:
    """Emits a metadata report to the URL log and to the console."""

    def __init__(
        self,
        sink: LogSink,
        stream: Optional[TextIO] = None,
        color: Optional[bool] = None,
    ) -> None:
        self.sink = sink
        self.stream = stream if stream is not None else sys.stdout
        if color is None:
            color = hasattr(self.stream, "isatty") and self.stream.isatty()
        self.color = color

    def render_console(self, metadata: PageMetadata) -> str:
        """Console copy of the report, colored when enabled."""
        lines = report_lines(metadata)
        if self.color:
            # URL in magenta, labelled fields in green, headings plain
            lines[0] = f"{MAGENTA}{lines[0]}"
            lines[1] = f"{GREEN}{lines[1]}"
            lines[3] = f"{lines[3]}{RESET}"
        return "\n".join(lines) + "\n"

    def report(self, metadata: PageMetadata) -> None:
        """Write *metadata* to both outputs; failures are logged, not raised."""
        try:
            self.sink.info(format_report(metadata))
            self.stream.write(self.render_console(metadata))
            self.stream.flush()
        except Exception as e:
            self.sink.error(f"Failed to display website details for URL {metadata.url}: {e}")
