"""
Append-only, timestamped log files for crawl output.

Two files are written: the URL log (INFO metadata reports and URL records)
and the error log (WARNING and ERROR records). A single lock owned by the
sink serializes every record written to either file.
"""
from __future__ import annotations

import logging
import os
import sys
import threading
from pathlib import Path
from typing import Optional, TextIO, Union

ERROR_LOG_NAME = "Error.log"
URL_LOG_NAME = "Urls.log"

RECORD_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Extracted URLs get their own level in the URL log
URL = 15
LEVEL_NAMES = {
    logging.ERROR: "ERROR",
    logging.WARNING: "WARNING",
    logging.INFO: "INFO",
    URL: "URL",
}

PathLike = Union[str, os.PathLike]


class LogSink:
    """Writes leveled records to the error log and the URL log."""

    def __init__(
        self,
        error_log_path: PathLike,
        url_log_path: PathLike,
        console: Optional[TextIO] = None,
    ) -> None:
        self.error_log_path = Path(error_log_path)
        self.url_log_path = Path(url_log_path)
        self.console = console if console is not None else sys.stderr
        self._lock = threading.Lock()
        self._formatter = logging.Formatter(RECORD_FORMAT, datefmt=TIMESTAMP_FORMAT)

        # Fresh, empty files for this run
        for path in (self.error_log_path, self.url_log_path):
            self.clear(path)
            self.ensure_exists(path)

    @staticmethod
    def ensure_exists(path: PathLike) -> None:
        """Create an empty file at *path* unless one is already there."""
        path = Path(path)
        if not path.exists():
            path.touch()

    @staticmethod
    def clear(path: PathLike) -> None:
        """Delete the file at *path*; the next append recreates it."""
        Path(path).unlink(missing_ok=True)

    def format_record(self, level: int, message: str) -> str:
        """Render one record line (without terminator) for *level* and *message*."""
        record = logging.makeLogRecord({
            "levelno": level,
            "levelname": LEVEL_NAMES.get(level, str(level)),
            "msg": message,
        })
        return self._formatter.format(record)

    def append(self, path: PathLike, level: int, message: str) -> None:
        """
        Append one record to *path*.

        Characters the file encoding cannot represent (lone surrogates) are
        written as backslash escapes. Any failure is reported on the console
        and never raised.
        """
        try:
            line = self.format_record(level, message)
            with self._lock:
                with open(path, "a", encoding="utf-8", errors="backslashreplace") as handle:
                    handle.write(line + "\n")
        except Exception as e:
            self.console.write(f"Failed to write to log file: {e!r}\n")
            self.console.flush()

    def error(self, message: str) -> None:
        """Append an ERROR record to the error log."""
        self.append(self.error_log_path, logging.ERROR, message)

    def warning(self, message: str) -> None:
        """Append a WARNING record to the error log."""
        self.append(self.error_log_path, logging.WARNING, message)

    def info(self, message: str) -> None:
        """Append an INFO record to the URL log."""
        self.append(self.url_log_path, logging.INFO, message)

    def url(self, url: str) -> None:
        """Append a URL record to the URL log."""
        self.append(self.url_log_path, URL, url)
