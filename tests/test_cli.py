"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

from conftest import read_records

from seedcrawler.cli import main
from seedcrawler.fetcher import ContentFetcher
from seedcrawler.models import FetchSuccess

_HTML = '<html><head><title>Hi</title></head><body><a href="https://x/1">l</a></body></html>'


def _config(base: Path, urls) -> None:
    payload = {"WebCrawlerSettings": {"Urls": urls}}
    (base / "appsettings.json").write_text(json.dumps(payload), encoding="utf-8")


def test_happy_path(tmp_path: Path, capsys) -> None:
    _config(tmp_path, ["https://a.example/"])

    with patch.object(ContentFetcher, "fetch", return_value=FetchSuccess(_HTML)) as fetch:
        code = main(["--base-dir", str(tmp_path)])

    assert code == 0
    fetch.assert_called_once_with("https://a.example/")
    assert "Crawling Completed." in capsys.readouterr().out
    url_records = read_records(tmp_path / "Urls.log")
    assert any(line.endswith("[URL] https://x/1") for line in url_records)
    assert read_records(tmp_path / "Error.log") == []


def test_empty_seed_list_logs_one_error(tmp_path: Path) -> None:
    _config(tmp_path, [])

    with patch.object(ContentFetcher, "fetch") as fetch:
        code = main(["--base-dir", str(tmp_path)])

    assert code == 1
    fetch.assert_not_called()
    [line] = read_records(tmp_path / "Error.log")
    assert line.endswith("[ERROR] No URLs Found in The Configuration.")


def test_missing_config_logs_one_error(tmp_path: Path) -> None:
    code = main(["--base-dir", str(tmp_path)])

    assert code == 1
    [line] = read_records(tmp_path / "Error.log")
    assert line.endswith("[ERROR] Configuration File Not Found.")


def test_explicit_config_and_previous_logs_truncated(tmp_path: Path) -> None:
    (tmp_path / "Error.log").write_text("old error\n", encoding="utf-8")
    (tmp_path / "Urls.log").write_text("old url\n", encoding="utf-8")
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    _config(config_dir, ["https://a.example/"])

    with patch.object(ContentFetcher, "fetch", return_value=FetchSuccess(_HTML)):
        code = main(["--base-dir", str(tmp_path), "--config", str(config_dir / "appsettings.json")])

    assert code == 0
    assert "old" not in (tmp_path / "Urls.log").read_text(encoding="utf-8")
    assert (tmp_path / "Error.log").read_text(encoding="utf-8") == ""


def test_verbose_prints_summary(tmp_path: Path, capsys) -> None:
    _config(tmp_path, ["https://a.example/"])

    with patch.object(ContentFetcher, "fetch", return_value=FetchSuccess(_HTML)):
        main(["--base-dir", str(tmp_path), "--verbose"])

    err = capsys.readouterr().err
    assert "CRAWL SUMMARY" in err
    assert "Pages reported:         1" in err
    assert "URLs extracted:         1" in err
    assert "No errors encountered." in err
