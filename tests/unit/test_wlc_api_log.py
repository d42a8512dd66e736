"""Unit tests for the unified logfile and the log commands."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from tests.conftest import run_cmd
from wlc.api.config.LogConfig import LogConfig
from wlc.api.log.append_log import append_log
from wlc.api.log.cmd_prune import cmd_prune
from wlc.api.log.cmd_status import cmd_status
from wlc.api.log.read_log_entries import entry_level, read_log_entries

pytestmark = pytest.mark.log


def _entry(age: timedelta, level: str, message: str) -> str:
    timestamp = (datetime.now(timezone.utc) - age).isoformat()
    return f"[{timestamp}] [links] {level}: {message}"


def test_append_log(tmp_path):
    log_path = tmp_path / "nested" / "logfile"
    append_log(log_path, "links", "INFO", "Hello")
    append_log(log_path, "links", "WARN", "Careful")

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("[links] INFO: Hello")
    assert lines[1].endswith("[links] WARN: Careful")


def test_append_log_io_error(tmp_path, monkeypatch):
    def mock_open(*args, **kwargs):
        raise OSError("fail")

    monkeypatch.setattr(Path, "open", mock_open)

    # Should not raise
    append_log(tmp_path / "logfile", "links", "ERROR", "Fail")


def test_read_log_entries_prunes_by_level(tmp_path):
    log_path = tmp_path / "logfile"
    lines = [
        _entry(timedelta(days=2), "INFO", "old info"),
        _entry(timedelta(hours=1), "INFO", "fresh info"),
        _entry(timedelta(days=3), "ERROR", "old but kept error"),
        _entry(timedelta(days=8), "ERROR", "expired error"),
        "free-form line",
    ]
    log_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    kept = read_log_entries(log_path, LogConfig())

    assert kept == [lines[1], lines[2], lines[4]]
    assert log_path.read_text(encoding="utf-8").splitlines() == kept


def test_read_log_entries_missing_file(tmp_path):
    assert read_log_entries(tmp_path / "logfile", LogConfig()) == []


def test_entry_level():
    assert entry_level(_entry(timedelta(0), "WARN", "x")) == "WARN"
    assert entry_level("no level here") is None


def test_cmd_status(wlc_home):
    (wlc_home / "logfile").write_text(
        "\n".join(
            [
                _entry(timedelta(0), "INFO", "scan done"),
                _entry(timedelta(0), "WARN", "could not clean"),
                _entry(timedelta(0), "ERROR", "scan failed"),
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    result = run_cmd(cmd_status)

    assert result.success is True
    assert result.output["entry_counts"] == {"debug": 0, "info": 1, "warn": 1, "error": 1}
    assert len(result.output["warnings"]) == 1
    assert result.output["errors"][0].endswith("scan failed")
    assert result.output["size_bytes"] > 0


def test_cmd_status_missing_config(tmp_path, monkeypatch):
    monkeypatch.setenv("WLC_HOME", str(tmp_path))

    result = run_cmd(cmd_status)

    assert result.success is False
    assert "Configuration file not found" in result.output["errors"][0]


def test_cmd_prune(wlc_home):
    (wlc_home / "logfile").write_text(
        "\n".join(
            [
                _entry(timedelta(days=5), "INFO", "old"),
                _entry(timedelta(days=5), "DEBUG", "old"),
                _entry(timedelta(0), "INFO", "new"),
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    result = run_cmd(cmd_prune)

    assert result.success is True
    assert result.output["pruned"] == 2
    assert result.output["kept"] == 1
    assert result.result == "Pruned 2 log entries"


def test_cmd_prune_no_logfile(wlc_home):
    result = run_cmd(cmd_prune)

    assert result.success is True
    assert result.output["pruned"] == 0
    assert result.output["kept"] == 0
