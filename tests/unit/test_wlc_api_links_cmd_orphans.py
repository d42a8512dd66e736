"""Unit tests for wlc.api.links.cmd_orphans and cmd_empty."""

from datetime import datetime

import pytest

from tests.conftest import run_cmd, write_notes
from wlc.api.links import LinksEmptyOutput, LinksOrphansOutput
from wlc.api.links._cmd_files_report import _cmd_files_report
from wlc.api.links.cmd_empty import cmd_empty
from wlc.api.links.cmd_orphans import cmd_orphans
from wlc.api.links.find_empty import find_empty
from wlc.api.StageResult import StageResult
from wlc.api.validate_output import validate_output

pytestmark = pytest.mark.links


@pytest.fixture
def notes(vault_dir):
    write_notes(
        vault_dir,
        {
            "Home.md": "[[Plan]]",
            "Plan.md": "[[Home]]",
            "Lonely.md": "",
            "Blank.md": "   \n",
        },
    )
    return vault_dir


def test_cmd_orphans(wlc_home, notes):
    result = run_cmd(cmd_orphans)

    assert result.success is True
    assert result.result == "Found 2 orphan files"
    assert result.output["files"] == ["Blank.md", "Lonely.md"]
    assert result.output["report_path"] == ""
    assert not list(notes.glob("Orphan files report*"))


def test_cmd_orphans_save(wlc_home, notes):
    result = run_cmd(cmd_orphans, True)

    expected = f"Orphan files report {datetime.now().strftime('%Y-%m-%d')}.md"
    assert result.success is True
    assert result.output["report_path"] == expected
    assert result.result == f"Found 2 orphan files. Saved report to: {expected}"
    text = (notes / expected).read_text(encoding="utf-8")
    assert text.startswith("# Orphan files report")
    assert "Total: 2 files" in text
    assert "- [[Lonely]] (Lonely.md)" in text


def test_cmd_orphans_none(wlc_home, vault_dir):
    write_notes(vault_dir, {"A.md": "[[B]]", "B.md": "[[A]]"})

    result = run_cmd(cmd_orphans, True)

    assert result.success is True
    assert result.result == "No orphan files found!"
    assert result.output["count"] == 0
    assert result.output["report_path"] == ""


def test_cmd_empty(wlc_home, notes):
    result = run_cmd(cmd_empty)

    assert result.success is True
    assert result.result == "Found 2 empty files"
    assert result.output["files"] == ["Blank.md", "Lonely.md"]


def test_cmd_empty_save(wlc_home, notes):
    result = run_cmd(cmd_empty, True)

    expected = f"Empty files report {datetime.now().strftime('%Y-%m-%d')}.md"
    assert result.output["report_path"] == expected
    assert "## Empty files:" in (notes / expected).read_text(encoding="utf-8")


def test_cmd_empty_none(wlc_home, vault_dir):
    write_notes(vault_dir, {"A.md": "a"})

    result = run_cmd(cmd_empty)

    assert result.result == "No empty files found!"


def test_cmd_orphans_missing_config(tmp_path, monkeypatch):
    monkeypatch.setenv("WLC_HOME", str(tmp_path / "empty"))

    result = run_cmd(cmd_orphans)

    assert result.success is False
    assert result.output["files"] == []


def test_files_report_output_built_from_model(wlc_home, notes):
    built = []

    class RecordingOutput(LinksOrphansOutput):
        def __init__(self, **data):
            super().__init__(**data)
            built.append(self)

    result = StageResult(
        announce="",
        progress_callback=_cmd_files_report(
            finder=find_empty,
            output_model=RecordingOutput,
            noun="empty",
            title="Empty files report",
            heading="Empty files:",
            save=False,
        ),
    )
    list(result.progress_callback(result))

    assert len(built) == 1
    assert result.output == built[0].model_dump(mode="python")


@pytest.mark.parametrize(("cmd_func", "schema"), [(cmd_orphans, LinksOrphansOutput), (cmd_empty, LinksEmptyOutput)])
def test_files_report_output_matches_schema(wlc_home, notes, cmd_func, schema):
    result = run_cmd(cmd_func)

    assert validate_output(cmd_func, result.output) == schema(**result.output).model_dump(mode="python")
