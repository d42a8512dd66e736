"""Unit tests for wlc.api.links.render_reports and write_report."""

from datetime import datetime

import pytest

from tests.conftest import write_notes
from wlc.api.links.parse_broken_links import parse_broken_links
from wlc.api.links.render_reports import (
    EMPTY_REPORT_TITLE,
    ORPHAN_REPORT_TITLE,
    dated_report_name,
    render_broken_links_report,
    render_files_report,
)
from wlc.api.links.ScanReport import ScanReport
from wlc.api.links.write_report import write_report
from wlc.api.vault._obsidian._Backend import _Backend
from wlc.api.vault.Document import Document
from wlc.api.vault.VaultConfig import VaultConfig

pytestmark = pytest.mark.links

GENERATED = datetime(2024, 3, 5, 14, 30, 0)


def _report() -> ScanReport:
    report = ScanReport(total_links_checked=7, documents_scanned=3)
    report.add_broken("[[Missing Page]]", "Home.md")
    report.add_broken("[[Missing Page]]", "Projects/Plan.md")
    report.add_broken("[[Gone]]", "Projects/Plan.md")
    return report


def test_broken_links_report_layout():
    text = render_broken_links_report(_report(), GENERATED)
    lines = text.splitlines()

    assert lines[0] == "# Broken links report"
    assert f"Generated: {GENERATED.strftime('%c')}" in lines
    assert "Total broken links: 2" in lines
    assert "Total links checked: 7" in lines
    assert "## Broken links:" in lines
    assert "- [[Missing Page]] in [[Home.md]], [[Projects/Plan.md]]" in lines
    assert "- [[Gone]] in [[Projects/Plan.md]]" in lines
    assert lines.index("- [[Missing Page]] in [[Home.md]], [[Projects/Plan.md]]") < lines.index(
        "- [[Gone]] in [[Projects/Plan.md]]"
    )


def test_broken_links_report_reads_back():
    text = render_broken_links_report(_report(), GENERATED)

    assert parse_broken_links(text) == ["[[Missing Page]]", "[[Gone]]"]


def test_files_report_layout():
    documents = [Document.from_path("Lonely.md"), Document.from_path("Archive/Old.md")]

    text = render_files_report(ORPHAN_REPORT_TITLE, "Files with no incoming links:", documents, GENERATED)
    lines = text.splitlines()

    assert lines[0] == "# Orphan files report"
    assert "Total: 2 files" in lines
    assert "## Files with no incoming links:" in lines
    assert "- [[Lonely]] (Lonely.md)" in lines
    assert "- [[Old]] (Archive/Old.md)" in lines


def test_dated_report_name():
    assert dated_report_name(EMPTY_REPORT_TITLE, GENERATED) == "Empty files report 2024-03-05.md"
    assert dated_report_name(ORPHAN_REPORT_TITLE, GENERATED) == "Orphan files report 2024-03-05.md"


def test_write_report_creates_then_updates(vault_dir):
    backend = _Backend(VaultConfig(type="obsidian", base_dir=str(vault_dir)))

    assert write_report(backend, "report.md", "first") is True
    assert (vault_dir / "report.md").read_text(encoding="utf-8") == "first"

    assert write_report(backend, "report.md", "second") is False
    assert (vault_dir / "report.md").read_text(encoding="utf-8") == "second"


def test_write_report_overwrites_existing_note(vault_dir):
    write_notes(vault_dir, {"reports/out.md": "old"})
    backend = _Backend(VaultConfig(type="obsidian", base_dir=str(vault_dir)))

    assert write_report(backend, "reports/out.md", "new") is False
    assert (vault_dir / "reports" / "out.md").read_text(encoding="utf-8") == "new"
