"""Links scan API command.

CLI: wlc links scan
"""

import logging
from collections.abc import Iterator

from ..config.WLCConfig import WLCConfig
from ..log.append_log import append_log
from ..StageResult import StageResult
from ..vault.Vault import Vault
from . import LinksScanOutput
from ._constants import LOG_DOMAIN
from ._Scanner import _Scanner
from .links_pass_guard import links_pass_guard
from .render_reports import render_broken_links_report
from .write_report import write_report

logger = logging.getLogger(__name__)


def cmd_scan() -> StageResult:
    """Scan the vault for broken links and write the broken links report."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        def fail(message: str) -> None:
            result_obj.result = f"Broken link scan failed: {message}"
            result_obj.output = LinksScanOutput(
                errors=[message],
                warnings=[],
                report_path="",
                created=False,
                documents_scanned=0,
                links_checked=0,
                broken_count=0,
                broken={},
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = WLCConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return
        log_path = WLCConfig.get_logfile_path()
        report_path = config.links.broken_links_file

        try:
            with links_pass_guard(WLCConfig.get_home_dir()), Vault(config.vault) as vault:
                yield (0.3, "Scanning vault for broken links...")
                existing = vault.get_document(report_path)
                report = _Scanner(vault, exclude=[existing.path] if existing else []).scan()
                logger.info(
                    "Checked %d links in %d documents, found %d broken",
                    report.total_links_checked,
                    report.documents_scanned,
                    report.total_broken,
                )

                created = False
                written_path = ""
                if report.broken:
                    yield (0.8, f"Writing {report_path}...")
                    created = write_report(vault, report_path, render_broken_links_report(report))
                    written_path = report_path
        except Exception as e:
            logger.exception("Broken link scan failed")
            append_log(log_path, LOG_DOMAIN, "ERROR", f"Scan failed: {e}")
            fail(str(e))
            return

        if not report.broken:
            result_obj.result = f"No broken links found! (Checked {report.total_links_checked} links)"
        else:
            verb = "Created" if created else "Updated"
            result_obj.result = f"{verb} {report_path} with {report.total_broken} broken links"
        append_log(log_path, LOG_DOMAIN, "INFO", result_obj.result)

        result_obj.output = LinksScanOutput(
            errors=[],
            warnings=report.errors,
            report_path=written_path,
            created=created,
            documents_scanned=report.documents_scanned,
            links_checked=report.total_links_checked,
            broken_count=report.total_broken,
            broken=report.broken,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Scanning vault for broken links...",
        progress_callback=do_work,
    )
