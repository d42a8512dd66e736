"""Shared body of the orphans and empty commands (private)."""

from collections.abc import Callable, Iterator

from .._output_schemas.links import LinksEmptyOutput, LinksOrphansOutput
from ..config.WLCConfig import WLCConfig
from ..log.append_log import append_log
from ..StageResult import StageResult
from ..vault._AbstractBackend import _AbstractBackend
from ..vault.Document import Document
from ..vault.Vault import Vault
from ._constants import LOG_DOMAIN
from .links_pass_guard import links_pass_guard
from .render_reports import dated_report_name, render_files_report
from .write_report import write_report


def _cmd_files_report(
    *,
    finder: Callable[[_AbstractBackend], list[Document]],
    output_model: type[LinksOrphansOutput] | type[LinksEmptyOutput],
    noun: str,
    title: str,
    heading: str,
    save: bool,
) -> Callable[[StageResult], Iterator[tuple[float, str]]]:
    """Build the progress callback listing (and optionally saving) matching documents."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        def finish(message: str, success: bool, errors: list[str], files: list[str], report_path: str = "") -> None:
            result_obj.result = message
            result_obj.output = output_model(
                errors=errors,
                warnings=[],
                count=len(files),
                files=files,
                report_path=report_path,
            ).model_dump(mode="python")
            result_obj.success = success

        yield (0.1, "Loading configuration...")
        try:
            config = WLCConfig.load()
        except ValueError as e:
            finish(f"Failed to load config: {e}", False, [str(e)], [])
            return
        log_path = WLCConfig.get_logfile_path()

        try:
            with Vault(config.vault) as vault:
                yield (0.3, f"Looking for {noun} files...")
                documents = finder(vault)
                report_path = ""
                if save and documents:
                    yield (0.8, "Saving report...")
                    report_path = dated_report_name(title)
                    with links_pass_guard(WLCConfig.get_home_dir()):
                        write_report(vault, report_path, render_files_report(title, heading, documents))
        except Exception as e:
            append_log(log_path, LOG_DOMAIN, "ERROR", f"Finding {noun} files failed: {e}")
            finish(f"Finding {noun} files failed: {e}", False, [str(e)], [])
            return

        files = [document.path for document in documents]
        if not documents:
            message = f"No {noun} files found!"
        elif report_path:
            message = f"Found {len(documents)} {noun} files. Saved report to: {report_path}"
            append_log(log_path, LOG_DOMAIN, "INFO", message)
        else:
            message = f"Found {len(documents)} {noun} files"
        finish(message, True, [], files, report_path)
        yield (1.0, "Complete")

    return do_work
