"""Links orphans API command.

CLI: wlc links orphans [--save]
"""

from ..StageResult import StageResult
from . import LinksOrphansOutput
from ._cmd_files_report import _cmd_files_report
from .find_orphans import find_orphans
from .render_reports import ORPHAN_REPORT_TITLE


def cmd_orphans(save: bool = False) -> StageResult:
    """List documents with no incoming links.

    Args:
        save: Also write a dated orphan files report into the vault
    """
    return StageResult(
        announce="Finding orphan files...",
        progress_callback=_cmd_files_report(
            finder=find_orphans,
            output_model=LinksOrphansOutput,
            noun="orphan",
            title=ORPHAN_REPORT_TITLE,
            heading="Files with no incoming links:",
            save=save,
        ),
    )
