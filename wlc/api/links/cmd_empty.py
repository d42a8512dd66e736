"""Links empty API command.

CLI: wlc links empty [--save]
"""

from ..StageResult import StageResult
from . import LinksEmptyOutput
from ._cmd_files_report import _cmd_files_report
from .find_empty import find_empty
from .render_reports import EMPTY_REPORT_TITLE


def cmd_empty(save: bool = False) -> StageResult:
    """List documents whose content is blank.

    Args:
        save: Also write a dated empty files report into the vault
    """
    return StageResult(
        announce="Finding empty files...",
        progress_callback=_cmd_files_report(
            finder=find_empty,
            output_model=LinksEmptyOutput,
            noun="empty",
            title=EMPTY_REPORT_TITLE,
            heading="Empty files:",
            save=save,
        ),
    )
