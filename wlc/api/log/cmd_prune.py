"""Log prune command - drop entries older than their retention period."""

from collections.abc import Iterator

from ..config.WLCConfig import WLCConfig
from ..StageResult import StageResult
from . import LogPruneOutput
from .read_log_entries import read_log_entries


def cmd_prune() -> StageResult:
    """Remove expired log entries according to the configured retention."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        log_path = WLCConfig.get_logfile_path()

        try:
            config = WLCConfig.load()
            yield (0.3, "Reading log file...")
            before = (
                sum(1 for line in log_path.read_text(encoding="utf-8", errors="ignore").splitlines() if line.strip())
                if log_path.exists()
                else 0
            )
            yield (0.6, "Pruning expired entries...")
            kept = read_log_entries(log_path, config.log)
        except (ValueError, OSError) as e:
            result_obj.result = f"Failed to prune log: {e}"
            result_obj.output = LogPruneOutput(
                errors=[str(e)], warnings=[], log_path=str(log_path), pruned=0, kept=0
            ).model_dump(mode="python")
            result_obj.success = False
            return

        pruned = before - len(kept)
        result_obj.result = f"Pruned {pruned} log entries"
        result_obj.output = LogPruneOutput(
            errors=[], warnings=[], log_path=str(log_path), pruned=pruned, kept=len(kept)
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Pruning log entries...",
        progress_callback=do_work,
    )
