"""Log status command - show log file status after auto-pruning by retention."""

from collections.abc import Iterator

from ..config.WLCConfig import WLCConfig
from ..StageResult import StageResult
from . import LogStatusOutput
from .read_log_entries import entry_level, read_log_entries


def cmd_status() -> StageResult:
    """Show log file status after auto-pruning expired entries by retention."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        log_path = WLCConfig.get_logfile_path()
        counts = {"debug": 0, "info": 0, "warn": 0, "error": 0}

        try:
            config = WLCConfig.load()
            yield (0.4, "Auto-pruning expired entries...")
            lines = read_log_entries(log_path, config.log)
        except (ValueError, OSError) as e:
            result_obj.result = f"Failed to read log: {e}"
            result_obj.output = LogStatusOutput(
                errors=[str(e)],
                warnings=[],
                log_path=str(log_path),
                size_bytes=0,
                entry_counts=counts,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings: list[str] = []
        errors: list[str] = []
        for line in lines:
            level = entry_level(line)
            if level is None:
                continue
            counts[level.lower()] += 1
            if level == "WARN":
                warnings.append(line)
            elif level == "ERROR":
                errors.append(line)

        size_bytes = log_path.stat().st_size if log_path.exists() else 0
        result_obj.result = f"Log file status ({len(lines)} entries)"
        result_obj.output = LogStatusOutput(
            errors=errors,
            warnings=warnings,
            log_path=str(log_path),
            size_bytes=size_bytes,
            entry_counts=counts,
        ).model_dump(mode="python")
        # Retained ERROR lines are reported, not a failure of the status command itself
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Checking log status...",
        progress_callback=do_work,
    )
