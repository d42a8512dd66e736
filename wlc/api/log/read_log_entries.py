from datetime import datetime, timedelta, timezone
from pathlib import Path

from ..config.LogConfig import LogConfig
from .LOG_PATTERN import LOG_PATTERN


def read_log_entries(log_path: Path, log_config: LogConfig) -> list[str]:
    """Read log entries, dropping the ones older than their level's retention.

    This is the prune-on-access contract: expired entries are removed from the
    logfile when it is read. Lines that do not match the log format are kept.

    Returns:
        The retained lines in file order
    """
    if not log_path.exists():
        return []

    now = datetime.now(timezone.utc)
    cutoffs = {
        "DEBUG": now - timedelta(days=log_config.debug_retention_days),
        "INFO": now - timedelta(days=log_config.info_retention_days),
        "WARN": now - timedelta(days=log_config.warning_retention_days),
        "ERROR": now - timedelta(days=log_config.error_retention_days),
    }

    kept_lines: list[str] = []
    for line in log_path.read_text(encoding="utf-8", errors="ignore").splitlines():
        stripped = line.strip()
        if not stripped:
            continue

        match = LOG_PATTERN.match(stripped)
        if match:
            try:
                entry_time = datetime.fromisoformat(match.group(1))
            except ValueError:
                entry_time = now
            if entry_time.tzinfo is None:
                entry_time = entry_time.replace(tzinfo=timezone.utc)
            if entry_time < cutoffs.get(match.group(3).upper(), now):
                continue  # Expired
        kept_lines.append(stripped)

    log_path.write_text("\n".join(kept_lines) + "\n" if kept_lines else "", encoding="utf-8")
    return kept_lines


def entry_level(line: str) -> str | None:
    """Level of a log line (``DEBUG``/``INFO``/``WARN``/``ERROR``), or None for free-form lines."""
    match = LOG_PATTERN.match(line)
    return match.group(3).upper() if match else None
