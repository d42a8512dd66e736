import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(wlc_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified WLC logging.

    Args:
        wlc_home: Path to WLC home directory. If None, derived from environment.
        level: Level name from the log config (WARN is mapped to WARNING).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if wlc_home is None:
        env_home = os.environ.get("WLC_HOME")
        wlc_home = Path(env_home).expanduser().absolute() if env_home else Path.home() / ".wlc"

    root_logger = logging.getLogger("wlc")
    root_logger.setLevel(logging.WARNING if level == "WARN" else getattr(logging, level, logging.INFO))

    try:
        wlc_home.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            wlc_home / "wlc.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    except OSError:
        # Unwritable home: run without a file handler
        root_logger.addHandler(logging.NullHandler())
    else:
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        root_logger.addHandler(file_handler)

    _CONFIGURED = True
