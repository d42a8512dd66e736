"""Concurrent pass error."""

from pathlib import Path


class PassInProgressError(Exception):
    """Raised when another scan or clean pass holds the links lock."""

    def __init__(self, lock_path: Path, owner_pid: int | None):
        self.lock_path = lock_path
        self.owner_pid = owner_pid
        owner = f" (pid {owner_pid})" if owner_pid is not None else ""
        super().__init__(f"Another links pass is already running{owner}; lock file: {lock_path}")
