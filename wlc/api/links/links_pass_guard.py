"""In-flight guard for mutating links passes."""

import os
import time
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path

from ...utils.pid_running import pid_running
from ._constants import LOCK_FILENAME, LOCK_GRACE_SECS
from .PassInProgressError import PassInProgressError


def _read_owner(lock_path: Path) -> int | None:
    try:
        return int(lock_path.read_text(encoding="utf-8").strip())
    except (OSError, ValueError):
        return None


def _acquire(lock_path: Path) -> None:
    # Second attempt only after removing a stale lock
    for _ in range(2):
        try:
            fd = os.open(lock_path, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
        except FileExistsError:
            owner = _read_owner(lock_path)
            if owner is not None and pid_running(owner):
                raise PassInProgressError(lock_path, owner) from None
            if owner is None:
                try:
                    age = time.time() - lock_path.stat().st_mtime
                except FileNotFoundError:
                    continue
                if age < LOCK_GRACE_SECS:
                    raise PassInProgressError(lock_path, None) from None
            with suppress(FileNotFoundError):
                lock_path.unlink()
            continue
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(str(os.getpid()))
        return
    raise PassInProgressError(lock_path, _read_owner(lock_path))


@contextmanager
def links_pass_guard(home_dir: Path) -> Iterator[Path]:
    """Hold the exclusive links lock for the duration of a pass.

    Only one scan or clean pass may write vault documents at a time. A lock
    whose owner process is gone is treated as stale and replaced. A lock
    without a readable pid is replaced only once it is older than
    ``LOCK_GRACE_SECS``.

    Raises:
        PassInProgressError: If a live process already holds the lock
    """
    home_dir.mkdir(parents=True, exist_ok=True)
    lock_path = home_dir / LOCK_FILENAME
    _acquire(lock_path)
    try:
        yield lock_path
    finally:
        with suppress(FileNotFoundError):
            lock_path.unlink()
