"""Check if a process ID is running."""

import os


def pid_running(pid: int) -> bool:
    """Check if a process ID is running.

    Args:
        pid: Process ID to check

    Returns:
        True if process is running, False otherwise
    """
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
    except PermissionError:
        # Exists but owned by another user
        return True
    except OSError:
        return False
    return True
