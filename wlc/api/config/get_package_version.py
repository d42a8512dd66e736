"""Installed package version lookup."""

from importlib.metadata import PackageNotFoundError, version


def get_package_version() -> str:
    """Return the installed wlc version, or ``"unknown"`` when running from a bare checkout."""
    try:
        return version("wlc")
    except PackageNotFoundError:
        return "unknown"
