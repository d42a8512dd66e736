"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from wlc.api.config.WLCConfig import WLCConfig

MARKERS = {
    "unit": "Fast, isolated tests",
    "integration": "Tests running whole commands or the CLI against a vault",
    "links": "Link engine tests",
    "vault": "Vault backend tests",
    "config": "Configuration tests",
    "log": "Logfile tests",
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(vault_dir: Path | str = "~/vault") -> dict:
    """Minimal valid WLC configuration dict for testing."""
    return {
        "vault": {
            "type": "obsidian",
            "base_dir": str(vault_dir),
        },
        "links": {
            "broken_links_file": "broken links output.md",
            "delete_text": False,
        },
    }


def write_notes(vault_dir: Path, notes: dict[str, str]) -> None:
    """Write ``{vault-relative path: content}`` into the vault."""
    for rel, content in notes.items():
        path = vault_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Empty vault directory."""
    d = tmp_path / "vault"
    d.mkdir()
    return d


@pytest.fixture
def wlc_home(tmp_path: Path, monkeypatch, vault_dir: Path) -> Path:
    """Set up WLC_HOME with a config pointing at ``vault_dir``.

    Returns:
        Path to the WLC home directory
    """
    home = tmp_path / ".wlc"
    home.mkdir()
    monkeypatch.setenv("WLC_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict(vault_dir)), encoding="utf-8")
    return home


@pytest.fixture
def set_links_config(wlc_home: Path):
    """Rewrite the ``links`` section of the test config."""

    def _set(**links) -> None:
        config_path = wlc_home / "config.json"
        data = json.loads(config_path.read_text(encoding="utf-8"))
        data["links"].update(links)
        config_path.write_text(json.dumps(data), encoding="utf-8")

    return _set


@pytest.fixture
def wlc_config(wlc_home: Path) -> WLCConfig:
    """The loaded test config."""
    return WLCConfig.load()


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
