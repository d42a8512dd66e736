"""Top-level WLC configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..links.LinksConfig import LinksConfig
from ..vault.VaultConfig import VaultConfig
from .LogConfig import LogConfig
from .normalize_path import normalize_path


class WLCConfig(BaseModel):
    """Top-level configuration for WLC.

    Loaded from ``$WLC_HOME/config.json`` and passed explicitly to every
    component that needs it.
    """

    model_config = ConfigDict(extra="forbid")

    vault: VaultConfig
    links: LinksConfig = Field(default_factory=LinksConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get WLC home directory based on WLC_HOME or default to ~/.wlc."""
        wlc_home_env = os.environ.get("WLC_HOME")
        if wlc_home_env:
            return normalize_path(wlc_home_env)
        return Path.home() / ".wlc"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the WLC home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def get_logfile_path(cls) -> Path:
        """Get path to the unified logfile inside the WLC home directory."""
        return cls.get_home_dir() / "logfile"

    @classmethod
    def load(cls) -> "WLCConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert WLCConfig instance to a dictionary for serialization."""
        return {
            "vault": self.vault.model_dump(),
            "links": self.links.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Writes to a temp file and renames it over the config, so an interrupted
        save never leaves a truncated config behind.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
