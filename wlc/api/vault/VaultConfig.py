"""Vault configuration management."""

from __future__ import annotations

__all__ = ["VaultConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VaultConfig(BaseModel):
    """Vault configuration model."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., description="Vault backend type")
    base_dir: str = Field(..., description="Path to vault root directory")

    @field_validator("type")
    @classmethod
    def _known_backend(cls, v: str) -> str:
        if v not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {v!r} (supported: {list(_BACKEND_REGISTRY)})")
        return v

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        from ..config.normalize_path import normalize_path

        if not v:
            raise ValueError("base_dir must not be empty")
        return str(normalize_path(v))


_BACKEND_REGISTRY = {
    "obsidian": "wlc.api.vault._obsidian",
}
