"""Output schemas for log commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class LogStatusOutput(BaseOutputSchema):
    """Output schema for log status command.

    The ``warnings`` and ``errors`` fields carry the retained WARN and ERROR log lines.
    """

    log_path: str = Field(..., description="Path to the unified logfile")
    size_bytes: int = Field(..., description="Logfile size after pruning")
    entry_counts: dict[str, int] = Field(..., description="Retained entries per level")


class LogPruneOutput(BaseOutputSchema):
    """Output schema for log prune command."""

    log_path: str = Field(..., description="Path to the unified logfile")
    pruned: int = Field(..., description="Number of expired entries removed")
    kept: int = Field(..., description="Number of entries retained")


schema_registry.register_output_schema("log", "status", LogStatusOutput)
schema_registry.register_output_schema("log", "prune", LogPruneOutput)
