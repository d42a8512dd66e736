"""Log API module."""

from .._output_schemas.log import LogPruneOutput, LogStatusOutput

__all__ = [
    "LogPruneOutput",
    "LogStatusOutput",
]
