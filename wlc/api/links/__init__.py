"""Links API module: broken link detection and cleaning, orphan and empty notes."""

from .._output_schemas.links import (
    LinksCleanFileOutput,
    LinksCleanOutput,
    LinksEmptyOutput,
    LinksOrphansOutput,
    LinksScanOutput,
    LinksShowOutput,
)

__all__ = [
    "LinksCleanFileOutput",
    "LinksCleanOutput",
    "LinksEmptyOutput",
    "LinksOrphansOutput",
    "LinksScanOutput",
    "LinksShowOutput",
]
