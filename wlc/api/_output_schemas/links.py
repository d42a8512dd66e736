"""Output schemas for links commands.

Every field is always present; failed commands fill counters with zero and
collections with empty values.
"""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class LinksScanOutput(BaseOutputSchema):
    """Output schema for links scan command."""

    report_path: str = Field(..., description="Vault path of the broken links report, empty if none was written")
    created: bool = Field(..., description="True if the report document was created rather than updated")
    documents_scanned: int = Field(..., description="Number of documents read")
    links_checked: int = Field(..., description="Number of link occurrences examined")
    broken_count: int = Field(..., description="Number of distinct broken link keys")
    broken: dict[str, list[str]] = Field(..., description="Broken link key -> paths of documents referencing it")


class LinksCleanOutput(BaseOutputSchema):
    """Output schema for links clean command."""

    registry_path: str = Field(..., description="Vault path of the broken links file")
    keys_loaded: int = Field(..., description="Number of broken link keys loaded")
    delete_text: bool = Field(..., description="True if whole links were deleted instead of unwrapped")
    files_total: int = Field(..., description="Number of documents visited")
    files_cleaned: int = Field(..., description="Number of documents rewritten")
    cleaned: list[str] = Field(..., description="Paths of rewritten documents")
    failed: list[str] = Field(..., description="Paths of documents that could not be read or written")


class LinksCleanFileOutput(BaseOutputSchema):
    """Output schema for links clean_file command."""

    registry_path: str = Field(..., description="Vault path of the broken links file")
    keys_loaded: int = Field(..., description="Number of broken link keys loaded")
    delete_text: bool = Field(..., description="True if whole links were deleted instead of unwrapped")
    path: str = Field(..., description="Vault path of the cleaned document")
    changed: bool = Field(..., description="True if the document was rewritten")


class LinksShowOutput(BaseOutputSchema):
    """Output schema for links show command."""

    registry_path: str = Field(..., description="Vault path of the broken links file")
    count: int = Field(..., description="Number of broken link keys loaded")
    preview: list[str] = Field(..., description="First keys in file order")
    truncated: bool = Field(..., description="True if more keys exist than shown")


class LinksOrphansOutput(BaseOutputSchema):
    """Output schema for links orphans command."""

    count: int = Field(..., description="Number of orphan documents")
    files: list[str] = Field(..., description="Paths of documents with no incoming links")
    report_path: str = Field(..., description="Vault path of the saved report, empty if not saved")


class LinksEmptyOutput(BaseOutputSchema):
    """Output schema for links empty command."""

    count: int = Field(..., description="Number of empty documents")
    files: list[str] = Field(..., description="Paths of documents whose content is blank")
    report_path: str = Field(..., description="Vault path of the saved report, empty if not saved")


schema_registry.register_output_schema("links", "scan", LinksScanOutput)
schema_registry.register_output_schema("links", "clean", LinksCleanOutput)
schema_registry.register_output_schema("links", "clean_file", LinksCleanFileOutput)
schema_registry.register_output_schema("links", "show", LinksShowOutput)
schema_registry.register_output_schema("links", "orphans", LinksOrphansOutput)
schema_registry.register_output_schema("links", "empty", LinksEmptyOutput)
