"""Links configuration."""

from pydantic import BaseModel, ConfigDict, Field


class LinksConfig(BaseModel):
    """Broken-link cleaning configuration."""

    model_config = ConfigDict(extra="forbid")

    broken_links_file: str = Field(
        "broken links output.md",
        min_length=1,
        description="Vault path of the broken links report / hand-authored list",
    )
    delete_text: bool = Field(
        False,
        description="Delete the whole link instead of keeping its text without the [[ ]] brackets",
    )
