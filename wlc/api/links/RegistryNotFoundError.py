"""Broken links file lookup error."""


class RegistryNotFoundError(Exception):
    """Raised when the configured broken links file is not a document in the vault."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Broken links file not found: {path}")
