"""Broken links registry loader."""

from ..vault._AbstractBackend import _AbstractBackend
from .parse_broken_links import parse_broken_links
from .RegistryNotFoundError import RegistryNotFoundError


def load_broken_links(vault: _AbstractBackend, path: str) -> list[str]:
    """Load the broken link keys from the document at ``path``.

    Read fresh on every call; the keys are never kept between commands.

    Returns:
        Keys in first-seen order, without duplicates

    Raises:
        RegistryNotFoundError: If ``path`` is not a document in the vault
    """
    document = vault.get_document(path)
    if document is None:
        raise RegistryNotFoundError(path)
    return parse_broken_links(vault.read(document))
