"""Write a generated report into the vault."""

from ..vault._AbstractBackend import _AbstractBackend


def write_report(vault: _AbstractBackend, path: str, content: str) -> bool:
    """Overwrite the document at ``path``, or create it.

    Returns:
        True if the document was created, False if an existing one was updated
    """
    existing = vault.get_document(path)
    if existing is not None:
        vault.write(existing, content)
        return False
    vault.create(path, content)
    return True
