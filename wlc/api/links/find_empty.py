"""Empty document detection."""

import logging

from ..vault._AbstractBackend import _AbstractBackend
from ..vault.Document import Document

logger = logging.getLogger(__name__)


def find_empty(vault: _AbstractBackend) -> list[Document]:
    """Documents whose content is empty once surrounding whitespace is stripped."""
    empty: list[Document] = []
    for document in vault.iter_documents():
        try:
            content = vault.read(document)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping unreadable %s: %s", document.path, exc)
            continue
        if not content.strip():
            empty.append(document)
    return empty
