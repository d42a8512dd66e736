"""Orphan document detection."""

import logging

from ..vault._AbstractBackend import _AbstractBackend
from ..vault.Document import Document
from .parse_wikilinks import parse_wikilinks

logger = logging.getLogger(__name__)


def find_orphans(vault: _AbstractBackend) -> list[Document]:
    """Documents that no wiki link in the vault points to.

    Links are resolved with the vault's own link path resolution only, not the
    name fallbacks used for broken link detection, so a document reachable
    only by a literal name match still counts as an orphan. A link from a
    document to itself counts as an incoming link.
    """
    documents = list(vault.iter_documents())
    linked: set[str] = set()

    for document in documents:
        try:
            text = vault.read(document)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping unreadable %s: %s", document.path, exc)
            continue
        for link in parse_wikilinks(text):
            target = vault.resolve_linkpath(link.target, document.path)
            if target is not None:
                linked.add(target.path)

    return [document for document in documents if document.path not in linked]
