"""Clean broken links from a single vault document."""

import logging
from collections.abc import Collection
from pathlib import Path

from ..log.append_log import append_log
from ..vault._AbstractBackend import _AbstractBackend
from ..vault.Document import Document
from ._constants import LOG_DOMAIN
from .clean_wikilinks import clean_wikilinks

logger = logging.getLogger(__name__)


def clean_document(
    vault: _AbstractBackend,
    document: Document,
    broken_keys: Collection[str],
    delete_text: bool,
    log_path: Path,
    failed: list[str] | None = None,
) -> bool:
    """Rewrite one document, writing back only if its content changed.

    A read or write failure is logged, the path is appended to ``failed`` when
    given, and the document counts as unchanged.

    Returns:
        True if the document was rewritten
    """
    try:
        content = vault.read(document)
        cleaned, changed = clean_wikilinks(content, broken_keys, delete_text)
        if changed:
            vault.write(document, cleaned)
    except (OSError, UnicodeDecodeError) as exc:
        message = f"Error cleaning file {document.path}: {exc}"
        logger.warning(message)
        append_log(log_path, LOG_DOMAIN, "WARN", message)
        if failed is not None:
            failed.append(document.path)
        return False
    return changed
