"""Link resolver (UNO: single class)."""

from collections.abc import Iterable

from ..vault._AbstractBackend import _AbstractBackend
from ..vault.Document import Document
from ._constants import (
    BROKEN,
    MARKDOWN_SUFFIX,
    RESOLVED_BY_FILENAME,
    RESOLVED_BY_LINKPATH,
    RESOLVED_BY_NAME,
)
from .LinkResolution import LinkResolution


class LinkResolver:
    """Decides whether a link target resolves to a document.

    Three checks in order, the first success wins:

    1. the vault's own link path resolution, relative to the source document;
    2. the target as-is against every document's basename, path and filename;
    3. the target with ``.md`` appended against the same names.

    The name index catches documents the vault's resolver misses, such as
    link forms it does not recognize. Matching is exact: no case folding and
    no fuzzy matching.
    """

    def __init__(self, vault: _AbstractBackend, documents: Iterable[Document]):
        self.vault = vault
        self.names: dict[str, Document] = {}
        for document in documents:
            for name in (document.basename, document.path, document.name):
                self.names.setdefault(name, document)

    def resolve(self, target: str, source_path: str) -> LinkResolution:
        """Resolve a link target written in the document at ``source_path``."""
        document = self.vault.resolve_linkpath(target, source_path)
        if document is not None:
            return LinkResolution(document=document, method=RESOLVED_BY_LINKPATH)
        if target in self.names:
            return LinkResolution(document=self.names[target], method=RESOLVED_BY_NAME)
        if target + MARKDOWN_SUFFIX in self.names:
            return LinkResolution(document=self.names[target + MARKDOWN_SUFFIX], method=RESOLVED_BY_FILENAME)
        return LinkResolution(document=None, method=BROKEN)
