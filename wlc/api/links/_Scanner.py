"""Vault broken-link scanner (private)."""

from __future__ import annotations

from collections.abc import Collection

from ..vault._AbstractBackend import _AbstractBackend
from .LinkResolver import LinkResolver
from .parse_wikilinks import parse_wikilinks
from .ScanReport import ScanReport


class _Scanner:
    """Classify every wiki link in the vault as resolved or broken."""

    def __init__(self, vault: _AbstractBackend, exclude: Collection[str] = ()):
        self.vault = vault
        # Paths whose links are not checked (the broken links report itself)
        self.exclude = set(exclude)

    def scan(self) -> ScanReport:
        """Scan all documents once, sequentially.

        Every document still counts as a link target, excluded ones included.
        A document that cannot be read is recorded in ``errors`` and skipped.
        """
        report = ScanReport()
        documents = list(self.vault.iter_documents())
        resolver = LinkResolver(self.vault, documents)

        for document in documents:
            if document.path in self.exclude:
                continue
            try:
                text = self.vault.read(document)
            except (OSError, UnicodeDecodeError) as exc:
                report.errors.append(f"Cannot read {document.path}: {exc}")
                continue
            report.documents_scanned += 1

            for link in parse_wikilinks(text):
                report.total_links_checked += 1
                resolution = resolver.resolve(link.target.strip(), document.path)
                if resolution.is_broken:
                    report.add_broken(link.key, document.path)

        return report
