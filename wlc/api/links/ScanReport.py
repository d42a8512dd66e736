"""Scan report model."""

from dataclasses import dataclass, field


@dataclass
class ScanReport:
    """Broken links found by one scan.

    ``broken`` maps each broken link key to the paths of the documents
    containing it, in the order they were found (a path repeats once per
    occurrence).
    """

    broken: dict[str, list[str]] = field(default_factory=dict)
    total_links_checked: int = 0
    documents_scanned: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def total_broken(self) -> int:
        return len(self.broken)

    def add_broken(self, key: str, path: str) -> None:
        self.broken.setdefault(key, []).append(path)
