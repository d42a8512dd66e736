"""Link resolution outcome."""

from dataclasses import dataclass

from ..vault.Document import Document
from ._constants import BROKEN


@dataclass(frozen=True)
class LinkResolution:
    document: Document | None
    method: str

    @property
    def is_broken(self) -> bool:
        return self.method == BROKEN
