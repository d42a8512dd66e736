"""Abstract base class for vault implementations."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from .Document import Document


class _AbstractBackend(ABC):
    """Abstract interface for a document store.

    This is the whole surface the link engine uses: enumerate documents, read
    and write content, create and look up documents, and resolve a link path
    the way the host application does.
    """

    @property
    @abstractmethod
    def vault_path(self) -> Path:
        """Root directory of the vault."""

    @abstractmethod
    def iter_documents(self) -> Iterator[Document]:
        """Iterate over all markdown documents in the vault."""

    @abstractmethod
    def get_document(self, path: str) -> Document | None:
        """Return the document (any file) at a vault-relative path, or None."""

    @abstractmethod
    def read(self, document: Document) -> str:
        """Read a document's content."""

    @abstractmethod
    def write(self, document: Document, content: str) -> None:
        """Replace a document's content."""

    @abstractmethod
    def create(self, path: str, content: str) -> Document:
        """Create a new document; raises FileExistsError if it already exists."""

    @abstractmethod
    def resolve_linkpath(self, linkpath: str, source_path: str) -> Document | None:
        """Resolve a link path written in ``source_path`` to a document, or None."""
