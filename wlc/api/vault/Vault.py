"""Vault public API."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ._AbstractBackend import _AbstractBackend
from .Document import Document
from .VaultConfig import VaultConfig


class Vault(_AbstractBackend):
    """Facade for vault operations.

    Delegates to a concrete backend chosen by ``vault_config.type`` and acts as
    a context manager so backends holding resources are released.
    """

    def __init__(self, vault_config: VaultConfig):
        self.vault_config = vault_config
        self.type = vault_config.type
        self._impl: _AbstractBackend | None = None

    def __enter__(self) -> "Vault":
        from .VaultConfig import _BACKEND_REGISTRY

        backend_type = self.vault_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY)})")

        # Pattern: wlc.api.vault._obsidian._Backend
        module = __import__(f"{_BACKEND_REGISTRY[backend_type]}._Backend", fromlist=[""])
        self._impl = module._Backend(self.vault_config)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self._impl = None

    @property
    def impl(self) -> _AbstractBackend:
        if self._impl is None:
            raise RuntimeError("Vault not initialized (use 'with Vault(...)')")
        return self._impl

    @property
    def vault_path(self) -> Path:
        return self.impl.vault_path

    def iter_documents(self) -> Iterator[Document]:
        return self.impl.iter_documents()

    def get_document(self, path: str) -> Document | None:
        return self.impl.get_document(path)

    def read(self, document: Document) -> str:
        return self.impl.read(document)

    def write(self, document: Document, content: str) -> None:
        self.impl.write(document, content)

    def create(self, path: str, content: str) -> Document:
        return self.impl.create(path, content)

    def resolve_linkpath(self, linkpath: str, source_path: str) -> Document | None:
        return self.impl.resolve_linkpath(linkpath, source_path)

    def document_for(self, path: str) -> Document | None:
        """Look up a document from a vault-relative or absolute filesystem path."""
        candidate = Path(path).expanduser()
        if candidate.is_absolute():
            try:
                path = candidate.relative_to(self.vault_path).as_posix()
            except ValueError:
                return None
        return self.get_document(path)
