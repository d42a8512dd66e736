"""
Obsidian vault backend for WLC.

Documents are the files under the vault root; hidden folders (``.obsidian``,
``.trash``, ...) are never part of the vault. Link paths are resolved the way
Obsidian resolves ``[[...]]`` targets.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterator
from pathlib import Path

from ...config.normalize_path import normalize_path
from .._AbstractBackend import _AbstractBackend
from ..Document import Document
from ..VaultConfig import VaultConfig

MARKDOWN_SUFFIX = ".md"


class _Backend(_AbstractBackend):
    """Filesystem-backed Obsidian vault."""

    def __init__(self, vault_config: VaultConfig):
        if not vault_config.base_dir:
            raise ValueError("vault.base_dir is required")

        self._vault_path = normalize_path(vault_config.base_dir)
        if not self._vault_path.is_dir():
            raise ValueError(f"Vault directory not found: {self._vault_path}")

        # path -> Document for every file, and lowercased filename -> Documents;
        # both built lazily and dropped on create()
        self._files: dict[str, Document] | None = None
        self._by_name: dict[str, list[Document]] = {}

    @property
    def vault_path(self) -> Path:
        return self._vault_path

    def _index(self) -> dict[str, Document]:
        if self._files is None:
            files: dict[str, Document] = {}
            by_name: dict[str, list[Document]] = {}
            for path in sorted(self._vault_path.rglob("*")):
                rel = path.relative_to(self._vault_path)
                if any(part.startswith(".") for part in rel.parts):
                    continue
                if not path.is_file():
                    continue
                document = Document.from_path(rel.as_posix())
                files[document.path] = document
                by_name.setdefault(document.name.lower(), []).append(document)
            self._files = files
            self._by_name = by_name
        return self._files

    def _abs(self, path: str) -> Path:
        """Absolute path for a vault-relative path; rejects paths escaping the vault."""
        normalized = posixpath.normpath(path.replace("\\", "/").lstrip("/"))
        if normalized == ".." or normalized.startswith("../"):
            raise ValueError(f"Path escapes the vault: {path}")
        return self._vault_path / normalized

    def iter_documents(self) -> Iterator[Document]:
        """Iterate all markdown documents in the vault, in path order."""
        for document in self._index().values():
            if document.path.lower().endswith(MARKDOWN_SUFFIX):
                yield document

    def get_document(self, path: str) -> Document | None:
        try:
            abs_path = self._abs(path)
        except ValueError:
            return None
        if not abs_path.is_file():
            return None
        return Document.from_path(abs_path.relative_to(self._vault_path).as_posix())

    def read(self, document: Document) -> str:
        return self._abs(document.path).read_text(encoding="utf-8")

    def write(self, document: Document, content: str) -> None:
        self._abs(document.path).write_text(content, encoding="utf-8")

    def create(self, path: str, content: str) -> Document:
        abs_path = self._abs(path)
        if abs_path.exists():
            raise FileExistsError(f"Document already exists: {path}")
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        abs_path.write_text(content, encoding="utf-8")
        self._files = None
        return Document.from_path(abs_path.relative_to(self._vault_path).as_posix())

    def resolve_linkpath(self, linkpath: str, source_path: str) -> Document | None:
        """Resolve a link path the way Obsidian does.

        The subpath (``#Heading``, ``#^block``) is ignored and an empty link
        path points at the source document itself. Each candidate name (as
        written, then with ``.md`` appended) is tried relative to the source
        folder, then relative to the vault root, then as a case-insensitive
        path suffix anywhere in the vault. Among suffix matches the source's
        own folder wins, then the shortest path.
        """
        files = self._index()
        linkpath = linkpath.split("#", 1)[0].strip().replace("\\", "/")
        if not linkpath:
            return files.get(source_path)

        source_folder = Document.from_path(source_path).folder
        candidates = [linkpath]
        if not linkpath.lower().endswith(MARKDOWN_SUFFIX):
            candidates.append(linkpath + MARKDOWN_SUFFIX)

        for candidate in candidates:
            for base in (source_folder, ""):
                path = posixpath.normpath(posixpath.join(base, candidate.lstrip("/")))
                if path in files:
                    return files[path]

        for candidate in candidates:
            wanted = candidate.lstrip("/").lower()
            # Any suffix match shares the candidate's final component
            matches = [
                document
                for document in self._by_name.get(posixpath.basename(wanted), [])
                if document.path.lower() == wanted or document.path.lower().endswith("/" + wanted)
            ]
            if matches:
                matches.sort(key=lambda d: (d.folder != source_folder, len(d.path), d.path))
                return matches[0]
        return None
