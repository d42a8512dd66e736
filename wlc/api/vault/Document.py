"""Document model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True)
class Document:
    """A document in the vault, identified by its vault-relative path.

    ``path`` is the POSIX path relative to the vault root (``notes/Home.md``),
    ``name`` the filename with extension (``Home.md``) and ``basename`` the
    filename without extension (``Home``).
    """

    path: str
    name: str
    basename: str

    @classmethod
    def from_path(cls, path: str) -> "Document":
        pure = PurePosixPath(path)
        return cls(path=pure.as_posix(), name=pure.name, basename=pure.stem)

    @property
    def folder(self) -> str:
        """Vault-relative folder of the document, empty string at the vault root."""
        parent = PurePosixPath(self.path).parent.as_posix()
        return "" if parent == "." else parent
