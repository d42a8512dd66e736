"""Vault API module: the document store the link engine reads and writes through."""

from .Document import Document
from .Vault import Vault
from .VaultConfig import VaultConfig

__all__ = [
    "Document",
    "Vault",
    "VaultConfig",
]
