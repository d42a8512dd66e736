"""Unit tests for the Vault facade and Document model."""

import pytest

from tests.conftest import write_notes
from wlc.api.vault.Document import Document
from wlc.api.vault.Vault import Vault
from wlc.api.vault.VaultConfig import VaultConfig

pytestmark = pytest.mark.vault


def test_document_from_path():
    document = Document.from_path("notes/Sub/Deep.md")
    assert document.name == "Deep.md"
    assert document.basename == "Deep"
    assert document.folder == "notes/Sub"
    assert Document.from_path("Home.md").folder == ""


def test_vault_requires_context(vault_dir):
    vault = Vault(VaultConfig(type="obsidian", base_dir=str(vault_dir)))
    with pytest.raises(RuntimeError, match="Vault not initialized"):
        list(vault.iter_documents())


def test_vault_delegates(vault_dir):
    write_notes(vault_dir, {"Home.md": "[[Plan]]", "Plan.md": ""})

    with Vault(VaultConfig(type="obsidian", base_dir=str(vault_dir))) as vault:
        assert vault.vault_path == vault_dir
        assert [document.path for document in vault.iter_documents()] == ["Home.md", "Plan.md"]
        home = vault.get_document("Home.md")
        assert vault.read(home) == "[[Plan]]"
        assert vault.resolve_linkpath("Plan", "Home.md").path == "Plan.md"
        vault.create("New.md", "x")
        assert vault.get_document("New.md") is not None


def test_vault_document_for(vault_dir, tmp_path):
    write_notes(vault_dir, {"notes/Home.md": ""})

    with Vault(VaultConfig(type="obsidian", base_dir=str(vault_dir))) as vault:
        assert vault.document_for("notes/Home.md").path == "notes/Home.md"
        assert vault.document_for(str(vault_dir / "notes" / "Home.md")).path == "notes/Home.md"
        assert vault.document_for(str(tmp_path / "elsewhere.md")) is None
        assert vault.document_for("notes/Missing.md") is None
