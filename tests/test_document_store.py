"""
Tests for store/document_store.py.

Covers:
- resolve: relative/absolute paths, rejection of paths outside the vault
- load/save: exact round trip including CRLF line endings
- editing: writes only when content changed, nothing on error
- markdown_files / reminders: vault-wide scan respecting exclusions
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from reminder_vault.parsers.trigger_config import TriggerConfig
from reminder_vault.store.document_store import DocumentStore


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_vault(tmp_path: Path) -> Path:
    vault = tmp_path / "vault"
    (vault / "daily").mkdir(parents=True)
    (vault / ".obsidian").mkdir()

    (vault / "inbox.md").write_text(
        "# Inbox\n"
        "- [ ] buy milk\n"
        "- Call mom (@2026-02-15 10:00)\n",
        encoding="utf-8",
    )
    (vault / "daily" / "2026-02-11.md").write_bytes(
        b"Standup (@2026-02-11 09:30)\r\n- [x] done\r\n"
    )
    (vault / ".obsidian" / "ignored.md").write_text("Hidden (@2026-01-01)\n", encoding="utf-8")
    (vault / "notes.txt").write_text("Not markdown (@2026-01-01)\n", encoding="utf-8")
    return vault


@pytest.fixture
def vault(tmp_path):
    return _make_vault(tmp_path)


@pytest.fixture
def store(vault):
    return DocumentStore(vault, {".obsidian"})


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

class TestResolve:
    def test_relative(self, store, vault):
        assert store.resolve("inbox.md") == (vault / "inbox.md").resolve()

    def test_absolute_inside(self, store, vault):
        assert store.resolve(str(vault / "inbox.md")) == (vault / "inbox.md").resolve()

    def test_outside_rejected(self, store, tmp_path):
        with pytest.raises(ValueError):
            store.resolve("../secret.md")
        with pytest.raises(ValueError):
            store.resolve(str(tmp_path / "elsewhere.md"))


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------

class TestLoadSave:
    def test_load(self, store):
        doc = store.load("inbox.md")
        assert doc.file == "inbox.md"
        assert len(doc.get_todos()) == 1
        assert len(doc.get_trigger_lines()) == 1

    def test_load_nested_uses_posix_name(self, store):
        assert store.load("daily/2026-02-11.md").file == "daily/2026-02-11.md"

    def test_load_missing(self, store):
        with pytest.raises(FileNotFoundError):
            store.load("missing.md")

    def test_crlf_round_trip(self, store, vault):
        path = vault / "daily" / "2026-02-11.md"
        original = path.read_bytes()
        store.save(store.load("daily/2026-02-11.md"))
        assert path.read_bytes() == original

    def test_uses_trigger_config(self, vault):
        store = DocumentStore(vault, trigger_config=TriggerConfig("(!"))
        assert store.load("inbox.md").get_trigger_lines() == []


class TestEditing:
    def test_saves_changes(self, store, vault):
        with store.editing("inbox.md") as doc:
            doc.get_todo(1).set_checked(True)
        assert (vault / "inbox.md").read_text(encoding="utf-8") == (
            "# Inbox\n- [x] buy milk\n- Call mom (@2026-02-15 10:00)\n"
        )

    def test_crlf_preserved_on_edit(self, store, vault):
        with store.editing("daily/2026-02-11.md") as doc:
            doc.get_trigger_line(0).set_checked(True)
        assert (vault / "daily" / "2026-02-11.md").read_bytes() == b"Standup\r\n- [x] done\r\n"

    def test_no_write_without_changes(self, store, vault, monkeypatch):
        calls = []
        monkeypatch.setattr(store, "save", lambda doc: calls.append(doc))
        with store.editing("inbox.md") as doc:
            doc.get_todo(1).set_checked(False)  # already unchecked
        assert calls == []

    def test_no_write_on_error(self, store, vault):
        before = (vault / "inbox.md").read_text(encoding="utf-8")
        with pytest.raises(RuntimeError):
            with store.editing("inbox.md") as doc:
                doc.get_todo(1).set_checked(True)
                raise RuntimeError("boom")
        assert (vault / "inbox.md").read_text(encoding="utf-8") == before


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

class TestQueries:
    def test_markdown_files(self, store, vault):
        names = [store.relative_name(p) for p in store.markdown_files()]
        assert names == ["daily/2026-02-11.md", "inbox.md"]

    def test_reminders_single_file(self, store):
        reminders = store.reminders("inbox.md")
        assert [(r.file, r.row_number, r.title) for r in reminders] == [
            ("inbox.md", 2, "- Call mom"),
        ]

    def test_reminders_vault_wide(self, store):
        reminders = store.reminders()
        assert {r.key for r in reminders} == {"inbox.md:2", "daily/2026-02-11.md:0"}

    def test_reminders_without_exclusions(self, vault):
        store = DocumentStore(vault)
        assert ".obsidian/ignored.md:0" in {r.key for r in store.reminders()}

    def test_symlink_outside_vault_skipped(self, store, vault, tmp_path):
        outside = tmp_path / "outside.md"
        outside.write_text("Leak (@2026-01-01)\n", encoding="utf-8")
        (vault / "link.md").symlink_to(outside)

        names = [store.relative_name(p) for p in store.markdown_files()]
        assert "link.md" not in names
        assert {r.key for r in store.reminders()} == {"inbox.md:2", "daily/2026-02-11.md:0"}

