"""
Tests for server.py environment configuration.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from reminder_vault.formats.base import ReminderFormatParameterKey
from reminder_vault.server import _parse_exclude_dirs, build_store, main


def test_parse_exclude_dirs():
    assert _parse_exclude_dirs(" .git, node_modules ,,") == {".git", "node_modules"}


def test_build_store_defaults(tmp_path, monkeypatch):
    for name in ("EXCLUDE_DIRS", "AUTOCOMPLETE_TRIGGER", "LINK_DATES_TO_DAILY_NOTES"):
        monkeypatch.delenv(name, raising=False)

    store = build_store(tmp_path)
    assert store.vault_root == tmp_path.resolve()
    assert store.exclude_dirs == {".git", ".obsidian", "node_modules", ".trash"}
    assert store.trigger_config.get_auto_complete_trigger() == "(@"
    assert store.reminder_format.config.get_parameter(
        ReminderFormatParameterKey.LINK_DATES_TO_DAILY_NOTES
    ) is False


def test_build_store_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("EXCLUDE_DIRS", "archive")
    monkeypatch.setenv("AUTOCOMPLETE_TRIGGER", "(!")
    monkeypatch.setenv("LINK_DATES_TO_DAILY_NOTES", "true")

    store = build_store(tmp_path)
    assert store.exclude_dirs == {"archive"}
    assert store.trigger_config.get_auto_complete_trigger() == "(!"
    assert store.reminder_format.config.get_parameter(
        ReminderFormatParameterKey.LINK_DATES_TO_DAILY_NOTES
    ) is True


@pytest.mark.parametrize("vault_root", ["", "does/not/exist"])
def test_main_requires_vault_root(tmp_path, monkeypatch, vault_root):
    if vault_root:
        vault_root = str(tmp_path / vault_root)
    monkeypatch.setenv("VAULT_ROOT", vault_root)
    with pytest.raises(SystemExit):
        main()
