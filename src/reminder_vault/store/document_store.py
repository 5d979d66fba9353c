"""
Vault-rooted access to markdown documents.

Design:
    Every request loads the file fresh, edits the MarkdownDocument in memory
    and writes it back only if the serialized text changed. Nothing is cached
    between requests, so edits made in the editor are never clobbered by a
    stale copy.

The MCP server and the REST API run on different threads; load-modify-save
sequences are serialized with _lock (threading.RLock).
"""

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Set

from reminder_vault.formats.base import ReminderFormat
from reminder_vault.formats.plain import PlainReminderFormat
from reminder_vault.models.reminder import Reminder
from reminder_vault.parsers.markdown import MarkdownDocument
from reminder_vault.parsers.trigger_config import TriggerConfig

log = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class DocumentStore:
    """
    Loads and saves markdown documents under a vault root.

    Usage:
        store = DocumentStore(vault_root, {".git", ".obsidian"})
        with store.editing("daily/2026-02-15.md") as doc:
            doc.get_todo(4).set_checked(True)
    """

    def __init__(
        self,
        vault_root: Path,
        exclude_dirs: Optional[Set[str]] = None,
        reminder_format: Optional[ReminderFormat] = None,
        trigger_config: Optional[TriggerConfig] = None,
    ) -> None:
        self.vault_root = vault_root.resolve()
        self.exclude_dirs: Set[str] = set(exclude_dirs or ())
        self.reminder_format = reminder_format or PlainReminderFormat()
        self.trigger_config = trigger_config or TriggerConfig()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def resolve(self, file_path: str) -> Path:
        """
        Resolve a vault-relative (or absolute, in-vault) path.

        Raises:
            ValueError: if the path points outside the vault
        """
        path = Path(file_path)
        if not path.is_absolute():
            path = self.vault_root / path
        path = path.resolve()
        try:
            path.relative_to(self.vault_root)
        except ValueError:
            log.warning("Rejected path outside vault: %s", file_path)
            raise ValueError(f"Path is outside the vault: {file_path}")
        return path

    def relative_name(self, path: Path) -> str:
        return path.relative_to(self.vault_root).as_posix()

    def markdown_files(self) -> Iterator[Path]:
        """Yield every markdown file under the vault root, respecting exclusions."""
        for path in sorted(self.vault_root.rglob(f"*{MARKDOWN_SUFFIX}")):
            if not path.is_file():
                continue
            rel = path.relative_to(self.vault_root)
            if any(part in self.exclude_dirs for part in rel.parts[:-1]):
                continue
            # Symlinks may point anywhere; only files that resolve into the vault count
            try:
                path.resolve().relative_to(self.vault_root)
            except ValueError:
                log.warning("Skipping %s: resolves outside the vault", path)
                continue
            yield path

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    def _read(self, path: Path) -> str:
        # newline="" keeps "\r\n" endings intact through the round trip
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()

    def load(self, file_path: str) -> MarkdownDocument:
        """
        Parse a vault file into a MarkdownDocument.

        Raises:
            FileNotFoundError: if the file does not exist
        """
        path = self.resolve(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")
        content = self._read(path)
        log.debug("Loaded %s (%d chars)", path, len(content))
        return MarkdownDocument(self.relative_name(path), content, self.trigger_config)

    def save(self, doc: MarkdownDocument) -> None:
        path = self.resolve(doc.file)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(doc.to_markdown())
        log.debug("Saved %s", path)

    @contextmanager
    def editing(self, file_path: str) -> Iterator[MarkdownDocument]:
        """
        Load a document for editing; write it back on exit if it changed.

        Nothing is written if the block raises.
        """
        with self._lock:
            doc = self.load(file_path)
            original = doc.to_markdown()
            yield doc
            if doc.to_markdown() != original:
                self.save(doc)
                log.info("Updated %s", doc.file)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def reminders(self, file_path: Optional[str] = None) -> List[Reminder]:
        """
        Collect reminders from one file, or from every markdown file in the vault.

        Files that cannot be read during a vault-wide scan are logged and skipped.
        """
        if file_path is not None:
            doc = self.load(file_path)
            return self.reminder_format.parse(doc)

        results: List[Reminder] = []
        for path in self.markdown_files():
            try:
                doc = self.load(str(path))
            except (OSError, UnicodeDecodeError):
                log.exception("Failed to read %s", path)
                continue
            results.extend(self.reminder_format.parse(doc))
        return results
