"""
Line-preserving model of a markdown document with todos and reminder lines.

Main API:
    doc = MarkdownDocument("notes/today.md", content)
    todo = doc.get_todo(3)
    todo.set_checked(True)
    doc.to_markdown()  → content with only line 3's status character changed

Unlike a parse-and-regenerate serializer, nothing here re-renders a line from
semantic fields. Every entity keeps the exact text around the part it can
edit, so untouched lines (and the untouched parts of edited lines) come back
byte-for-byte.
"""

import re
from typing import List, Optional

from reminder_vault.models.reminder import TodoEdit
from reminder_vault.models.time import DateTime
from reminder_vault.parsers.trigger_config import TriggerConfig

# Status characters that count as "done"
CHECKED_STATUSES = frozenset({"x", "-"})


# ---------------------------------------------------------------------------
# Todo
# ---------------------------------------------------------------------------

class Todo:
    """
    A checkbox line.

    e.g. '  - [x] hello'
        prefix: '  - ['
        check:  'x'
        suffix: '] '
        body:   'hello'

    prefix + check + suffix + body is always the current line.
    """

    _REGEXP = re.compile(
        r"^(?P<prefix>((> ?)*)?\s*[-*][ ]+\[)(?P<check>.)(?P<suffix>\]\s+)(?P<body>.*)$"
    )

    def __init__(self, line_index: int, prefix: str, check: str, suffix: str, body: str) -> None:
        self.line_index = line_index
        self._prefix = prefix
        self.check = check
        self._suffix = suffix
        self.body = body

    @classmethod
    def parse(cls, line_index: int, line: str) -> Optional["Todo"]:
        """Return a Todo, or None if the line is not a checkbox item."""
        m = cls._REGEXP.match(line)
        if not m:
            return None
        return cls(line_index, m.group("prefix"), m.group("check"), m.group("suffix"), m.group("body"))

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def suffix(self) -> str:
        return self._suffix

    def is_checked(self) -> bool:
        return self.check in CHECKED_STATUSES

    def set_checked(self, checked: bool) -> None:
        # Overwrites: unchecking a "-" gives " ", not "-" back.
        self.check = "x" if checked else " "

    def apply(self, edit: TodoEdit) -> None:
        """Apply the non-None fields of a TodoEdit."""
        if edit.checked is not None:
            self.set_checked(edit.checked)
        if edit.body is not None:
            self.body = edit.body

    def get_header_length(self) -> int:
        """Length of everything before the body (caret offset of the body)."""
        return len(self._prefix) + 1 + len(self._suffix)

    def to_markdown(self) -> str:
        return f"{self._prefix}{self.check}{self._suffix}{self.body}"

    def clone(self) -> Optional["Todo"]:
        return Todo.parse(self.line_index, self.to_markdown())

    def __repr__(self) -> str:
        return f"Todo(line_index={self.line_index}, line={self.to_markdown()!r})"


# ---------------------------------------------------------------------------
# TriggerLine
# ---------------------------------------------------------------------------

class TriggerLine:
    """
    A non-checkbox line carrying a reminder annotation.

    e.g. '- Call mom (@2026-01-01 10:00) today'
        prefix: '- Call mom '
        timer:  '2026-01-01 10:00'  (not stored; rewritten or dropped on output)
        suffix: ' today'

    ``line`` is the source of truth and is what gets flushed into the
    document. Matching always looks for the literal "(@"; writing uses the
    configured trigger.
    """

    _REGEXP = re.compile(r"^(?P<prefix>.*?)(\(@(?P<timer>.+?)\))(?P<suffix>.*)$")

    def __init__(
        self,
        line_index: int,
        line: str,
        prefix: str = "",
        suffix: str = "",
        trigger_config: Optional[TriggerConfig] = None,
    ) -> None:
        self.line_index = line_index
        self.line = line
        self._prefix = prefix
        self._suffix = suffix
        self._trigger_config = trigger_config or TriggerConfig()

    @classmethod
    def parse(
        cls,
        line_index: int,
        line: str,
        trigger_config: Optional[TriggerConfig] = None,
    ) -> Optional["TriggerLine"]:
        """Return a TriggerLine for the first annotation, or None if there is none."""
        m = cls._REGEXP.match(line)
        if not m:
            return None
        return cls(line_index, line, m.group("prefix"), m.group("suffix"), trigger_config)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def suffix(self) -> str:
        return self._suffix

    def _annotated(self, payload: str) -> str:
        trigger = self._trigger_config.get_auto_complete_trigger()
        return f"{self._prefix}{trigger}{payload}){self._suffix}"

    def to_markdown(self, time: Optional[DateTime] = None) -> str:
        """
        Render the line with a new annotation, or without any.

        Args:
            time: New annotation time. None removes the annotation along with
                  the whitespace run in front of it.
        """
        if time is not None:
            return self._annotated(str(time))
        return f"{self._prefix.rstrip()}{self._suffix}"

    def set_new_date_time(self, time: DateTime) -> None:
        self.line = self.to_markdown(time)

    def set_raw_time(self, raw_time: str) -> None:
        """Write ``raw_time`` verbatim as the annotation payload."""
        self.line = self._annotated(raw_time)

    def set_checked(self, checked: bool) -> None:
        # Checking a reminder line drops its annotation; unchecking is a no-op.
        if checked:
            self.line = self.to_markdown()

    def __repr__(self) -> str:
        return f"TriggerLine(line_index={self.line_index}, line={self.line!r})"


# ---------------------------------------------------------------------------
# MarkdownDocument
# ---------------------------------------------------------------------------

class MarkdownDocument:
    """
    Ordered line buffer plus the todos and trigger lines found in it.

    Entities point back at their row through ``line_index``; their own fields
    hold the current content until to_markdown() flushes them into ``lines``.
    Both entity lists stay sorted by ``line_index``.
    """

    def __init__(
        self,
        file: str,
        content: str,
        trigger_config: Optional[TriggerConfig] = None,
    ) -> None:
        self.file = file
        self.trigger_config = trigger_config or TriggerConfig()
        self.lines: List[str] = []
        self._todos: List[Todo] = []
        self._trigger_lines: List[TriggerLine] = []
        self._parse(content)

    def _parse(self, content: str) -> None:
        self.lines = content.split("\n")
        self._classify()

    def _classify(self) -> None:
        self._todos = []
        self._trigger_lines = []
        trigger = self.trigger_config.get_auto_complete_trigger()

        for line_index, line in enumerate(self.lines):
            todo = Todo.parse(line_index, line)
            if todo:
                self._todos.append(todo)
                continue

            if trigger and trigger in line:
                trigger_line = TriggerLine.parse(line_index, line, self.trigger_config)
                if trigger_line:
                    self._trigger_lines.append(trigger_line)

    def reparse(self) -> None:
        """Flush pending edits, then rebuild every entity from the buffer."""
        self._apply_changes()
        self._classify()

    def get_todos(self) -> List[Todo]:
        return self._todos

    def get_trigger_lines(self) -> List[TriggerLine]:
        return self._trigger_lines

    def get_todo(self, line_index: int) -> Optional[Todo]:
        for todo in self._todos:
            if todo.line_index == line_index:
                return todo
        return None

    def get_trigger_line(self, line_index: int) -> Optional[TriggerLine]:
        for trigger_line in self._trigger_lines:
            if trigger_line.line_index == line_index:
                return trigger_line
        return None

    def insert_todo(self, line_index: int, todo: Todo) -> None:
        """
        Insert ``todo`` as a new line at ``line_index``.

        Every entity at or after ``line_index`` moves down one row; the new
        todo takes its place in ``get_todos()`` order without a re-parse.

        Raises:
            IndexError: if ``line_index`` is not in ``0..len(lines)``
        """
        if not 0 <= line_index <= len(self.lines):
            raise IndexError(f"Row {line_index} is outside {self.file} (0-{len(self.lines)})")

        todo.line_index = line_index
        self.lines.insert(line_index, todo.to_markdown())

        insert_pos = None
        for i, existing in enumerate(self._todos):
            if existing.line_index >= line_index:
                if insert_pos is None:
                    insert_pos = i
                existing.line_index += 1

        for trigger_line in self._trigger_lines:
            if trigger_line.line_index >= line_index:
                trigger_line.line_index += 1

        if insert_pos is None:
            self._todos.append(todo)
        else:
            self._todos.insert(insert_pos, todo)

    def _apply_changes(self) -> None:
        for todo in self._todos:
            self.lines[todo.line_index] = todo.to_markdown()
        for trigger_line in self._trigger_lines:
            self.lines[trigger_line.line_index] = trigger_line.line

    def to_markdown(self) -> str:
        self._apply_changes()
        return "\n".join(self.lines)
