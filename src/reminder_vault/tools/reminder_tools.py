"""
Reminder and todo tool handlers.

Core logic lives in handle_* functions (return dicts).
MCP wrappers in register_reminder_tools() serialize to JSON strings.
"""

import json
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from reminder_vault.models.reminder import ReminderEdit, TodoEdit
from reminder_vault.parsers.markdown import Todo
from reminder_vault.utils.dates import resolve_date_time

log = logging.getLogger(__name__)


def _reminder_to_dict(reminder) -> dict:
    return {
        "file_path": reminder.file,
        "row_number": reminder.row_number,
        "title": reminder.title,
        "time": str(reminder.time),
        "completed": reminder.completed,
        "ref": reminder.key,
    }


def _line_break_error(field: str, value: Optional[str]) -> Optional[dict]:
    if value is not None and ("\n" in value or "\r" in value):
        return {"error": f"{field} must be a single line"}
    return None


def _todo_to_dict(todo, file_path: str) -> dict:
    return {
        "file_path": file_path,
        "row_number": todo.line_index,
        "check": todo.check,
        "checked": todo.is_checked(),
        "body": todo.body,
        "line": todo.to_markdown(),
    }


# ---------------------------------------------------------------------------
# Handler functions (return dicts, shared by MCP tools and REST API)
# ---------------------------------------------------------------------------


def handle_reminder_list(store, *, file_path: Optional[str] = None) -> list[dict]:
    reminders = store.reminders(file_path)
    reminders.sort(key=lambda r: (r.time.to_datetime(), r.file, r.row_number))
    return [_reminder_to_dict(r) for r in reminders]


async def handle_reminder_update(
    store,
    *,
    file_path: str,
    row_number: int,
    checked: Optional[bool] = None,
    time: Optional[str] = None,
    raw_time: Optional[str] = None,
) -> dict:
    error = _line_break_error("raw_time", raw_time)
    if error:
        return error

    new_time = None
    if time:
        new_time = resolve_date_time(time)
        if new_time is None:
            return {"error": f"Could not parse time '{time}'"}

    edit = ReminderEdit(checked=checked, time=new_time, raw_time=raw_time)
    reminder_format = store.reminder_format

    # store.editing holds a threading lock and does blocking file I/O. This
    # only works because modify() never suspends; a format whose modify()
    # really awaits must not be called inside this block.
    with store.editing(file_path) as doc:
        reminder = next((r for r in reminder_format.parse(doc) if r.row_number == row_number), None)
        if reminder is None:
            return {"error": f"No reminder at {file_path}:{row_number}"}
        if not await reminder_format.modify(doc, reminder, edit):
            return {"error": f"Reminder at {file_path}:{row_number} could not be updated"}
        line = doc.get_trigger_line(row_number).line

    return {"file_path": file_path, "row_number": row_number, "line": line}


def handle_todo_list(store, *, file_path: str, checked: Optional[bool] = None) -> list[dict]:
    doc = store.load(file_path)
    todos = doc.get_todos()
    if checked is not None:
        todos = [t for t in todos if t.is_checked() == checked]
    return [_todo_to_dict(t, doc.file) for t in todos]


def handle_todo_update(
    store,
    *,
    file_path: str,
    row_number: int,
    checked: Optional[bool] = None,
    body: Optional[str] = None,
) -> dict:
    error = _line_break_error("body", body)
    if error:
        return error

    with store.editing(file_path) as doc:
        todo = doc.get_todo(row_number)
        if todo is None:
            return {"error": f"No todo at {file_path}:{row_number}"}
        todo.apply(TodoEdit(checked=checked, body=body))
        return _todo_to_dict(todo, doc.file)


def handle_todo_insert(
    store,
    *,
    file_path: str,
    row_number: int,
    body: str,
    checked: bool = False,
) -> dict:
    """
    Insert a new todo line at ``row_number``.

    The new line copies the list prefix (quote markers, indentation, bullet)
    of the todo directly above it, or uses a plain "- [ ]" otherwise.
    """
    error = _line_break_error("body", body)
    if error:
        return error

    with store.editing(file_path) as doc:
        if not 0 <= row_number <= len(doc.lines):
            return {"error": f"Row {row_number} is outside {file_path} (0-{len(doc.lines)})"}

        above = doc.get_todo(row_number - 1)
        prefix = above.prefix if above else "- ["
        todo = Todo.parse(row_number, f"{prefix}{'x' if checked else ' '}] {body}")
        if todo is None:
            return {"error": f"Invalid todo text: {body!r}"}

        doc.insert_todo(row_number, todo)
        return _todo_to_dict(todo, doc.file)


# ---------------------------------------------------------------------------
# MCP registration
# ---------------------------------------------------------------------------


def register_reminder_tools(mcp: FastMCP, store) -> None:
    """Register all reminder and todo tools with the MCP server."""

    @mcp.tool()
    def reminder_list(file_path: Optional[str] = None) -> str:
        """
        List reminders, soonest first.

        A reminder is a non-checkbox line with a "(@YYYY-MM-DD[ HH:MM])"
        annotation.

        Args:
            file_path: Vault-relative markdown file; omit to scan the whole vault

        Returns:
            JSON array of reminder objects
        """
        try:
            return json.dumps(handle_reminder_list(store, file_path=file_path), indent=2)
        except Exception as e:
            return json.dumps({"error": str(e)})

    @mcp.tool()
    async def reminder_update(
        file_path: str,
        row_number: int,
        checked: Optional[bool] = None,
        time: Optional[str] = None,
        raw_time: Optional[str] = None,
    ) -> str:
        """
        Update a reminder line in place.

        Only the annotation changes; the rest of the line is kept as written.

        Args:
            file_path: Vault-relative markdown file
            row_number: Zero-based line number of the reminder
            checked: True removes the annotation (marks the reminder done)
            time: New time ("2026-02-15 09:00", "tomorrow 10:00", "friday")
            raw_time: Annotation text to write verbatim (takes precedence over time)

        Returns:
            JSON with the updated line, or an error
        """
        try:
            result = await handle_reminder_update(
                store,
                file_path=file_path,
                row_number=row_number,
                checked=checked,
                time=time,
                raw_time=raw_time,
            )
            return json.dumps(result, indent=2)
        except Exception as e:
            return json.dumps({"error": str(e)})

    @mcp.tool()
    def todo_list(file_path: str, checked: Optional[bool] = None) -> str:
        """
        List checkbox items in a markdown file.

        Args:
            file_path: Vault-relative markdown file
            checked: Filter by done (True) or open (False); omit for all

        Returns:
            JSON array of todo objects
        """
        try:
            return json.dumps(handle_todo_list(store, file_path=file_path, checked=checked), indent=2)
        except Exception as e:
            return json.dumps({"error": str(e)})

    @mcp.tool()
    def todo_update(
        file_path: str,
        row_number: int,
        checked: Optional[bool] = None,
        body: Optional[str] = None,
    ) -> str:
        """
        Check/uncheck a todo or replace its text.

        Args:
            file_path: Vault-relative markdown file
            row_number: Zero-based line number of the todo
            checked: New completion state
            body: New text after the checkbox

        Returns:
            JSON todo object, or an error
        """
        try:
            return json.dumps(
                handle_todo_update(
                    store, file_path=file_path, row_number=row_number, checked=checked, body=body
                ),
                indent=2,
            )
        except Exception as e:
            return json.dumps({"error": str(e)})

    @mcp.tool()
    def todo_insert(file_path: str, row_number: int, body: str, checked: bool = False) -> str:
        """
        Insert a new todo as line ``row_number``, pushing later lines down.

        Args:
            file_path: Vault-relative markdown file
            row_number: Zero-based line number for the new todo
            body: Todo text
            checked: Create the todo already checked

        Returns:
            JSON todo object, or an error
        """
        try:
            return json.dumps(
                handle_todo_insert(
                    store, file_path=file_path, row_number=row_number, body=body, checked=checked
                ),
                indent=2,
            )
        except Exception as e:
            return json.dumps({"error": str(e)})
