from .reminder_tools import (
    handle_reminder_list,
    handle_reminder_update,
    handle_todo_insert,
    handle_todo_list,
    handle_todo_update,
    register_reminder_tools,
)

__all__ = [
    "handle_reminder_list",
    "handle_reminder_update",
    "handle_todo_insert",
    "handle_todo_list",
    "handle_todo_update",
    "register_reminder_tools",
]
