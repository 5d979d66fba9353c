from .time import DateTime
from .reminder import Reminder, ReminderEdit, ReminderInsertion, TodoEdit

__all__ = [
    "DateTime",
    "Reminder",
    "ReminderEdit",
    "ReminderInsertion",
    "TodoEdit",
]
