from .markdown import CHECKED_STATUSES, MarkdownDocument, Todo, TriggerLine
from .trigger_config import DEFAULT_TRIGGER, TriggerConfig

__all__ = [
    "CHECKED_STATUSES",
    "MarkdownDocument",
    "Todo",
    "TriggerLine",
    "DEFAULT_TRIGGER",
    "TriggerConfig",
]
