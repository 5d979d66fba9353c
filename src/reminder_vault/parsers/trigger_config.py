"""
Trigger marker configuration.

The trigger is the text that opens a reminder annotation, ``(@`` by default.
Documents and trigger lines receive a TriggerConfig explicitly so that two
documents can use different markers side by side.
"""

import os
from typing import Callable, Union

DEFAULT_TRIGGER = "(@"

# A plain string, or a zero-arg callable read on every access (e.g. a
# settings getter that can change while a document is open).
TriggerReference = Union[str, Callable[[], str]]


class TriggerConfig:
    """Holds the active auto-complete trigger."""

    def __init__(self, trigger: TriggerReference = DEFAULT_TRIGGER) -> None:
        self._trigger = trigger

    @classmethod
    def from_env(cls) -> "TriggerConfig":
        """Read AUTOCOMPLETE_TRIGGER, falling back to the default marker."""
        return cls(os.environ.get("AUTOCOMPLETE_TRIGGER", "") or DEFAULT_TRIGGER)

    def set_auto_complete_trigger(self, trigger: TriggerReference) -> None:
        self._trigger = trigger

    def get_auto_complete_trigger(self) -> str:
        if callable(self._trigger):
            return self._trigger()
        return self._trigger

    def __repr__(self) -> str:
        return f"TriggerConfig({self.get_auto_complete_trigger()!r})"
