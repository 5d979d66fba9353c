from .dates import parse_date_time, resolve_date_time

__all__ = [
    "parse_date_time",
    "resolve_date_time",
]
