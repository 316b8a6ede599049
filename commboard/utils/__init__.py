"""CommBoard Utilities Module."""

from .formatting import format_timestamp, format_event_date, format_event_time, truncate

__all__ = ["format_timestamp", "format_event_date", "format_event_time", "truncate"]
