"""
CommBoard Formatting Utilities

Helper functions for formatting output.
"""

from datetime import date, datetime, time
from typing import Optional


def format_timestamp(value: Optional[datetime]) -> str:
    """
    Format a timestamp in local time.

    Returns:
        Formatted string like "2025-12-10 14:32"
    """
    if value is None:
        return "Never"

    return value.astimezone().strftime("%Y-%m-%d %H:%M")


def format_event_date(value: date) -> str:
    """
    Format an event date.

    Returns:
        Formatted string like "Thursday, January 25, 2024"
    """
    return f"{value.strftime('%A, %B')} {value.day}, {value.year}"


def format_event_time(value: time) -> str:
    """
    Format an event time on a 12-hour clock.

    Returns:
        Formatted string like "7:00 PM"
    """
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def truncate(text: str, max_length: int = 50, suffix: str = "...") -> str:
    """
    Truncate text to maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length including suffix
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix


def pad_right(text: str, width: int) -> str:
    """Pad text to width with spaces on the right."""
    return text.ljust(width)[:width]
