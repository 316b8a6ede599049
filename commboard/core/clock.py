"""
CommBoard Clock

Source of the current instant for timestamping and date partitioning.
"""

from datetime import date, datetime, timedelta, timezone


class Clock:
    """Wall clock. Returns timezone-aware local time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc).astimezone()

    def today(self) -> date:
        return self.now().date()


class FixedClock(Clock):
    """Clock frozen at a given instant, for tests."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def advance(self, **kwargs):
        """Move the clock forward by a timedelta built from kwargs."""
        self.instant = self.instant + timedelta(**kwargs)
