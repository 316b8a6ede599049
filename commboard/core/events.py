"""
CommBoard Events

Community events, split into upcoming and past by calendar date.
"""

import logging
from typing import Optional

from ..db.models import Event, parse_date, parse_time
from .collection import CollectionService
from .store import EVENTS_KEY
from .views import count_upcoming_events, partition_events

logger = logging.getLogger(__name__)


def default_events() -> list[Event]:
    """Demonstration events shown on a fresh board."""
    return [Event.from_dict(data) for data in (
        {
            "id": "1",
            "title": "Monthly Community Meeting",
            "description": (
                "Join us for our monthly community discussion. We will cover budget "
                "updates, upcoming projects, and address resident concerns."
            ),
            "date": "2024-01-25",
            "time": "19:00",
            "location": "Community Hall",
            "organizer": "Community Board",
            "createdAt": "2024-01-10T09:00:00Z",
        },
        {
            "id": "2",
            "title": "Children's Art Workshop",
            "description": (
                "Creative art workshop for children aged 5-12. Materials provided. "
                "Parents welcome to stay and watch."
            ),
            "date": "2024-01-28",
            "time": "15:00",
            "location": "Community Club",
            "organizer": "Mishthi",
            "createdAt": "2024-01-12T10:30:00Z",
        },
        {
            "id": "3",
            "title": "Community Cleanup Drive",
            "description": (
                "Help us keep our community beautiful! Volunteers needed for our "
                "quarterly cleanup. Gloves and supplies provided."
            ),
            "date": "2024-02-03",
            "time": "09:00",
            "location": "Main Entrance",
            "organizer": "Environmental Committee",
            "createdAt": "2024-01-08T11:15:00Z",
        },
    )]


class EventService(CollectionService):
    """Event calendar."""

    key = EVENTS_KEY
    noun = "event"

    def default_records(self) -> list[Event]:
        return default_events()

    def list_events(self) -> list[Event]:
        return self._records()

    def partition(self) -> tuple[list[Event], list[Event]]:
        """(upcoming, past) relative to the clock's current date."""
        return partition_events(self._records(), self.clock.today())

    def upcoming(self, limit: Optional[int] = None) -> list[Event]:
        upcoming, _ = self.partition()
        return upcoming if limit is None else upcoming[:limit]

    def upcoming_count(self) -> int:
        return count_upcoming_events(self._records(), self.clock.today())

    def create(
        self,
        title: str,
        description: str,
        date: str,
        time: str,
        location: str
    ) -> tuple[Optional[Event], str]:
        """
        Add an event organized by the logged-in user.

        ``date`` is YYYY-MM-DD and ``time`` is HH:MM.

        Returns:
            (Event, "") on success
            (None, error_message) on failure
        """
        error = self._check_author() or self._check_required(
            title=title,
            description=description,
            date=date,
            time=time,
            location=location,
        )
        if error:
            return None, error

        try:
            event_date = parse_date(date.strip())
        except ValueError:
            return None, "Date must be in YYYY-MM-DD format."

        try:
            event_time = parse_time(time.strip())
        except ValueError:
            event_time = None
        if event_time is None or event_time.second or event_time.microsecond:
            return None, "Time must be in HH:MM format."

        event = Event(
            id=self._new_id(),
            title=title.strip(),
            description=description.strip(),
            date=event_date,
            time=event_time,
            location=location.strip(),
            organizer=self.session.current.name,
            created_at=self.clock.now(),
        )
        self._prepend(event)
        return event, ""
