"""
CommBoard Announcements

Community notices with a priority level.
"""

import logging
from typing import Optional

from ..db.models import Announcement, Priority
from .collection import CollectionService
from .store import ANNOUNCEMENTS_KEY
from .views import count_by_priority, sort_by_created

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 120


def default_announcements() -> list[Announcement]:
    """Demonstration notices shown on a fresh board."""
    return [Announcement.from_dict(data) for data in (
        {
            "id": "1",
            "title": "Community Guidelines Updated",
            "content": (
                "We have updated our community guidelines to ensure a safe and pleasant "
                "environment for all residents. Please review the new policies regarding "
                "noise levels, parking, and common area usage."
            ),
            "author": "Community Admin",
            "createdAt": "2024-01-15T10:00:00Z",
            "priority": "high",
        },
        {
            "id": "2",
            "title": "Maintenance Schedule - Water Supply",
            "content": (
                "Scheduled water supply maintenance on January 20th from 9 AM to 3 PM. "
                "Please store water in advance for your daily needs."
            ),
            "author": "Maintenance Team",
            "createdAt": "2024-01-14T14:30:00Z",
            "priority": "medium",
        },
        {
            "id": "3",
            "title": "New Recycling Program",
            "content": (
                "We are implementing a new recycling program starting February 1st. "
                "Separate collection bins will be placed in each building. Guidelines "
                "for waste segregation are attached."
            ),
            "author": "Environmental Committee",
            "createdAt": "2024-01-13T09:15:00Z",
            "priority": "low",
        },
    )]


class AnnouncementService(CollectionService):
    """Announcement board."""

    key = ANNOUNCEMENTS_KEY
    noun = "announcement"

    def default_records(self) -> list[Announcement]:
        return default_announcements()

    def list_announcements(self) -> list[Announcement]:
        """All announcements, newest insert first."""
        return self._records()

    def recent(self, limit: int = 5) -> list[Announcement]:
        return sort_by_created(self._records())[:limit]

    def priority_counts(self) -> dict[str, int]:
        return count_by_priority(self._records())

    def create(
        self,
        title: str,
        content: str,
        priority: str = Priority.MEDIUM.value
    ) -> tuple[Optional[Announcement], str]:
        """
        Post a new announcement as the logged-in user.

        Returns:
            (Announcement, "") on success
            (None, error_message) on failure
        """
        error = self._check_author() or self._check_required(title=title, content=content)
        if error:
            return None, error

        if len(title.strip()) > MAX_TITLE_LENGTH:
            return None, f"Title too long (max {MAX_TITLE_LENGTH} chars)."

        try:
            level = Priority(priority)
        except ValueError:
            return None, f"Priority must be one of: {', '.join(p.value for p in Priority)}."

        announcement = Announcement(
            id=self._new_id(),
            title=title.strip(),
            content=content.strip(),
            author=self.session.current.name,
            created_at=self.clock.now(),
            priority=level,
        )
        self._prepend(announcement)
        return announcement, ""
