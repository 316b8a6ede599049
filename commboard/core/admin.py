"""
CommBoard Administration

Dashboard statistics, the recent activity feed and the destructive
clear-all operation. Every operation requires an admin session.
"""

import logging
from typing import TYPE_CHECKING, Callable, Optional

from ..db.models import ActivityItem, Announcement, ClearResult, Event
from .store import COLLECTION_KEYS, SESSION_KEY
from .views import BoardStats, compute_stats, recent_activity

if TYPE_CHECKING:
    from .board import CommunityBoard

logger = logging.getLogger(__name__)

ADMIN_REQUIRED_MESSAGE = "You need admin privileges to access this page."
CLEAR_CONFIRM_PROMPT = (
    "Are you sure you want to clear all community data? "
    "This action cannot be undone."
)


class AdminService:
    """Admin dashboard operations."""

    def __init__(self, board: "CommunityBoard"):
        self.board = board
        self.store = board.store
        self.session = board.session
        self.activity = board.config.activity

    def _check_admin(self) -> str:
        if not self.session.is_admin:
            return ADMIN_REQUIRED_MESSAGE
        return ""

    def stats(self) -> tuple[Optional[BoardStats], str]:
        """Collection totals and highlight counts."""
        error = self._check_admin()
        if error:
            return None, error

        return compute_stats(
            self.board.announcements.list_announcements(),
            self.board.events.list_events(),
            self.board.marketplace.list_postings(),
            self.board.contacts.list_contacts(),
            self.board.clock.today(),
        ), ""

    def recent_activity(self) -> tuple[Optional[list[ActivityItem]], str]:
        """Newest announcements, events and postings, merged."""
        error = self._check_admin()
        if error:
            return None, error

        return recent_activity(
            self.board.announcements.list_announcements(),
            self.board.events.list_events(),
            self.board.marketplace.list_postings(),
            per_collection=self.activity.per_collection,
            limit=self.activity.max_items,
        ), ""

    def recent_announcements(self) -> tuple[Optional[list[Announcement]], str]:
        error = self._check_admin()
        if error:
            return None, error
        return self.board.announcements.recent(self.activity.recent_limit), ""

    def upcoming_events(self) -> tuple[Optional[list[Event]], str]:
        error = self._check_admin()
        if error:
            return None, error
        return self.board.events.upcoming(self.activity.recent_limit), ""

    def clear_all_data(
        self,
        confirm: Callable[[str], bool],
        include_session: bool = False
    ) -> tuple[Optional[ClearResult], str]:
        """
        Remove every community collection.

        ``confirm`` receives the warning text and must return True for
        anything to be deleted. Keys are cleared one at a time; failures
        are reported in the result rather than aborting the rest. With
        ``include_session`` the admin's own session is ended as well.

        Returns:
            (ClearResult, "") once clearing ran, even if some keys failed
            (None, error_message) if refused or cancelled
        """
        error = self._check_admin()
        if error:
            return None, error

        if not confirm(CLEAR_CONFIRM_PROMPT):
            return None, "Clear cancelled."

        admin = self.session.current
        result = self.store.clear(COLLECTION_KEYS)

        if include_session:
            try:
                self.session.logout()
                result.cleared.append(SESSION_KEY)
            except Exception as e:
                logger.error(f"Failed to clear session: {e}")
                result.failed[SESSION_KEY] = str(e)

        if result.ok:
            logger.warning(f"All community data cleared by {admin.email}")
        else:
            logger.warning(
                f"Community data partially cleared by {admin.email}; "
                f"failed keys: {', '.join(result.failed)}"
            )
        return result, ""
