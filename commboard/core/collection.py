"""
CommBoard Collection Services

Shared plumbing for the page services: each service owns one collection
key, seeds it with its defaults and prepends new records.
"""

import logging
import uuid
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .board import CommunityBoard

logger = logging.getLogger(__name__)


class CollectionService:
    """Base class for services that own one stored collection."""

    key = ""
    noun = "item"

    def __init__(self, board: "CommunityBoard"):
        self.board = board
        self.store = board.store
        self.session = board.session
        self.clock = board.clock

    def default_records(self) -> list:
        """Records seeded on first access. Built fresh on every call."""
        return []

    def _records(self) -> list:
        return self.store.get(self.key, self.default_records())

    def _prepend(self, record):
        records = self._records()
        self.store.set(self.key, [record] + records)
        logger.info(f"New {self.noun} {record.id} in {self.key} ({len(records) + 1} total)")

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    def _check_author(self) -> str:
        """Return an error message unless someone is logged in."""
        if not self.session.is_authenticated:
            return f"Please login to add a {self.noun}."
        return ""

    @staticmethod
    def _check_required(**fields: Optional[str]) -> str:
        """Return an error message for the first blank field, else ""."""
        for name, value in fields.items():
            if value is None or not str(value).strip():
                return f"{name.replace('_', ' ').capitalize()} is required."
        return ""
