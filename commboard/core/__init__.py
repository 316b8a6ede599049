"""CommBoard Core Module - board orchestrator, stores, services and views."""

from .board import CommunityBoard
from .clock import Clock, FixedClock
from .store import CollectionStore
from .session import SessionStore, CredentialDirectory
from .announcements import AnnouncementService
from .events import EventService
from .marketplace import MarketplaceService
from .contacts import ContactService
from .admin import AdminService

__all__ = [
    "CommunityBoard",
    "Clock",
    "FixedClock",
    "CollectionStore",
    "SessionStore",
    "CredentialDirectory",
    "AnnouncementService",
    "EventService",
    "MarketplaceService",
    "ContactService",
    "AdminService",
]
