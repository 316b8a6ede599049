"""
CommBoard Main Board Class

Central orchestrator wiring storage, session and page services.
"""

import logging
from typing import Optional

from ..config import Config
from ..db.backend import StorageBackend
from .clock import Clock
from .crypto import PasswordManager
from .session import CredentialDirectory, SessionStore
from .store import CollectionStore

logger = logging.getLogger(__name__)


class CommunityBoard:
    """
    Main CommBoard class - owns all board components.

    Responsibilities:
    - Open the storage backend
    - Build the collection store and session store
    - Restore any persisted session
    - Expose the page services
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        backend: Optional[StorageBackend] = None,
        clock: Optional[Clock] = None,
        directory: Optional[CredentialDirectory] = None
    ):
        """
        Initialize CommunityBoard.

        Args:
            config: Loaded configuration (defaults if None)
            backend: Storage backend (SQLite at config.storage.path if None)
            clock: Time source (wall clock if None)
            directory: Credential directory (built-in accounts if None)
        """
        self.config = config or Config()
        self.clock = clock or Clock()

        if backend is None:
            from ..db.connection import SQLiteStorage
            backend = SQLiteStorage(self.config.storage.path)
        self.backend = backend

        if directory is None:
            directory = CredentialDirectory(passwords=PasswordManager(
                time_cost=self.config.crypto.argon2_time_cost,
                memory_cost_kb=self.config.crypto.argon2_memory_kb,
                parallelism=self.config.crypto.argon2_parallelism
            ))
        self.directory = directory

        self.store = CollectionStore(self.backend)
        self.session = SessionStore(self.store, self.directory)

        # These will be initialized in setup()
        self.announcements = None
        self.events = None
        self.marketplace = None
        self.contacts = None
        self.admin = None

        self._ready = False

    def setup(self) -> "CommunityBoard":
        """Open storage, restore the session and create the services."""
        if self._ready:
            return self

        self.backend.initialize()
        self.session.load()

        from .announcements import AnnouncementService
        from .events import EventService
        from .marketplace import MarketplaceService
        from .contacts import ContactService
        from .admin import AdminService

        self.announcements = AnnouncementService(self)
        self.events = EventService(self)
        self.marketplace = MarketplaceService(self)
        self.contacts = ContactService(self)
        self.admin = AdminService(self)

        self._ready = True
        logger.info(f"{self.config.board.name} ready")
        return self

    def close(self):
        """Release the storage backend."""
        self.backend.close()
        self._ready = False

    def __enter__(self) -> "CommunityBoard":
        return self.setup()

    def __exit__(self, exc_type, exc, tb):
        self.close()
