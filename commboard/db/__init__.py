"""CommBoard Database Module - key/value storage backends and record models."""

from .backend import StorageBackend, MemoryStorage
from .connection import SQLiteStorage
from .models import Identity, Announcement, Event, Posting, Contact

__all__ = [
    "StorageBackend",
    "MemoryStorage",
    "SQLiteStorage",
    "Identity",
    "Announcement",
    "Event",
    "Posting",
    "Contact",
]
