"""
CommBoard Storage Backends

Minimal read/write/delete interface the collection store depends on,
plus an in-memory implementation for tests and throwaway sessions.
"""

from abc import ABC, abstractmethod
from typing import Optional


class StorageBackend(ABC):
    """String-keyed, synchronous text storage."""

    def initialize(self):
        """Prepare the backend for use. No-op by default."""

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return stored text for key, or None if absent."""

    @abstractmethod
    def write(self, key: str, text: str):
        """Replace the stored text for key."""

    @abstractmethod
    def delete(self, key: str):
        """Remove key. Deleting a missing key is not an error."""

    def keys(self) -> list[str]:
        return []

    def close(self):
        """Release resources. No-op by default."""


class MemoryStorage(StorageBackend):
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, text: str):
        self._data[key] = text

    def delete(self, key: str):
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)
