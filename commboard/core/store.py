"""
CommBoard Collection Store

Key/value store over a StorageBackend. Values are serialized to JSON text
on write and decoded on read; well-known keys carry a schema so reads
return typed records instead of raw JSON.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..db.backend import StorageBackend
from ..db.models import Announcement, ClearResult, Contact, Event, Identity, Posting

logger = logging.getLogger(__name__)


# Storage keys
ANNOUNCEMENTS_KEY = "announcements"
EVENTS_KEY = "events"
POSTINGS_KEY = "postings"
CONTACTS_KEY = "contacts"
SESSION_KEY = "communityUser"

COLLECTION_KEYS = (ANNOUNCEMENTS_KEY, EVENTS_KEY, POSTINGS_KEY, CONTACTS_KEY)


@dataclass(frozen=True)
class Schema:
    """
    Encoding for the value stored under one key.

    ``record_type`` must provide ``to_dict()`` and ``from_dict()``. With
    ``many=True`` the value is a list of records, otherwise a single
    record or None.
    """
    record_type: type
    many: bool = True

    def encode(self, value: Any) -> Any:
        if self.many:
            return [record.to_dict() for record in value]
        return value.to_dict() if value is not None else None

    def decode(self, data: Any) -> Any:
        if self.many:
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            return [self._decode_one(item) for item in data]
        if data is None:
            return None
        return self._decode_one(data)

    def _decode_one(self, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        return self.record_type.from_dict(data)


DEFAULT_SCHEMAS: dict[str, Schema] = {
    ANNOUNCEMENTS_KEY: Schema(Announcement),
    EVENTS_KEY: Schema(Event),
    POSTINGS_KEY: Schema(Posting),
    CONTACTS_KEY: Schema(Contact),
    SESSION_KEY: Schema(Identity, many=False),
}

# Raised by json.loads (JSONDecodeError is a ValueError) and by from_dict
# on missing fields, bad enum values or unparseable dates.
_DECODE_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


class CollectionStore:
    """
    Persistent key/value store with read-through default seeding.

    Every mutation is written through to the backend before returning.
    Keys are independent; nothing here spans more than one key.
    """

    def __init__(
        self,
        backend: StorageBackend,
        schemas: Optional[dict[str, Schema]] = None
    ):
        self.backend = backend
        self.schemas = dict(DEFAULT_SCHEMAS if schemas is None else schemas)

    def get(self, key: str, default: Any) -> Any:
        """
        Return the value stored under key.

        If nothing is stored, or the stored text cannot be decoded, the
        default is persisted and returned.
        """
        found, value = self._load(key)
        if found:
            return value

        self.set(key, default)
        return default

    def peek(self, key: str, default: Any = None) -> Any:
        """Return the stored value, or default, without seeding."""
        found, value = self._load(key)
        return value if found else default

    def set(self, key: str, value: Any):
        """Replace the value under key and persist it."""
        text = json.dumps(self._encode(key, value))
        self.backend.write(key, text)
        logger.debug(f"Stored '{key}' ({len(text)} bytes)")

    def remove(self, key: str):
        """Delete the value under key."""
        self.backend.delete(key)
        logger.debug(f"Removed '{key}'")

    def clear(self, keys) -> ClearResult:
        """
        Remove each key independently.

        A failure on one key does not stop the others; failures are
        collected in the returned ClearResult.
        """
        result = ClearResult()
        for key in keys:
            try:
                self.remove(key)
                result.cleared.append(key)
            except Exception as e:
                logger.error(f"Failed to clear '{key}': {e}")
                result.failed[key] = str(e)
        return result

    def _load(self, key: str) -> tuple[bool, Any]:
        text = self.backend.read(key)
        if text is None:
            return False, None

        try:
            return True, self._decode(key, json.loads(text))
        except _DECODE_ERRORS as e:
            logger.warning(f"Discarding unreadable value for '{key}': {e}")
            return False, None

    def _encode(self, key: str, value: Any) -> Any:
        schema = self.schemas.get(key)
        return schema.encode(value) if schema else value

    def _decode(self, key: str, data: Any) -> Any:
        schema = self.schemas.get(key)
        return schema.decode(data) if schema else data
