"""
CommBoard Session Store

Holds the currently authenticated identity, persisted under a reserved
key of the collection store, and validates logins against the static
credential directory.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..db.models import Identity, Role
from .crypto import PasswordManager
from .store import CollectionStore, SESSION_KEY

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Invalid email or password"


@dataclass(frozen=True)
class DirectoryEntry:
    """Compiled-in credential record."""
    id: str
    name: str
    email: str
    role: Role
    password: str


# Demo accounts. Not user-editable at runtime.
DEFAULT_DIRECTORY = (
    DirectoryEntry(
        id="1",
        name="Board Admin",
        email="admin@community.example",
        role=Role.ADMIN,
        password="admin123",
    ),
    DirectoryEntry(
        id="2",
        name="Sample Resident",
        email="resident@community.example",
        role=Role.USER,
        password="resident123",
    ),
)


@dataclass(frozen=True)
class _Account:
    id: str
    name: str
    email: str
    role: Role
    password_hash: str


class CredentialDirectory:
    """
    Static table of valid credentials.

    Passwords are hashed when the directory is built. Lookups for unknown
    emails still run one verification against a throwaway hash, so both
    failure modes cost the same.
    """

    def __init__(
        self,
        entries: Iterable[DirectoryEntry] = DEFAULT_DIRECTORY,
        passwords: Optional[PasswordManager] = None
    ):
        self.passwords = passwords or PasswordManager()
        self._accounts: dict[str, _Account] = {}

        for entry in entries:
            if entry.email in self._accounts:
                raise ValueError(f"Duplicate directory email: {entry.email}")
            if any(a.id == entry.id for a in self._accounts.values()):
                raise ValueError(f"Duplicate directory id: {entry.id}")
            self._accounts[entry.email] = _Account(
                id=entry.id,
                name=entry.name,
                email=entry.email,
                role=entry.role,
                password_hash=self.passwords.hash_password(entry.password),
            )

        self._dummy_hash = self.passwords.hash_password("")

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, email: str) -> bool:
        return email in self._accounts

    def authenticate(self, email: str, password: str) -> Optional[Identity]:
        """
        Check credentials.

        Returns a fresh Identity on match, None otherwise.
        """
        account = self._accounts.get(email)
        hash_str = account.password_hash if account else self._dummy_hash
        matched = self.passwords.verify_password(password, hash_str)

        if not account or not matched:
            return None

        return Identity(
            id=account.id,
            name=account.name,
            email=account.email,
            role=account.role,
            is_authenticated=True,
        )


class SessionStore:
    """
    Process-wide session state.

    ``load()`` restores a persisted identity at startup; ``login()`` and
    ``logout()`` are the only mutators afterwards.
    """

    def __init__(self, store: CollectionStore, directory: CredentialDirectory):
        self.store = store
        self.directory = directory
        self._current: Optional[Identity] = None

    @property
    def current(self) -> Optional[Identity]:
        return self._current

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    @property
    def is_admin(self) -> bool:
        return self._current is not None and self._current.is_admin

    def load(self) -> Optional[Identity]:
        """
        Restore the persisted session, if any.

        The stored identity is trusted as-is; credentials are not checked
        again. Unreadable data means no session.
        """
        identity = self.store.peek(SESSION_KEY)
        if identity is not None and not identity.is_authenticated:
            identity = None

        self._current = identity
        if identity:
            logger.info(f"Restored session for {identity.email}")
        return identity

    def login(self, email: str, password: str) -> tuple[Optional[Identity], str]:
        """
        Authenticate and start a session.

        Returns:
            (Identity, "") on success
            (None, error_message) on failure; prior session is untouched
        """
        identity = self.directory.authenticate(email, password)
        if identity is None:
            logger.info("Rejected login attempt")
            return None, LOGIN_FAILED_MESSAGE

        self.store.set(SESSION_KEY, identity)
        self._current = identity
        logger.info(f"Login: {identity.email} ({identity.role.value})")
        return identity, ""

    def logout(self):
        """End the session. Safe to call with no active session."""
        previous = self._current
        self._current = None
        self.store.remove(SESSION_KEY)
        if previous:
            logger.info(f"Logout: {previous.email}")
