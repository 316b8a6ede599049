"""
Tests for CommBoard Session Store and Credential Directory
"""

import json

import pytest

from commboard.core.crypto import PasswordManager
from commboard.core.session import (
    CredentialDirectory,
    DirectoryEntry,
    SessionStore,
    DEFAULT_DIRECTORY,
    LOGIN_FAILED_MESSAGE,
)
from commboard.core.store import CollectionStore, SESSION_KEY
from commboard.db.backend import MemoryStorage
from commboard.db.models import Role


ADMIN_EMAIL = "admin@community.example"
ADMIN_PASSWORD = "admin123"
USER_EMAIL = "resident@community.example"
USER_PASSWORD = "resident123"


def fast_passwords() -> PasswordManager:
    """Cheap Argon2 parameters for tests."""
    return PasswordManager(time_cost=1, memory_cost_kb=8192, parallelism=1)


class TestPasswordManager:
    """Tests for Argon2 password hashing."""

    def setup_method(self):
        self.passwords = fast_passwords()

    def test_hash_and_verify(self):
        """A hash verifies its own password only."""
        hash_str = self.passwords.hash_password("secret")

        assert self.passwords.verify_password("secret", hash_str) is True
        assert self.passwords.verify_password("Secret", hash_str) is False

    def test_hashes_are_salted(self):
        """Hashing twice gives different strings."""
        assert self.passwords.hash_password("x") != self.passwords.hash_password("x")

    def test_malformed_hash(self):
        """A garbage hash never verifies."""
        assert self.passwords.verify_password("x", "not-a-hash") is False


class TestCredentialDirectory:
    """Tests for the static directory."""

    def setup_method(self):
        self.directory = CredentialDirectory(passwords=fast_passwords())

    def test_default_entries(self):
        """Built-in directory has one admin and one user."""
        assert len(self.directory) == 2
        assert ADMIN_EMAIL in self.directory
        roles = {entry.role for entry in DEFAULT_DIRECTORY}
        assert roles == {Role.ADMIN, Role.USER}

    def test_authenticate_success(self):
        """Matching credentials return an authenticated identity."""
        identity = self.directory.authenticate(USER_EMAIL, USER_PASSWORD)

        assert identity is not None
        assert identity.role is Role.USER
        assert identity.is_authenticated

    def test_wrong_password(self):
        """Wrong password returns None."""
        assert self.directory.authenticate(USER_EMAIL, "nope") is None

    def test_unknown_email(self):
        """Unknown email returns None."""
        assert self.directory.authenticate("who@example.com", USER_PASSWORD) is None

    def test_identities_are_detached(self):
        """Each login yields a separate identity object."""
        first = self.directory.authenticate(ADMIN_EMAIL, ADMIN_PASSWORD)
        second = self.directory.authenticate(ADMIN_EMAIL, ADMIN_PASSWORD)

        assert first == second
        assert first is not second

    def test_duplicate_email_rejected(self):
        """Directory emails must be unique."""
        entry = DirectoryEntry("9", "X", "x@example.com", Role.USER, "pw")
        other = DirectoryEntry("10", "Y", "x@example.com", Role.USER, "pw")

        with pytest.raises(ValueError):
            CredentialDirectory([entry, other], passwords=fast_passwords())

    def test_duplicate_id_rejected(self):
        """Directory ids must be unique."""
        entry = DirectoryEntry("9", "X", "x@example.com", Role.USER, "pw")
        other = DirectoryEntry("9", "Y", "y@example.com", Role.USER, "pw")

        with pytest.raises(ValueError):
            CredentialDirectory([entry, other], passwords=fast_passwords())


class TestSessionStore:
    """Tests for login, logout and session restore."""

    @classmethod
    def setup_class(cls):
        cls.directory = CredentialDirectory(passwords=fast_passwords())

    def setup_method(self):
        self.backend = MemoryStorage()
        self.store = CollectionStore(self.backend)
        self.session = SessionStore(self.store, self.directory)
        self.session.load()

    def test_starts_logged_out(self):
        """Empty storage means no session."""
        assert self.session.current is None
        assert not self.session.is_authenticated
        assert not self.session.is_admin

    def test_login_admin(self):
        """Admin login returns identity with admin role."""
        identity, error = self.session.login(ADMIN_EMAIL, ADMIN_PASSWORD)

        assert error == ""
        assert identity.role is Role.ADMIN
        assert identity.is_authenticated
        assert self.session.is_admin
        assert self.session.current == identity

    def test_login_persists(self):
        """Successful login writes the session key."""
        self.session.login(USER_EMAIL, USER_PASSWORD)
        data = json.loads(self.backend.read(SESSION_KEY))

        assert data["email"] == USER_EMAIL
        assert data["role"] == "user"
        assert data["isAuthenticated"] is True
        assert "password" not in data

    def test_failed_login(self):
        """Bad credentials give a generic error and no session."""
        identity, error = self.session.login(ADMIN_EMAIL, "wrong")

        assert identity is None
        assert error == LOGIN_FAILED_MESSAGE
        assert self.session.current is None
        assert self.backend.read(SESSION_KEY) is None

    def test_same_error_for_unknown_email(self):
        """Unknown email and wrong password are indistinguishable."""
        _, wrong_password = self.session.login(ADMIN_EMAIL, "wrong")
        _, unknown_email = self.session.login("nobody@example.com", ADMIN_PASSWORD)

        assert wrong_password == unknown_email

    def test_failed_login_keeps_prior_session(self):
        """A rejected login leaves the active session alone."""
        admin, _ = self.session.login(ADMIN_EMAIL, ADMIN_PASSWORD)
        identity, _ = self.session.login(USER_EMAIL, "wrong")

        assert identity is None
        assert self.session.current == admin
        assert json.loads(self.backend.read(SESSION_KEY))["email"] == ADMIN_EMAIL

    def test_session_survives_restart(self):
        """A new store over the same storage restores the session."""
        identity, _ = self.session.login(USER_EMAIL, USER_PASSWORD)

        restarted = SessionStore(CollectionStore(self.backend), self.directory)
        assert restarted.load() == identity
        assert restarted.current == identity

    def test_logout_then_reload(self):
        """After logout, a reload finds no session."""
        self.session.login(USER_EMAIL, USER_PASSWORD)
        self.session.logout()

        assert self.session.current is None
        restarted = SessionStore(CollectionStore(self.backend), self.directory)
        assert restarted.load() is None

    def test_logout_is_idempotent(self):
        """Logging out with no session is not an error."""
        self.session.logout()
        self.session.logout()

        assert self.session.current is None

    def test_corrupt_session_means_logged_out(self):
        """Unreadable session data loads as no session."""
        self.backend.write(SESSION_KEY, "garbage{")

        assert self.session.load() is None
        assert not self.session.is_authenticated

    def test_unauthenticated_session_ignored(self):
        """A stored identity without the authenticated flag is ignored."""
        self.backend.write(SESSION_KEY, json.dumps({
            "id": "2",
            "name": "Sample Resident",
            "email": USER_EMAIL,
            "role": "user",
            "isAuthenticated": False,
        }))

        assert self.session.load() is None

    def test_non_boolean_authenticated_flag_ignored(self):
        """A text "false" flag is unreadable, not truthy."""
        self.backend.write(SESSION_KEY, json.dumps({
            "id": "2",
            "name": "Sample Resident",
            "email": USER_EMAIL,
            "role": "user",
            "isAuthenticated": "false",
        }))

        assert self.session.load() is None
        assert not self.session.is_authenticated

    def test_restored_session_trusted(self):
        """Persisted sessions are not re-checked against the directory."""
        self.backend.write(SESSION_KEY, json.dumps({
            "id": "77",
            "name": "Former Member",
            "email": "former@example.com",
            "role": "user",
            "isAuthenticated": True,
        }))

        identity = self.session.load()
        assert identity is not None
        assert identity.email == "former@example.com"
