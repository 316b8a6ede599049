"""
CommBoard Database Connection Manager

SQLite-backed key/value storage with WAL mode for concurrent reads.
"""

import sqlite3
import logging
import time
from pathlib import Path
from typing import Optional

from .backend import StorageBackend

logger = logging.getLogger(__name__)


class SQLiteStorage(StorageBackend):
    """
    Durable key/value storage for CommBoard.

    Every key maps to one text blob in the ``kv_store`` table. The
    connection runs in autocommit mode, so each write is durable as soon
    as the call returns.
    """

    def __init__(self, path: str):
        """
        Initialize storage.

        Args:
            path: Path to SQLite database file, or ":memory:"
        """
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    def initialize(self):
        """Open the connection and apply the schema."""
        if self.path != ":memory:":
            db_path = Path(self.path).expanduser()
            db_path.parent.mkdir(parents=True, exist_ok=True)
            target = str(db_path)
        else:
            target = self.path

        self._conn = sqlite3.connect(
            target,
            check_same_thread=False,
            isolation_level=None  # Autocommit mode
        )

        # Enable WAL mode for concurrent reads
        self._conn.execute("PRAGMA journal_mode=WAL")

        self._run_migrations()

        logger.info(f"Storage initialized: {self.path}")

    def _run_migrations(self):
        """Run database migrations."""
        self._conn.execute("""
            CREATE TABLE IF NOT EXISTS _migrations (
                id INTEGER PRIMARY KEY,
                name TEXT UNIQUE NOT NULL,
                applied_at INTEGER NOT NULL
            )
        """)

        applied = {
            row[0] for row in
            self._conn.execute("SELECT name FROM _migrations").fetchall()
        }

        migrations = [
            ("001_kv_store", self._migration_001_kv_store),
        ]

        for name, func in migrations:
            if name not in applied:
                logger.info(f"Running migration: {name}")
                func()
                self._conn.execute(
                    "INSERT INTO _migrations (name, applied_at) VALUES (?, ?)",
                    (name, int(time.time() * 1_000_000))
                )

    def _migration_001_kv_store(self):
        """Key/value table."""
        self._conn.executescript("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key             TEXT PRIMARY KEY,
                value           TEXT NOT NULL,
                updated_at_us   INTEGER NOT NULL
            );
        """)

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Storage not initialized")
        return self._conn

    def read(self, key: str) -> Optional[str]:
        row = self.connection.execute(
            "SELECT value FROM kv_store WHERE key = ?",
            (key,)
        ).fetchone()
        return row[0] if row else None

    def write(self, key: str, text: str):
        now_us = int(time.time() * 1_000_000)
        self.connection.execute("""
            INSERT INTO kv_store (key, value, updated_at_us) VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                value = excluded.value,
                updated_at_us = excluded.updated_at_us
        """, (key, text, now_us))

    def delete(self, key: str):
        self.connection.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def keys(self) -> list[str]:
        rows = self.connection.execute(
            "SELECT key FROM kv_store ORDER BY key"
        ).fetchall()
        return [row[0] for row in rows]

    def close(self):
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None
            logger.info("Storage connection closed")
