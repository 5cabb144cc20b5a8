"""SQLite database connection and schema management."""

import sqlite3
from pathlib import Path

import structlog

from shared.dal import StorageError

logger = structlog.get_logger()

_BUSY_TIMEOUT_MS = 5000

# Creation is additive only: existing tables and rows are never touched.
_SCHEMA_SQL = """\
CREATE TABLE IF NOT EXISTS players (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL DEFAULT '',
    team TEXT NOT NULL DEFAULT '',
    points INTEGER NOT NULL DEFAULT 0,
    assists INTEGER NOT NULL DEFAULT 0,
    rebounds INTEGER NOT NULL DEFAULT 0
);
"""


class Database:
    """SQLite database wrapper owning one long-lived connection."""

    def __init__(self, path: str | Path) -> None:
        self._path = str(path)
        self._conn: sqlite3.Connection | None = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def connection(self) -> sqlite3.Connection:
        """Return the active connection or raise if disconnected."""
        if self._conn is None:
            raise StorageError("Database is not connected")
        return self._conn

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def connect(self) -> None:
        """Open the database file, apply pragmas, and create the schema if absent."""
        Path(self._path).parent.mkdir(parents=True, exist_ok=True)

        try:
            conn = sqlite3.connect(self._path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to open database: {self._path}") from exc

        try:
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute(f"PRAGMA busy_timeout={_BUSY_TIMEOUT_MS}")
            conn.executescript(_SCHEMA_SQL)
        except sqlite3.Error as exc:
            conn.close()
            raise StorageError(f"Failed to initialize schema in {self._path}") from exc

        self._conn = conn
        logger.info("database connected", path=self._path)

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info("database closed", path=self._path)
