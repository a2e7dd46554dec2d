# Area: Shared
"""
mindforge._shared.database — Database Initialization
=====================================================

Handles SQLite initialization and connection management for the
key-value table that holds durable game data.
"""

import sqlite3
import logging
from typing import Optional

logger = logging.getLogger("mindforge.database")

DEFAULT_DB_PATH = "mindforge.db"

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


def get_connection(db_path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """
    Get a database connection.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with row factory set
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: str = DEFAULT_DB_PATH) -> None:
    """
    Initialize the database with schema.

    Args:
        db_path: Path to the SQLite database file
    """
    conn = get_connection(db_path)
    try:
        conn.executescript(SCHEMA)
        conn.commit()
        logger.debug(f"Database initialized at {db_path}")
    finally:
        conn.close()


class KeyValueRepository:
    """
    Repository for the kv_store table.

    Values are stored as text; callers own the encoding.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        """
        Initialize repository.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        """Get a database connection."""
        return get_connection(self.db_path)

    def get(self, key: str) -> Optional[str]:
        """
        Get the value stored under a key.

        Args:
            key: Slot name

        Returns:
            Stored text or None if the slot is empty
        """
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def put(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Args:
            key: Slot name
            value: Text to store
        """
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT OR REPLACE INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                """,
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()
