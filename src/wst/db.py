"""SQLite helpers and blob-store adapters for the tracker."""
from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Dict, Optional


def get_conn(db_path: str) -> sqlite3.Connection:
    """Return a SQLite connection with sensible defaults."""

    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create the key-value table if it does not already exist."""

    conn.executescript(
        """
        CREATE TABLE IF NOT EXISTS kv_store (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at TEXT NOT NULL
        );
        """
    )
    conn.commit()


def get_value(conn: sqlite3.Connection, key: str) -> Optional[str]:
    row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
    return row["value"] if row else None


def set_value(conn: sqlite3.Connection, key: str, value: str) -> None:
    """Insert or replace a value and commit immediately."""

    conn.execute(
        """
        INSERT INTO kv_store (key, value, updated_at)
        VALUES (:key, :value, :updated_at)
        ON CONFLICT(key) DO UPDATE SET
            value = excluded.value,
            updated_at = excluded.updated_at
        """,
        {
            "key": key,
            "value": value,
            "updated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        },
    )
    conn.commit()


class SqliteBlobStore:
    """Blob store backed by the ``kv_store`` table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn
        init_db(conn)

    def get(self, key: str) -> Optional[str]:
        return get_value(self.conn, key)

    def set(self, key: str, value: str) -> None:
        set_value(self.conn, key, value)


class MemoryBlobStore:
    """Dict-backed blob store for embedding the tracker without a database."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
