"""Durable key-value storage backed by SQLite.

Updates:
  v0.1.0 - 2026-10-06 - Add KeyValueRepository holding whole-payload text values.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

from .base import (
    RepositoryError,
    connect as _connect,
    ensure_directory as _ensure_directory,
    logger,
)


class KeyValueRepository:
    """Store opaque text payloads under string keys.

    Values are always replaced wholesale; there is no partial update.
    """

    def __init__(self, db_path: str | Path) -> None:
        """Initialise repository storage and ensure the schema exists."""
        self._db_path = Path(db_path)
        _ensure_directory(self._db_path)
        try:
            with _connect(self._db_path) as conn:
                conn.execute(
                    "CREATE TABLE IF NOT EXISTS kv_store ("
                    "key TEXT PRIMARY KEY, "
                    "value TEXT NOT NULL"
                    ");"
                )
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to initialise storage at {self._db_path}") from exc

    @property
    def db_path(self) -> Path:
        """Return the SQLite database location."""
        return self._db_path

    def get(self, key: str) -> str | None:
        """Return the stored value for *key*, or None when absent."""
        try:
            with _connect(self._db_path) as conn:
                row = conn.execute("SELECT value FROM kv_store WHERE key = ?;", (key,)).fetchone()
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to read key {key!r}") from exc
        if row is None:
            return None
        return str(row["value"])

    def set(self, key: str, value: str) -> None:
        """Overwrite the value stored under *key*."""
        try:
            with _connect(self._db_path) as conn:
                conn.execute(
                    "INSERT INTO kv_store (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value;",
                    (key, value),
                )
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to write key {key!r}") from exc
        logger.debug("KV_WRITE key=%s bytes=%d", key, len(value))

    def delete(self, key: str) -> None:
        """Remove *key* from storage; missing keys are ignored."""
        try:
            with _connect(self._db_path) as conn:
                conn.execute("DELETE FROM kv_store WHERE key = ?;", (key,))
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to delete key {key!r}") from exc


__all__ = ["KeyValueRepository"]
