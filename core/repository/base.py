"""Shared repository helpers and error hierarchy.

Updates:
  v0.2.0 - 2026-10-06 - Trim helpers down to connection setup for the key-value store.
  v0.1.0 - 2026-10-05 - Extract logger, helpers, and exceptions for note storage.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger("note_keeper.repository")


class RepositoryError(Exception):
    """Base exception for repository failures."""


class RepositoryNotFoundError(RepositoryError):
    """Raised when a requested record cannot be located."""


def ensure_directory(path: Path) -> None:
    """Ensure the directory for the SQLite database exists."""
    path.parent.mkdir(parents=True, exist_ok=True)


def connect(db_path: Path) -> sqlite3.Connection:
    """Return a configured SQLite connection."""
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL;")
    conn.execute("PRAGMA synchronous = NORMAL;")
    return conn


__all__ = [
    "RepositoryError",
    "RepositoryNotFoundError",
    "connect",
    "ensure_directory",
    "logger",
]
