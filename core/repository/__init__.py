"""SQLite-backed repository for persistent note storage.

Updates:
  v0.2.0 - 2026-10-06 - Replace the table-per-entity schema with a single key-value store.
  v0.1.0 - 2026-10-05 - Package scaffold.
"""

from __future__ import annotations

from .base import (
    RepositoryError,
    RepositoryNotFoundError,
    connect as _connect,
    ensure_directory as _ensure_directory,
)
from .key_value import KeyValueRepository

__all__ = [
    "KeyValueRepository",
    "RepositoryError",
    "RepositoryNotFoundError",
    "_connect",
    "_ensure_directory",
]
