"""Factories for constructing NoteManager instances from validated settings.

Updates:
  v0.1.1 - 2026-10-13 - Surface storage initialisation failures as NoteStorageError.
  v0.1.0 - 2026-10-09 - Introduce build_note_manager.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .category_registry import CategoryRegistry
from .exceptions import NoteStorageError
from .note_manager import NoteManager
from .note_store import NoteStore, TextStorage
from .repository import KeyValueRepository, RepositoryError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from config import NoteKeeperSettings
else:  # pragma: no cover - typing only
    NoteKeeperSettings = Any

factory_logger = logging.getLogger("note_keeper.factory")


def build_note_manager(
    settings: NoteKeeperSettings,
    *,
    storage: TextStorage | None = None,
) -> NoteManager:
    """Return a NoteManager wired to the configured storage, with notes loaded."""
    if storage is None:
        try:
            storage = KeyValueRepository(settings.db_path)
        except RepositoryError as exc:
            raise NoteStorageError(f"Unable to open note storage at {settings.db_path}") from exc
    store = NoteStore(storage)
    manager = NoteManager(
        store,
        categories=CategoryRegistry(settings.categories),
        storage_location=settings.storage_location,
    )
    notes = manager.load()
    factory_logger.info("Note Keeper initialised with %d notes", len(notes))
    return manager


__all__ = ["build_note_manager"]
