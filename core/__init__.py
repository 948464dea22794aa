"""Core service layer for Note Keeper.

Updates:
  v0.2.0 - 2026-10-14 - Export NoteManager, AppState and the sync engine.
  v0.1.0 - 2026-10-06 - Export NoteStore, search and tag helpers.
"""

from .category_registry import DEFAULT_CATEGORIES, CategoryRegistry
from .document_sync import DocumentSyncEngine, EditingSurface, SlotIdentity
from .exceptions import (
    CorruptStoreError,
    NoteKeeperError,
    NoteStorageError,
    NoteValidationError,
    SerializationFailure,
)
from .factory import build_note_manager
from .note_manager import AppState, NoteManager
from .note_store import IdAllocator, NoteStore, decode_notes, encode_notes
from .repository import KeyValueRepository, RepositoryError
from .search import filter_notes, note_matches
from .tags import add_tag, collect_tags, remove_tag

__all__ = [
    "AppState",
    "CategoryRegistry",
    "CorruptStoreError",
    "DEFAULT_CATEGORIES",
    "DocumentSyncEngine",
    "EditingSurface",
    "IdAllocator",
    "KeyValueRepository",
    "NoteKeeperError",
    "NoteManager",
    "NoteStorageError",
    "NoteStore",
    "NoteValidationError",
    "RepositoryError",
    "SerializationFailure",
    "SlotIdentity",
    "add_tag",
    "build_note_manager",
    "collect_tags",
    "decode_notes",
    "encode_notes",
    "filter_notes",
    "note_matches",
    "remove_tag",
]
