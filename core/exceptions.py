"""Common exception classes for core package.

All exceptions ultimately inherit from :class:`NoteKeeperError`, allowing
callers to catch a single base class for any manager-related failure while
still distinguishing individual error categories when needed.

Only :class:`NoteStorageError` escapes the core services. The remaining
errors are raised internally and recovered where they occur so every failure
degrades to a safe default state.

Updates:
  v0.2.0 - 2026-10-09 - Add SerializationFailure for editing surface exports.
  v0.1.0 - 2026-10-05 - Created module with validation and storage errors.
"""

from __future__ import annotations


class NoteKeeperError(Exception):
    """Base exception for Note Keeper failures."""


class NoteValidationError(NoteKeeperError):
    """Raised when a note cannot be persisted in its current form."""


class CorruptStoreError(NoteKeeperError):
    """Raised when the persisted notes payload cannot be decoded."""


class NoteStorageError(NoteKeeperError):
    """Raised when writing to the durable backend fails."""


class SerializationFailure(NoteKeeperError):
    """Raised when an editing surface cannot produce its serialized content."""


__all__ = [
    "CorruptStoreError",
    "NoteKeeperError",
    "NoteStorageError",
    "NoteValidationError",
    "SerializationFailure",
]
