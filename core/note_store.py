"""Durable note collection with upsert-by-identity semantics.

The whole collection lives under a single storage key and is rewritten in full
after every successful mutation. Reads that hit malformed data fall back to an
empty collection instead of propagating the failure.

Updates:
  v0.3.0 - 2026-10-13 - Make persistence an injectable callable.
  v0.2.0 - 2026-10-11 - Allocate strictly monotonic millisecond identifiers.
  v0.1.0 - 2026-10-06 - Introduce NoteStore with load/save/delete.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable, Container, Iterable, Sequence
from dataclasses import replace
from typing import Protocol, cast

from models.note import Note

from .exceptions import CorruptStoreError, NoteStorageError, NoteValidationError
from .repository import RepositoryError

logger = logging.getLogger("note_keeper.note_store")

NOTES_KEY = "notes"

PersistCallable = Callable[[Sequence[Note]], None]


class TextStorage(Protocol):
    """Key-value backend holding whole text payloads."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


def clone_note(note: Note) -> Note:
    """Return a copy of *note* that shares no mutable state with it."""
    return replace(note, tags=list(note.tags))


def encode_notes(notes: Iterable[Note]) -> str:
    """Serialise *notes* to the persisted JSON array layout."""
    return json.dumps([note.to_record() for note in notes], ensure_ascii=False)


def decode_notes(payload: str) -> list[Note]:
    """Parse a persisted JSON array into notes, preserving stored order."""
    try:
        parsed: object = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise CorruptStoreError(f"Notes payload is not valid JSON: {exc}") from exc
    if not isinstance(parsed, list):
        raise CorruptStoreError("Notes payload must be a JSON array")
    notes: list[Note] = []
    seen: set[int] = set()
    for index, record in enumerate(cast("list[object]", parsed)):
        try:
            note = Note.from_record(record)
        except (TypeError, ValueError) as exc:
            raise CorruptStoreError(f"Invalid note record at index {index}: {exc}") from exc
        if note.id in seen:
            raise CorruptStoreError(f"Duplicate note id {note.id} at index {index}")
        seen.add(cast("int", note.id))
        notes.append(note)
    return notes


def validate_note(note: Note) -> None:
    """Raise NoteValidationError when *note* cannot be persisted."""
    if not note.title.strip():
        raise NoteValidationError("Note title must not be empty")


class IdAllocator:
    """Hand out identifiers derived from the wall clock in milliseconds.

    Identifiers are strictly increasing even when several saves land inside
    the same clock tick or the clock steps backwards.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def observe(self, ids: Iterable[int]) -> None:
        """Never hand out anything at or below the highest of *ids*."""
        for value in ids:
            self._last = max(self._last, value)

    def allocate(self, in_use: Container[int] = ()) -> int:
        candidate = max(int(self._clock() * 1000), self._last + 1)
        while candidate in in_use:
            candidate += 1
        self._last = candidate
        return candidate


class NoteStore:
    """Own the durable note collection."""

    def __init__(
        self,
        storage: TextStorage,
        *,
        persist: PersistCallable | None = None,
        id_allocator: IdAllocator | None = None,
    ) -> None:
        self._storage = storage
        self._persist: PersistCallable = persist if persist is not None else self.persist
        self._ids = id_allocator or IdAllocator()
        self._notes: list[Note] = []

    @property
    def notes(self) -> list[Note]:
        """Return a copy of the in-memory collection in stored order."""
        return [clone_note(note) for note in self._notes]

    def get(self, note_id: int) -> Note | None:
        """Return a copy of the note with *note_id*, if present."""
        for note in self._notes:
            if note.id == note_id:
                return clone_note(note)
        return None

    def load(self) -> list[Note]:
        """Rebuild the collection from storage, or start empty if it is unreadable."""
        try:
            payload = self._storage.get(NOTES_KEY)
        except RepositoryError as exc:
            logger.warning("Unable to read stored notes; starting empty: %s", exc)
            payload = None
        notes: list[Note] = []
        if payload is not None:
            try:
                notes = decode_notes(payload)
            except CorruptStoreError as exc:
                logger.warning("Stored notes are corrupt; starting empty: %s", exc)
                notes = []
        self._notes = notes
        self._ids.observe(cast("int", note.id) for note in notes)
        logger.debug("NOTES_LOADED count=%d", len(notes))
        return self.notes

    def save(self, note: Note) -> tuple[list[Note], Note]:
        """Insert or replace *note* and persist the whole collection.

        Notes with an empty title are ignored: the collection is returned
        unchanged together with the untouched *note*.
        """
        try:
            validate_note(note)
        except NoteValidationError as exc:
            logger.debug("Skipping save: %s", exc)
            return self.notes, note

        updated = list(self._notes)
        stored: Note | None = None
        if note.id is not None:
            for index, existing in enumerate(updated):
                if existing.id == note.id:
                    stored = clone_note(note)
                    updated[index] = stored
                    break
        if stored is None:
            in_use = {existing.id for existing in updated}
            stored = replace(clone_note(note), id=self._ids.allocate(in_use))
            updated.append(stored)

        self._commit(updated)
        logger.info("NOTE_SAVED id=%s title=%r", stored.id, stored.title)
        return self.notes, clone_note(stored)

    def delete(self, note_id: int) -> list[Note]:
        """Remove the note with *note_id*; unknown identifiers are ignored."""
        updated = [note for note in self._notes if note.id != note_id]
        if len(updated) == len(self._notes):
            return self.notes
        self._commit(updated)
        logger.info("NOTE_DELETED id=%s", note_id)
        return self.notes

    def persist(self, notes: Sequence[Note]) -> None:
        """Write the full *notes* collection to storage."""
        try:
            self._storage.set(NOTES_KEY, encode_notes(notes))
        except RepositoryError as exc:
            raise NoteStorageError("Failed to persist notes") from exc

    def _commit(self, updated: list[Note]) -> None:
        self._persist(tuple(updated))
        self._notes = updated


__all__ = [
    "IdAllocator",
    "NOTES_KEY",
    "NoteStore",
    "PersistCallable",
    "TextStorage",
    "clone_note",
    "decode_notes",
    "encode_notes",
    "validate_note",
]
