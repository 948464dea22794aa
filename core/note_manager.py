"""Application state and transitions for Note Keeper.

``NoteManager`` owns the note collection (through :class:`NoteStore`), the
single current-note slot, the search query, and the in-memory settings the
UI edits. Views never mutate these directly; they call the transition methods
below and re-render from :meth:`NoteManager.snapshot`.

Updates:
  v0.3.1 - 2026-10-19 - Validate the title before saving so stored notes keep their edits; reuse the sync engine per surface.
  v0.3.0 - 2026-10-14 - Notify subscribers with immutable AppState snapshots.
  v0.2.0 - 2026-10-12 - Route editing-slot identity changes through DocumentSyncEngine.
  v0.1.0 - 2026-10-09 - Replace global UI state with explicit transitions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from models.note import Note

from . import tags as _tags
from .category_registry import CategoryRegistry
from .document_sync import DocumentSyncEngine, EditingSurface, SlotIdentity
from .exceptions import NoteValidationError
from .note_store import NoteStore, clone_note, validate_note
from .search import filter_notes

logger = logging.getLogger("note_keeper.manager")

StateListener = Callable[["AppState"], None]


@dataclass(slots=True, frozen=True)
class AppState:
    """Read-only view of the application state after a transition."""

    notes: tuple[Note, ...]
    current: Note
    current_identity: SlotIdentity
    search_query: str
    visible_notes: tuple[Note, ...]
    storage_location: str
    categories: tuple[str, ...]


class NoteManager:
    """Coordinate the note store, the editing slot and the search query."""

    def __init__(
        self,
        store: NoteStore,
        *,
        categories: CategoryRegistry | None = None,
        storage_location: str = "",
    ) -> None:
        self._store = store
        self._categories = categories or CategoryRegistry()
        self._storage_location = storage_location
        self._search_query = ""
        self._draft_serial = 0
        self._current = Note.draft()
        self._identity = self._next_draft_identity()
        self._sync: DocumentSyncEngine | None = None
        self._listeners: list[StateListener] = []

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def store(self) -> NoteStore:
        return self._store

    @property
    def categories(self) -> CategoryRegistry:
        return self._categories

    @property
    def current(self) -> Note:
        """Return a copy of the note occupying the editing slot."""
        return clone_note(self._current)

    @property
    def current_identity(self) -> SlotIdentity:
        return self._identity

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def storage_location(self) -> str:
        return self._storage_location

    @property
    def sync_engine(self) -> DocumentSyncEngine | None:
        return self._sync

    def list_notes(self) -> list[Note]:
        return self._store.notes

    def visible_notes(self) -> list[Note]:
        """Return the notes matching the active search query."""
        return filter_notes(self._store.notes, self._search_query)

    def snapshot(self) -> AppState:
        notes = self._store.notes
        return AppState(
            notes=tuple(notes),
            current=clone_note(self._current),
            current_identity=self._identity,
            search_query=self._search_query,
            visible_notes=tuple(filter_notes(notes, self._search_query)),
            storage_location=self._storage_location,
            categories=tuple(self._categories.all()),
        )

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------
    def attach_surface(self, surface: EditingSurface) -> DocumentSyncEngine:
        """Bind an editing surface and show the current note in it.

        Attaching the surface that is already bound returns the existing engine,
        so each surface has a single edit subscription.
        """
        if self._sync is not None and self._sync.surface is surface:
            return self._sync
        self._sync = DocumentSyncEngine(surface, self.update_content)
        self._sync.sync_selection(self._identity, self._current)
        return self._sync

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* for state changes and return an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def load(self) -> list[Note]:
        """Load the collection from storage."""
        notes = self._store.load()
        self._notify()
        return notes

    def close(self) -> None:
        """Drop listeners and the editing surface binding."""
        self._listeners.clear()
        self._sync = None

    # ------------------------------------------------------------------
    # Editing slot transitions
    # ------------------------------------------------------------------
    def new_note(self) -> Note:
        """Replace the editing slot with a fresh draft."""
        self._occupy(Note.draft(), self._next_draft_identity())
        self._notify()
        return self.current

    def select_note(self, note_id: int) -> Note | None:
        """Open the stored note *note_id* in the editing slot.

        Re-selecting the note that is already current keeps its unsaved edits.
        """
        if self._current.id == note_id:
            return self.current
        note = self._store.get(note_id)
        if note is None:
            logger.warning("Cannot select unknown note id=%s", note_id)
            return None
        self._occupy(note, ("note", note_id))
        self._notify()
        return self.current

    def set_title(self, title: str) -> None:
        self._current = replace(self._current, title=title)
        self._notify()

    def set_category(self, category: str) -> None:
        """Assign *category* to the current note; unknown labels are accepted."""
        if category and not self._categories.is_known(category):
            logger.debug("Category %r is not in the configured set", category)
        self._current = replace(self._current, category=category)
        self._notify()

    def add_tag(self, tag: str) -> None:
        if not tag:
            return
        updated = _tags.add_tag(self._current, tag)
        if updated is self._current:
            return
        self._current = updated
        self._notify()

    def remove_tag(self, tag: str) -> None:
        updated = _tags.remove_tag(self._current, tag)
        if updated is self._current:
            return
        self._current = updated
        self._notify()

    def update_content(self, markup: str) -> None:
        """Store editor markup on the current note without touching the surface."""
        if markup == self._current.content:
            return
        self._current = replace(self._current, content=markup)
        self._notify()

    # ------------------------------------------------------------------
    # Collection transitions
    # ------------------------------------------------------------------
    def save_current(self) -> Note | None:
        """Persist the current note and open a fresh draft.

        Returns the persisted note, or None when the title is empty (in which
        case nothing changes).
        """
        try:
            validate_note(self._current)
        except NoteValidationError as exc:
            logger.info("Save skipped: %s", exc)
            return None
        _, persisted = self._store.save(self._current)
        self._current = Note.draft()
        self._identity = self._next_draft_identity()
        if self._sync is not None:
            self._sync.reset(self._identity)
        self._notify()
        return persisted

    def delete_note(self, note_id: int) -> list[Note]:
        """Delete *note_id*; the slot resets when that note was current."""
        notes = self._store.delete(note_id)
        if self._current.id == note_id:
            self._occupy(Note.draft(), self._next_draft_identity())
        self._notify()
        return notes

    def set_search_query(self, query: str) -> list[Note]:
        self._search_query = query
        self._notify()
        return self.visible_notes()

    def set_storage_location(self, location: str) -> None:
        """Record the storage location string; no I/O is performed."""
        self._storage_location = location
        self._notify()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _next_draft_identity(self) -> SlotIdentity:
        self._draft_serial += 1
        return ("draft", self._draft_serial)

    def _occupy(self, note: Note, identity: SlotIdentity) -> None:
        self._current = note
        self._identity = identity
        if self._sync is not None:
            self._sync.sync_selection(identity, note)

    def _notify(self) -> None:
        if not self._listeners:
            return
        state = self.snapshot()
        for listener in list(self._listeners):
            listener(state)


__all__ = ["AppState", "NoteManager", "StateListener"]
