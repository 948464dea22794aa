"""Keep a live rich-text editing surface and the current note in step.

Two directions, two disjoint triggers:

* push: the current slot changed identity, so the surface receives the new
  note's content. Content changes never cause a push.
* write-back: the surface reported a user edit, so its serialized content is
  copied into the current note. Pushes never count as user edits.

Updates:
  v0.2.0 - 2026-10-10 - Ignore edit notifications delivered while a push is running.
  v0.1.0 - 2026-10-08 - Introduce identity-keyed push and edit-keyed write-back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from .exceptions import SerializationFailure

if TYPE_CHECKING:
    from models.note import Note

logger = logging.getLogger("note_keeper.document_sync")

SlotIdentity = tuple[str, int]


class EditingSurface(Protocol):
    """Stateful rich-text editor holding its own document model."""

    def set_content(self, markup: str) -> None:
        """Replace the whole document without reporting a user edit."""
        ...

    def serialize(self) -> str:
        """Return the document markup or raise SerializationFailure."""
        ...

    def clear(self) -> None:
        ...

    def on_user_edit(self, callback: Callable[[], None]) -> None:
        """Register *callback* for user-originated content changes."""
        ...


class DocumentSyncEngine:
    """Directional synchroniser between an EditingSurface and the current note."""

    def __init__(
        self,
        surface: EditingSurface,
        write_back: Callable[[str], None],
    ) -> None:
        self._surface = surface
        self._write_back = write_back
        self._pushed_identity: SlotIdentity | None = None
        self._pushing = False
        self.push_count = 0
        self.write_back_count = 0
        surface.on_user_edit(self.handle_user_edit)

    @property
    def surface(self) -> EditingSurface:
        return self._surface

    @property
    def pushed_identity(self) -> SlotIdentity | None:
        """Return the slot identity whose content the surface currently shows."""
        return self._pushed_identity

    def sync_selection(self, identity: SlotIdentity, note: Note) -> bool:
        """Push *note* into the surface if *identity* differs from the last push.

        Returns True when a push happened.
        """
        if identity == self._pushed_identity:
            return False
        self._pushing = True
        try:
            self._surface.set_content(note.content)
        finally:
            self._pushing = False
        self._pushed_identity = identity
        self.push_count += 1
        logger.debug("SYNC_PUSH identity=%s chars=%d", identity, len(note.content))
        return True

    def handle_user_edit(self) -> None:
        """Copy the surface's serialized content into the current note."""
        if self._pushing:
            logger.debug("Ignoring edit notification raised during push")
            return
        try:
            markup = self._surface.serialize()
        except SerializationFailure as exc:
            logger.warning("Editor content could not be serialized; keeping previous content: %s", exc)
            return
        self._write_back(markup)
        self.write_back_count += 1

    def reset(self, identity: SlotIdentity) -> None:
        """Empty the surface for a fresh draft occupying *identity*."""
        self._pushing = True
        try:
            self._surface.clear()
        finally:
            self._pushing = False
        self._pushed_identity = identity
        logger.debug("SYNC_RESET identity=%s", identity)


__all__ = ["DocumentSyncEngine", "EditingSurface", "SlotIdentity"]
