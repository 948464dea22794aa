"""Substring search across note titles, content and tags.

Updates:
  v0.1.0 - 2026-10-07 - Extract note filtering from the list view.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from models.note import Note


def note_matches(note: Note, query: str) -> bool:
    """Return True when *query* occurs in the title, raw content markup, or a tag."""
    if not query:
        return True
    needle = query.casefold()
    if needle in note.title.casefold():
        return True
    if needle in note.content.casefold():
        return True
    return any(needle in tag.casefold() for tag in note.tags)


def filter_notes(notes: Iterable[Note], query: str) -> list[Note]:
    """Return the notes matching *query*, keeping collection order."""
    return [note for note in notes if note_matches(note, query)]


__all__ = ["filter_notes", "note_matches"]
