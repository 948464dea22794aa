"""Pure helpers over a note's tag list.

Tags are compared exactly: no trimming and no case folding, so ``"work"``,
``"Work"`` and ``"work "`` are three different tags.

Updates:
  v0.1.0 - 2026-10-07 - Add add_tag/remove_tag/collect_tags helpers.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from models.note import Note


def add_tag(note: Note, tag: str) -> Note:
    """Return *note* with *tag* appended, or *note* itself when already tagged."""
    if tag in note.tags:
        return note
    return replace(note, tags=[*note.tags, tag])


def remove_tag(note: Note, tag: str) -> Note:
    """Return *note* without the first occurrence of *tag*."""
    if tag not in note.tags:
        return note
    tags = list(note.tags)
    tags.remove(tag)
    return replace(note, tags=tags)


def collect_tags(notes: Iterable[Note]) -> list[str]:
    """Return the distinct tags used across *notes* in first-seen order."""
    seen: list[str] = []
    for note in notes:
        for tag in note.tags:
            if tag not in seen:
                seen.append(tag)
    return seen


__all__ = ["add_tag", "collect_tags", "remove_tag"]
