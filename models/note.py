"""Note data model definitions.

Updates:
  v0.2.0 - 2026-10-12 - Validate persisted record shape in ``from_record``.
  v0.1.0 - 2026-10-05 - Add Note dataclass with title, rich content, category and tags.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, cast


@dataclass(slots=True)
class Note:
    """Single note occupying the collection or the editing slot.

    A note without an ``id`` is a draft: it has never been saved.
    """

    id: int | None = None
    title: str = ""
    content: str = ""
    category: str = ""
    tags: list[str] = field(default_factory=list)

    @classmethod
    def draft(cls) -> Note:
        """Return an empty, unsaved note."""
        return cls()

    @property
    def is_draft(self) -> bool:
        """Return True when the note has not been persisted yet."""
        return self.id is None

    def to_record(self) -> dict[str, Any]:
        """Return a mapping matching the persisted ``notes`` layout."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "tags": list(self.tags),
        }

    @classmethod
    def from_record(cls, data: object) -> Note:
        """Hydrate a Note from a stored mapping.

        Raises ``TypeError`` or ``ValueError`` when *data* does not follow the
        persisted record layout.
        """
        if not isinstance(data, Mapping):
            raise TypeError("note record must be an object")
        record = cast("Mapping[str, object]", data)
        raw_id = record.get("id")
        if isinstance(raw_id, bool) or not isinstance(raw_id, (int, float)):
            raise ValueError(f"note id must be a number, got {raw_id!r}")
        if isinstance(raw_id, float) and not raw_id.is_integer():
            raise ValueError(f"note id must be integral, got {raw_id!r}")
        strings: dict[str, str] = {}
        for key in ("title", "content", "category"):
            value = record.get(key, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"note {key} must be a string")
            strings[key] = value
        raw_tags = record.get("tags", [])
        if raw_tags is None:
            raw_tags = []
        if not isinstance(raw_tags, Sequence) or isinstance(raw_tags, (str, bytes)):
            raise ValueError("note tags must be a list of strings")
        tags = cast("Sequence[object]", raw_tags)
        if not all(isinstance(tag, str) for tag in tags):
            raise ValueError("note tags must be a list of strings")
        return cls(
            id=int(raw_id),
            title=strings["title"],
            content=strings["content"],
            category=strings["category"],
            tags=[str(tag) for tag in tags],
        )


__all__ = ["Note"]
