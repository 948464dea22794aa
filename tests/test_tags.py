"""Tests for tag list helpers."""

from __future__ import annotations

from core.tags import add_tag, collect_tags, remove_tag
from models.note import Note


def test_add_tag_appends_new_tag() -> None:
    note = Note(id=1, title="a", tags=["x"])
    updated = add_tag(note, "y")
    assert updated.tags == ["x", "y"]
    assert note.tags == ["x"]


def test_add_existing_tag_returns_same_note() -> None:
    note = Note(id=1, title="a", tags=["x"])
    assert add_tag(note, "x") is note


def test_tags_compare_exactly() -> None:
    note = Note(title="a", tags=["work"])
    note = add_tag(note, "Work")
    note = add_tag(note, "work ")
    assert note.tags == ["work", "Work", "work "]


def test_remove_tag_drops_only_that_tag() -> None:
    note = Note(title="a", tags=["x", "y", "z"])
    assert remove_tag(note, "y").tags == ["x", "z"]


def test_remove_missing_tag_returns_same_note() -> None:
    note = Note(title="a", tags=["x"])
    assert remove_tag(note, "nope") is note


def test_remove_tag_drops_first_occurrence_of_loaded_duplicates() -> None:
    note = Note(title="a", tags=["x", "y", "x"])
    assert remove_tag(note, "x").tags == ["y", "x"]


def test_collect_tags_keeps_first_seen_order() -> None:
    notes = [Note(title="a", tags=["b", "a"]), Note(title="b", tags=["a", "c"]), Note(title="c")]
    assert collect_tags(notes) == ["b", "a", "c"]
