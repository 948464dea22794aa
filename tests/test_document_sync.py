"""Tests for the editing surface synchroniser.

Updates:
  v0.2.0 - 2026-10-10 - Cover notifications emitted while a push is in flight.
  v0.1.0 - 2026-10-08 - Cover identity-keyed push and edit-keyed write-back.
"""

from __future__ import annotations

from typing import Any

import pytest

from core.document_sync import DocumentSyncEngine
from models.note import Note


def _engine(surface: Any) -> tuple[DocumentSyncEngine, list[str]]:
    written: list[str] = []
    return DocumentSyncEngine(surface, written.append), written


def test_switching_identity_pushes_once_without_write_back(fake_surface: Any) -> None:
    engine, written = _engine(fake_surface)
    note_a = Note(id=1, title="A", content="<p>alpha</p>")
    note_b = Note(id=2, title="B", content="<p>beta</p>")

    engine.sync_selection(("note", 1), note_a)
    engine.sync_selection(("note", 2), note_b)

    assert fake_surface.set_calls == ["<p>alpha</p>", "<p>beta</p>"]
    assert engine.push_count == 2
    assert written == []
    assert engine.pushed_identity == ("note", 2)


def test_same_identity_never_pushes_again(fake_surface: Any) -> None:
    engine, _ = _engine(fake_surface)
    note = Note(id=1, title="A", content="<p>alpha</p>")
    assert engine.sync_selection(("note", 1), note) is True

    changed = Note(id=1, title="A", content="<p>something else</p>")
    assert engine.sync_selection(("note", 1), changed) is False
    assert fake_surface.set_calls == ["<p>alpha</p>"]


def test_user_edit_writes_back_serialized_content(fake_surface: Any) -> None:
    engine, written = _engine(fake_surface)
    engine.sync_selection(("draft", 1), Note.draft())

    fake_surface.type_text("<p>h</p>")
    fake_surface.type_text("<p>hi</p>")

    assert written == ["<p>h</p>", "<p>hi</p>"]
    assert engine.write_back_count == 2
    assert engine.push_count == 1


def test_notifications_during_push_are_ignored(fake_surface: Any) -> None:
    fake_surface.echo_programmatic = True
    engine, written = _engine(fake_surface)

    engine.sync_selection(("note", 7), Note(id=7, title="x", content="<p>loaded</p>"))
    engine.reset(("draft", 2))

    assert written == []
    assert engine.write_back_count == 0


def test_serialization_failure_keeps_previous_content(
    fake_surface: Any, caplog: pytest.LogCaptureFixture
) -> None:
    engine, written = _engine(fake_surface)
    fake_surface.type_text("<p>first</p>")
    fake_surface.fail_serialize = True

    fake_surface.type_text("<p>second</p>")

    assert written == ["<p>first</p>"]
    assert "could not be serialized" in caplog.text


def test_reset_clears_surface_and_records_identity(fake_surface: Any) -> None:
    engine, _ = _engine(fake_surface)
    engine.sync_selection(("note", 1), Note(id=1, title="A", content="<p>a</p>"))

    engine.reset(("draft", 3))

    assert fake_surface.markup == ""
    assert fake_surface.clear_calls == 1
    assert engine.pushed_identity == ("draft", 3)
    assert engine.sync_selection(("draft", 3), Note.draft()) is False


def test_distinct_drafts_are_distinct_identities(fake_surface: Any) -> None:
    engine, _ = _engine(fake_surface)
    engine.sync_selection(("draft", 1), Note.draft())
    fake_surface.type_text("<p>typed</p>")

    assert engine.sync_selection(("draft", 2), Note.draft()) is True
    assert fake_surface.markup == ""
