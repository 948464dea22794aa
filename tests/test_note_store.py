"""NoteStore persistence and upsert tests.

Updates:
  v0.2.0 - 2026-10-13 - Cover injected persistence and write failures.
  v0.1.0 - 2026-10-06 - Cover load/save/delete semantics and fail-safe loading.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

import pytest

from core.exceptions import CorruptStoreError, NoteStorageError
from core.note_store import NOTES_KEY, IdAllocator, NoteStore, decode_notes, encode_notes
from models.note import Note


class _StepClock:
    """Clock returning a fixed second value until told otherwise."""

    def __init__(self, value: float) -> None:
        self.value = value

    def __call__(self) -> float:
        return self.value


def _store(storage: Any, clock: float = 1_700_000_000.0) -> NoteStore:
    return NoteStore(storage, id_allocator=IdAllocator(_StepClock(clock)))


def _note(title: str, **fields: Any) -> Note:
    return Note(title=title, **fields)


def test_load_without_stored_payload_is_empty(memory_storage: Any) -> None:
    store = _store(memory_storage)
    assert store.load() == []
    assert memory_storage.writes == []


def test_load_preserves_stored_order(memory_storage: Any) -> None:
    records = [
        {"id": 30, "title": "c", "content": "", "category": "", "tags": []},
        {"id": 10, "title": "a", "content": "", "category": "", "tags": []},
        {"id": 20, "title": "b", "content": "", "category": "", "tags": []},
    ]
    memory_storage.values[NOTES_KEY] = json.dumps(records)
    loaded = _store(memory_storage).load()
    assert [note.id for note in loaded] == [30, 10, 20]


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        json.dumps({"id": 1}),
        json.dumps([{"id": 1, "title": "ok"}, {"title": "no id"}]),
        json.dumps([{"id": 1, "title": "a"}, {"id": 1, "title": "dup"}]),
    ],
)
def test_load_falls_back_to_empty_on_corrupt_payload(
    memory_storage: Any, payload: str, caplog: pytest.LogCaptureFixture
) -> None:
    memory_storage.values[NOTES_KEY] = payload
    store = _store(memory_storage)

    with caplog.at_level(logging.WARNING, logger="note_keeper.note_store"):
        assert store.load() == []

    assert "corrupt" in caplog.text
    assert memory_storage.writes == []
    assert memory_storage.values[NOTES_KEY] == payload


def test_load_falls_back_to_empty_when_storage_read_fails(memory_storage: Any) -> None:
    memory_storage.fail_reads = True
    assert _store(memory_storage).load() == []


def test_decode_notes_raises_corrupt_store_error() -> None:
    with pytest.raises(CorruptStoreError):
        decode_notes("[1, 2, 3]")


def test_save_with_empty_title_is_a_no_op(memory_storage: Any) -> None:
    store = _store(memory_storage)
    store.save(_note("kept"))
    writes_before = list(memory_storage.writes)

    for title in ("", "   "):
        draft = _note(title, content="<p>body</p>")
        notes, returned = store.save(draft)
        assert [note.title for note in notes] == ["kept"]
        assert returned is draft
        assert returned.id is None

    assert memory_storage.writes == writes_before


def test_save_new_note_appends_with_fresh_id(memory_storage: Any) -> None:
    store = _store(memory_storage)
    store.save(_note("first"))
    notes, persisted = store.save(_note("second", tags=["x"]))

    assert len(notes) == 2
    assert notes[-1].title == "second"
    assert persisted.id is not None
    assert persisted.id not in {notes[0].id}
    assert persisted == notes[-1]


def test_save_within_same_clock_tick_never_collides(memory_storage: Any) -> None:
    store = _store(memory_storage)
    ids = [store.save(_note(f"n{index}"))[1].id for index in range(5)]
    assert len(set(ids)) == 5
    assert ids == sorted(ids)
    assert ids[0] == 1_700_000_000_000


def test_save_existing_id_replaces_in_place(memory_storage: Any) -> None:
    store = _store(memory_storage)
    first = store.save(_note("first"))[1]
    second = store.save(_note("second"))[1]
    third = store.save(_note("third"))[1]

    edited = Note(id=second.id, title="second (edited)", content="<p>new</p>", category="Work", tags=["a"])
    notes, persisted = store.save(edited)

    assert [note.id for note in notes] == [first.id, second.id, third.id]
    assert notes[1] == edited
    assert persisted == edited
    assert notes[0] == first and notes[2] == third


def test_save_unknown_id_is_appended_with_new_id(memory_storage: Any) -> None:
    store = _store(memory_storage)
    store.save(_note("first"))
    notes, persisted = store.save(Note(id=42, title="stale"))
    assert len(notes) == 2
    assert persisted.id != 42
    assert notes[-1] == persisted


def test_every_mutation_rewrites_whole_collection(memory_storage: Any) -> None:
    store = _store(memory_storage)
    store.save(_note("a"))
    store.save(_note("b"))

    assert len(memory_storage.writes) == 2
    key, payload = memory_storage.writes[-1]
    assert key == NOTES_KEY
    assert [record["title"] for record in json.loads(payload)] == ["a", "b"]


def test_stored_collection_is_isolated_from_caller_mutation(memory_storage: Any) -> None:
    store = _store(memory_storage)
    note = _note("a", tags=["x"])
    _, persisted = store.save(note)
    note.tags.append("y")
    persisted.tags.append("z")
    assert store.notes[0].tags == ["x"]


def test_delete_removes_only_matching_entry(memory_storage: Any) -> None:
    store = _store(memory_storage)
    keep = store.save(_note("keep"))[1]
    drop = store.save(_note("drop"))[1]

    notes = store.delete(drop.id)  # type: ignore[arg-type]

    assert notes == [keep]
    assert json.loads(memory_storage.values[NOTES_KEY])[0]["id"] == keep.id


def test_delete_unknown_id_is_a_no_op(memory_storage: Any) -> None:
    store = _store(memory_storage)
    store.save(_note("keep"))
    writes = len(memory_storage.writes)

    notes = store.delete(123)

    assert [note.title for note in notes] == ["keep"]
    assert len(memory_storage.writes) == writes


def test_load_reproduces_persisted_collection(memory_storage: Any) -> None:
    store = _store(memory_storage)
    store.save(_note("Grocery List", content="<p>milk</p>", category="Personal", tags=["home"]))
    store.save(_note("Ideas", content="<h1>Big</h1><ul><li>one</li></ul>", tags=["a", "B", "a "]))
    expected = store.notes

    reloaded = _store(memory_storage).load()

    assert reloaded == expected


def test_encode_decode_keep_unicode_and_markup() -> None:
    notes = [Note(id=1, title="Zażółć", content='<p class="x">&amp; ü</p>', category="Ideas", tags=["ß"])]
    assert decode_notes(encode_notes(notes)) == notes


def test_injected_persist_receives_full_collection(memory_storage: Any) -> None:
    calls: list[Sequence[Note]] = []
    store = NoteStore(memory_storage, persist=calls.append)

    store.save(_note("a"))
    store.save(_note("b"))
    store.delete(store.notes[0].id)  # type: ignore[arg-type]

    assert [[note.title for note in call] for call in calls] == [["a"], ["a", "b"], ["b"]]
    assert memory_storage.writes == []


def test_write_failure_leaves_collection_unchanged(memory_storage: Any) -> None:
    store = _store(memory_storage)
    store.save(_note("a"))
    memory_storage.fail_writes = True

    with pytest.raises(NoteStorageError):
        store.save(_note("b"))

    assert [note.title for note in store.notes] == ["a"]


def test_allocator_skips_ids_after_loaded_notes(memory_storage: Any) -> None:
    memory_storage.values[NOTES_KEY] = json.dumps(
        [{"id": 5_000_000_000_000, "title": "future", "content": "", "category": "", "tags": []}]
    )
    store = _store(memory_storage, clock=1.0)
    store.load()
    _, persisted = store.save(_note("next"))
    assert persisted.id == 5_000_000_000_001


def test_allocator_is_monotonic_when_clock_goes_backwards() -> None:
    clock = _StepClock(2_000.0)
    allocator = IdAllocator(clock)
    first = allocator.allocate()
    clock.value = 1_000.0
    second = allocator.allocate()
    assert second == first + 1


def test_allocator_skips_identifiers_in_use() -> None:
    allocator = IdAllocator(_StepClock(1.0))
    assert allocator.allocate({1000, 1001}) == 1002
