"""Pytest configuration for shared test fixtures and environment hooks.

Updates:
  v0.3.0 - 2026-10-17 - Share the fake editing surface between sync and manager tests.
  v0.2.0 - 2026-10-16 - Add in-memory key-value storage fixture for note store tests.
  v0.1.0 - 2026-10-05 - Force Qt offscreen platform for headless test runs.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import pytest

from core.exceptions import SerializationFailure
from core.repository import RepositoryError


def pytest_configure(config: Any) -> None:
    """Ensure Qt uses the offscreen platform during tests to avoid GUI aborts."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class MemoryStorage:
    """Dict-backed stand-in for KeyValueRepository that records writes."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})
        self.writes: list[tuple[str, str]] = []
        self.fail_writes = False
        self.fail_reads = False

    def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise RepositoryError("read failed")
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise RepositoryError("write failed")
        self.values[key] = value
        self.writes.append((key, value))


@pytest.fixture()
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


class FakeSurface:
    """Editing surface double that can echo programmatic changes as edits."""

    def __init__(self, *, echo_programmatic: bool = False) -> None:
        self.markup = ""
        self.set_calls: list[str] = []
        self.clear_calls = 0
        self.fail_serialize = False
        self.echo_programmatic = echo_programmatic
        self._callbacks: list[Callable[[], None]] = []

    def set_content(self, markup: str) -> None:
        self.markup = markup
        self.set_calls.append(markup)
        if self.echo_programmatic:
            self._emit()

    def serialize(self) -> str:
        if self.fail_serialize:
            raise SerializationFailure("document gone")
        return self.markup

    def clear(self) -> None:
        self.markup = ""
        self.clear_calls += 1
        if self.echo_programmatic:
            self._emit()

    def on_user_edit(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def type_text(self, markup: str) -> None:
        """Simulate the user changing the document to *markup*."""
        self.markup = markup
        self._emit()

    def _emit(self) -> None:
        for callback in list(self._callbacks):
            callback()


@pytest.fixture()
def fake_surface() -> FakeSurface:
    return FakeSurface()
