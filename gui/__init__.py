"""GUI module namespace for Note Keeper.

Updates: v0.1.0 - 2026-10-16 - Expose PySide6 launcher utilities with a friendly missing-Qt error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config import NoteKeeperSettings
    from core import NoteManager


class GuiDependencyError(RuntimeError):
    """Raised when the GUI cannot start because optional dependencies are absent."""


_MISSING_PYSIDE6_MESSAGE = (
    "PySide6 is not installed. Install dependencies with `pip install -e .` "
    "before launching the GUI, or rerun with --no-gui."
)

try:
    from .application import create_qapplication, launch_note_keeper
except ModuleNotFoundError as exc:  # pragma: no cover - exercised when Qt is absent
    if exc.name is None or not exc.name.startswith("PySide6"):
        raise

    def _raise_create_qapplication(_: Sequence[str] | None = None) -> NoReturn:
        raise GuiDependencyError(_MISSING_PYSIDE6_MESSAGE)

    def _raise_launch_note_keeper(
        _: NoteManager,
        __: NoteKeeperSettings | None = None,
    ) -> NoReturn:
        raise GuiDependencyError(_MISSING_PYSIDE6_MESSAGE)

    create_qapplication = _raise_create_qapplication
    launch_note_keeper = _raise_launch_note_keeper


__all__ = ["create_qapplication", "launch_note_keeper", "GuiDependencyError"]
