"""CLI command handlers for Note Keeper.

Updates:
  v0.1.0 - 2026-10-15 - Add list and search commands over the stored collection.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .utils import format_note_line, print_and_log

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from core.note_manager import NoteManager
    from models.note import Note
else:  # pragma: no cover - runtime placeholders for type-only imports
    NoteManager = object
    Note = object

CommandHandler = Callable[[NoteManager | None, argparse.Namespace, logging.Logger], int]


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler
    requires_manager: bool = True


def _print_notes(notes: Sequence[Note]) -> None:
    for note in notes:
        print(format_note_line(note))


def run_list(
    manager: NoteManager | None,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    if manager is None:
        raise ValueError("Note Keeper is required to list notes.")
    notes = manager.list_notes()
    if not notes:
        print_and_log(logger, logging.INFO, "No notes stored yet.")
        return 0
    _print_notes(notes)
    logger.info("Listed %d notes", len(notes))
    return 0


def run_search(
    manager: NoteManager | None,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    if manager is None:
        raise ValueError("Note Keeper is required to search notes.")
    query = str(getattr(args, "query", "") or "")
    matches = manager.set_search_query(query)
    if not matches:
        print_and_log(logger, logging.INFO, f"No notes match {query!r}.")
        return 1
    _print_notes(matches)
    logger.info("Search %r matched %d notes", query, len(matches))
    return 0


COMMAND_SPECS: dict[str | None, CommandSpec] = {
    "list": CommandSpec(run_list),
    "search": CommandSpec(run_search),
}


__all__ = ["CommandSpec", "COMMAND_SPECS", "run_list", "run_search"]
