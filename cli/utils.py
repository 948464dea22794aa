"""Shared CLI utility functions for Note Keeper commands.

Updates:
  v0.1.0 - 2026-10-15 - Extract stdout logging, path helpers, and note formatting.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from logging import Logger

    from models.note import Note

_TAG_PATTERN = re.compile(r"<[^>]+>")
_PREVIEW_LIMIT = 60


def print_and_log(logger: Logger, level: int, message: str) -> None:
    """Log *message* at *level* and mirror it to stdout."""
    logger.log(level, message)
    print(message)


def describe_path(
    path_value: object,
    *,
    expect_directory: bool,
    allow_missing_file: bool = False,
) -> str:
    """Return a human-friendly description of *path_value* suitability."""
    try:
        path = Path(path_value) if path_value is not None else None  # type: ignore[arg-type]
    except TypeError:
        path = None
    if path is None:
        return "not set"

    resolved = path.expanduser()
    if resolved.exists():
        if expect_directory and not resolved.is_dir():
            return f"{resolved} (exists but is not a directory)"
        if not expect_directory and resolved.is_dir():
            return f"{resolved} (exists but is a directory)"
        return f"{resolved} (exists)"

    message = f"{resolved} (missing)"
    if not expect_directory and allow_missing_file:
        message = f"{resolved} (missing - created on demand)"
    parent = resolved.parent
    if not parent.exists():
        message += f", parent missing: {parent}"
    return message


def content_preview(markup: str, *, limit: int = _PREVIEW_LIMIT) -> str:
    """Return a single-line plain-text preview of note markup."""
    text = " ".join(_TAG_PATTERN.sub(" ", markup).split())
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


def format_note_line(note: Note) -> str:
    """Return a one-line summary of *note* for terminal output."""
    category = note.category or "uncategorised"
    tags = ", ".join(f"#{tag}" for tag in note.tags)
    line = f"[{note.id}] {note.title} ({category})"
    if tags:
        line += f" {tags}"
    preview = content_preview(note.content)
    if preview:
        line += f"\n    {preview}"
    return line
