"""Printable summaries for Note Keeper configuration.

Updates:
  v0.1.0 - 2026-10-15 - Extract CLI settings summary rendering.
"""

from __future__ import annotations

from config import NoteKeeperSettings

from .utils import describe_path


def print_settings_summary(settings: NoteKeeperSettings) -> None:
    """Emit a readable summary of the resolved configuration."""
    db_path_desc = describe_path(
        settings.db_path,
        expect_directory=False,
        allow_missing_file=True,
    )
    categories = ", ".join(settings.categories) or "none"
    lines = [
        "Note Keeper configuration summary",
        "---------------------------------",
        f"Database path: {db_path_desc}",
        f"Storage location (display only): {settings.storage_location or 'not set'}",
        f"Categories: {categories}",
    ]
    print("\n".join(lines))
