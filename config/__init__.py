"""Configuration helpers for Note Keeper.

Updates: v0.1.0 - 2026-10-05 - Expose settings loader and configuration error types.
"""

from .settings import (
    DEFAULT_DB_PATH,
    DEFAULT_STORAGE_LOCATION,
    NoteKeeperSettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "DEFAULT_DB_PATH",
    "DEFAULT_STORAGE_LOCATION",
    "NoteKeeperSettings",
    "SettingsError",
    "load_settings",
]
