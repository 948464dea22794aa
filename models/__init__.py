"""Data models for Note Keeper.

Updates: v0.1.0 - 2026-10-05 - Export Note dataclass.
"""

from .note import Note

__all__ = ["Note"]
