"""QTextEdit adapter implementing the core editing surface protocol.

Updates:
  v0.1.1 - 2026-10-17 - Strip Qt's document boilerplate from serialized markup.
  v0.1.0 - 2026-10-16 - Wrap QTextEdit with signal-blocked programmatic updates.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from PySide6.QtCore import QObject
from PySide6.QtWidgets import QTextEdit

from core.exceptions import SerializationFailure

logger = logging.getLogger("note_keeper.gui.surface")

_BODY_PATTERN = re.compile(r"<body[^>]*>(?P<body>.*)</body>", re.DOTALL | re.IGNORECASE)
_FRAGMENT_MARKERS = ("<!--StartFragment-->", "<!--EndFragment-->")


def extract_body_markup(document_html: str) -> str:
    """Return the markup inside ``<body>`` of a Qt HTML export."""
    match = _BODY_PATTERN.search(document_html)
    body = match.group("body") if match else document_html
    for marker in _FRAGMENT_MARKERS:
        body = body.replace(marker, "")
    return body.strip()


class RichTextSurface(QObject):
    """Expose a QTextEdit as an editing surface.

    Programmatic replacements run with the editor's signals blocked, so only
    keystrokes and other user actions reach the edit callbacks.
    """

    def __init__(self, editor: QTextEdit) -> None:
        super().__init__(editor)
        self._editor = editor
        self._callbacks: list[Callable[[], None]] = []
        editor.textChanged.connect(self._on_text_changed)  # type: ignore[arg-type]

    @property
    def editor(self) -> QTextEdit:
        return self._editor

    def set_content(self, markup: str) -> None:
        previous = self._editor.blockSignals(True)
        try:
            self._editor.setHtml(markup)
        finally:
            self._editor.blockSignals(previous)

    def clear(self) -> None:
        previous = self._editor.blockSignals(True)
        try:
            self._editor.clear()
        finally:
            self._editor.blockSignals(previous)

    def serialize(self) -> str:
        try:
            document = self._editor.document()
            if document.isEmpty():
                return ""
            return extract_body_markup(document.toHtml())
        except RuntimeError as exc:
            raise SerializationFailure(f"Editor document unavailable: {exc}") from exc

    def on_user_edit(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def _on_text_changed(self) -> None:
        for callback in list(self._callbacks):
            callback()


__all__ = ["RichTextSurface", "extract_body_markup"]
