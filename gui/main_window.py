"""Main window for Note Keeper.

The window renders :class:`core.note_manager.AppState` snapshots and turns
user actions into NoteManager transitions. Widgets are only ever updated with
their signals blocked, and handlers listen to user-only signals
(``textEdited``, ``activated``, ``itemClicked``) so rendering never feeds back
into the manager.

Updates:
  v0.1.2 - 2026-10-18 - Defer note deletion until the list item's click handler returns.
  v0.1.1 - 2026-10-17 - Render tag chips and surface empty-title saves in the status bar.
  v0.1.0 - 2026-10-16 - Initial sidebar, editor pane and settings wiring.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSplitter,
    QTextEdit,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from core import NoteStorageError

from .rich_text_surface import RichTextSurface
from .settings_dialog import StorageSettingsDialog

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config import NoteKeeperSettings
    from core import AppState, NoteManager
    from models.note import Note

_CATEGORY_PLACEHOLDER = "Select Category"


class _NoteListEntry(QWidget):
    """List row showing a note title, its category, and a delete button."""

    def __init__(self, note: Note, on_delete, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)
        labels = QVBoxLayout()
        title = QLabel(note.title, self)
        title_font = QFont(title.font())
        title_font.setBold(True)
        title.setFont(title_font)
        category = QLabel(note.category, self)
        category.setStyleSheet("color: gray;")
        labels.addWidget(title)
        labels.addWidget(category)
        layout.addLayout(labels, 1)
        self.delete_button = QToolButton(self)
        self.delete_button.setText("✕")
        self.delete_button.setToolTip("Delete note")
        self.delete_button.clicked.connect(on_delete)  # type: ignore[arg-type]
        layout.addWidget(self.delete_button)


class MainWindow(QMainWindow):
    """Sidebar of notes plus an editor for the current note."""

    def __init__(
        self,
        manager: NoteManager,
        settings: NoteKeeperSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._manager = manager
        self._settings = settings
        self._rendered_notes: tuple[Note, ...] | None = None
        self._rendered_tags: list[str] | None = None
        self._rendered_category: tuple[tuple[str, ...], str] | None = None
        self.setWindowTitle("Note Keeper")
        self.resize(1024, 640)
        self._build_ui()
        self._surface = RichTextSurface(self._editor)
        self._manager.attach_surface(self._surface)
        self._unsubscribe = self._manager.subscribe(self._render)
        self._render(self._manager.snapshot())

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        splitter = QSplitter(Qt.Orientation.Horizontal, self)

        sidebar = QWidget(splitter)
        side_layout = QVBoxLayout(sidebar)
        side_layout.setContentsMargins(12, 12, 12, 12)
        heading = QLabel("Notes", sidebar)
        heading_font = QFont(heading.font())
        heading_font.setPointSize(heading_font.pointSize() + 6)
        heading_font.setBold(True)
        heading.setFont(heading_font)
        side_layout.addWidget(heading)

        self._search_input = QLineEdit(sidebar)
        self._search_input.setPlaceholderText("Search notes...")
        self._search_input.setClearButtonEnabled(True)
        self._search_input.textChanged.connect(self._manager.set_search_query)  # type: ignore[arg-type]
        side_layout.addWidget(self._search_input)

        self._new_button = QPushButton("New Note", sidebar)
        self._new_button.clicked.connect(self._on_new_clicked)  # type: ignore[arg-type]
        side_layout.addWidget(self._new_button)

        self._note_list = QListWidget(sidebar)
        self._note_list.itemClicked.connect(self._on_note_clicked)  # type: ignore[arg-type]
        side_layout.addWidget(self._note_list, 1)

        editor_pane = QWidget(splitter)
        editor_layout = QVBoxLayout(editor_pane)
        editor_layout.setContentsMargins(12, 12, 12, 12)

        header = QHBoxLayout()
        self._title_input = QLineEdit(editor_pane)
        self._title_input.setPlaceholderText("Note Title")
        title_font = QFont(self._title_input.font())
        title_font.setPointSize(title_font.pointSize() + 6)
        title_font.setBold(True)
        self._title_input.setFont(title_font)
        self._title_input.textEdited.connect(self._manager.set_title)  # type: ignore[arg-type]
        header.addWidget(self._title_input, 1)

        self._category_combo = QComboBox(editor_pane)
        self._category_combo.activated.connect(self._on_category_activated)  # type: ignore[arg-type]
        header.addWidget(self._category_combo)

        self._save_button = QPushButton("Save", editor_pane)
        self._save_button.clicked.connect(self._on_save_clicked)  # type: ignore[arg-type]
        header.addWidget(self._save_button)

        self._settings_button = QPushButton("Settings", editor_pane)
        self._settings_button.clicked.connect(self._on_settings_clicked)  # type: ignore[arg-type]
        header.addWidget(self._settings_button)
        editor_layout.addLayout(header)

        tag_row = QHBoxLayout()
        self._tag_chips = QHBoxLayout()
        tag_row.addLayout(self._tag_chips)
        self._tag_input = QLineEdit(editor_pane)
        self._tag_input.setPlaceholderText("Add tag...")
        self._tag_input.setMaximumWidth(160)
        self._tag_input.returnPressed.connect(self._on_tag_entered)  # type: ignore[arg-type]
        tag_row.addWidget(self._tag_input)
        tag_row.addStretch(1)
        editor_layout.addLayout(tag_row)

        self._editor = QTextEdit(editor_pane)
        self._editor.setAcceptRichText(True)
        self._editor.setPlaceholderText("Start writing…")
        editor_layout.addWidget(self._editor, 1)

        splitter.addWidget(sidebar)
        splitter.addWidget(editor_pane)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([300, 724])
        self.setCentralWidget(splitter)
        self.statusBar()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render(self, state: AppState) -> None:
        if state.visible_notes != self._rendered_notes:
            self._populate_list(state.visible_notes)
        category_key = (state.categories, state.current.category)
        if category_key != self._rendered_category:
            self._populate_categories(*category_key)
            self._rendered_category = category_key
        if self._title_input.text() != state.current.title:
            self._title_input.blockSignals(True)
            self._title_input.setText(state.current.title)
            self._title_input.blockSignals(False)
        if list(state.current.tags) != self._rendered_tags:
            self._populate_tags(state.current.tags)
        self._highlight_current(state.current.id)

    def _populate_list(self, notes: Sequence[Note]) -> None:
        self._note_list.blockSignals(True)
        self._note_list.clear()
        for note in notes:
            item = QListWidgetItem(self._note_list)
            item.setData(Qt.ItemDataRole.UserRole, note.id)
            entry = _NoteListEntry(
                note,
                partial(self._on_delete_requested, note.id),
                self._note_list,
            )
            item.setSizeHint(entry.sizeHint())
            self._note_list.setItemWidget(item, entry)
        self._note_list.blockSignals(False)
        self._rendered_notes = tuple(notes)

    def _populate_categories(self, categories: Sequence[str], current: str) -> None:
        self._category_combo.blockSignals(True)
        self._category_combo.clear()
        self._category_combo.addItem(_CATEGORY_PLACEHOLDER, "")
        for category in categories:
            self._category_combo.addItem(category, category)
        if current and current not in categories:
            self._category_combo.addItem(current, current)
        index = self._category_combo.findData(current)
        self._category_combo.setCurrentIndex(max(index, 0))
        self._category_combo.blockSignals(False)

    def _populate_tags(self, tags: Sequence[str]) -> None:
        while self._tag_chips.count():
            child = self._tag_chips.takeAt(0)
            widget = child.widget()
            if widget is not None:
                widget.deleteLater()
        for tag in tags:
            chip = QPushButton(f"{tag}  ✕", self)
            chip.setToolTip("Remove tag")
            chip.clicked.connect(partial(self._on_tag_removed, tag))  # type: ignore[arg-type]
            self._tag_chips.addWidget(chip)
        self._rendered_tags = list(tags)

    def _highlight_current(self, note_id: int | None) -> None:
        self._note_list.blockSignals(True)
        self._note_list.clearSelection()
        if note_id is not None:
            for row in range(self._note_list.count()):
                item = self._note_list.item(row)
                if item.data(Qt.ItemDataRole.UserRole) == note_id:
                    item.setSelected(True)
                    break
        self._note_list.blockSignals(False)

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def _on_new_clicked(self) -> None:
        self._manager.new_note()
        self._title_input.setFocus()

    def _on_note_clicked(self, item: QListWidgetItem) -> None:
        note_id = item.data(Qt.ItemDataRole.UserRole)
        if note_id is None:
            return
        self._manager.select_note(int(note_id))

    def _on_category_activated(self, index: int) -> None:
        category = self._category_combo.itemData(index)
        self._manager.set_category(str(category or ""))

    def _on_tag_entered(self) -> None:
        tag = self._tag_input.text()
        self._tag_input.clear()
        self._manager.add_tag(tag)

    def _on_tag_removed(self, tag: str, _checked: bool = False) -> None:
        self._manager.remove_tag(tag)

    def _on_save_clicked(self) -> None:
        try:
            persisted = self._manager.save_current()
        except NoteStorageError as exc:
            QMessageBox.critical(self, "Unable to save note", str(exc))
            return
        if persisted is None:
            self._show_status("Enter a title before saving.")
            self._title_input.setFocus()
            return
        self._show_status(f"Saved “{persisted.title}”.")

    def _on_delete_requested(self, note_id: int | None, _checked: bool = False) -> None:
        if note_id is None:
            return
        # The list is rebuilt on delete, which destroys the button emitting this signal.
        QTimer.singleShot(0, partial(self._delete_note, note_id))

    def _delete_note(self, note_id: int) -> None:
        try:
            self._manager.delete_note(note_id)
        except NoteStorageError as exc:
            QMessageBox.critical(self, "Unable to delete note", str(exc))
            return
        self._show_status("Note deleted.")

    def _on_settings_clicked(self) -> None:
        dialog = StorageSettingsDialog(self, storage_location=self._manager.storage_location)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return
        self._manager.set_storage_location(dialog.storage_location)
        self._show_status("Storage location updated.")

    def _show_status(self, message: str, duration_ms: int = 3000) -> None:
        self.statusBar().showMessage(message, duration_ms)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._unsubscribe()
        super().closeEvent(event)


__all__ = ["MainWindow"]
