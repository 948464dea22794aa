"""Storage settings dialog for Note Keeper.

Updates:
  v0.1.0 - 2026-10-16 - Initial dialog editing the storage location string.
"""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)


class StorageSettingsDialog(QDialog):
    """Modal dialog editing the storage location shown to the user."""

    def __init__(self, parent: QWidget | None = None, *, storage_location: str = "") -> None:
        """Initialise the dialog with the current *storage_location*."""
        super().__init__(parent)
        self.setWindowTitle("Storage Settings")
        self.resize(420, 120)
        self._location_input = QLineEdit(self)
        self._location_input.setPlaceholderText("Storage Location")
        self._location_input.setText(storage_location)
        self._build_ui()

    @property
    def storage_location(self) -> str:
        """Return the location entered by the user."""
        return self._location_input.text().strip()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        form = QFormLayout()
        form.addRow("Folder", self._location_input)
        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel,
            self,
        )
        buttons.accepted.connect(self.accept)  # type: ignore[arg-type]
        buttons.rejected.connect(self.reject)  # type: ignore[arg-type]
        layout.addWidget(buttons)


__all__ = ["StorageSettingsDialog"]
