"""SettingsDialog — language and board appearance."""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from fenview.ui.i18n import LANGUAGES, t
from fenview.ui.settings import AppSettings
from fenview.ui.styles.theme import BOARD_THEMES


class SettingsDialog(QDialog):
    """Edits an :class:`AppSettings` in place when accepted."""

    def __init__(self, settings: AppSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._settings = settings
        self.setModal(True)
        self.setMinimumWidth(360)

        layout = QVBoxLayout(self)
        form = QFormLayout()
        form.setSpacing(12)
        form.setContentsMargins(16, 16, 16, 16)

        self._lang_label = QLabel()
        self._lang_combo = QComboBox()
        self._lang_combo.addItems(LANGUAGES)
        self._lang_combo.setCurrentIndex(max(0, self._lang_combo.findText(settings.language)))
        form.addRow(self._lang_label, self._lang_combo)

        self._theme_label = QLabel()
        self._theme_combo = QComboBox()
        self._theme_combo.addItems(list(BOARD_THEMES))
        self._theme_combo.setCurrentIndex(
            max(0, self._theme_combo.findText(settings.board_theme))
        )
        form.addRow(self._theme_label, self._theme_combo)

        self._coords_label = QLabel()
        self._coords_check = QCheckBox()
        self._coords_check.setChecked(settings.show_coordinates)
        form.addRow(self._coords_label, self._coords_check)

        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.settings_title)
        self._lang_label.setText(s.settings_language)
        self._theme_label.setText(s.settings_board_theme)
        self._coords_label.setText(s.settings_show_coords)

    def apply(self, settings: AppSettings) -> None:
        settings.language = self._lang_combo.currentText()
        settings.board_theme = self._theme_combo.currentText()
        settings.show_coordinates = self._coords_check.isChecked()

    def _on_accept(self) -> None:
        self.apply(self._settings)
        self.accept()
