"""FenForm — text input and submit button for a FEN string."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QWidget

from fenview.ui.i18n import t


class FenForm(QWidget):
    """Single-line FEN editor.

    Signals:
        fen_submitted(str): Emitted with the raw text on Return or button click.
    """

    fen_submitted = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._label = QLabel()
        layout.addWidget(self._label)

        self._input = QLineEdit()
        self._input.setFont(QFont("Consolas", 11))
        self._input.returnPressed.connect(self.submit)
        layout.addWidget(self._input, stretch=1)

        self._btn_show = QPushButton()
        self._btn_show.setMinimumHeight(32)
        self._btn_show.clicked.connect(self.submit)
        layout.addWidget(self._btn_show)

    def retranslate_ui(self) -> None:
        s = t()
        self._label.setText(s.form_label)
        self._input.setPlaceholderText(s.form_placeholder)
        self._btn_show.setText(s.btn_show)

    def text(self) -> str:
        return self._input.text()

    def set_text(self, text: str) -> None:
        self._input.setText(text)

    def submit(self) -> None:
        self.fen_submitted.emit(self._input.text())
