"""OutputPanel — parser output or error message."""

from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QPlainTextEdit, QVBoxLayout, QWidget

from fenview.ui.i18n import t

STATE_SUCCESS = "success"
STATE_ERROR = "error"


class OutputPanel(QWidget):
    """Read-only view of the last parse: JSON summary or error text."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._state = ""

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        self._header = QLabel()
        layout.addWidget(self._header)

        self._text = QPlainTextEdit()
        self._text.setReadOnly(True)
        layout.addWidget(self._text, stretch=1)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        self._header.setText(t().output_header)

    @property
    def state(self) -> str:
        """``"success"``, ``"error"`` or ``""`` before the first parse."""
        return self._state

    def text(self) -> str:
        return self._text.toPlainText()

    def show_success(self, text: str) -> None:
        self._set(text, STATE_SUCCESS)

    def show_error(self, message: str) -> None:
        self._set(message, STATE_ERROR)

    def clear(self) -> None:
        self._set("", "")

    def _set(self, text: str, state: str) -> None:
        self._state = state
        self._text.setPlainText(text)
        # Re-polish so the [state=...] QSS selectors apply
        self._text.setProperty("state", state)
        style = self._text.style()
        if style is not None:
            style.unpolish(self._text)
            style.polish(self._text)
