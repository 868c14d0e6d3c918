"""MainWindow — FEN form, board view and parser output."""

from __future__ import annotations

from PyQt6.QtWidgets import QFileDialog, QMainWindow, QMessageBox

from fenview.core.notation import ParseFailure, ParseResult
from fenview.ui.dialogs.settings_dialog import SettingsDialog
from fenview.ui.main_window_parts import export as export_part
from fenview.ui.main_window_parts import fen as fen_part
from fenview.ui.main_window_parts import settings as settings_part
from fenview.ui.main_window_parts import ui as ui_part
from fenview.ui.settings import AppSettings


class MainWindow(QMainWindow):
    """Main application window for fenview."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setMinimumSize(900, 560)
        self.resize(1100, 680)

        self._settings = settings if settings is not None else AppSettings()
        self._last_result: ParseResult | ParseFailure | None = None

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        # Show the initial position straight away
        self._fen_form.set_text(self._settings.initial_fen)
        self._fen_form.submit()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        ui_part.setup_ui(self)

    def _setup_menu(self) -> None:
        ui_part.setup_menu(self)

    def _connect_signals(self) -> None:
        self._fen_form.fen_submitted.connect(self._on_fen_submitted)

    def retranslate_ui(self) -> None:
        ui_part.retranslate_ui(self)
        # Output text is locale-dependent, so redo the last parse
        if self._last_result is not None:
            self._on_fen_submitted(self._fen_form.text())

    # ── Actions ──────────────────────────────────────────────────────────

    @property
    def last_result(self) -> ParseResult | ParseFailure | None:
        return self._last_result

    def _on_fen_submitted(self, text: str) -> None:
        fen_part.show_fen(self, text)

    def _on_export_html(self) -> None:
        export_part.on_export_html(
            self,
            file_dialog_cls=QFileDialog,
            message_box_cls=QMessageBox,
        )

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_settings(self) -> None:
        settings_part.on_settings(self, settings_dialog_cls=SettingsDialog)

    def _apply_settings(self) -> None:
        settings_part.apply_settings(self)
