"""Tests for MainWindow FEN submission flow."""

from __future__ import annotations

from fenview.core.enums import FenErrorKind
from fenview.core.notation import STARTING_FEN, ParseFailure, ParseResult
from fenview.ui.main_window import MainWindow
from fenview.ui.panels.output_panel import STATE_ERROR, STATE_SUCCESS
from fenview.ui.settings import AppSettings


class TestMainWindow:
    def test_initial_fen_is_shown(self) -> None:
        window = MainWindow()
        assert isinstance(window.last_result, ParseResult)
        assert window._fen_form.text() == STARTING_FEN
        assert len(window._board_view.board_scene._piece_items) == 32
        assert window._output_panel.state == STATE_SUCCESS
        assert '"activeColor": "w"' in window._output_panel.text()
        window.close()

    def test_custom_initial_fen(self) -> None:
        settings = AppSettings(initial_fen="8/8/8/8/8/8/8/8 b - - 0 1")
        window = MainWindow(settings)
        assert window._board_view.board_scene._piece_items == {}
        assert window._status_label.text() == "Parsed FEN: Black to move"
        window.close()

    def test_invalid_fen_shows_error_and_clears_board(self) -> None:
        window = MainWindow()
        window._fen_form.set_text("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0")
        window._fen_form.submit()

        result = window.last_result
        assert isinstance(result, ParseFailure)
        assert result.kind == FenErrorKind.WRONG_FIELD_COUNT
        assert window._board_view.board_scene.board is None
        assert window._output_panel.state == STATE_ERROR
        assert "expected 6 space-separated fields" in window._output_panel.text()
        assert window._status_label.text() == "Invalid FEN"
        window.close()

    def test_error_message_per_kind(self) -> None:
        window = MainWindow()
        window._on_fen_submitted("8/8/8/8/8/8/8/8 x - - 0 1")
        assert "active color" in window._output_panel.text()

        window._on_fen_submitted("9/8/8/8/8/8/8/8 w - - 0 1")
        assert "piece placement" in window._output_panel.text()
        window.close()

    def test_language_switch_retranslates_output(self) -> None:
        window = MainWindow()
        window._fen_form.set_text("8/8/8/8/8/8/8/8 w - - 0")
        window._fen_form.submit()

        window._settings.language = "Portuguese"
        window._apply_settings()

        assert window._menu_file.title() == "&Arquivo"
        assert "Esperado 6 campos" in window._output_panel.text()
        assert window.windowTitle() == "Visualizador FEN"
        window.close()

    def test_flip_action_toggles_orientation(self) -> None:
        window = MainWindow()
        scene = window._board_view.board_scene
        window._act_flip.trigger()
        assert scene.is_flipped()
        window._act_flip.trigger()
        assert not scene.is_flipped()
        window.close()
