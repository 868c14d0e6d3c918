"""Tests for FenForm and OutputPanel."""

from __future__ import annotations

from fenview.ui.i18n import set_language
from fenview.ui.panels.fen_form import FenForm
from fenview.ui.panels.output_panel import STATE_ERROR, STATE_SUCCESS, OutputPanel


class TestFenForm:
    def test_submit_emits_raw_text(self) -> None:
        form = FenForm()
        received: list[str] = []
        form.fen_submitted.connect(received.append)

        form.set_text("  8/8/8/8/8/8/8/8 w - - 0 1 ")
        form._btn_show.click()

        assert received == ["  8/8/8/8/8/8/8/8 w - - 0 1 "]

    def test_return_pressed_submits(self) -> None:
        form = FenForm()
        received: list[str] = []
        form.fen_submitted.connect(received.append)
        form.set_text("x")
        form._input.returnPressed.emit()
        assert received == ["x"]

    def test_retranslate(self) -> None:
        form = FenForm()
        set_language("Portuguese")
        form.retranslate_ui()
        assert form._btn_show.text() == "Mostrar"


class TestOutputPanel:
    def test_initial_state_empty(self) -> None:
        panel = OutputPanel()
        assert panel.state == ""
        assert panel.text() == ""

    def test_success_then_error(self) -> None:
        panel = OutputPanel()
        panel.show_success('{"isValid": true}')
        assert panel.state == STATE_SUCCESS
        assert panel.text() == '{"isValid": true}'

        panel.show_error("bad")
        assert panel.state == STATE_ERROR
        assert panel.text() == "bad"
        assert panel._text.property("state") == STATE_ERROR

    def test_clear(self) -> None:
        panel = OutputPanel()
        panel.show_error("bad")
        panel.clear()
        assert panel.state == ""
        assert panel.text() == ""
