"""Tests for SettingsDialog."""

from __future__ import annotations

from fenview.ui.dialogs.settings_dialog import SettingsDialog
from fenview.ui.i18n import set_language
from fenview.ui.settings import AppSettings


def test_dialog_reflects_current_settings() -> None:
    settings = AppSettings(language="Portuguese", board_theme="Blue", show_coordinates=False)
    dlg = SettingsDialog(settings)
    assert dlg._lang_combo.currentText() == "Portuguese"
    assert dlg._theme_combo.currentText() == "Blue"
    assert not dlg._coords_check.isChecked()


def test_accept_writes_back_settings() -> None:
    settings = AppSettings()
    dlg = SettingsDialog(settings)
    dlg._lang_combo.setCurrentText("Portuguese")
    dlg._theme_combo.setCurrentText("Green")
    dlg._coords_check.setChecked(False)

    dlg._on_accept()

    assert settings.language == "Portuguese"
    assert settings.board_theme == "Green"
    assert settings.show_coordinates is False


def test_reject_leaves_settings_untouched() -> None:
    settings = AppSettings()
    dlg = SettingsDialog(settings)
    dlg._theme_combo.setCurrentText("Green")
    dlg.reject()
    assert settings.board_theme == "Classic"


def test_retranslate_ui() -> None:
    set_language("Portuguese")
    dlg = SettingsDialog(AppSettings())
    assert dlg.windowTitle() == "Configurações"
    assert dlg._lang_label.text() == "Idioma:"
