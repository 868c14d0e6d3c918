"""MainWindow settings dialog and application helpers."""

from __future__ import annotations

from typing import Any

from fenview.ui.i18n import set_language
from fenview.ui.styles.theme import theme_by_name


def on_settings(host: Any, *, settings_dialog_cls: type[Any]) -> None:
    dlg = settings_dialog_cls(host._settings, host)
    if dlg.exec():
        host._apply_settings()


def apply_settings(host: Any) -> None:
    s = host._settings

    # Language must come first so all retranslate calls use the new locale
    set_language(s.language)
    host.retranslate_ui()

    scene = host._board_view.board_scene
    scene.set_theme(theme_by_name(s.board_theme))
    scene.set_show_coordinates(s.show_coordinates)
