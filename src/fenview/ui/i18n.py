"""Internationalisation strings for the fenview UI.

Usage::

    from fenview.ui.i18n import t, set_language

    set_language("Portuguese")
    print(t().btn_show)                 # "Mostrar"
    print(t().failure_message(kind))
"""

from __future__ import annotations

from dataclasses import dataclass

from fenview.core.enums import FenErrorKind


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_file: str
    menu_export_html: str
    menu_flip_board: str
    menu_quit: str
    menu_settings: str
    menu_settings_action: str

    status_ready: str
    status_parsed: str  # e.g. "Parsed FEN: {side} to move"
    status_invalid: str
    status_exported_html: str  # e.g. "Saved board: {name}"
    color_white: str
    color_black: str

    # ── FenForm ──────────────────────────────────────────────────────────
    form_label: str
    form_placeholder: str
    btn_show: str

    # ── OutputPanel / board ──────────────────────────────────────────────
    output_header: str
    board_unavailable: str

    # Failure messages, one per FenErrorKind
    error_generic: str
    error_not_a_string: str
    error_field_count: str
    error_piece_placement: str
    error_active_color: str

    # HTML export
    html_filter: str
    all_files: str
    export_html_title: str
    export_html_failed: str  # "Failed to save board:\n{exc}"
    export_html_no_board: str

    # ── SettingsDialog ───────────────────────────────────────────────────
    settings_title: str
    settings_language: str
    settings_board_theme: str
    settings_show_coords: str

    def failure_message(self, kind: FenErrorKind) -> str:
        """User-facing text for a rejected FEN."""
        return {
            FenErrorKind.NOT_A_STRING: self.error_not_a_string,
            FenErrorKind.WRONG_FIELD_COUNT: self.error_field_count,
            FenErrorKind.MALFORMED_PIECE_PLACEMENT: self.error_piece_placement,
            FenErrorKind.INVALID_ACTIVE_COLOR: self.error_active_color,
        }.get(kind, self.error_generic)


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="FEN Viewer",
    menu_file="&File",
    menu_export_html="&Export Board as HTML...",
    menu_flip_board="&Flip Board",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_settings_action="&Settings...",
    status_ready="Ready",
    status_parsed="Parsed FEN: {side} to move",
    status_invalid="Invalid FEN",
    status_exported_html="Saved board: {name}",
    color_white="White",
    color_black="Black",
    form_label="FEN:",
    form_placeholder="rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
    btn_show="Show",
    output_header="Parser output",
    board_unavailable="Could not draw the board. Invalid FEN.",
    error_generic="Error: the FEN entered is not valid. Check the format and the number of fields.",
    error_not_a_string="Error: FEN input must be text.",
    error_field_count="FEN error: expected 6 space-separated fields.",
    error_piece_placement="FEN error: the piece placement must have 8 ranks of 8 squares using only 1-8 and pnbrqkPNBRQK.",
    error_active_color="FEN error: the active color must be 'w' or 'b'.",
    html_filter="HTML Files (*.html *.htm)",
    all_files="All Files (*)",
    export_html_title="Export Board as HTML",
    export_html_failed="Failed to save board:\n{exc}",
    export_html_no_board="There is no valid board to export.",
    settings_title="Settings",
    settings_language="Language:",
    settings_board_theme="Board theme:",
    settings_show_coords="Show coordinates:",
)

_PT = Strings(
    window_title="Visualizador FEN",
    menu_file="&Arquivo",
    menu_export_html="&Exportar tabuleiro como HTML...",
    menu_flip_board="&Girar tabuleiro",
    menu_quit="&Sair",
    menu_settings="&Configurações",
    menu_settings_action="&Configurações...",
    status_ready="Pronto",
    status_parsed="FEN analisado: vez das {side}",
    status_invalid="FEN inválido",
    status_exported_html="Tabuleiro salvo: {name}",
    color_white="Brancas",
    color_black="Pretas",
    form_label="FEN:",
    form_placeholder="rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
    btn_show="Mostrar",
    output_header="Saída do parser",
    board_unavailable="Não foi possível gerar o tabuleiro. FEN inválido.",
    error_generic="Erro: O FEN inserido não é válido. Verifique o formato e o número de campos.",
    error_not_a_string="Erro: o FEN deve ser um texto.",
    error_field_count="Erro FEN: Esperado 6 campos separados por espaço.",
    error_piece_placement="Erro FEN: o posicionamento deve ter 8 fileiras de 8 casas usando apenas 1-8 e pnbrqkPNBRQK.",
    error_active_color="Erro FEN: a cor ativa deve ser 'w' ou 'b'.",
    html_filter="Arquivos HTML (*.html *.htm)",
    all_files="Todos os arquivos (*)",
    export_html_title="Exportar tabuleiro como HTML",
    export_html_failed="Falha ao salvar o tabuleiro:\n{exc}",
    export_html_no_board="Não há tabuleiro válido para exportar.",
    settings_title="Configurações",
    settings_language="Idioma:",
    settings_board_theme="Tema do tabuleiro:",
    settings_show_coords="Mostrar coordenadas:",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Portuguese": _PT,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
