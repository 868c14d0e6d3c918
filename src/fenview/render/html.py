"""HTML markup for a parsed board."""

from __future__ import annotations

from collections.abc import Mapping
from html import escape
from types import MappingProxyType

from fenview.core.notation.models import Board
from fenview.render.cells import SquareShade, board_cells

DEFAULT_SQUARE_COLORS: MappingProxyType[SquareShade, str] = MappingProxyType(
    {
        SquareShade.LIGHT: "#f0d9b5",
        SquareShade.DARK: "#b58863",
    }
)


def board_html(
    board: Board,
    colors: Mapping[SquareShade, str] = DEFAULT_SQUARE_COLORS,
) -> str:
    """Render *board* as nested ``chessboard`` / ``rank`` / ``square`` divs."""
    parts = ['<div class="chessboard">']
    for row in board_cells(board):
        parts.append('<div class="rank">')
        for cell in row:
            parts.append(
                f'<div class="square {cell.css_class}" '
                f'style="background-color: {colors[cell.shade]};">'
                f"{escape(cell.glyph)}</div>"
            )
        parts.append("</div>")
    parts.append("</div>")
    return "\n".join(parts)


def error_html(message: str) -> str:
    """Markup shown in place of the board when the FEN is invalid."""
    return f'<p class="error">{escape(message)}</p>'


def html_document(body: str, title: str = "FEN board") -> str:
    """Wrap *body* in a standalone page with the board stylesheet."""
    return (
        "<!DOCTYPE html>\n"
        '<html>\n<head>\n<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>{_BOARD_CSS}</style>\n"
        "</head>\n<body>\n"
        f"{body}\n"
        "</body>\n</html>\n"
    )


_BOARD_CSS = """
.chessboard { display: inline-flex; flex-direction: column; border: 2px solid #333; }
.rank { display: flex; }
.square { width: 56px; height: 56px; display: flex; align-items: center;
  justify-content: center; font-size: 40px; }
.piece.white { color: #fff; text-shadow: 0 0 2px #000; }
.piece.black { color: #000; }
.error { color: #b00020; }
"""
