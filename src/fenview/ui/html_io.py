"""Board HTML file export."""

from __future__ import annotations

from pathlib import Path

from fenview.core.notation.models import Board
from fenview.render.html import board_html, html_document


def write_board_html(path: Path, board: Board, *, title: str = "FEN board") -> Path:
    """Write *board* as a standalone HTML page; returns the path written."""
    save_path = path
    if save_path.suffix.lower() not in (".html", ".htm"):
        save_path = save_path.with_suffix(".html")
    save_path.write_text(html_document(board_html(board), title=title), encoding="utf-8")
    return save_path
