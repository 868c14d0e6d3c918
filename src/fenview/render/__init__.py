"""Pure projections of a parsed board: cells, HTML markup, JSON summary."""

from fenview.render.cells import (
    PIECE_GLYPHS,
    BoardCell,
    SquareShade,
    board_cells,
    square_shade,
)
from fenview.render.html import board_html, error_html, html_document
from fenview.render.summary import result_json, result_summary

__all__ = [
    "PIECE_GLYPHS",
    "BoardCell",
    "SquareShade",
    "board_cells",
    "board_html",
    "error_html",
    "html_document",
    "result_json",
    "result_summary",
    "square_shade",
]
