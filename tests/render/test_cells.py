"""Tests for the board → display-cell projection."""

import pytest

from fenview.core.enums import Color, PieceType
from fenview.core.notation import STARTING_FEN, ParseResult, parse_fen
from fenview.core.piece import Piece
from fenview.render.cells import PIECE_GLYPHS, BoardCell, SquareShade, board_cells, square_shade


def _board(fen: str = STARTING_FEN):
    result = parse_fen(fen)
    assert isinstance(result, ParseResult)
    return result.board


def test_square_shade_alternates() -> None:
    assert square_shade(0, 0) is SquareShade.LIGHT
    assert square_shade(0, 1) is SquareShade.DARK
    assert square_shade(1, 0) is SquareShade.DARK
    assert square_shade(7, 7) is SquareShade.LIGHT


def test_board_cells_is_8x8_with_coordinates() -> None:
    cells = board_cells(_board())
    assert len(cells) == 8
    for rank_index, row in enumerate(cells):
        assert len(row) == 8
        for file_index, cell in enumerate(row):
            assert (cell.rank_index, cell.file_index) == (rank_index, file_index)
            assert cell.shade is square_shade(rank_index, file_index)


def test_light_and_dark_counts() -> None:
    shades = [cell.shade for row in board_cells(_board()) for cell in row]
    assert shades.count(SquareShade.LIGHT) == 32
    assert shades.count(SquareShade.DARK) == 32


def test_glyphs_follow_pieces() -> None:
    cells = board_cells(_board())
    assert cells[0][4].glyph == "♚"
    assert cells[7][4].glyph == "♔"
    assert cells[4][4].glyph == ""


def test_css_class() -> None:
    cells = board_cells(_board())
    assert cells[0][0].css_class == "piece black"
    assert cells[7][0].css_class == "piece white"
    assert cells[3][3].css_class == "empty"


def test_glyph_table_covers_every_piece() -> None:
    assert len(PIECE_GLYPHS) == 12
    assert PIECE_GLYPHS[Piece(Color.WHITE, PieceType.KNIGHT)] == "♘"
    assert PIECE_GLYPHS[Piece(Color.BLACK, PieceType.PAWN)] == "♟"


def test_glyph_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        PIECE_GLYPHS[Piece(Color.WHITE, PieceType.KING)] = "K"  # type: ignore[index]


def test_empty_cell_defaults() -> None:
    cell = BoardCell(2, 3, SquareShade.DARK)
    assert cell.piece is None
    assert cell.glyph == ""
