"""Board → 64 display cells, with square shade and piece glyph."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from fenview.core.enums import Color, PieceType
from fenview.core.notation.models import Board
from fenview.core.piece import Piece

PIECE_GLYPHS: MappingProxyType[Piece, str] = MappingProxyType(
    {
        Piece(Color.WHITE, PieceType.KING): "♔",
        Piece(Color.WHITE, PieceType.QUEEN): "♕",
        Piece(Color.WHITE, PieceType.ROOK): "♖",
        Piece(Color.WHITE, PieceType.BISHOP): "♗",
        Piece(Color.WHITE, PieceType.KNIGHT): "♘",
        Piece(Color.WHITE, PieceType.PAWN): "♙",
        Piece(Color.BLACK, PieceType.KING): "♚",
        Piece(Color.BLACK, PieceType.QUEEN): "♛",
        Piece(Color.BLACK, PieceType.ROOK): "♜",
        Piece(Color.BLACK, PieceType.BISHOP): "♝",
        Piece(Color.BLACK, PieceType.KNIGHT): "♞",
        Piece(Color.BLACK, PieceType.PAWN): "♟",
    }
)


class SquareShade(Enum):
    LIGHT = "light"
    DARK = "dark"


def square_shade(rank_index: int, file_index: int) -> SquareShade:
    """Even coordinate sum is a light square, odd is dark."""
    return SquareShade.LIGHT if (rank_index + file_index) % 2 == 0 else SquareShade.DARK


@dataclass(frozen=True, slots=True)
class BoardCell:
    """One visual square of the rendered grid."""

    rank_index: int
    file_index: int
    shade: SquareShade
    piece: Piece | None = None

    @property
    def glyph(self) -> str:
        return PIECE_GLYPHS[self.piece] if self.piece is not None else ""

    @property
    def css_class(self) -> str:
        if self.piece is None:
            return "empty"
        return "piece white" if self.piece.is_white else "piece black"


def board_cells(board: Board) -> list[list[BoardCell]]:
    """Project *board* onto rows of display cells, first rank first."""
    return [
        [
            BoardCell(rank_index, file_index, square_shade(rank_index, file_index), piece)
            for file_index, piece in enumerate(rank)
        ]
        for rank_index, rank in enumerate(board)
    ]
