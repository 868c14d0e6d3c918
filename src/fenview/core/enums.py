"""Core enumerations for the FEN domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color, also used for the side to move."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class FenErrorKind(Enum):
    """Why a FEN string was rejected."""

    NOT_A_STRING = "not_a_string"
    WRONG_FIELD_COUNT = "wrong_field_count"
    MALFORMED_PIECE_PLACEMENT = "malformed_piece_placement"
    INVALID_ACTIVE_COLOR = "invalid_active_color"
