"""Core domain layer — pure FEN parsing with zero external dependencies.

Quick start::

    from fenview.core import parse_fen, STARTING_FEN

    result = parse_fen(STARTING_FEN)
    if result.is_valid:
        print(result.board[0])
"""

from fenview.core.enums import Color, FenErrorKind, PieceType
from fenview.core.notation import (
    STARTING_FEN,
    Board,
    FenError,
    ParseFailure,
    ParseResult,
    board_to_placement,
    parse_fen,
    require_fen,
)
from fenview.core.piece import Piece

__all__ = [
    # Enums
    "Color",
    "FenErrorKind",
    "PieceType",
    # Domain objects
    "Board",
    "Piece",
    "ParseFailure",
    "ParseResult",
    # Notation
    "STARTING_FEN",
    "FenError",
    "board_to_placement",
    "parse_fen",
    "require_fen",
]
