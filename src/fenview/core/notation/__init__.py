"""Notation package: FEN parsing and serialisation."""

from fenview.core.notation.fen import (
    STARTING_FEN,
    FenError,
    board_to_placement,
    parse_clock,
    parse_fen,
    parse_placement,
    require_fen,
)
from fenview.core.notation.models import Board, ParseFailure, ParseResult, Rank

__all__ = [
    "STARTING_FEN",
    "Board",
    "FenError",
    "ParseFailure",
    "ParseResult",
    "Rank",
    "board_to_placement",
    "parse_clock",
    "parse_fen",
    "parse_placement",
    "require_fen",
]
