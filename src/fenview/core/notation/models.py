"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from fenview.core.enums import Color, FenErrorKind
from fenview.core.piece import Piece

Rank: TypeAlias = tuple[Piece | None, ...]
Board: TypeAlias = tuple[Rank, ...]

# Rendered in place of a clock that did not hold a number.
NAN_TEXT = "NaN"


def board_to_placement(board: Board) -> str:
    """Serialise *board* to a FEN piece-placement field."""
    rows: list[str] = []
    for rank in board:
        empty = 0
        row = ""
        for piece in rank:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def _clock_text(value: int | None) -> str:
    if value is None:
        return NAN_TEXT
    try:
        return str(value)
    except ValueError:
        return NAN_TEXT


@dataclass(frozen=True, slots=True)
class ParseResult:
    """A successfully parsed FEN string.

    ``board`` holds the ranks in the order they appear in the text
    (conventionally rank 8 first). Clocks are ``None`` when the field did not
    start with a number.
    """

    board: Board
    active_color: Color
    castling_availability: str
    en_passant_target: str
    halfmove_clock: int | None
    fullmove_number: int | None
    piece_placement: str = field(default="", compare=False)
    source_text: str = field(default="", compare=False)

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def fields(self) -> tuple[str, str, str, str, str, str]:
        """The six FEN fields, normalised."""
        return (
            board_to_placement(self.board),
            "w" if self.active_color == Color.WHITE else "b",
            self.castling_availability,
            self.en_passant_target,
            _clock_text(self.halfmove_clock),
            _clock_text(self.fullmove_number),
        )

    def to_fen(self) -> str:
        return " ".join(self.fields)

    def piece_at(self, rank_index: int, file_index: int) -> Piece | None:
        return self.board[rank_index][file_index]


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """A rejected FEN string. Carries no partial board data."""

    kind: FenErrorKind
    message: str
    source_text: object = None

    @property
    def is_valid(self) -> bool:
        return False
