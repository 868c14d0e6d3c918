"""FEN parsing."""

from __future__ import annotations

import re

from fenview.core.enums import Color, FenErrorKind
from fenview.core.notation.models import (
    Board,
    ParseFailure,
    ParseResult,
    Rank,
    board_to_placement,
)
from fenview.core.piece import PIECE_CHARS, Piece

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

FIELD_COUNT = 6
BOARD_SIZE = 8

_EMPTY_RUN_DIGITS = frozenset("12345678")
_SIDE_TO_MOVE: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class FenError(ValueError):
    """Raised when a FEN string is rejected."""

    def __init__(self, kind: FenErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def parse_fen(text: object) -> ParseResult | ParseFailure:
    """Parse *text* as FEN.

    Never raises: malformed input yields a :class:`ParseFailure` whose
    ``kind`` says which check rejected it.
    """
    try:
        return _parse(text)
    except FenError as exc:
        return ParseFailure(exc.kind, str(exc), text)


def require_fen(text: object) -> ParseResult:
    """Parse *text* as FEN, raising :class:`FenError` on failure."""
    return _parse(text)


def _parse(text: object) -> ParseResult:
    if not isinstance(text, str):
        raise FenError(
            FenErrorKind.NOT_A_STRING,
            f"Invalid FEN (expected str, got {type(text).__name__})",
        )

    parts = text.split()
    if len(parts) != FIELD_COUNT:
        raise FenError(
            FenErrorKind.WRONG_FIELD_COUNT,
            f"Invalid FEN (need {FIELD_COUNT} fields, got {len(parts)}): {text!r}",
        )

    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    board = parse_placement(placement)

    side = _SIDE_TO_MOVE.get(side_part)
    if side is None:
        raise FenError(
            FenErrorKind.INVALID_ACTIVE_COLOR,
            f"Invalid FEN side-to-move field: {side_part!r}",
        )

    # Castling and en passant are kept verbatim.
    return ParseResult(
        board=board,
        active_color=side,
        castling_availability=castling_part,
        en_passant_target=ep_part,
        halfmove_clock=parse_clock(halfmove_part),
        fullmove_number=parse_clock(fullmove_part),
        piece_placement=placement,
        source_text=text,
    )


def parse_placement(placement: str) -> Board:
    """Parse the piece-placement field into an 8x8 board."""
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise FenError(
            FenErrorKind.MALFORMED_PIECE_PLACEMENT,
            f"Invalid FEN board (must contain {BOARD_SIZE} ranks): {placement!r}",
        )
    return tuple(_parse_rank(rank_text, placement) for rank_text in ranks)


def _parse_rank(rank_text: str, placement: str) -> Rank:
    cells: list[Piece | None] = []
    for ch in rank_text:
        if ch in _EMPTY_RUN_DIGITS:
            cells.extend([None] * int(ch))
        elif ch in PIECE_CHARS:
            cells.append(Piece.from_char(ch))
        else:
            raise FenError(
                FenErrorKind.MALFORMED_PIECE_PLACEMENT,
                f"Invalid FEN character {ch!r}: {placement!r}",
            )
    if len(cells) != BOARD_SIZE:
        raise FenError(
            FenErrorKind.MALFORMED_PIECE_PLACEMENT,
            f"Invalid FEN rank width ({len(cells)} squares in {rank_text!r}): "
            f"{placement!r}",
        )
    return tuple(cells)


def parse_clock(text: str) -> int | None:
    """Read the leading integer of *text*, or ``None`` if there is none.

    ``"12"`` → 12, ``"12abc"`` → 12, ``"-"`` → None. Digit runs too long to
    convert also give None.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Past the interpreter's int-conversion digit limit
        return None


__all__ = [
    "FIELD_COUNT",
    "STARTING_FEN",
    "FenError",
    "board_to_placement",
    "parse_clock",
    "parse_fen",
    "parse_placement",
    "require_fen",
]
