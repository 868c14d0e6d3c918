"""JSON-ready summary of a parse result."""

from __future__ import annotations

import json
from typing import Any

from fenview.core.enums import Color
from fenview.core.notation.models import ParseResult


def result_summary(result: ParseResult) -> dict[str, Any]:
    """Mirror a result as plain data: letters for pieces, ``None`` for empty squares."""
    return {
        "isValid": result.is_valid,
        "piecePlacement": result.piece_placement,
        "board": [
            [str(piece) if piece is not None else None for piece in rank]
            for rank in result.board
        ],
        "activeColor": "w" if result.active_color == Color.WHITE else "b",
        "castlingAvailability": result.castling_availability,
        "enPassantTarget": result.en_passant_target,
        "halfmoveClock": result.halfmove_clock,
        "fullmoveNumber": result.fullmove_number,
        "fen": result.source_text,
    }


def result_json(result: ParseResult) -> str:
    return json.dumps(result_summary(result), indent=2, ensure_ascii=False)
