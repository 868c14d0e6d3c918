"""MainWindow FEN submission: parse, then project onto board and output."""

from __future__ import annotations

import logging
from typing import Any

from fenview.core.enums import Color
from fenview.core.notation import ParseFailure, ParseResult, parse_fen
from fenview.render.summary import result_json
from fenview.ui.i18n import t

_LOGGER = logging.getLogger(__name__)


def show_fen(host: Any, text: str) -> ParseResult | ParseFailure:
    """Parse *text* and refresh the board view, output panel and status bar."""
    result = parse_fen(text)
    host._last_result = result
    scene = host._board_view.board_scene
    s = t()

    if isinstance(result, ParseResult):
        scene.set_board(result.board)
        host._output_panel.show_success(result_json(result))
        side = s.color_white if result.active_color == Color.WHITE else s.color_black
        host._status_label.setText(s.status_parsed.format(side=side))
        _LOGGER.info("Parsed FEN: %s", result.source_text)
    else:
        scene.set_board(None)
        host._output_panel.show_error(
            f"{s.failure_message(result.kind)}\n\n{s.board_unavailable}"
        )
        host._status_label.setText(s.status_invalid)
        _LOGGER.warning("Invalid FEN %r: %s", text, result.message)
    return result
