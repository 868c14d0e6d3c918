"""Tests for HTML board markup."""

from fenview.core.notation import STARTING_FEN, ParseResult, parse_fen
from fenview.render.html import (
    DEFAULT_SQUARE_COLORS,
    board_html,
    error_html,
    html_document,
)
from fenview.render.cells import SquareShade


def _board(fen: str = STARTING_FEN):
    result = parse_fen(fen)
    assert isinstance(result, ParseResult)
    return result.board


def test_board_html_structure() -> None:
    html = board_html(_board())
    assert html.startswith('<div class="chessboard">')
    assert html.count('<div class="rank">') == 8
    assert html.count('class="square ') == 64


def test_board_html_colors_and_classes() -> None:
    html = board_html(_board())
    assert html.count(DEFAULT_SQUARE_COLORS[SquareShade.LIGHT]) == 32
    assert html.count(DEFAULT_SQUARE_COLORS[SquareShade.DARK]) == 32
    assert html.count("square piece white") == 16
    assert html.count("square piece black") == 16
    assert html.count("square empty") == 32


def test_first_square_is_light_black_rook() -> None:
    first = board_html(_board()).splitlines()[2]
    assert 'class="square piece black"' in first
    assert "#f0d9b5" in first
    assert "♜" in first


def test_custom_colors() -> None:
    colors = {SquareShade.LIGHT: "#ffffff", SquareShade.DARK: "#000000"}
    html = board_html(_board("8/8/8/8/8/8/8/8 w - - 0 1"), colors)
    assert html.count("#ffffff") == 32
    assert html.count("#000000") == 32


def test_error_html_escapes_message() -> None:
    assert error_html("bad <fen>") == '<p class="error">bad &lt;fen&gt;</p>'


def test_html_document_wraps_body() -> None:
    doc = html_document("<p>x</p>", title="a & b")
    assert doc.startswith("<!DOCTYPE html>")
    assert "<title>a &amp; b</title>" in doc
    assert "<p>x</p>" in doc
    assert ".chessboard" in doc
