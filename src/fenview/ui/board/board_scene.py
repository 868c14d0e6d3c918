"""BoardScene — QGraphicsScene that draws the squares and piece glyphs."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
)

from fenview.core.notation.models import Board
from fenview.render.cells import SquareShade, board_cells, square_shade
from fenview.ui.styles.theme import BoardTheme

Cell = tuple[int, int]  # (rank_index, file_index), first rank of the FEN first


class BoardScene(QGraphicsScene):
    """Renders the board squares, coordinates and piece glyphs."""

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._flipped = False
        self._show_coordinates = True

        # Visual layers
        self._square_items: dict[Cell, QGraphicsRectItem] = {}
        self._piece_items: dict[Cell, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board | None) -> None:
        """Show *board*, or an empty grid when ``None``."""
        self._board = board
        self._sync_pieces()

    @property
    def board(self) -> Board | None:
        return self._board

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self._sync_pieces()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        self._clear_items(self._square_items.values())
        self._square_items.clear()
        self._clear_items(self._coord_items)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for rank_index in range(8):
            for file_index in range(8):
                col, row = self._visual_coords(rank_index, file_index)
                is_light = square_shade(rank_index, file_index) is SquareShade.LIGHT
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[(rank_index, file_index)] = rect

                coord_brush = QBrush(
                    self._theme.coord_dark if is_light else self._theme.coord_light
                )
                # Rank numbers on the left edge, file letters on the bottom edge
                if col == 0:
                    self._add_coord(str(8 - rank_index), col * t + 2, row * t + 1, font, coord_brush)
                if row == 7:
                    letter = chr(ord("a") + file_index)
                    self._add_coord(letter, col * t + t - 12, row * t + t - 16, font, coord_brush)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, brush: QBrush
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(brush)
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all glyph items from the current board."""
        self._clear_items(self._piece_items.values())
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for row_cells in board_cells(self._board):
            for cell in row_cells:
                if cell.piece is None:
                    continue
                item = QGraphicsSimpleTextItem(cell.glyph)
                item.setFont(font)
                item.setBrush(QBrush(self._theme.glyph))
                col, row = self._visual_coords(cell.rank_index, cell.file_index)
                bounds = item.boundingRect()
                item.setPos(
                    col * t + (t - bounds.width()) / 2,
                    row * t + (t - bounds.height()) / 2,
                )
                item.setZValue(1)
                self.addItem(item)
                self._piece_items[(cell.rank_index, cell.file_index)] = item

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, rank_index: int, file_index: int) -> tuple[int, int]:
        """Convert a board cell to visual column/row."""
        if self._flipped:
            return 7 - file_index, 7 - rank_index
        return file_index, rank_index

    def _clear_items(self, items: Iterable[QGraphicsItem]) -> None:
        for item in list(items):
            if item.scene() is self:
                self.removeItem(item)
