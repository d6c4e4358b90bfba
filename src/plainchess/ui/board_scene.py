"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from plainchess.core.types import ALL_SQUARES, Square
from plainchess.ui.theme import CLASSIC, BoardTheme

if TYPE_CHECKING:
    from plainchess.core.position import Position


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights and pieces.

    Holds no rules: selection, legal destinations and checked kings are
    pushed in by the owner.

    Signals:
        square_clicked(int, int): row and column of a clicked square.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = CLASSIC
        self._position: Position | None = None
        self._show_coordinates = True
        self._show_legal_moves = True

        self._selected: Square | None = None
        self._destinations: set[Square] = set()
        self._check_squares: set[Square] = set()

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._overlay_items: list[QGraphicsRectItem | QGraphicsEllipseItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, position: Position) -> None:
        """Update the displayed position (full redraw of pieces)."""
        self._position = position
        self._sync_pieces()

    def set_selection(self, square: Square | None, destinations: Iterable[Square]) -> None:
        self._selected = square
        self._destinations = set(destinations)
        self._sync_overlays()

    def set_check_squares(self, squares: Iterable[Square]) -> None:
        """Kings to mark as being in check."""
        self._check_squares = set(squares)
        self._sync_overlays()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_overlays()

    def set_show_coordinates(self, visible: bool) -> None:
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move markers."""
        self._show_legal_moves = visible
        self._sync_overlays()

    def piece_text(self, square: Square) -> str | None:
        """Symbol currently drawn on *square*, if any."""
        item = self._piece_items.get(square)
        return item.text() if item is not None else None

    @property
    def overlay_count(self) -> int:
        return len(self._overlay_items)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for sq in ALL_SQUARES:
            row, col = sq
            vx, vy = self._visual_coords(sq)
            color = self._theme.square_color(sq)
            rect = QGraphicsRectItem(vx * t, vy * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coordinate_color(sq)

            # Row numbers (left edge)
            if col == 0:
                txt = QGraphicsSimpleTextItem(str(row + 1))
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(vx * t + 2, vy * t + 1)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

            # Column letters (bottom edge)
            if row == 0:
                txt = QGraphicsSimpleTextItem(chr(ord("a") + col))
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(vx * t + t - 12, vy * t + t - 16)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._position is None:
            return

        t = self.TILE
        font = QFont("Sans Serif", int(t * 0.6))
        for sq, piece in self._position.board.occupied():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(QColor(20, 20, 20)))
            vx, vy = self._visual_coords(sq)
            bounds = item.boundingRect()
            item.setPos(
                vx * t + (t - bounds.width()) / 2,
                vy * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    def _sync_overlays(self) -> None:
        for item in self._overlay_items:
            self.removeItem(item)
        self._overlay_items.clear()

        for sq in self._check_squares:
            self._overlay_items.append(
                self._make_highlight(sq, self._theme.in_check)
            )
        if self._selected is not None:
            self._overlay_items.append(
                self._make_highlight(self._selected, self._theme.selected)
            )
        if self._show_legal_moves:
            for sq in self._destinations:
                self._overlay_items.append(self._make_dot(sq))

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq[0], sq[1])
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    @staticmethod
    def _visual_coords(sq: Square) -> tuple[int, int]:
        """Board square → visual column/row (white at the bottom)."""
        row, col = sq
        return col, 7 - row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        vx = int(pos.x() // t)
        vy = int(pos.y() // t)
        if not (0 <= vx < 8 and 0 <= vy < 8):
            return None
        return (7 - vy, vx)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vx, vy = self._visual_coords(sq)
        rect = QGraphicsRectItem(vx * t, vy * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        """Dot on an empty target; ring around an enemy piece that can be taken."""
        t = self.TILE
        vx, vy = self._visual_coords(sq)
        capture = self._position is not None and self._position.board[sq] is not None
        color = self._theme.indicator_color(capture)
        size = t * (0.9 if capture else 0.3)
        offset = (t - size) / 2
        dot = QGraphicsEllipseItem(vx * t + offset, vy * t + offset, size, size)
        if capture:
            dot.setBrush(QBrush(Qt.BrushStyle.NoBrush))
            dot.setPen(QPen(color, t * 0.08))
        else:
            dot.setBrush(QBrush(color))
            dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(1.5)
        self.addItem(dot)
        return dot
