"""BoardScene — QGraphicsScene that draws the chessboard and piece glyphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from oopchess.core.enums import Color
from oopchess.core.position import BOARD_SIZE, FILES, Position
from oopchess.ui.glyphs import piece_glyph
from oopchess.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from oopchess.core.board import Board


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    Moves are entered as a pair of clicks: the first selects a piece of the
    side to move, the second names the destination.

    Signals:
        move_requested(Position, Position): origin and target of a click pair.
            Legality is decided by whoever handles the signal.
    """

    move_requested = pyqtSignal(object, object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None, tile: int = TILE) -> None:
        super().__init__(parent)
        self.TILE = tile
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._side_to_move = Color.WHITE

        # Interaction state
        self._selected: Position | None = None
        self._interactive = True
        self._show_coordinates = True

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Position, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board, side_to_move: Color) -> None:
        """Show *board* (full redraw of pieces) with *side_to_move* to play."""
        self._board = board
        self._side_to_move = side_to_move
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click input."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._board is not None:
            self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def highlight_check(self, king_pos: Position | None) -> None:
        """Highlight the king in check, or clear the highlight with ``None``."""
        self._clear_items(self._check_items)
        if king_pos is None:
            return
        rect = self._make_highlight(king_pos, self._theme.highlight_check)
        rect.setZValue(0.6)
        self._check_items.append(rect)

    @property
    def selected(self) -> Position | None:
        return self._selected

    def click_square(self, pos: Position) -> None:
        """Handle a click on *pos* (first click selects, second requests)."""
        if not self._interactive or self._board is None:
            return

        piece = self._board.get_piece(pos)
        if self._selected is None:
            if piece is not None and piece.color == self._side_to_move:
                self._select_square(pos)
            return

        if pos == self._selected:
            self._clear_selection()
            return
        if piece is not None and piece.color == self._side_to_move:
            self._select_square(pos)
            return

        origin = self._selected
        self._clear_selection()
        self.move_requested.emit(origin, pos)

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
        font = QFont()
        font.setPointSize(max(7, t // 8))

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                pos = Position(row, col)
                is_light = (row + col) % 2 == 0
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[pos] = rect

                coord_color = (
                    self._theme.coord_dark if is_light else self._theme.coord_light
                )
                # Rank numbers (left edge)
                if col == 0:
                    self._add_coord(str(BOARD_SIZE - row), font, coord_color, 2, row * t + 1)
                # File letters (bottom edge)
                if row == BOARD_SIZE - 1:
                    self._add_coord(
                        FILES[col], font, coord_color, col * t + t - 12, row * t + t - 16
                    )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(self, label: str, font: QFont, color: QColor, x: float, y: float) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all glyph items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont()
        font.setPixelSize(int(t * 0.7))
        for piece in self._board:
            item = QGraphicsSimpleTextItem(piece_glyph(piece))
            item.setFont(font)
            item.setBrush(QBrush(self._theme.glyph))
            bounds = item.boundingRect()
            pos = piece.position
            item.setPos(
                pos.col * t + (t - bounds.width()) / 2,
                pos.row * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[pos] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._board is None or event is None:
            return super().mousePressEvent(event)

        pos = self._pos_to_square(event.scenePos())
        if pos is None:
            self._clear_selection()
        else:
            self.click_square(pos)
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, pos: Position) -> None:
        self._clear_selection()
        self._selected = pos
        rect = self._make_highlight(pos, self._theme.highlight_from)
        self._highlight_items.append(rect)

    def _clear_selection(self) -> None:
        self._selected = None
        self._clear_items(self._highlight_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, point: QPointF) -> Position | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(point.x() // t)
        row = int(point.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Position(row, col)

    def _make_highlight(self, pos: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(pos.col * t, pos.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
