"""Player — one side's available pieces, its King and its forfeit flag."""

from __future__ import annotations

from typing import TYPE_CHECKING

from oopchess.core.enums import Color, PieceType
from oopchess.core.piece import Piece
from oopchess.core.position import BOARD_SIZE, Position

if TYPE_CHECKING:
    from oopchess.core.board import Board

BACK_ROW: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_BACK_ROW_INDEX: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_PAWN_ROW_INDEX: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


class Player:
    """Owns the on-board pieces of one color.

    The available list is an index over pieces the board owns; it is only
    changed through :meth:`initialize_available` and :meth:`remove` (on
    capture).
    """

    __slots__ = ("_color", "_available", "_king", "_is_forfeit")

    def __init__(self, color: Color) -> None:
        self._color = color
        self._available: list[Piece] = []
        self._king: Piece | None = None
        self._is_forfeit = False

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def color(self) -> Color:
        return self._color

    @property
    def available(self) -> tuple[Piece, ...]:
        return tuple(self._available)

    @property
    def king(self) -> Piece:
        if self._king is None:
            raise ValueError(f"{self} has no king; call initialize_available()")
        return self._king

    @property
    def is_forfeit(self) -> bool:
        return self._is_forfeit

    def forfeit(self) -> None:
        self._is_forfeit = True

    # ── Setup ────────────────────────────────────────────────────────────

    def set_up_back_row(self, board: Board) -> None:
        row = _BACK_ROW_INDEX[self._color]
        for col, piece_type in enumerate(BACK_ROW):
            pos = Position(row, col)
            board.set_piece(pos, Piece(self._color, piece_type, pos))

    def set_up_pawns(self, board: Board) -> None:
        row = _PAWN_ROW_INDEX[self._color]
        for col in range(BOARD_SIZE):
            pos = Position(row, col)
            board.set_piece(pos, Piece(self._color, PieceType.PAWN, pos))

    def initialize_available(self, board: Board) -> None:
        """Index this color's pieces currently on *board*."""
        pieces = board.pieces(self._color)
        kings = [p for p in pieces if p.piece_type == PieceType.KING]
        if len(kings) != 1:
            raise ValueError(
                f"{self} must have exactly one king, found {len(kings)}"
            )
        self._available = pieces
        self._king = kings[0]

    # ── Piece bookkeeping ────────────────────────────────────────────────

    def remove(self, piece: Piece) -> None:
        """Drop a captured piece from the available set."""
        if piece is self._king:
            raise ValueError("The king cannot be captured")
        for i, candidate in enumerate(self._available):
            if candidate is piece:
                del self._available[i]
                return
        raise ValueError(f"{piece} at {piece.position} does not belong to {self}")

    def clone(self) -> Player:
        """Deep copy for simulation; shares no mutable state with *self*."""
        twin = Player(self._color)
        for piece in self._available:
            copy = piece.copy()
            twin._available.append(copy)
            if piece is self._king:
                twin._king = copy
        twin._is_forfeit = self._is_forfeit
        return twin

    def __str__(self) -> str:
        return f"{self._color.name.capitalize()} Player"

    def __repr__(self) -> str:
        return f"Player({self._color.name}, pieces={len(self._available)})"
