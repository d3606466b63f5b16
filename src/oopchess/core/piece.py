"""Piece — a tagged chess piece that knows where it stands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from oopchess.core import movement
from oopchess.core.enums import Color, PieceType
from oopchess.core.position import Position

if TYPE_CHECKING:
    from oopchess.core.board import Board

# FEN-style character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(eq=False, slots=True)
class Piece:
    """A piece on the board.

    Identity matters: the same object sits in a board cell and in its
    owner's available set, so pieces compare by identity.

    ``in_check`` is the King's check-condition flag. It is informational
    (UI / console) and never consulted by legality checks.
    """

    color: Color
    piece_type: PieceType
    position: Position
    in_check: bool = False

    # ── Movement ─────────────────────────────────────────────────────────

    def possible_moves(self, board: Board) -> set[Position]:
        """Destinations reachable by this piece's geometry on *board*.

        Does not consider whether the move would leave the own King attacked.
        """
        return movement.possible_moves(self, board)

    def attacked_squares(self, board: Board) -> set[Position]:
        return movement.attacked_squares(self, board)

    def is_valid_move(self, board: Board, target: Position, moving_color: Color) -> bool:
        if target not in self.possible_moves(board):
            return False
        occupant = board.get_piece(target)
        return occupant is None or occupant.color != moving_color

    # ── Helpers ──────────────────────────────────────────────────────────

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    def copy(self) -> Piece:
        """Independent piece of the same kind at the same position."""
        return Piece(self.color, self.piece_type, self.position, self.in_check)

    def __str__(self) -> str:
        """Letter (uppercase = white, lowercase = black)."""
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, position: Position) -> Piece:
        """Create piece from a letter, e.g. ``'N'`` → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, position)
