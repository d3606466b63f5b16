"""Per-variant movement rules, dispatched on :class:`PieceType`."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from oopchess.core.enums import Color, PieceType
from oopchess.core.position import Position

if TYPE_CHECKING:
    from oopchess.core.board import Board
    from oopchess.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# White pawns move towards row 0.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}

_SLIDE_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


# -- Geometry helpers -------------------------------------------------------


def _leaps(origin: Position, offsets: tuple[tuple[int, int], ...]) -> list[Position]:
    targets: list[Position] = []
    for d_row, d_col in offsets:
        target = origin.offset(d_row, d_col)
        if target is not None:
            targets.append(target)
    return targets


def _slide(piece: Piece, board: Board, *, attacks: bool) -> set[Position]:
    """Walk each ray until blocked.

    For movement the first blocker is a destination only when it is an
    opposing piece. For attacks it always counts, and an opposing King does
    not stop the ray.
    """
    targets: set[Position] = set()
    for d_row, d_col in _SLIDE_DIRS[piece.piece_type]:
        current = piece.position.offset(d_row, d_col)
        while current is not None:
            occupant = board.get_piece(current)
            if occupant is None:
                targets.add(current)
            else:
                if attacks or occupant.color != piece.color:
                    targets.add(current)
                see_through = (
                    attacks and occupant.is_king and occupant.color != piece.color
                )
                if not see_through:
                    break
            current = current.offset(d_row, d_col)
    return targets


# -- Movement ---------------------------------------------------------------


def _pawn_moves(piece: Piece, board: Board) -> set[Position]:
    direction = PAWN_DIRECTION[piece.color]
    targets: set[Position] = set()

    one_step = piece.position.offset(direction, 0)
    if one_step is not None and board.is_empty(one_step):
        targets.add(one_step)
        if piece.position.row == PAWN_START_ROW[piece.color]:
            two_step = one_step.offset(direction, 0)
            if two_step is not None and board.is_empty(two_step):
                targets.add(two_step)

    for target in _pawn_attacks(piece, board):
        occupant = board.get_piece(target)
        if occupant is not None and occupant.color != piece.color:
            targets.add(target)
    return targets


def _knight_moves(piece: Piece, board: Board) -> set[Position]:
    return {
        target
        for target in _leaps(piece.position, KNIGHT_OFFSETS)
        if _not_own(board, target, piece.color)
    }


def _sliding_moves(piece: Piece, board: Board) -> set[Position]:
    return _slide(piece, board, attacks=False)


def _king_moves(piece: Piece, board: Board) -> set[Position]:
    vulnerable = _attacked_by(board, piece.color.opposite)
    return {
        target
        for target in _leaps(piece.position, KING_OFFSETS)
        if _not_own(board, target, piece.color) and target not in vulnerable
    }


def _not_own(board: Board, target: Position, color: Color) -> bool:
    occupant = board.get_piece(target)
    return occupant is None or occupant.color != color


_MOVES: dict[PieceType, Callable[[Piece, Board], set[Position]]] = {
    PieceType.PAWN: _pawn_moves,
    PieceType.KNIGHT: _knight_moves,
    PieceType.BISHOP: _sliding_moves,
    PieceType.ROOK: _sliding_moves,
    PieceType.QUEEN: _sliding_moves,
    PieceType.KING: _king_moves,
}


def possible_moves(piece: Piece, board: Board) -> set[Position]:
    """Destination squares for *piece* on *board*, ignoring king safety."""
    return _MOVES[piece.piece_type](piece, board)


# -- Attacks ----------------------------------------------------------------


def _pawn_attacks(piece: Piece, board: Board) -> set[Position]:
    direction = PAWN_DIRECTION[piece.color]
    return set(_leaps(piece.position, ((direction, -1), (direction, 1))))


def _knight_attacks(piece: Piece, board: Board) -> set[Position]:
    return set(_leaps(piece.position, KNIGHT_OFFSETS))


def _sliding_attacks(piece: Piece, board: Board) -> set[Position]:
    return _slide(piece, board, attacks=True)


def _king_attacks(piece: Piece, board: Board) -> set[Position]:
    return set(_leaps(piece.position, KING_OFFSETS))


_ATTACKS: dict[PieceType, Callable[[Piece, Board], set[Position]]] = {
    PieceType.PAWN: _pawn_attacks,
    PieceType.KNIGHT: _knight_attacks,
    PieceType.BISHOP: _sliding_attacks,
    PieceType.ROOK: _sliding_attacks,
    PieceType.QUEEN: _sliding_attacks,
    PieceType.KING: _king_attacks,
}


def attacked_squares(piece: Piece, board: Board) -> set[Position]:
    """Squares *piece* attacks, including ones guarded for its own side."""
    return _ATTACKS[piece.piece_type](piece, board)


def _attacked_by(board: Board, color: Color) -> set[Position]:
    """Every square attacked by the pieces of *color* currently on *board*."""
    attacked: set[Position] = set()
    for piece in board.pieces(color):
        attacked |= attacked_squares(piece, board)
    return attacked
