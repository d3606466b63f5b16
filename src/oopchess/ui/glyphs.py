"""Unicode chess glyphs for rendering pieces."""

from __future__ import annotations

from oopchess.core.enums import Color, PieceType
from oopchess.core.piece import Piece

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


def piece_glyph(piece: Piece | None) -> str:
    """Unicode chess symbol, e.g. ♞; empty string for an empty square."""
    if piece is None:
        return ""
    return _UNICODE[(piece.color, piece.piece_type)]
