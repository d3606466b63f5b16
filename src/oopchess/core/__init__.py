"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from oopchess.core import Board, Color, Player, Position, Rules

    board = Board()
    white, black = Player(Color.WHITE), Player(Color.BLACK)
    for player in (white, black):
        player.set_up_back_row(board)
        player.set_up_pawns(board)
        player.initialize_available(board)

    pawn = board.get_piece(Position.parse("e2"))
    print(sorted(p.name for p in pawn.possible_moves(board)))
"""

from oopchess.core.board import Board
from oopchess.core.enums import Color, PieceType
from oopchess.core.errors import InvalidInput, InvalidPosition
from oopchess.core.notation import (
    Command,
    ForfeitCommand,
    MoveCommand,
    parse_command,
    parse_square,
)
from oopchess.core.piece import Piece
from oopchess.core.player import Player
from oopchess.core.position import Position
from oopchess.core.rules import Rules

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "InvalidInput",
    "InvalidPosition",
    # Domain objects
    "Board",
    "Piece",
    "Player",
    "Position",
    "Rules",
    # Input
    "Command",
    "ForfeitCommand",
    "MoveCommand",
    "parse_command",
    "parse_square",
]
