"""High-level chess rules: check, checkmate and king-safety simulation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from oopchess.core.board import Board

if TYPE_CHECKING:
    from oopchess.core.player import Player
    from oopchess.core.position import Position


class Rules:
    """Static rule-checker over a board and the two players."""

    @staticmethod
    def is_in_check(moving: Player, waiting: Player, board: Board) -> bool:
        """Whether *moving*'s King is attacked by *waiting*.

        The attack cache is refreshed here, so the answer always reflects the
        board as it is now.
        """
        board.update_vulnerable_positions(waiting)
        return moving.king.position in board.vulnerable_positions

    @staticmethod
    def is_checkmate(moving: Player, waiting: Player, board: Board) -> bool:
        """King attacked and the King itself has nowhere to go.

        Only the King's own moves are considered; blocking or capturing the
        attacker with another piece does not count as an escape.
        """
        if not Rules.is_in_check(moving, waiting, board):
            return False
        return not moving.king.possible_moves(board)

    @staticmethod
    def would_expose_king(
        board: Board,
        origin: Position,
        target: Position,
        moving: Player,
        waiting: Player,
    ) -> bool:
        """Replay *origin* → *target* on a throwaway copy of the game.

        Builds a fresh board from clones of both players, applies the move,
        and reports whether the mover's King ends up attacked. *board* and
        the players are left untouched.
        """
        sim_board = Board()
        moving_clone = moving.clone()
        waiting_clone = waiting.clone()
        for player in (moving_clone, waiting_clone):
            for piece in player.available:
                sim_board.set_piece(piece.position, piece)

        captured = sim_board.move_piece(origin, target)
        if captured is not None:
            if captured is waiting_clone.king:
                # Capturing the King ends the game; nothing can be exposed.
                return False
            waiting_clone.remove(captured)
        return Rules.is_in_check(moving_clone, waiting_clone, sim_board)

    @staticmethod
    def is_legal_move(
        board: Board,
        origin: Position,
        target: Position,
        moving: Player,
        waiting: Player,
    ) -> bool:
        return not Rules.would_expose_king(board, origin, target, moving, waiting)
