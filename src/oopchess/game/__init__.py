"""Game management layer — rules coordinator and its state machine.

Quick start::

    from oopchess.game import Game

    game = Game()
    game.start()
    outcome = game.play("e2 e4")
    print(outcome.message, game.side_to_move)
"""

from oopchess.game.controller import Game, GameEvents
from oopchess.game.interfaces import (
    GameEndReason,
    GamePhase,
    GameResult,
    IGame,
    MoveOutcome,
    MoveRecord,
    MoveStatus,
)

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    "GameResult",
    "IGame",
    "MoveOutcome",
    "MoveRecord",
    "MoveStatus",
    # Concrete
    "Game",
    "GameEvents",
]
