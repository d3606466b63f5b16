"""Console front end: read coordinate pairs, print the board."""

from __future__ import annotations

import logging
from collections.abc import Callable

from oopchess.core.piece import Piece
from oopchess.game.controller import Game
from oopchess.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def run_console(
    game: Game | None = None,
    read_line: ReadLine = input,
    write: Write = print,
    glyph: Callable[[Piece], str] | None = None,
) -> Game:
    """Play a game to completion on the console and return it.

    Bad input or an illegal move is reported and re-prompted without
    consuming the turn. End of input counts as a forfeit by the side to move.
    """
    if game is None:
        game = Game()
    if game.phase == GamePhase.SETUP:
        game.start()

    while not game.is_game_over:
        write(game.board.display(glyph))
        if game.in_check:
            write("Check")

        while True:
            try:
                line = read_line(f"{game.current_player} Enter Move: ")
            except EOFError:
                _LOGGER.warning("Input closed; %s forfeits", game.current_player)
                game.forfeit()
                break
            outcome = game.play(line.strip())
            if outcome.ok:
                break
            write(outcome.message)

    write(game.board.display(glyph))
    write(game.end())
    return game
