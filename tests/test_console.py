"""Tests for the console front end."""

from __future__ import annotations

from collections.abc import Iterable

from oopchess.console import run_console
from oopchess.core.enums import Color
from oopchess.game.controller import Game
from oopchess.game.interfaces import GameEndReason, GameResult
from oopchess.ui.glyphs import piece_glyph


class _Script:
    """Feeds scripted lines to the console; raises EOFError when exhausted."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


def _run(lines: Iterable[str], game: Game | None = None) -> tuple[Game, list[str], _Script]:
    out: list[str] = []
    script = _Script(lines)
    game = run_console(game, read_line=script, write=out.append)
    return game, out, script


def test_fools_mate_ends_with_checkmate_message() -> None:
    game, out, script = _run(["f2 f3", "e7 e5", "g2 g4", "d8 h4"])
    assert game.result == GameResult.BLACK_WINS
    assert game.end_reason == GameEndReason.CHECKMATE
    assert out[-1] == "Checkmate! Black Player wins!"
    assert len(script.prompts) == 4


def test_prompts_alternate_between_players() -> None:
    _game, _out, script = _run(["e2 e4", "e7 e5", "f"])
    assert script.prompts == [
        "White Player Enter Move: ",
        "Black Player Enter Move: ",
        "White Player Enter Move: ",
    ]


def test_forfeit_message() -> None:
    game, out, _script = _run(["e2 e4", "F"])
    assert game.black.is_forfeit
    assert out[-1] == "Black Player has forfeited. White Player wins!"


def test_invalid_input_is_reported_and_reprompted() -> None:
    game, out, script = _run(["hello", "e2 e4", "f"])
    assert "Invalid input" in out
    assert script.prompts[:2] == [
        "White Player Enter Move: ",
        "White Player Enter Move: ",
    ]
    assert [str(r) for r in game.history] == ["Pe2-e4"]


def test_illegal_move_is_reported() -> None:
    game, out, _script = _run(["e2 e5", "e7 e5", "f"])
    assert out.count("Invalid move") == 2
    assert game.white.is_forfeit


def test_king_exposed_is_reported() -> None:
    game = Game()
    game.start([
        "k...r...",
        "........",
        "........",
        "........",
        "........",
        "........",
        "....B...",
        "....K...",
    ])
    _game, out, _script = _run(["e2 d3", "f"], game)
    assert "Invalid move - king in check" in out


def test_check_is_announced() -> None:
    game = Game()
    game.start([
        ".......k",
        "........",
        "........",
        "........",
        "........",
        "........",
        "R.......",
        "....K...",
    ])
    _game, out, _script = _run(["a2 a8", "f"], game)
    assert out.count("Check") == 1
    # the notice follows the board printed for black's turn
    assert out[out.index("Check") - 1].startswith("8 R")


def test_end_of_input_forfeits_side_to_move() -> None:
    game, out, _script = _run(["e2 e4"])
    assert game.side_to_move == Color.BLACK
    assert game.black.is_forfeit
    assert out[-1] == "Black Player has forfeited. White Player wins!"


def test_board_printed_each_turn_and_at_end() -> None:
    _game, out, _script = _run(["e2 e4", "f"])
    boards = [line for line in out if line.endswith("a b c d e f g h")]
    assert len(boards) == 3


def test_unicode_glyphs() -> None:
    out: list[str] = []
    run_console(read_line=_Script(["f"]), write=out.append, glyph=piece_glyph)
    assert "♔" in out[0]
    assert "K" not in out[0]
