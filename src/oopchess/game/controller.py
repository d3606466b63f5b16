"""Game — the rules coordinator.

Coordinates: Board, both Players, turn order, the move validation pipeline
and end-of-game detection. Emits events via simple callbacks so the UI /
tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from oopchess.core.board import Board
from oopchess.core.enums import Color
from oopchess.core.errors import InvalidInput, InvalidPosition
from oopchess.core.notation import ForfeitCommand, parse_command
from oopchess.core.player import Player
from oopchess.core.position import Position
from oopchess.core.rules import Rules
from oopchess.game.interfaces import (
    GameEndReason,
    GamePhase,
    GameResult,
    IGame,
    MoveOutcome,
    MoveRecord,
    MoveStatus,
)

_LOGGER = logging.getLogger(__name__)

SquareLike = Position | tuple[int, int] | str

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
CheckCallback = Callable[[Color], None]  # color in check
GameOverCallback = Callable[[GameResult, GameEndReason], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class Game(IGame):
    """Runs one game: ``SETUP`` → ``IN_PROGRESS`` → ``GAME_OVER``.

    Illegal moves are ordinary outcomes: :meth:`submit_move` and :meth:`play`
    return a :class:`MoveOutcome` and leave the board untouched instead of
    raising.
    """

    __slots__ = (
        "_board",
        "_white",
        "_black",
        "_is_white_turn",
        "_phase",
        "_result",
        "_end_reason",
        "_history",
        "events",
    )

    def __init__(self) -> None:
        self._board: Board | None = None
        self._white = Player(Color.WHITE)
        self._black = Player(Color.BLACK)
        self._is_white_turn = True
        self._phase = GamePhase.SETUP
        self._result = GameResult.IN_PROGRESS
        self._end_reason = GameEndReason.NONE
        self._history: list[MoveRecord] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        if self._board is None:
            raise RuntimeError("Game has not been started")
        return self._board

    @property
    def white(self) -> Player:
        return self._white

    @property
    def black(self) -> Player:
        return self._black

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def end_reason(self) -> GameEndReason:
        return self._end_reason

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def side_to_move(self) -> Color:
        return Color.WHITE if self._is_white_turn else Color.BLACK

    @property
    def current_player(self) -> Player:
        return self._white if self._is_white_turn else self._black

    @property
    def waiting_player(self) -> Player:
        return self._black if self._is_white_turn else self._white

    @property
    def in_check(self) -> bool:
        """Check condition of the side to move, as of the start of its turn."""
        if self._board is None:
            return False
        return self.current_player.king.in_check

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    def player(self, color: Color) -> Player:
        return self._white if color == Color.WHITE else self._black

    # ── IGame impl ───────────────────────────────────────────────────────

    def start(self, rows: Sequence[str] | None = None, white_to_move: bool = True) -> None:
        """Set up a new game from the standard position, or from *rows*.

        *rows* uses the :meth:`Board.from_rows` layout.
        """
        white, black = Player(Color.WHITE), Player(Color.BLACK)
        if rows is None:
            board = Board()
            for player in (white, black):
                player.set_up_back_row(board)
                player.set_up_pawns(board)
        else:
            board = Board.from_rows(rows)
        white.initialize_available(board)
        black.initialize_available(board)
        idle, to_move = (black, white) if white_to_move else (white, black)
        if Rules.is_in_check(idle, to_move, board):
            raise ValueError(f"{idle} is in check but it is not their turn")

        self._white, self._black = white, black
        self._board = board
        self._is_white_turn = white_to_move
        self._result = GameResult.IN_PROGRESS
        self._end_reason = GameEndReason.NONE
        self._history = []
        _LOGGER.debug("New game, %s to move", self.side_to_move)

        self._set_phase(GamePhase.IN_PROGRESS)
        self._begin_turn()

    def play(self, line: str) -> MoveOutcome:
        if self._phase != GamePhase.IN_PROGRESS:
            return MoveOutcome(MoveStatus.GAME_NOT_ACTIVE)
        try:
            command = parse_command(line)
        except InvalidInput:
            _LOGGER.debug("Unparseable input %r", line)
            return MoveOutcome(MoveStatus.INVALID_INPUT)
        if isinstance(command, ForfeitCommand):
            return self.forfeit()
        return self.submit_move(command.origin, command.target)

    def submit_move(self, origin: SquareLike, target: SquareLike) -> MoveOutcome:
        if self._phase != GamePhase.IN_PROGRESS:
            return MoveOutcome(MoveStatus.GAME_NOT_ACTIVE)

        try:
            origin_pos = _to_position(origin)
            target_pos = _to_position(target)
        except InvalidPosition:
            return self._reject(MoveStatus.INVALID_POSITION, origin, target)
        except InvalidInput:
            return self._reject(MoveStatus.INVALID_INPUT, origin, target)

        board = self.board
        moving = self.current_player
        waiting = self.waiting_player

        piece = board.get_piece(origin_pos)
        if piece is None:
            return self._reject(MoveStatus.EMPTY_ORIGIN, origin_pos, target_pos)
        if piece.color != moving.color:
            return self._reject(MoveStatus.NOT_YOUR_PIECE, origin_pos, target_pos)
        if not piece.is_valid_move(board, target_pos, moving.color):
            return self._reject(MoveStatus.ILLEGAL_PIECE_MOVE, origin_pos, target_pos)
        if self.would_expose_king(board, origin_pos, target_pos, moving, waiting):
            return self._reject(MoveStatus.KING_EXPOSED, origin_pos, target_pos)

        return self._commit(origin_pos, target_pos)

    def forfeit(self) -> MoveOutcome:
        if self._phase != GamePhase.IN_PROGRESS:
            return MoveOutcome(MoveStatus.GAME_NOT_ACTIVE)
        loser = self.current_player
        loser.forfeit()
        _LOGGER.debug("%s forfeits", loser)
        self._finish(GameEndReason.FORFEIT)
        return MoveOutcome(MoveStatus.FORFEIT)

    def end(self) -> str:
        if self._white.is_forfeit:
            return "White Player has forfeited. Black Player wins!"
        if self._black.is_forfeit:
            return "Black Player has forfeited. White Player wins!"
        if self._result == GameResult.BLACK_WINS:
            return "Checkmate! Black Player wins!"
        if self._result == GameResult.WHITE_WINS:
            return "Checkmate! White Player wins!"
        return "Game in progress"

    # ── Rule pass-throughs ───────────────────────────────────────────────

    def is_in_check(self, moving: Player, waiting: Player, board: Board) -> bool:
        return Rules.is_in_check(moving, waiting, board)

    def is_checkmate(self, moving: Player, waiting: Player, board: Board) -> bool:
        return Rules.is_checkmate(moving, waiting, board)

    def would_expose_king(
        self,
        board: Board,
        origin: Position,
        target: Position,
        moving: Player,
        waiting: Player,
    ) -> bool:
        return Rules.would_expose_king(board, origin, target, moving, waiting)

    def is_legal_move(
        self,
        board: Board,
        origin: Position,
        target: Position,
        moving: Player,
        waiting: Player,
    ) -> bool:
        return Rules.is_legal_move(board, origin, target, moving, waiting)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, origin: Position, target: Position) -> MoveOutcome:
        board = self.board
        moving = self.current_player
        waiting = self.waiting_player

        piece = board.get_piece(origin)
        assert piece is not None
        captured = board.move_piece(origin, target)
        if captured is not None:
            waiting.remove(captured)

        gave_check = Rules.is_in_check(waiting, moving, board)
        record = MoveRecord(
            color=moving.color,
            piece=str(piece).upper(),
            origin=origin,
            target=target,
            captured=str(captured) if captured is not None else None,
            gave_check=gave_check,
        )
        self._history.append(record)
        _LOGGER.debug("%s plays %s", moving, record)

        self._is_white_turn = not self._is_white_turn
        self._emit_move(record)
        self._begin_turn()
        return MoveOutcome(MoveStatus.ACCEPTED, captured)

    def _begin_turn(self) -> None:
        """Refresh attacks for the side to move; detect check and checkmate."""
        board = self.board
        moving = self.current_player
        waiting = self.waiting_player

        in_check = self.is_in_check(moving, waiting, board)
        moving.king.in_check = in_check
        waiting.king.in_check = False

        if in_check and self.is_checkmate(moving, waiting, board):
            self._finish(GameEndReason.CHECKMATE)
            return
        if in_check:
            _LOGGER.debug("%s is in check", moving)
            self._emit_check(moving.color)

    def _finish(self, reason: GameEndReason) -> None:
        loser = self.side_to_move
        self._result = (
            GameResult.BLACK_WINS if loser == Color.WHITE else GameResult.WHITE_WINS
        )
        self._end_reason = reason
        self._set_phase(GamePhase.GAME_OVER)
        _LOGGER.debug("Game over: %s (%s)", self._result.name, reason.name)
        for cb in self.events.on_game_over:
            cb(self._result, reason)

    def _reject(
        self, status: MoveStatus, origin: object, target: object
    ) -> MoveOutcome:
        _LOGGER.debug("Rejected %s -> %s: %s", origin, target, status.name)
        return MoveOutcome(status)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)


def _to_position(value: SquareLike) -> Position:
    if isinstance(value, Position):
        return value
    if isinstance(value, str):
        return Position.parse(value)
    row, col = value
    return Position(row, col)
