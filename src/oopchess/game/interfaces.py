"""Game-layer enums, result objects and the abstract coordinator interface.

Front ends (console loop, Qt window) depend on :class:`IGame`, not on the
concrete :class:`~oopchess.game.controller.Game`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from oopchess.core.enums import Color
    from oopchess.core.piece import Piece
    from oopchess.core.position import Position


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    SETUP = auto()
    IN_PROGRESS = auto()
    GAME_OVER = auto()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2


class GameEndReason(IntEnum):
    """Why a finished game ended."""

    NONE = 0
    CHECKMATE = auto()
    FORFEIT = auto()


# ── Move outcomes ────────────────────────────────────────────────────────────


class MoveStatus(IntEnum):
    """Result of submitting one line of input or one move."""

    ACCEPTED = 0
    FORFEIT = auto()
    INVALID_INPUT = auto()
    INVALID_POSITION = auto()
    EMPTY_ORIGIN = auto()
    NOT_YOUR_PIECE = auto()
    ILLEGAL_PIECE_MOVE = auto()
    KING_EXPOSED = auto()
    GAME_NOT_ACTIVE = auto()

    @property
    def message(self) -> str:
        return _STATUS_MESSAGES[self]


_STATUS_MESSAGES: dict[MoveStatus, str] = {
    MoveStatus.ACCEPTED: "Move accepted",
    MoveStatus.FORFEIT: "Forfeited",
    MoveStatus.INVALID_INPUT: "Invalid input",
    MoveStatus.INVALID_POSITION: "Invalid input",
    MoveStatus.EMPTY_ORIGIN: "Invalid move",
    MoveStatus.NOT_YOUR_PIECE: "Invalid move",
    MoveStatus.ILLEGAL_PIECE_MOVE: "Invalid move",
    MoveStatus.KING_EXPOSED: "Invalid move - king in check",
    MoveStatus.GAME_NOT_ACTIVE: "The game is not in progress",
}


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What happened to a submitted move."""

    status: MoveStatus
    captured: Piece | None = None

    @property
    def ok(self) -> bool:
        """True when the turn was consumed (move committed or forfeit)."""
        return self.status in (MoveStatus.ACCEPTED, MoveStatus.FORFEIT)

    @property
    def message(self) -> str:
        return self.status.message


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    color: Color
    piece: str
    origin: Position
    target: Position
    captured: str | None = None
    gave_check: bool = False

    def __str__(self) -> str:
        sep = "x" if self.captured else "-"
        suffix = "+" if self.gave_check else ""
        return f"{self.piece}{self.origin}{sep}{self.target}{suffix}"


# ── Abstract interface ───────────────────────────────────────────────────────


class IGame(ABC):
    """Interface for the rules coordinator."""

    @abstractmethod
    def start(self) -> None:
        """Set up a new game."""

    @abstractmethod
    def play(self, line: str) -> MoveOutcome:
        """Apply one line of player input (a move or a forfeit)."""

    @abstractmethod
    def submit_move(
        self,
        origin: Position | tuple[int, int] | str,
        target: Position | tuple[int, int] | str,
    ) -> MoveOutcome:
        """Validate and, if legal, commit a move for the side to move."""

    @abstractmethod
    def forfeit(self) -> MoveOutcome:
        """The side to move concedes."""

    @abstractmethod
    def end(self) -> str:
        """Describe the outcome of the game."""
