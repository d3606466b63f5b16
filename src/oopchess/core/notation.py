"""Coordinate-pair input parsing (``"e2 e4"``, or ``"f"`` to forfeit)."""

from __future__ import annotations

from dataclasses import dataclass

from oopchess.core.errors import InvalidInput
from oopchess.core.position import Position

FORFEIT_TOKEN = "f"


@dataclass(frozen=True, slots=True)
class MoveCommand:
    """A request to move the piece on *origin* to *target*."""

    origin: Position
    target: Position

    def __str__(self) -> str:
        return f"{self.origin} {self.target}"


@dataclass(frozen=True, slots=True)
class ForfeitCommand:
    """The side to move concedes."""


Command = MoveCommand | ForfeitCommand


def parse_square(text: str) -> Position:
    """Parse a square name, e.g. ``'e4'`` → ``Position(4, 4)``."""
    return Position.parse(text)


def parse_command(line: str) -> Command:
    """Parse one line of player input.

    Two whitespace-separated squares make a move; a lone ``f`` (either case)
    is a forfeit. Anything else raises :class:`InvalidInput`.
    """
    tokens = line.split()
    if len(tokens) == 1 and tokens[0].lower() == FORFEIT_TOKEN:
        return ForfeitCommand()
    if len(tokens) != 2:
        raise InvalidInput(f"Expected two squares or 'f', got {line!r}")
    return MoveCommand(parse_square(tokens[0]), parse_square(tokens[1]))
