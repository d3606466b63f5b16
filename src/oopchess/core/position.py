"""Position — an immutable (row, column) board coordinate.

Board layout (row 0 is the black back rank)::

    row 0 -> rank 8    a8=(0, 0) ... h8=(0, 7)
    ...
    row 7 -> rank 1    a1=(7, 0) ... h1=(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

from oopchess.core.errors import InvalidInput, InvalidPosition

BOARD_SIZE = 8
FILES = "abcdefgh"
RANKS = "12345678"


def is_on_board(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies inside the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Value object for one of the 64 squares."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_on_board(self.row, self.col):
            raise InvalidPosition(
                f"Position out of range: ({self.row}, {self.col})"
            )

    # ── Text conversion ──────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> Position:
        """Parse a square name, e.g. ``'e2'`` → ``Position(6, 4)``."""
        name = text.strip().lower()
        if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
            raise InvalidInput(f"Invalid square name: {text!r}")
        return cls(BOARD_SIZE - int(name[1]), FILES.index(name[0]))

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``Position(7, 0)`` → ``'a1'``."""
        return f"{FILES[self.col]}{BOARD_SIZE - self.row}"

    # ── Geometry ─────────────────────────────────────────────────────────

    def offset(self, d_row: int, d_col: int) -> Position | None:
        """Shifted position, or ``None`` when it falls off the board."""
        row, col = self.row + d_row, self.col + d_col
        if not is_on_board(row, col):
            return None
        return Position(row, col)

    def __str__(self) -> str:
        return self.name
