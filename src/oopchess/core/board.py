"""Board — piece placement on an 8x8 grid plus the cached attack set."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING

from oopchess.core.enums import Color
from oopchess.core.piece import Piece
from oopchess.core.position import BOARD_SIZE, FILES, Position

if TYPE_CHECKING:
    from oopchess.core.player import Player

_EMPTY_CHARS = ".-_ "


class Board:
    """Mutable 64-square board.

    ``vulnerable_positions`` is a cache of the squares attacked by the side
    last passed to :meth:`update_vulnerable_positions`. Mutations do not
    invalidate it; :class:`~oopchess.core.rules.Rules` refreshes it as part of
    every check query.
    """

    __slots__ = ("_grid", "_vulnerable")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._vulnerable: frozenset[Position] = frozenset()

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._grid[pos.row][pos.col]

    def get_piece(self, pos: Position) -> Piece | None:
        return self._grid[pos.row][pos.col]

    def is_empty(self, pos: Position) -> bool:
        return self._grid[pos.row][pos.col] is None

    def set_piece(self, pos: Position, piece: Piece | None) -> None:
        """Place (or overwrite with) *piece* at *pos*.

        Player piece sets are not touched.
        """
        if piece is not None:
            piece.position = pos
        self._grid[pos.row][pos.col] = piece

    def move_piece(self, origin: Position, target: Position) -> Piece | None:
        """Move the piece at *origin* to *target* and return any captured piece.

        No legality checks are made here.
        """
        piece = self._grid[origin.row][origin.col]
        if piece is None:
            raise ValueError(f"No piece on {origin}")
        captured = self._grid[target.row][target.col]
        self._grid[origin.row][origin.col] = None
        self._grid[target.row][target.col] = piece
        piece.position = target
        return captured

    # -- Query helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[Piece]:
        """Occupied cells in row-major order."""
        for row in self._grid:
            for piece in row:
                if piece is not None:
                    yield piece

    def pieces(self, color: Color) -> list[Piece]:
        return [piece for piece in self if piece.color == color]

    # -- Attack cache -------------------------------------------------------

    def update_vulnerable_positions(self, attacking_player: Player) -> frozenset[Position]:
        """Recompute the squares attacked by *attacking_player*'s pieces."""
        attacked: set[Position] = set()
        for piece in attacking_player.available:
            attacked |= piece.attacked_squares(self)
        self._vulnerable = frozenset(attacked)
        return self._vulnerable

    @property
    def vulnerable_positions(self) -> frozenset[Position]:
        """Most recently computed attack set."""
        return self._vulnerable

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from eight text rows, rank 8 first.

        Letters follow the usual convention (``'K'`` white king, ``'q'`` black
        queen); ``'.'`` marks an empty square::

            Board.from_rows([
                "....k...",
                "........",
                ...
                "....K...",
            ])
        """
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board layout must be 8 rows of 8 characters")
        board = cls()
        for row, text in enumerate(rows):
            for col, char in enumerate(text):
                if char in _EMPTY_CHARS:
                    continue
                pos = Position(row, col)
                board.set_piece(pos, Piece.from_char(char, pos))
        return board

    # -- Rendering ----------------------------------------------------------

    def display(self, glyph: Callable[[Piece], str] | None = None) -> str:
        """Text rendering, rank 8 at the top."""
        render = glyph or str
        lines: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [render(p) if p is not None else "." for p in self._grid[row]]
            lines.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        lines.append(f"  {' '.join(FILES)}")
        return "\n".join(lines)

    # -- Dunder helpers -----------------------------------------------------

    def _layout(self) -> tuple[str, ...]:
        return tuple(
            "".join(str(p) if p is not None else "." for p in row) for row in self._grid
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._layout() == other._layout()

    def __repr__(self) -> str:
        return self.display()
