"""Tests for Rules: check, checkmate and the king-safety simulation."""

from oopchess.core.board import Board
from oopchess.core.enums import Color
from oopchess.core.player import Player
from oopchess.core.position import Position
from oopchess.core.rules import Rules


def _setup(rows: list[str]) -> tuple[Board, Player, Player]:
    board = Board.from_rows(rows)
    white, black = Player(Color.WHITE), Player(Color.BLACK)
    white.initialize_available(board)
    black.initialize_available(board)
    return board, white, black


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board, white, black = _setup([
            "rnbqkbnr",
            "pppppppp",
            "........",
            "........",
            "........",
            "........",
            "PPPPPPPP",
            "RNBQKBNR",
        ])
        assert not Rules.is_in_check(white, black, board)
        assert not Rules.is_in_check(black, white, board)

    def test_rook_on_open_file(self) -> None:
        board, white, black = _setup([
            "k...r...",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "....K...",
        ])
        assert Rules.is_in_check(white, black, board)

    def test_refreshes_stale_cache(self) -> None:
        board, white, black = _setup([
            "k...r...",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "....K...",
        ])
        # Cache now holds white's attacks, which do not reach e1.
        board.update_vulnerable_positions(white)
        assert Rules.is_in_check(white, black, board)
        assert board.vulnerable_positions == board.update_vulnerable_positions(black)


class TestCheckmate:
    def test_back_rank_mate(self) -> None:
        board, white, black = _setup([
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "........",
            "...PPP..",
            "r...K...",
        ])
        assert Rules.is_checkmate(white, black, board)

    def test_king_walled_in_by_attacked_squares(self) -> None:
        # King on its start square; every neighbour is attacked.
        board, white, black = _setup([
            "...rkr..",
            "........",
            "........",
            "........",
            "....q...",
            "........",
            "........",
            "....K...",
        ])
        assert Rules.is_checkmate(white, black, board)

    def test_not_checkmate_when_king_can_step_away(self) -> None:
        board, white, black = _setup([
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "r...K...",
        ])
        assert Rules.is_in_check(white, black, board)
        assert not Rules.is_checkmate(white, black, board)

    def test_not_checkmate_without_check(self) -> None:
        board, white, black = _setup([
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "........",
            "...PPP..",
            "...QKB..",
        ])
        assert not Rules.is_checkmate(white, black, board)

    def test_only_king_moves_count_as_escapes(self) -> None:
        # The b2 rook could block on b1, but only the king's moves are
        # considered.
        board, white, black = _setup([
            "k.......",
            "........",
            "........",
            "........",
            "........",
            "........",
            ".R....PP",
            "r......K",
        ])
        assert Rules.is_checkmate(white, black, board)


class TestWouldExposeKing:
    PINNED = [
        "k...r...",
        "........",
        "........",
        "........",
        "........",
        "........",
        "....B...",
        "....K...",
    ]

    def test_pinned_piece_cannot_leave_the_line(self) -> None:
        board, white, black = _setup(self.PINNED)
        assert Rules.would_expose_king(
            board, Position.parse("e2"), Position.parse("d3"), white, black
        )
        assert not Rules.is_legal_move(
            board, Position.parse("e2"), Position.parse("d3"), white, black
        )

    def test_simulation_leaves_real_state_untouched(self) -> None:
        board, white, black = _setup(self.PINNED)
        snapshot = Board.from_rows(self.PINNED)
        bishop = board.get_piece(Position.parse("e2"))

        Rules.would_expose_king(
            board, Position.parse("e2"), Position.parse("d3"), white, black
        )

        assert board == snapshot
        assert bishop is not None and bishop.position == Position.parse("e2")
        assert len(white.available) == 2
        assert len(black.available) == 2

    def test_king_sidestep_is_safe(self) -> None:
        board, white, black = _setup(self.PINNED)
        assert not Rules.would_expose_king(
            board, Position.parse("e1"), Position.parse("d1"), white, black
        )

    def test_king_stepping_into_attack(self) -> None:
        board, white, black = _setup([
            "k..r....",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "....K...",
        ])
        assert Rules.would_expose_king(
            board, Position.parse("e1"), Position.parse("d1"), white, black
        )

    def test_capturing_the_checker_resolves_check(self) -> None:
        board, white, black = _setup([
            "k.......",
            "........",
            "........",
            "........",
            "Q...r...",
            "........",
            "........",
            "....K...",
        ])
        assert Rules.is_in_check(white, black, board)
        assert not Rules.would_expose_king(
            board, Position.parse("a4"), Position.parse("e4"), white, black
        )
        # The real opponent keeps its rook.
        assert len(black.available) == 2

    def test_ignoring_check_is_exposing(self) -> None:
        board, white, black = _setup([
            "k.......",
            "........",
            "........",
            "........",
            "Q...r...",
            "........",
            "........",
            "....K...",
        ])
        assert Rules.would_expose_king(
            board, Position.parse("a4"), Position.parse("a5"), white, black
        )
