"""Tests for BoardScene drawing and click-pair input."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from oopchess.core.enums import Color
from oopchess.core.position import Position
from oopchess.game.controller import Game
from oopchess.ui.board.board_scene import BoardScene
from oopchess.ui.styles.theme import BoardTheme


def _scene_with_game() -> tuple[BoardScene, Game]:
    game = Game()
    game.start()
    scene = BoardScene()
    scene.set_board(game.board, game.side_to_move)
    return scene, game


def _capture(scene: BoardScene) -> list[tuple[Position, Position]]:
    requests: list[tuple[Position, Position]] = []
    scene.move_requested.connect(lambda o, t: requests.append((o, t)))
    return requests


def test_scene_rect_matches_tile_size() -> None:
    scene = BoardScene(tile=40)
    rect = scene.sceneRect()
    assert rect.width() == 320
    assert rect.height() == 320


def test_pos_to_square() -> None:
    scene = BoardScene()
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == Position.parse("a8")
    assert scene._pos_to_square(QPointF(4 * 80 + 5, 6 * 80 + 5)) == Position.parse("e2")
    assert scene._pos_to_square(QPointF(-1, 10)) is None
    assert scene._pos_to_square(QPointF(10, 8 * 80 + 1)) is None


def test_set_board_syncs_piece_items_count() -> None:
    scene, _game = _scene_with_game()
    assert len(scene._piece_items) == 32
    assert scene._piece_items[Position.parse("e1")].text() == "♔"


def test_click_pair_emits_move_request() -> None:
    scene, _game = _scene_with_game()
    requests = _capture(scene)

    scene.click_square(Position.parse("e2"))
    assert scene.selected == Position.parse("e2")
    assert len(scene._highlight_items) == 1

    scene.click_square(Position.parse("e4"))
    assert requests == [(Position.parse("e2"), Position.parse("e4"))]
    assert scene.selected is None
    assert scene._highlight_items == []


def test_first_click_ignores_empty_and_opponent_squares() -> None:
    scene, _game = _scene_with_game()
    scene.click_square(Position.parse("e4"))
    assert scene.selected is None
    scene.click_square(Position.parse("e7"))
    assert scene.selected is None


def test_same_square_deselects_and_own_piece_reselects() -> None:
    scene, _game = _scene_with_game()
    requests = _capture(scene)

    scene.click_square(Position.parse("e2"))
    scene.click_square(Position.parse("e2"))
    assert scene.selected is None

    scene.click_square(Position.parse("e2"))
    scene.click_square(Position.parse("g1"))
    assert scene.selected == Position.parse("g1")
    assert requests == []


def test_second_click_on_opponent_piece_requests_capture() -> None:
    scene, _game = _scene_with_game()
    requests = _capture(scene)
    scene.click_square(Position.parse("d1"))
    scene.click_square(Position.parse("d8"))
    assert requests == [(Position.parse("d1"), Position.parse("d8"))]


def test_black_to_move_selects_black_pieces() -> None:
    scene, game = _scene_with_game()
    scene.set_board(game.board, Color.BLACK)
    scene.click_square(Position.parse("e2"))
    assert scene.selected is None
    scene.click_square(Position.parse("e7"))
    assert scene.selected == Position.parse("e7")


def test_non_interactive_ignores_clicks() -> None:
    scene, _game = _scene_with_game()
    scene.click_square(Position.parse("e2"))
    scene.set_interactive(False)
    assert scene.selected is None

    scene.click_square(Position.parse("e2"))
    assert scene.selected is None


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_hidden_coordinates_survive_theme_change() -> None:
    scene = BoardScene()
    scene.set_show_coordinates(False)
    scene.set_theme(BoardTheme.green())
    assert len(scene._coord_items) == 16
    assert all(not item.isVisible() for item in scene._coord_items)


def test_theme_change_recolours_squares() -> None:
    scene = BoardScene()
    scene.set_theme(BoardTheme.blue())
    a8 = scene._square_items[Position.parse("a8")]
    assert a8.brush().color() == BoardTheme.blue().light_square


def test_highlight_check_adds_and_clears() -> None:
    scene = BoardScene()
    scene.highlight_check(Position.parse("e1"))
    assert len(scene._check_items) == 1

    scene.highlight_check(None)
    assert scene._check_items == []
