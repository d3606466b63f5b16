"""MainWindow — top-level window hosting the board and game actions."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QGraphicsView,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QToolBar,
)

from oopchess.core.enums import Color
from oopchess.core.position import Position
from oopchess.game.controller import Game
from oopchess.game.interfaces import GameEndReason, GameResult, MoveRecord
from oopchess.settings import AppSettings
from oopchess.ui.board.board_scene import BoardScene
from oopchess.ui.styles.theme import BoardTheme

_STATUS_MESSAGE_MS = 4000


class MainWindow(QMainWindow):
    """Main application window: click-pair moves on a Qt board."""

    def __init__(self, settings: AppSettings | None = None, game: Game | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Chess")

        self._settings = settings or AppSettings()
        self._game = game or Game()

        self._setup_ui()
        self._setup_toolbar()
        self._connect_signals()
        self._connect_game_events()
        self._apply_settings()

        self.new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._scene = BoardScene(self, tile=self._settings.square_size)
        self._view = QGraphicsView(self._scene)
        self._view.setFixedSize(
            int(self._scene.width()) + 4, int(self._scene.height()) + 4
        )
        self.setCentralWidget(self._view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._turn_label = QLabel()
        self._turn_label.setObjectName("turnLabel")
        self._status.addWidget(self._turn_label)

    def _setup_toolbar(self) -> None:
        toolbar = QToolBar("Game", self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self._act_new_game = QAction("New Game", self)
        self._act_new_game.triggered.connect(self.new_game)
        toolbar.addAction(self._act_new_game)

        self._act_forfeit = QAction("Forfeit", self)
        self._act_forfeit.triggered.connect(self.forfeit)
        toolbar.addAction(self._act_forfeit)

    def _connect_signals(self) -> None:
        self._scene.move_requested.connect(self._on_move_requested)

    def _connect_game_events(self) -> None:
        events = self._game.events
        events.on_move.append(self._on_game_move)
        events.on_check.append(self._on_check)
        events.on_game_over.append(self._on_game_over)

    def _apply_settings(self) -> None:
        self._scene.set_theme(BoardTheme.by_name(self._settings.board_theme))
        self._scene.set_show_coordinates(self._settings.show_coordinates)

    # ── Public actions ───────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def new_game(self) -> None:
        self._game.start()
        self._refresh()

    def forfeit(self) -> None:
        if self._game.is_game_over:
            return
        self._game.forfeit()

    # ── Handlers ─────────────────────────────────────────────────────────

    def _on_move_requested(self, origin: Position, target: Position) -> None:
        """Handle a click pair from the board."""
        outcome = self._game.submit_move(origin, target)
        if not outcome.ok:
            piece = self._game.board.get_piece(origin)
            name = piece.piece_type.name.capitalize() if piece else "empty square"
            self._status.showMessage(
                f"{outcome.message} for {name} {origin}-{target}", _STATUS_MESSAGE_MS
            )
        self._refresh()

    def _on_game_move(self, record: MoveRecord) -> None:
        self._status.showMessage(str(record), _STATUS_MESSAGE_MS)

    def _on_check(self, _color: Color) -> None:
        self._refresh()
        self._notify("Check", "Check!")

    def _on_game_over(self, _result: GameResult, _reason: GameEndReason) -> None:
        self._refresh()
        self._notify("Game over", self._game.end())

    # ── Helpers ──────────────────────────────────────────────────────────

    def _notify(self, title: str, text: str) -> None:
        QMessageBox.information(self, title, text)

    def _refresh(self) -> None:
        game = self._game
        self._scene.set_board(game.board, game.side_to_move)
        self._scene.set_interactive(not game.is_game_over)
        self._act_forfeit.setEnabled(not game.is_game_over)

        king = game.current_player.king
        self._scene.highlight_check(king.position if king.in_check else None)

        if game.is_game_over:
            self._turn_label.setText(game.end())
        else:
            side = "White" if game.side_to_move == Color.WHITE else "Black"
            suffix = " (check)" if game.in_check else ""
            self._turn_label.setText(f"{side} to move{suffix}")
