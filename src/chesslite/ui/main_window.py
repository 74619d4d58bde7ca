"""MainWindow — top-level window hosting the board."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QMessageBox, QStatusBar, QWidget

from chesslite.core.enums import Color, GameStatus
from chesslite.core.move import Move
from chesslite.game.state import GameState
from chesslite.ui.board.board_view import BoardView
from chesslite.ui.settings import AppSettings
from chesslite.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


def result_message(status: GameStatus, side_to_move: Color) -> str:
    """User-facing text for a finished game."""
    if status == GameStatus.CHECKMATE:
        return f"Checkmate! {side_to_move.name.capitalize()} loses!"
    if status == GameStatus.STALEMATE:
        return "Stalemate!"
    return ""


def turn_message(status: GameStatus, side_to_move: Color) -> str:
    """Status-bar text for the side to move."""
    side = side_to_move.name.capitalize()
    if status == GameStatus.CHECK:
        return f"{side} to move (check)"
    if status.is_terminal:
        return result_message(status, side_to_move)
    return f"{side} to move"


class MainWindow(QMainWindow):
    """Main application window for chesslite."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("chesslite")
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._settings = settings or AppSettings()
        self._game = GameState(filter_self_check=self._settings.filter_self_check)
        self._game.setup()

        self._setup_ui()
        self._setup_menu()
        self._apply_settings()
        self._update_status()

    # ── UI construction ──────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self._game, self)
        self.setCentralWidget(self._board_view)

        self._status_label = QLabel()
        status_bar = QStatusBar(self)
        status_bar.addWidget(self._status_label)
        self.setStatusBar(status_bar)

        self._board_view.move_made.connect(self._on_move_made)
        self._board_view.game_over.connect(self._on_game_over)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        game_menu = menu_bar.addMenu("&Game")
        assert game_menu is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        game_menu.addAction(self._act_new_game)

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        game_menu.addAction(self._act_quit)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        self._game.filter_self_check = s.filter_self_check

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def game(self) -> GameState:
        return self._game

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def new_game(self) -> None:
        """Reset to the starting position."""
        self._game.setup()
        scene = self._board_view.board_scene
        scene.set_interactive(True)
        scene.refresh()
        self._update_status()
        _LOGGER.info("New game started")

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_made(self, move: Move) -> None:
        self._update_status()

    def _on_game_over(self, status: GameStatus) -> None:
        self._board_view.board_scene.set_interactive(False)
        self._update_status()
        QMessageBox.information(
            self, "Game over", result_message(status, self._game.side_to_move)
        )

    def _update_status(self) -> None:
        self._status_label.setText(
            turn_message(self._game.status, self._game.side_to_move)
        )
