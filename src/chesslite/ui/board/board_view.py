"""BoardView — QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chesslite.core.move import Move
from chesslite.game.state import GameState
from chesslite.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene, handles scaling to fit the widget.

    Signals:
        move_made(Move): Bubbled up from BoardScene.
        game_over(GameStatus): Bubbled up from BoardScene.
    """

    move_made = pyqtSignal(Move)
    game_over = pyqtSignal(object)

    def __init__(self, game: GameState, parent: QWidget | None = None) -> None:
        self._scene = BoardScene(game)
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

        # Bubble scene signals
        self._scene.move_made.connect(self.move_made.emit)
        self._scene.game_over.connect(self.game_over.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
