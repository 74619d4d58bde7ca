"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesslite.core.enums import Color, GameStatus
from chesslite.core.move import Move
from chesslite.core.piece import Piece
from chesslite.core.types import ALL_SQUARES, Square, in_bounds
from chesslite.game.interfaces import ClickOutcome
from chesslite.game.state import GameState
from chesslite.ui.styles.theme import PIECE_FONT, BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    Clicks are translated to squares and forwarded to the
    :class:`GameState`; the scene only mirrors what the session decides.

    Signals:
        move_made(Move): Emitted after a click completed a move.
        game_over(GameStatus): Emitted once the side to move is mated or
            stalemated.
    """

    move_made = pyqtSignal(Move)
    game_over = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, game: GameState, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._game = game
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsItem] = []
        self._legal_dot_items: list[QGraphicsItem] = []
        self._check_items: list[QGraphicsItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def game(self) -> GameState:
        return self._game

    def set_game(self, game: GameState) -> None:
        """Display another session (full redraw of pieces)."""
        self._game = game
        self.refresh()

    def refresh(self) -> None:
        """Re-sync pieces and highlights with the session."""
        self._sync_pieces()
        self._sync_selection()
        self.highlight_check()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._show_legal_moves = visible
        self._sync_selection()

    def highlight_check(self) -> None:
        """Highlight the king of the side to move when it is in check."""
        self._clear_items(self._check_items)
        if self._game.status not in (GameStatus.CHECK, GameStatus.CHECKMATE):
            return
        king_sq = self._game.board.king_square(self._game.side_to_move)
        if king_sq is None:
            return
        rect = self._make_highlight(king_sq, self._theme.highlight_check)
        rect.setZValue(0.6)
        self._check_items.append(rect)

    def handle_square_click(self, sq: Square) -> ClickOutcome:
        """Forward a click on *sq* to the session and redraw what changed."""
        if not self._interactive:
            return ClickOutcome.IGNORED

        selected = self._game.selected
        move = self._game.move_to(sq) if selected is not None else None
        outcome = self._game.click(sq)

        if outcome == ClickOutcome.MOVED and move is not None:
            self.refresh()
            self.move_made.emit(move)
            if self._game.is_game_over:
                self.game_over.emit(self._game.status)
        else:
            self._sync_selection()
        return outcome

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for sq in ALL_SQUARES:
            row, col = sq
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            coord = self._theme.coord_dark if is_light else self._theme.coord_light
            # Rank numbers (left edge)
            if col == 0:
                self._add_coord(str(8 - row), col * t + 2, row * t + 1, font, coord)
            # File letters (bottom edge)
            if row == 7:
                letter = chr(ord("a") + col)
                x, y = col * t + t - 12, row * t + t - 16
                self._add_coord(letter, x, y, font, coord)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        for sq, piece in self._game.board.pieces():
            item = self._make_piece_item(piece)
            rect = item.boundingRect()
            t = self.TILE
            item.setPos(
                sq.col * t + (t - rect.width()) / 2,
                sq.row * t + (t - rect.height()) / 2,
            )
            self.addItem(item)
            self._piece_items[sq] = item

    def _make_piece_item(self, piece: Piece) -> QGraphicsSimpleTextItem:
        item = QGraphicsSimpleTextItem(piece.symbol)
        item.setFont(QFont(PIECE_FONT, int(self.TILE * 0.6)))
        if piece.color == Color.WHITE:
            fill = self._theme.piece_white
        else:
            fill = self._theme.piece_black
        item.setBrush(QBrush(fill))
        item.setPen(QPen(QColor(0, 0, 0), 1))
        item.setToolTip(piece.asset_key)
        item.setData(0, piece.asset_key)
        item.setZValue(1)
        return item

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_selection(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

        sq = self._game.selected
        if sq is None:
            return

        # Highlight origin
        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)

        # Legal move dots
        if self._show_legal_moves:
            for m in self._game.selected_moves:
                self._legal_dot_items.append(self._make_dot(m.to_sq))

    def _clear_items(self, items: list[QGraphicsItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.handle_square_click(sq)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not in_bounds(row, col):
            return None
        return Square(row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(sq.col * t, sq.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        t = self.TILE
        d = t * 0.3
        dot = QGraphicsEllipseItem(
            sq.col * t + (t - d) / 2, sq.row * t + (t - d) / 2, d, d
        )
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(0.9)
        self.addItem(dot)
        return dot
