"""Game state machine — turn, selection and end-of-game tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chesslite.core.board import Board
from chesslite.core.enums import Color, GameStatus
from chesslite.core.move import Move
from chesslite.core.notation import STARTING_FEN, position_from_fen
from chesslite.core.position import Position
from chesslite.core.rules import IllegalMoveError, Rules
from chesslite.core.types import Square
from chesslite.game.interfaces import ClickOutcome, GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Manages a game between two humans sharing one board.

    Holds the position, the currently selected square and the legal moves
    cached for it. This is a pure data/logic class — no threading, no UI.

    Args:
        filter_self_check: Offer only fully legal moves. When False the
            session offers pseudo-legal moves, letting a player leave their
            own king in check.
    """

    filter_self_check: bool = True
    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    status: GameStatus = field(default=GameStatus.NORMAL, init=False)
    selected: Square | None = field(default=None, init=False)
    selected_moves: list[Move] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.position = position_from_fen(fen or STARTING_FEN)
        self.phase = GamePhase.AWAITING_MOVE
        self.clear_selection()
        self._evaluate_status()

    # ── Selection ────────────────────────────────────────────────────────

    def click(self, sq: Square) -> ClickOutcome:
        """React to a click on *sq* the way the board UI expects."""
        if self.phase != GamePhase.AWAITING_MOVE:
            return ClickOutcome.IGNORED

        if self.selected is None:
            return self.select(sq)

        if sq == self.selected:
            self.clear_selection()
            return ClickOutcome.DESELECTED

        move = self.move_to(sq)
        if move is not None:
            self.apply_move(move)
            return ClickOutcome.MOVED

        # Another own piece → switch selection; anything else keeps it.
        if self._owns(sq):
            return self.select(sq)
        return ClickOutcome.IGNORED

    def select(self, sq: Square) -> ClickOutcome:
        """Select *sq* if it holds a piece of the side to move."""
        if not self._owns(sq):
            return ClickOutcome.IGNORED
        self.selected = sq
        self.selected_moves = self.legal_moves(sq)
        return ClickOutcome.SELECTED

    def clear_selection(self) -> None:
        self.selected = None
        self.selected_moves = []

    def move_to(self, sq: Square) -> Move | None:
        """Cached move from the selected square landing on *sq*, if any."""
        for move in self.selected_moves:
            if move.to_sq == sq:
                return move
        return None

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> GameStatus:
        """Validate, apply *move*, flip the turn and evaluate the new status."""
        if self.phase == GamePhase.GAME_OVER:
            raise IllegalMoveError(f"Game is over, cannot play {move}")
        if move not in self.legal_moves(move.from_sq):
            _LOGGER.warning("Rejected move %s for %s", move, self.side_to_move)
            raise IllegalMoveError(f"Illegal move for {self.side_to_move}: {move}")

        mover = self.side_to_move
        self.position.make_move(move)
        self.clear_selection()
        _LOGGER.debug("%s played %s", mover, move)
        return self._evaluate_status()

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self.position.board

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        """Side that delivered checkmate, None otherwise."""
        if self.status == GameStatus.CHECKMATE:
            return self.side_to_move.opposite
        return None

    def legal_moves(self, sq: Square) -> list[Move]:
        """Moves the side to move may play from *sq*."""
        return Rules.legal_moves(
            self.position.board, sq, self.side_to_move, self.filter_self_check
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _owns(self, sq: Square) -> bool:
        piece = self.position.board[sq]
        return piece is not None and piece.color == self.side_to_move

    def _evaluate_status(self) -> GameStatus:
        board, side = self.position.board, self.side_to_move
        self.status = Rules.status(board, side)
        if self.status == GameStatus.NORMAL and Rules.is_in_check(board, side):
            self.status = GameStatus.CHECK
        if self.status.is_terminal:
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info(
                "Game over: %s (%s to move)", self.status.name, self.side_to_move
            )
        return self.status
