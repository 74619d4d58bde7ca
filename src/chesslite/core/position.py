"""Position — board + side to move, and the move-application transition."""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.enums import CastlingSide, Color, PieceType
from chesslite.core.move import Move
from chesslite.core.types import Square

# castling side -> (rook from col, rook to col)
_ROOK_SLIDES: dict[CastlingSide, tuple[int, int]] = {
    CastlingSide.KINGSIDE: (7, 5),
    CastlingSide.QUEENSIDE: (0, 3),
}

_PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


def apply_move(board: Board, move: Move) -> None:
    """Apply *move* to *board* in place.

    The move is trusted to come from the move generator; it is not
    re-validated here.
    """
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    board[move.to_sq] = piece
    board[move.from_sq] = None

    if move.castling is not None:
        row = move.from_sq.row
        rook_from, rook_to = _ROOK_SLIDES[move.castling]
        rook = board[Square(row, rook_from)]
        board[Square(row, rook_to)] = rook
        board[Square(row, rook_from)] = None
        if rook is not None:
            rook.moved = True

    piece.moved = True

    if (
        piece.piece_type == PieceType.PAWN
        and move.to_sq.row == _PROMOTION_ROW[piece.color]
    ):
        piece.piece_type = PieceType.QUEEN


class Position:
    """Full game state for the rules engine: board + side to move."""

    __slots__ = ("board", "side_to_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move

    def make_move(self, move: Move) -> Color:
        """Apply *move*, flip the turn and return the new side to move."""
        apply_move(self.board, move)
        self.side_to_move = self.side_to_move.opposite
        return self.side_to_move

    def copy(self) -> Position:
        """Deep copy; the board is cloned."""
        return Position(self.board.clone(), self.side_to_move)

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
