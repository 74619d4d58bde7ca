"""Pseudo-legal move generation + attack detection."""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.enums import CastlingSide, Color, PieceType
from chesslite.core.move import Move
from chesslite.core.piece import Piece
from chesslite.core.types import Square, in_bounds

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDING_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# White advances toward row 0, Black toward row 7.
_PAWN_STEP: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


class MoveGenerator:
    """Generates pseudo-legal moves on a given :class:`Board`.

    Generation is a pure function of the piece and the board: it never looks
    at whose turn it is, which is what lets the check test run it for the
    opposing side.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate(self, piece: Piece, sq: Square) -> list[Move]:
        """Pseudo-legal moves for *piece* standing on *sq*."""
        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, KNIGHT_OFFSETS, moves)
        elif ptype == PieceType.KING:
            self._gen_steps(sq, piece.color, KING_OFFSETS, moves)
            if not piece.moved:
                self._gen_castling(sq, piece.color, moves)
        else:
            self._gen_sliding(sq, piece.color, _SLIDING_DIRS[ptype], moves)
        return moves

    def generate_at(self, sq: Square) -> list[Move]:
        """Pseudo-legal moves for whatever stands on *sq* (empty → [])."""
        piece = self._board[sq]
        if piece is None:
            return []
        return self.generate(piece, sq)

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A board without a king of *color* is never in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Does any piece of *by_color* generate a move onto *sq*?"""
        for from_sq, piece in self._board.pieces(by_color):
            if any(move.to_sq == sq for move in self.generate(piece, from_sq)):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        step = _PAWN_STEP[piece.color]

        one_step = sq.offset(step, 0)
        if board.is_empty(one_step):
            moves.append(Move(sq, one_step))
            two_step = sq.offset(2 * step, 0)
            if not piece.moved and board.is_empty(two_step):
                moves.append(Move(sq, two_step))

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if board.is_enemy(cap_sq, piece.color):
                moves.append(Move(sq, cap_sq))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if in_bounds(*to_sq) and not board.is_ally(to_sq, color):
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for d_row, d_col in directions:
            to_sq = sq.offset(d_row, d_col)
            while in_bounds(*to_sq):
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        # Only emptiness and unmoved flags are checked; the king may castle
        # out of, through or into an attacked square.
        board = self._board
        row, col = king_sq

        if self._has_unmoved_rook(Square(row, 7), color) and all(
            board.is_empty(Square(row, col + d)) for d in (1, 2)
        ):
            moves.append(Move(king_sq, Square(row, col + 2), CastlingSide.KINGSIDE))

        if self._has_unmoved_rook(Square(row, 0), color) and all(
            board.is_empty(Square(row, col - d)) for d in (1, 2, 3)
        ):
            moves.append(Move(king_sq, Square(row, col - 2), CastlingSide.QUEENSIDE))

    def _has_unmoved_rook(self, sq: Square, color: Color) -> bool:
        rook = self._board[sq]
        return (
            rook is not None
            and rook.piece_type == PieceType.ROOK
            and rook.color == color
            and not rook.moved
        )
