"""High-level chess rules: legality filtering, checkmate and stalemate."""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.enums import Color, GameStatus
from chesslite.core.move import Move
from chesslite.core.move_generator import MoveGenerator
from chesslite.core.position import apply_move
from chesslite.core.types import Square


class IllegalMoveError(ValueError):
    """Raised when a move is not legal for the side asked to play it."""


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy: checkmate and stalemate only. No draws by repetition,
    # move count or material.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def would_expose_king(board: Board, move: Move, color: Color) -> bool:
        """Would playing *move* leave *color*'s king in check?

        Runs on a clone; *board* is left untouched.
        """
        scratch = board.clone()
        apply_move(scratch, move)
        return MoveGenerator(scratch).is_in_check(color)

    @staticmethod
    def legal_moves(
        board: Board,
        sq: Square,
        color: Color,
        filter_self_check: bool = True,
    ) -> list[Move]:
        """Moves for *color*'s piece on *sq*.

        Empty when *sq* is empty or holds an opposing piece. With
        *filter_self_check* off the result is pseudo-legal.
        """
        piece = board[sq]
        if piece is None or piece.color != color:
            return []
        moves = MoveGenerator(board).generate_at(sq)
        if not filter_self_check:
            return moves
        return [m for m in moves if not Rules.would_expose_king(board, m, color)]

    @staticmethod
    def has_any_legal_move(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        for sq, piece in board.pieces(color):
            for move in gen.generate(piece, sq):
                if not Rules.would_expose_king(board, move, color):
                    return True
        return False

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        return Rules.status(board, color) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        return Rules.status(board, color) == GameStatus.STALEMATE

    @staticmethod
    def status(board: Board, color: Color) -> GameStatus:
        """Determine the status of *color* as the side to move.

        Being in check with a move left is still ``NORMAL``; callers that
        want to flag it ask :meth:`is_in_check`.
        A side without a king is always ``NORMAL``.
        """
        if board.king_square(color) is None:
            return GameStatus.NORMAL
        if Rules.has_any_legal_move(board, color):
            return GameStatus.NORMAL
        if Rules.is_in_check(board, color):
            return GameStatus.CHECKMATE
        return GameStatus.STALEMATE

    @staticmethod
    def is_game_over(board: Board, color: Color) -> bool:
        return Rules.status(board, color).is_terminal


# ── Functional entry points ──────────────────────────────────────────────────


def legal_moves(
    sq: Square,
    board: Board,
    color: Color,
    filter_self_check: bool = True,
) -> list[Move]:
    """Destinations a front end may offer for the piece on *sq*."""
    return Rules.legal_moves(board, sq, color, filter_self_check)


def status(color: Color, board: Board) -> GameStatus:
    """Status of *color* as the side to move on *board*."""
    return Rules.status(board, color)
