"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesslite.core import Color, initial_board, legal_moves, parse_square

    board = initial_board()
    for move in legal_moves(parse_square("e2"), board, Color.WHITE):
        print(move)
"""

from chesslite.core.board import Board, initial_board
from chesslite.core.enums import CastlingSide, Color, GameStatus, PieceType
from chesslite.core.move import Move
from chesslite.core.move_generator import MoveGenerator
from chesslite.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chesslite.core.piece import Piece
from chesslite.core.position import Position, apply_move
from chesslite.core.rules import IllegalMoveError, Rules, legal_moves, status
from chesslite.core.types import Square, in_bounds, parse_square, square_name

__all__ = [
    # Enums
    "CastlingSide",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "IllegalMoveError",
    # Engine operations
    "apply_move",
    "initial_board",
    "legal_moves",
    "status",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
