"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def code(self) -> str:
        """Single-letter code, ``"w"`` or ``"b"``."""
        return "w" if self == Color.WHITE else "b"

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class CastlingSide(IntEnum):
    """Which rook a castling move uses."""

    KINGSIDE = 1
    QUEENSIDE = 2

    def __str__(self) -> str:
        return self.name.lower()


class GameStatus(IntEnum):
    """Status of the side to move.

    ``Rules.status`` yields NORMAL, CHECKMATE or STALEMATE; CHECK is set by
    the game session for display.
    """

    NORMAL = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)
