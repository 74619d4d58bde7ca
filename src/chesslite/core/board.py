"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Square, in_bounds, square_name

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by :class:`Square`."""

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._rows[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._rows[sq[0]][sq[1]] = piece

    def at(self, sq: Square) -> Piece | None:
        return self[sq]

    def set(self, sq: Square, piece: Piece | None) -> None:
        self[sq] = piece

    # -- Query helpers ------------------------------------------------------

    def is_empty(self, sq: Square) -> bool:
        """In bounds and unoccupied."""
        return in_bounds(sq[0], sq[1]) and self._rows[sq[0]][sq[1]] is None

    def is_enemy(self, sq: Square, color: Color) -> bool:
        """In bounds and occupied by a piece not of *color*."""
        if not in_bounds(sq[0], sq[1]):
            return False
        piece = self._rows[sq[0]][sq[1]]
        return piece is not None and piece.color != color

    def is_ally(self, sq: Square, color: Color) -> bool:
        """In bounds and occupied by a piece of *color*."""
        if not in_bounds(sq[0], sq[1]):
            return False
        piece = self._rows[sq[0]][sq[1]]
        return piece is not None and piece.color == color

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in row-major order, optionally filtered by *color*."""
        for row, cells in enumerate(self._rows):
            for col, piece in enumerate(cells):
                if piece is not None and (color is None or piece.color == color):
                    yield Square(row, col), piece

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None when it is missing."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Copying ------------------------------------------------------------

    def clone(self) -> Board:
        """Independent deep copy; pieces are copied by value."""
        b = Board()
        b._rows = [
            [piece.copy() if piece is not None else None for piece in cells]
            for cells in self._rows
        ]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (Black on rows 0-1, White on rows 6-7)."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._rows):
            text = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{square_name(Square(row, 0))[1]} {text}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def initial_board() -> Board:
    """Fresh board in the standard starting position."""
    return Board.initial()
