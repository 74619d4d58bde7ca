"""Square type and coordinate helpers.

Board layout (row-major, origin top-left as the board is drawn):
    row 0 = a8 ... h8   (Black's back rank)
    row 7 = a1 ... h1   (White's back rank)
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """A (row, col) board coordinate, both 0–7."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return square_name(self)


def in_bounds(row: int, col: int) -> bool:
    """Both coordinates inside 0–7."""
    return 0 <= row < 8 and 0 <= col < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 0) → 'a1', (0, 7) → 'h8'."""
    return chr(ord("a") + sq.col) + str(8 - sq.row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → Square(6, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(8) for col in range(8)
)
