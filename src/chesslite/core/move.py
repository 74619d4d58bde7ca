"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.enums import CastlingSide
from chesslite.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    from_sq: Square
    to_sq: Square
    castling: CastlingSide | None = None

    @property
    def is_castling(self) -> bool:
        return self.castling is not None

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
