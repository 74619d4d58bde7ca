"""Piece record."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.enums import Color, PieceType

_LETTERS = "pnbrqk"  # PieceType order

# Unicode: white king U+2654 .. white pawn U+2659, black king U+265A .. pawn U+265F
_GLYPH_BASE: dict[Color, int] = {Color.WHITE: 0x2654, Color.BLACK: 0x265A}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {
    (color, ptype): letter.upper() if color == Color.WHITE else letter
    for color in Color
    for ptype, letter in zip(PieceType, _LETTERS)
}

_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {v: k for k, v in _FEN_CHARS.items()}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (color, ptype): chr(_GLYPH_BASE[color] + PieceType.KING - ptype)
    for color in Color
    for ptype in PieceType
}


@dataclass(slots=True)
class Piece:
    """A chess piece occupying one board cell.

    ``moved`` is carried by every piece but only pawns (double step), rooks
    and kings (castling) ever consult it. Promotion rewrites ``piece_type``
    in place.
    """

    color: Color
    piece_type: PieceType
    moved: bool = False

    def copy(self) -> Piece:
        return Piece(self.color, self.piece_type, self.moved)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def asset_key(self) -> str:
        """Glyph key used by renderers, e.g. ``"knight-w"``."""
        return f"{self.piece_type}-{self.color.code}"
