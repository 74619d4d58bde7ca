"""FEN parsing and serialisation.

Only the placement, side-to-move and castling fields carry meaning here. The
en-passant field is accepted and ignored (no en passant capture), as are the
move clocks. ``moved`` flags are not part of FEN and are inferred:

* a pawn off its home row has moved;
* a king counts as unmoved only on its home square with at least one
  castling right left for its colour;
* a corner rook counts as unmoved only when the matching right is present.
"""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.position import Position
from chesslite.core.types import Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_BACK_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_KING_HOME_COL = 4

# castling letter -> (color, rook column)
_CASTLING_RIGHTS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (3 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 3-6 fields): {fen!r}")

    placement, side_part, castling_part = parts[:3]

    # 1. Piece placement (first rank listed is row 0)
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[Square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    rights: set[str] = set()
    if castling_part != "-":
        for ch in castling_part:
            if ch not in _CASTLING_RIGHTS or ch in rights:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            rights.add(ch)

    # 4. En passant: validated, not used
    if len(parts) > 3 and parts[3] != "-":
        parse_square(parts[3])

    _infer_moved_flags(board, rights)
    return Position(board, side)


def position_to_fen(position: Position) -> str:
    """Serialise *position* to FEN (clocks are always ``0 1``)."""
    board = position.board
    ranks: list[str] = []
    for row in range(8):
        text = ""
        empty = 0
        for col in range(8):
            piece = board[Square(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)

    castling = "".join(
        ch
        for ch, (color, rook_col) in _CASTLING_RIGHTS.items()
        if _can_castle(board, color, rook_col)
    )
    side = position.side_to_move.code
    return f"{'/'.join(ranks)} {side} {castling or '-'} - 0 1"


# ── moved-flag inference ─────────────────────────────────────────────────────


def _infer_moved_flags(board: Board, rights: set[str]) -> None:
    for sq, piece in board.pieces():
        color = piece.color
        if piece.piece_type == PieceType.PAWN:
            piece.moved = sq.row != _PAWN_HOME_ROW[color]
        elif piece.piece_type == PieceType.KING:
            has_right = any(_CASTLING_RIGHTS[ch][0] == color for ch in rights)
            piece.moved = not (sq == _king_home(color) and has_right)
        elif piece.piece_type == PieceType.ROOK:
            piece.moved = not any(
                _CASTLING_RIGHTS[ch] == (color, sq.col) and sq.row == _BACK_ROW[color]
                for ch in rights
            )


def _king_home(color: Color) -> Square:
    return Square(_BACK_ROW[color], _KING_HOME_COL)


def _can_castle(board: Board, color: Color, rook_col: int) -> bool:
    king = board[_king_home(color)]
    rook = board[Square(_BACK_ROW[color], rook_col)]
    return (
        king is not None
        and king.piece_type == PieceType.KING
        and king.color == color
        and not king.moved
        and rook is not None
        and rook.piece_type == PieceType.ROOK
        and rook.color == color
        and not rook.moved
    )
