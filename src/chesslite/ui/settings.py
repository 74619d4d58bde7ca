"""User-configurable settings for the desktop front end."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Rules
    filter_self_check: bool = True  # False offers pseudo-legal moves
