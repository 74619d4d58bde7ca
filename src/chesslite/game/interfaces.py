"""Enumerations shared by the game layer and its front ends."""

from __future__ import annotations

from enum import IntEnum, auto

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class ClickOutcome(IntEnum):
    """What a click on a board square did to the session."""

    IGNORED = auto()
    SELECTED = auto()
    DESELECTED = auto()
    MOVED = auto()
