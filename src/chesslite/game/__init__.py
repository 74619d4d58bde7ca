"""Game management layer — session state and click-driven selection.

Quick start::

    from chesslite.core import parse_square
    from chesslite.game import GameState

    game = GameState()
    game.setup()
    game.click(parse_square("e2"))
    game.click(parse_square("e4"))
"""

from chesslite.game.interfaces import ClickOutcome, GamePhase
from chesslite.game.state import GameState

__all__ = [
    "ClickOutcome",
    "GamePhase",
    "GameState",
]
