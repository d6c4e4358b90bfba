"""Game management layer — history-aware state and click controller.

Quick start::

    from plainchess.game import GameController

    ctrl = GameController()
    ctrl.click_square((1, 4))
    ctrl.click_square((3, 4))
"""

from plainchess.game.controller import (
    CHECK_MESSAGE,
    GameController,
    GameEvents,
    checkmate_message,
)
from plainchess.game.state import GameState

__all__ = [
    "CHECK_MESSAGE",
    "GameController",
    "GameEvents",
    "GameState",
    "checkmate_message",
]
