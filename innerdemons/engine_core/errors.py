"""
Engine errors.

Zone primitives raise these; the reducer turns them into failed
ActionResults so the caller can reject the user action.
"""

from __future__ import annotations
from typing import Any


class EngineError(Exception):
    """Base class for recoverable verb failures."""
    error_code = "ENGINE_ERROR"


class CardNotFound(EngineError):
    """A verb referenced a card that is not in the zone it expected."""
    error_code = "CARD_NOT_FOUND"

    def __init__(self, card_id: int, zone: Any = None):
        self.card_id = card_id
        self.zone = zone
        where = f" in {zone}" if zone is not None else ""
        super().__init__(f"Card {card_id} not found{where}")


class NoCardsAvailable(EngineError):
    """Both deck and discard pile are empty."""
    error_code = "NO_CARDS_AVAILABLE"

    def __init__(self):
        super().__init__("No cards available to draw: deck and discard pile are empty")


class GameOver(EngineError):
    """The player's resolve has reached 0; no further verbs are accepted."""
    error_code = "GAME_OVER"

    def __init__(self):
        super().__init__("Game is over - no actions allowed")
