"""
Engine Core - Zone store and turn engine.

The engine:
1. Builds a GameState (demons, shuffled deck, opening hand)
2. Applies verbs via the reducer (draw, discard, play, gain, end turn)
3. Resolves end of turn: cleanup, demon attacks, draw-up
4. Reports what changed as events on every ActionResult
"""

from .state import (
    GameState, GamePhase, TurnPhase, Card, CardKind, Demon, DemonKind, Zone, ZoneName,
)
from .errors import EngineError, CardNotFound, NoCardsAvailable, GameOver
from .action import Action, ActionType, ActionPayload, ActionResult, Event, EventType
from .effects import CARD_EFFECTS, register_card_effect, resolve_card_effect
from .reducer import Reducer, apply_action
from .engine import TurnEngine, new_game, STARTER_DECK, DEFAULT_DEMONS

__all__ = [
    "GameState",
    "GamePhase",
    "TurnPhase",
    "Card",
    "CardKind",
    "Demon",
    "DemonKind",
    "Zone",
    "ZoneName",
    "EngineError",
    "CardNotFound",
    "NoCardsAvailable",
    "GameOver",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "Event",
    "EventType",
    "CARD_EFFECTS",
    "register_card_effect",
    "resolve_card_effect",
    "Reducer",
    "apply_action",
    "TurnEngine",
    "new_game",
    "STARTER_DECK",
    "DEFAULT_DEMONS",
]
