"""
Card Effects - Per-kind gameplay effects applied when a card is played.

Effects are plain functions dispatched by CardKind through a lookup
table. An effect receives the reducer's working copy of the state (never
the committed one) and returns the events it caused. In the current rule
set every kind only changes zones, so all kinds map to no_effect.

Example of installing an effect:

    @register_card_effect(CardKind.DETERMINED)
    def stun_fear(state):
        state.get_demon(DemonKind.FEAR).stun(1)
        return []
"""

from __future__ import annotations
from typing import Callable, TYPE_CHECKING

from .state import CardKind

if TYPE_CHECKING:
    from .state import GameState
    from .action import Event


CardEffect = Callable[["GameState"], "list[Event]"]


def no_effect(state: GameState) -> list[Event]:
    return []


CARD_EFFECTS: dict[CardKind, CardEffect] = {kind: no_effect for kind in CardKind}


def register_card_effect(kind: CardKind) -> Callable[[CardEffect], CardEffect]:
    """Decorator installing `effect` as the effect of `kind`."""
    def decorator(effect: CardEffect) -> CardEffect:
        CARD_EFFECTS[kind] = effect
        return effect
    return decorator


def resolve_card_effect(kind: CardKind, state: GameState) -> list[Event]:
    """Apply the effect registered for `kind` to `state`."""
    return CARD_EFFECTS.get(kind, no_effect)(state)
