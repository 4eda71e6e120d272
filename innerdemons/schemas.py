"""
Pydantic read models for the presentation layer.

A host reads these every refresh cycle instead of reaching into
GameState directly. They are snapshots: mutating one never touches
the engine.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .engine_core.state import GameState, Card, Demon
from .engine_core.action import Event


# =============================================================================
# Cards and demons
# =============================================================================

class CardView(BaseModel):
    """A card as shown in a zone."""
    card_id: int
    kind: str

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        return cls(card_id=card.card_id, kind=card.kind.value)


class DemonView(BaseModel):
    """A demon and its current stun."""
    kind: str
    power: int = Field(ge=0)
    stun_time: int = Field(ge=0)
    is_stunned: bool

    @classmethod
    def from_demon(cls, demon: Demon) -> "DemonView":
        return cls(
            kind=demon.kind.value,
            power=demon.power,
            stun_time=demon.stun_time,
            is_stunned=demon.is_stunned,
        )


# =============================================================================
# Game snapshot
# =============================================================================

class GameView(BaseModel):
    """Everything the presentation layer draws each frame."""
    phase: str
    turn_number: int
    resolve: int = Field(ge=0)
    demons: list[DemonView] = Field(default_factory=list)

    # Zone contents in order; top of deck and discard is the last element
    deck: list[CardView] = Field(default_factory=list)
    hand: list[CardView] = Field(default_factory=list)
    discard_pile: list[CardView] = Field(default_factory=list)
    in_play: list[CardView] = Field(default_factory=list)

    @property
    def deck_count(self) -> int:
        return len(self.deck)

    @property
    def discard_top(self) -> Optional[CardView]:
        return self.discard_pile[-1] if self.discard_pile else None

    @classmethod
    def from_state(cls, state: GameState) -> "GameView":
        return cls(
            phase=state.phase.value,
            turn_number=state.turn_number,
            resolve=state.resolve,
            demons=[DemonView.from_demon(d) for d in state.demons],
            deck=[CardView.from_card(c) for c in state.deck],
            hand=[CardView.from_card(c) for c in state.hand],
            discard_pile=[CardView.from_card(c) for c in state.discard_pile],
            in_play=[CardView.from_card(c) for c in state.in_play],
        )


class EventView(BaseModel):
    """Serializable form of an engine event."""
    event_type: str
    description: str
    card: Optional[CardView] = None
    from_zone: Optional[str] = None
    to_zone: Optional[str] = None
    demon: Optional[str] = None
    amount: Optional[int] = None
    resolve: Optional[int] = None
    phase: Optional[str] = None

    @classmethod
    def from_event(cls, event: Event) -> "EventView":
        return cls(
            event_type=event.event_type.value,
            description=event.describe(),
            card=CardView.from_card(event.card) if event.card else None,
            from_zone=event.from_zone.value if event.from_zone else None,
            to_zone=event.to_zone.value if event.to_zone else None,
            demon=event.demon.value if event.demon else None,
            amount=event.amount,
            resolve=event.resolve,
            phase=event.phase.value if event.phase else None,
        )
