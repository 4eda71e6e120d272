"""
Action System - Actions, events, and results.

Actions represent the verbs a host can issue (draw, discard, play,
gain, end turn). Every applied action returns an ActionResult listing
the events it caused, so a presentation layer can animate the change
without diffing full state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .state import Card, CardKind, DemonKind, TurnPhase, ZoneName


class ActionType(Enum):
    """Types of actions in the system."""
    DRAW = "draw"
    DISCARD = "discard"
    PLAY = "play"
    GAIN = "gain"
    END_TURN = "end_turn"


@dataclass(frozen=True)
class ActionPayload:
    """Payload for an action. Validation happens in the reducer."""
    card_id: int | None = None
    kind: CardKind | None = None


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the game state.

    Actions are:
    - Logged for replay
    - Validated before application
    - Applied atomically by the reducer
    """
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)
    timestamp: float | None = None

    @classmethod
    def draw(cls) -> Action:
        return cls(action_type=ActionType.DRAW)

    @classmethod
    def discard(cls, card_id: int) -> Action:
        return cls(action_type=ActionType.DISCARD, payload=ActionPayload(card_id=card_id))

    @classmethod
    def play(cls, card_id: int) -> Action:
        return cls(action_type=ActionType.PLAY, payload=ActionPayload(card_id=card_id))

    @classmethod
    def gain(cls, kind: CardKind) -> Action:
        return cls(action_type=ActionType.GAIN, payload=ActionPayload(kind=kind))

    @classmethod
    def end_turn(cls) -> Action:
        return cls(action_type=ActionType.END_TURN)


class EventType(Enum):
    """Kinds of state change reported back to the host."""
    CARD_CREATED = "card_created"
    CARD_MOVED = "card_moved"
    DECK_SHUFFLED = "deck_shuffled"
    PHASE_STARTED = "phase_started"
    DEMON_ATTACKED = "demon_attacked"
    DEMON_STUN_TICKED = "demon_stun_ticked"
    RESOLVE_UNDERFLOW = "resolve_underflow"
    GAME_LOST = "game_lost"


@dataclass
class Event:
    """
    One thing that changed while applying an action.

    Only the fields relevant to the event type are set.
    """
    event_type: EventType
    card: Card | None = None
    from_zone: ZoneName | None = None
    to_zone: ZoneName | None = None
    demon: DemonKind | None = None
    amount: int | None = None  # damage dealt, stun left, or cards shuffled
    resolve: int | None = None  # resolve after the event
    phase: TurnPhase | None = None

    @classmethod
    def card_moved(cls, card: Card, from_zone: ZoneName, to_zone: ZoneName) -> Event:
        return cls(EventType.CARD_MOVED, card=card, from_zone=from_zone, to_zone=to_zone)

    def describe(self) -> str:
        """Human-readable summary."""
        t = self.event_type
        if t == EventType.CARD_CREATED:
            return f"Gained {self.card} into {self.to_zone.value}"
        if t == EventType.CARD_MOVED:
            return f"Moved {self.card} from {self.from_zone.value} to {self.to_zone.value}"
        if t == EventType.DECK_SHUFFLED:
            return f"Shuffled {self.amount} cards from the discard pile into the deck"
        if t == EventType.PHASE_STARTED:
            return f"{self.phase.value.replace('_', ' ').capitalize()} started"
        if t == EventType.DEMON_ATTACKED:
            return f"{self.demon.value.capitalize()} dealt {self.amount} damage (resolve {self.resolve})"
        if t == EventType.DEMON_STUN_TICKED:
            return f"{self.demon.value.capitalize()} is stunned ({self.amount} turns left)"
        if t == EventType.RESOLVE_UNDERFLOW:
            return "Resolve floored at 0"
        if t == EventType.GAME_LOST:
            return "Resolve reached 0 - game lost"
        return t.value


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Errors (if failed)
    - Events (for UI updates)
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None
    events: list[Event] = field(default_factory=list)

    @property
    def state_changes(self) -> list[str]:
        """Human-readable changes."""
        return [e.describe() for e in self.events]

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(cls, state: Any, events: list[Event] | None = None) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, events=events or [])
