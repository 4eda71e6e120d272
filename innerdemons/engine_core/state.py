"""
Game State - The zone store the turn engine operates on.

Holds the four card zones (deck, hand, discard pile, in play), the demon
roster and the player's resolve.

Design principles:
- Cards are immutable; only their zone membership changes
- A card lives in exactly one zone; moves are remove-then-append
- Card ids come from a monotonic counter and are never reused
- The reducer works on a clone, so a failed verb never leaks a partial change
"""

from __future__ import annotations
import random
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from .errors import CardNotFound


class CardKind(Enum):
    """The ten card flavors."""
    ANGRY = "angry"
    INSPIRED = "inspired"
    TIRED = "tired"
    STRESSED = "stressed"
    SATISFIED = "satisfied"
    PROUD = "proud"
    DETERMINED = "determined"
    PEACEFUL = "peaceful"
    DIZZY = "dizzy"
    HUNGOVER = "hungover"


class DemonKind(Enum):
    """The fixed demon roster."""
    FEAR = "fear"
    DESPAIR = "despair"
    DOUBT = "doubt"


class ZoneName(Enum):
    """The four card zones."""
    DECK = "deck"
    HAND = "hand"
    DISCARD_PILE = "discard_pile"
    IN_PLAY = "in_play"


class GamePhase(Enum):
    """High-level game phases."""
    SETUP = "setup"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class TurnPhase(Enum):
    """Steps of end-of-turn resolution, in order."""
    CLEANUP = "cleanup"
    DEMONS_ATTACK = "demons_attack"
    DRAW_UP = "draw_up"


@dataclass(frozen=True)
class Card:
    """A card instance. Identity is the id; kind never changes."""
    card_id: int
    kind: CardKind

    def __str__(self) -> str:
        return f"{self.kind.value.capitalize()} #{self.card_id}"


@dataclass
class Demon:
    """
    A recurring adversary.

    Deals `power` damage to resolve at the end of each turn unless
    `stun_time` is above zero, in which case the stun ticks down instead.
    """
    kind: DemonKind
    power: int = 0
    stun_time: int = 0

    def __post_init__(self):
        if self.power < 0:
            raise ValueError(f"Demon power must be non-negative, got {self.power}")
        if self.stun_time < 0:
            raise ValueError(f"Demon stun_time must be non-negative, got {self.stun_time}")

    @property
    def is_stunned(self) -> bool:
        return self.stun_time > 0

    def stun(self, turns: int):
        """Stun for `turns` more turns."""
        if turns < 0:
            raise ValueError(f"Stun turns must be non-negative, got {turns}")
        self.stun_time += turns


@dataclass
class Zone:
    """
    An ordered sequence of cards.

    For the deck and discard pile the top is the end of the list.
    """
    name: ZoneName
    cards: list[Card] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return len(self.cards) == 0

    @property
    def top_card(self) -> Card | None:
        """Get the top card of the zone."""
        return self.cards[-1] if self.cards else None

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def push(self, card: Card):
        """Put a card on top."""
        self.cards.append(card)

    def pop_top(self) -> Card | None:
        """Remove and return the top card, or None if empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def take(self, card_id: int) -> Card:
        """Remove the card with `card_id`. Raises CardNotFound if absent."""
        for i, card in enumerate(self.cards):
            if card.card_id == card_id:
                return self.cards.pop(i)
        raise CardNotFound(card_id, self.name.value)

    def contains(self, card_id: int) -> bool:
        return any(c.card_id == card_id for c in self.cards)

    def card_ids(self) -> list[int]:
        return [c.card_id for c in self.cards]

    def shuffle(self, rng: random.Random):
        """Uniformly permute the zone in place."""
        rng.shuffle(self.cards)

    def clear(self) -> list[Card]:
        """Empty the zone, returning the cards in their previous order."""
        cards = self.cards
        self.cards = []
        return cards


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    This is the canonical state the turn engine operates on.
    All verbs go through the reducer.
    """
    demons: list[Demon] = field(default_factory=list)
    resolve: int = 0

    deck: Zone = field(default_factory=lambda: Zone(name=ZoneName.DECK))
    hand: Zone = field(default_factory=lambda: Zone(name=ZoneName.HAND))
    discard_pile: Zone = field(default_factory=lambda: Zone(name=ZoneName.DISCARD_PILE))
    in_play: Zone = field(default_factory=lambda: Zone(name=ZoneName.IN_PLAY))

    next_card_id: int = 0
    hand_size: int = 5  # Draw-up target at end of turn

    phase: GamePhase = GamePhase.SETUP
    turn_number: int = 0

    # History (for replay and debugging)
    action_history: list[Any] = field(default_factory=list)

    random_seed: int | None = None
    rng_state: tuple | None = None  # random.Random.getstate() after the last verb

    @property
    def zones(self) -> dict[ZoneName, Zone]:
        return {
            ZoneName.DECK: self.deck,
            ZoneName.HAND: self.hand,
            ZoneName.DISCARD_PILE: self.discard_pile,
            ZoneName.IN_PLAY: self.in_play,
        }

    @property
    def is_lost(self) -> bool:
        return self.resolve <= 0

    @property
    def card_count(self) -> int:
        return sum(zone.count for zone in self.zones.values())

    def zone(self, name: ZoneName) -> Zone:
        """Get a zone by name."""
        return self.zones[name]

    def get_demon(self, kind: DemonKind) -> Demon | None:
        """Get demon by kind."""
        for demon in self.demons:
            if demon.kind == kind:
                return demon
        return None

    def all_cards(self) -> list[Card]:
        """Every card across the four zones."""
        return [card for zone in self.zones.values() for card in zone]

    def card_ids(self) -> list[int]:
        return [card.card_id for card in self.all_cards()]

    def find_zone(self, card_id: int) -> ZoneName | None:
        """Which zone currently holds `card_id`."""
        for name, zone in self.zones.items():
            if zone.contains(card_id):
                return name
        return None

    def create_card(self, kind: CardKind) -> Card:
        """
        Allocate a new card id and return the card.

        The card is not placed in any zone; the caller does that.
        The counter never rolls back.
        """
        card = Card(card_id=self.next_card_id, kind=kind)
        self.next_card_id += 1
        return card

    def move_card(self, card_id: int, from_zone: ZoneName, to_zone: ZoneName) -> Card:
        """Move a card from one zone to the top of another."""
        card = self.zone(from_zone).take(card_id)
        self.zone(to_zone).push(card)
        return card

    def clone(self) -> GameState:
        """
        Deep copy the state.

        Actions in the history are immutable and the rng state is a tuple,
        so both are shared rather than copied.
        """
        memo = {id(self.action_history): list(self.action_history)}
        if self.rng_state is not None:
            memo[id(self.rng_state)] = self.rng_state
        return deepcopy(self, memo)
