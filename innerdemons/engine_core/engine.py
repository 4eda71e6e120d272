"""
Turn Engine - Builds a game and owns it for the session.

new_game() sets up the initial GameState. TurnEngine holds that state
plus the shuffle rng, runs every verb through the Reducer and commits the
new state only when the verb succeeds.

Usage:
    engine = TurnEngine.new(settings=load_settings())
    result = engine.play(engine.state.hand.cards[0].card_id)
    if not result.success:
        show_error(result.error)
    engine.end_turn()
"""

from __future__ import annotations
import logging
import random
from typing import Iterable

from ..config import Settings
from .state import GameState, GamePhase, Demon, DemonKind, CardKind
from .action import Action, ActionResult, Event
from .reducer import Reducer

logger = logging.getLogger(__name__)

DEFAULT_DEMONS: tuple[DemonKind, ...] = tuple(DemonKind)

# One card of each flavor
STARTER_DECK: tuple[CardKind, ...] = tuple(CardKind)


def new_game(
    demon_kinds: Iterable[DemonKind] | None = None,
    starter_card_kinds: Iterable[CardKind] | None = None,
    settings: Settings | None = None,
    rng: random.Random | None = None,
) -> GameState:
    """
    Set up a new game.

    Args:
        demon_kinds: Demon roster, one per kind (defaults to all three)
        starter_card_kinds: Starting deck composition (defaults to one of each kind)
        settings: Starting resolve, demon power/stun and hand size
        rng: Shuffle generator (defaults to one seeded from settings.seed)

    Returns:
        Initial GameState with a shuffled deck and an opening hand
    """
    settings = settings or Settings()
    rng = rng or random.Random(settings.seed)
    kinds = list(DEFAULT_DEMONS if demon_kinds is None else demon_kinds)
    if len(set(kinds)) != len(kinds):
        raise ValueError("Demon roster holds one demon per kind")

    state = GameState(
        demons=[
            Demon(
                kind=kind,
                power=settings.starting_demon_power,
                stun_time=settings.starting_demon_stun_time,
            )
            for kind in kinds
        ],
        resolve=settings.starting_resolve,
        hand_size=settings.hand_size,
        random_seed=settings.seed,
    )

    for kind in STARTER_DECK if starter_card_kinds is None else starter_card_kinds:
        state.deck.push(state.create_card(kind))
    state.deck.shuffle(rng)

    reducer = Reducer(rng=rng)
    events: list[Event] = []
    drawn = reducer.draw_up(state, events)

    state.phase = GamePhase.GAME_OVER if state.is_lost else GamePhase.PLAYING
    state.rng_state = rng.getstate()
    logger.info(
        "New game: %d demons, %d cards, opening hand %d, resolve %d",
        len(state.demons), state.card_count, drawn, state.resolve,
    )
    return state


class TurnEngine:
    """
    Owner of one GameState for a session.

    Verbs run to completion synchronously. A failed verb returns a
    failure result and leaves the state exactly as it was.
    """

    def __init__(self, state: GameState, rng: random.Random | None = None):
        self._state = state
        if rng is None:
            rng = random.Random(state.random_seed)
            if state.rng_state is not None:
                rng.setstate(state.rng_state)
        self.reducer = Reducer(rng=rng)

    @classmethod
    def new(
        cls,
        demon_kinds: Iterable[DemonKind] | None = None,
        starter_card_kinds: Iterable[CardKind] | None = None,
        settings: Settings | None = None,
        seed: int | None = None,
    ) -> TurnEngine:
        """Build a new game; `seed` overrides settings.seed."""
        settings = settings or Settings()
        rng = random.Random(settings.seed if seed is None else seed)
        state = new_game(demon_kinds, starter_card_kinds, settings, rng)
        return cls(state, rng)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state.phase == GamePhase.GAME_OVER

    def apply(self, action: Action) -> ActionResult:
        """Apply an action and commit the new state on success."""
        result = self.reducer.apply(self._state, action)
        if result.success and result.new_state is not None:
            self._state = result.new_state
        return result

    def draw(self) -> ActionResult:
        return self.apply(Action.draw())

    def discard(self, card_id: int) -> ActionResult:
        return self.apply(Action.discard(card_id))

    def play(self, card_id: int) -> ActionResult:
        return self.apply(Action.play(card_id))

    def gain(self, kind: CardKind) -> ActionResult:
        return self.apply(Action.gain(kind))

    def end_turn(self) -> ActionResult:
        return self.apply(Action.end_turn())
