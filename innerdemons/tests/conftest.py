"""
Pytest fixtures for Inner Demons tests.
"""

import random

import pytest

from ..config import Settings
from ..engine_core.engine import TurnEngine
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameState, GamePhase, Demon, DemonKind


@pytest.fixture
def settings() -> Settings:
    """Three demons at power 1, resolve 30."""
    return Settings(
        starting_resolve=30,
        starting_demon_power=1,
        starting_demon_stun_time=0,
        seed=1234,
    )


@pytest.fixture
def engine(settings: Settings) -> TurnEngine:
    """A fresh game with the default roster and starter deck."""
    return TurnEngine.new(settings=settings)


@pytest.fixture
def reducer() -> Reducer:
    return Reducer(rng=random.Random(0))


@pytest.fixture
def make_state():
    """
    Build a playing GameState with the given zone contents.

    Cards are created through the state so ids stay 0..n-1.
    """
    def _make(
        deck=(),
        hand=(),
        discard=(),
        in_play=(),
        demons=None,
        resolve=20,
        hand_size=5,
    ) -> GameState:
        state = GameState(
            demons=demons if demons is not None else [Demon(kind=DemonKind.FEAR, power=5)],
            resolve=resolve,
            hand_size=hand_size,
            phase=GamePhase.PLAYING,
        )
        for zone, kinds in (
            (state.deck, deck),
            (state.hand, hand),
            (state.discard_pile, discard),
            (state.in_play, in_play),
        ):
            for kind in kinds:
                zone.push(state.create_card(kind))
        return state

    return _make
