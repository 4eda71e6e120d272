"""
Tests for the card effect registry.
"""

from ..engine_core.action import Action, Event, EventType
from ..engine_core.effects import CARD_EFFECTS, no_effect, register_card_effect, resolve_card_effect
from ..engine_core.state import CardKind, Demon, DemonKind, GamePhase


class TestEffectRegistry:
    """Tests for dispatch by card kind."""

    def test_every_kind_has_an_effect(self):
        assert set(CARD_EFFECTS) == set(CardKind)

    def test_default_is_zone_transfer_only(self, make_state, reducer):
        """Playing a card with no effect changes nothing but its zone."""
        state = make_state(hand=[CardKind.ANGRY], resolve=9)
        assert CARD_EFFECTS[CardKind.ANGRY] is no_effect

        result = reducer.apply(state, Action.play(0))

        assert result.new_state.resolve == 9
        assert result.new_state.demons == state.demons
        assert len(result.events) == 1

    def test_registered_effect_runs_on_play(self, make_state, reducer, monkeypatch):
        """A registered effect sees the working state and can stun a demon."""
        monkeypatch.setitem(CARD_EFFECTS, CardKind.DETERMINED, CARD_EFFECTS[CardKind.DETERMINED])

        @register_card_effect(CardKind.DETERMINED)
        def stun_fear(state):
            state.get_demon(DemonKind.FEAR).stun(2)
            return []

        state = make_state(hand=[CardKind.DETERMINED])
        result = reducer.apply(state, Action.play(0))

        assert result.success
        assert result.new_state.get_demon(DemonKind.FEAR).stun_time == 2
        assert state.get_demon(DemonKind.FEAR).stun_time == 0

    def test_effect_events_are_reported(self, make_state, reducer, monkeypatch):
        marker = Event(EventType.DEMON_STUN_TICKED, demon=DemonKind.DOUBT, amount=1)
        monkeypatch.setitem(CARD_EFFECTS, CardKind.PEACEFUL, lambda state: [marker])

        result = reducer.apply(make_state(hand=[CardKind.PEACEFUL]), Action.play(0))

        assert result.events[-1] is marker

    def test_effect_that_drains_resolve_ends_game(self, make_state, reducer, monkeypatch):
        def despair(state):
            state.resolve = 0
            return []

        monkeypatch.setitem(CARD_EFFECTS, CardKind.STRESSED, despair)

        result = reducer.apply(make_state(hand=[CardKind.STRESSED], resolve=4), Action.play(0))

        assert result.new_state.phase == GamePhase.GAME_OVER
        assert result.events[-1].event_type == EventType.GAME_LOST

    def test_resolve_card_effect_dispatch(self, make_state, monkeypatch):
        calls = []
        monkeypatch.setitem(CARD_EFFECTS, CardKind.DIZZY, lambda state: calls.append(state) or [])
        state = make_state(demons=[Demon(kind=DemonKind.DOUBT)])

        assert resolve_card_effect(CardKind.DIZZY, state) == []
        assert calls == [state]
