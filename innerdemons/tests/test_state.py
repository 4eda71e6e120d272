"""
Tests for the zone store.

Tests:
- Zone primitives
- Card id allocation
- Card moves between zones
- Demon stun
"""

import random

import pytest

from ..engine_core.action import Action
from ..engine_core.errors import CardNotFound
from ..engine_core.state import (
    GameState, Card, CardKind, Demon, DemonKind, Zone, ZoneName,
)


class TestZone:
    """Tests for Zone primitives."""

    def test_push_and_pop_top(self):
        """Top of the zone is the last card pushed."""
        zone = Zone(name=ZoneName.DECK)
        zone.push(Card(0, CardKind.ANGRY))
        zone.push(Card(1, CardKind.TIRED))

        assert zone.top_card == Card(1, CardKind.TIRED)
        assert zone.pop_top().card_id == 1
        assert zone.count == 1

    def test_pop_top_empty(self):
        """Popping an empty zone returns None."""
        assert Zone(name=ZoneName.DECK).pop_top() is None

    def test_take_removes_card(self):
        """Taking a card removes exactly that card."""
        zone = Zone(name=ZoneName.HAND, cards=[Card(i, CardKind.PROUD) for i in range(3)])

        card = zone.take(1)

        assert card.card_id == 1
        assert zone.card_ids() == [0, 2]

    def test_take_missing_card_raises(self):
        """Taking an absent card raises CardNotFound and changes nothing."""
        zone = Zone(name=ZoneName.HAND, cards=[Card(0, CardKind.PROUD)])

        with pytest.raises(CardNotFound) as exc:
            zone.take(7)

        assert exc.value.card_id == 7
        assert exc.value.error_code == "CARD_NOT_FOUND"
        assert "hand" in str(exc.value)
        assert zone.card_ids() == [0]

    def test_shuffle_is_permutation(self):
        """Shuffling keeps the same cards."""
        zone = Zone(name=ZoneName.DECK, cards=[Card(i, CardKind.DIZZY) for i in range(20)])

        zone.shuffle(random.Random(3))

        assert sorted(zone.card_ids()) == list(range(20))

    def test_clear_returns_cards(self):
        zone = Zone(name=ZoneName.DISCARD_PILE, cards=[Card(0, CardKind.DIZZY)])

        cards = zone.clear()

        assert [c.card_id for c in cards] == [0]
        assert zone.is_empty


class TestCards:
    """Tests for card creation and moves."""

    def test_create_card_ids_are_monotonic(self):
        """Each new card gets the next id."""
        state = GameState()

        first = state.create_card(CardKind.ANGRY)
        second = state.create_card(CardKind.ANGRY)

        assert (first.card_id, second.card_id) == (0, 1)
        assert state.next_card_id == 2

    def test_create_card_is_not_placed(self):
        """create_card only allocates; it does not put the card in a zone."""
        state = GameState()
        state.create_card(CardKind.HUNGOVER)

        assert state.card_count == 0

    def test_cards_are_immutable(self):
        card = Card(0, CardKind.ANGRY)
        with pytest.raises(AttributeError):
            card.kind = CardKind.PEACEFUL

    def test_move_card(self, make_state):
        """Moving removes from the source and appends to the target."""
        state = make_state(hand=[CardKind.ANGRY, CardKind.TIRED])

        card = state.move_card(0, ZoneName.HAND, ZoneName.IN_PLAY)

        assert card.kind == CardKind.ANGRY
        assert state.hand.card_ids() == [1]
        assert state.in_play.card_ids() == [0]
        assert state.find_zone(0) == ZoneName.IN_PLAY

    def test_move_card_wrong_zone(self, make_state):
        """Moving a card from a zone that does not hold it fails."""
        state = make_state(deck=[CardKind.ANGRY])

        with pytest.raises(CardNotFound):
            state.move_card(0, ZoneName.HAND, ZoneName.DISCARD_PILE)

        assert state.deck.card_ids() == [0]

    def test_clone_is_independent(self, make_state):
        state = make_state(hand=[CardKind.ANGRY])
        copy = state.clone()

        copy.move_card(0, ZoneName.HAND, ZoneName.DISCARD_PILE)
        copy.demons[0].stun_time = 3

        assert state.hand.card_ids() == [0]
        assert state.demons[0].stun_time == 0

    def test_clone_shares_history_entries(self, make_state):
        """History actions are immutable and shared; the list itself is copied."""
        state = make_state()
        state.action_history.extend(Action.draw() for _ in range(1000))

        copy = state.clone()
        copy.action_history.append(Action.end_turn())

        assert copy.action_history is not state.action_history
        assert all(a is b for a, b in zip(copy.action_history, state.action_history))
        assert len(state.action_history) == 1000

    def test_actions_are_immutable(self):
        action = Action.play(3)
        with pytest.raises(AttributeError):
            action.payload = None


class TestDemon:
    """Tests for demons."""

    def test_stun_adds_turns(self):
        demon = Demon(kind=DemonKind.DOUBT, power=2)

        demon.stun(2)
        demon.stun(1)

        assert demon.stun_time == 3
        assert demon.is_stunned

    def test_negative_stun_rejected(self):
        with pytest.raises(ValueError):
            Demon(kind=DemonKind.DOUBT).stun(-1)

    def test_negative_power_rejected(self):
        with pytest.raises(ValueError):
            Demon(kind=DemonKind.FEAR, power=-4)

    def test_negative_stun_time_rejected(self):
        with pytest.raises(ValueError):
            Demon(kind=DemonKind.FEAR, stun_time=-1)

    def test_get_demon(self, make_state):
        state = make_state()
        assert state.get_demon(DemonKind.FEAR).power == 5
        assert state.get_demon(DemonKind.DOUBT) is None
