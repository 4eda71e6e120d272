"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- (state, action) -> ActionResult with a new state; the input is never touched
- Handlers mutate a clone, so a failed verb is a full no-op
- Zone primitives raise EngineError; apply() turns that into a failure result
- Randomness comes only from the injected rng
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field

from .state import GameState, GamePhase, Demon, TurnPhase, ZoneName
from .action import Action, ActionType, ActionResult, Event, EventType
from .effects import resolve_card_effect
from .errors import EngineError, GameOver, NoCardsAvailable

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Holds only the shuffle rng - all game state is in GameState.
    """
    rng: random.Random = field(default_factory=random.Random)

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        validation_error = self._validate_action(state, action)
        if validation_error:
            logger.warning("Rejected %s: %s", action.action_type.value, validation_error.error)
            return validation_error

        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code="NO_HANDLER",
            )

        working = state.clone()
        try:
            result = handler(working, action)
        except EngineError as e:
            logger.warning("Rejected %s: %s", action.action_type.value, e)
            return ActionResult.failure(str(e), error_code=e.error_code)

        if result.success and result.new_state:
            result.new_state.action_history.append(action)
            result.new_state.rng_state = self.rng.getstate()
        return result

    def _validate_action(self, state: GameState, action: Action) -> ActionResult | None:
        """
        Validate that an action is legal in the current state.

        Returns a failure result if invalid, None if valid.
        """
        if state.phase == GamePhase.GAME_OVER:
            error = GameOver()
            return ActionResult.failure(str(error), error_code=error.error_code)

        if state.phase == GamePhase.SETUP:
            return ActionResult.failure("Game not started", error_code="INVALID_ACTION")

        payload = action.payload
        if action.action_type in {ActionType.DISCARD, ActionType.PLAY} and payload.card_id is None:
            return ActionResult.failure(
                f"{action.action_type.value} needs a card_id", error_code="INVALID_ACTION"
            )
        if action.action_type == ActionType.GAIN and payload.kind is None:
            return ActionResult.failure("gain needs a card kind", error_code="INVALID_ACTION")

        return None

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.DRAW: self._handle_draw,
            ActionType.DISCARD: self._handle_discard,
            ActionType.PLAY: self._handle_play,
            ActionType.GAIN: self._handle_gain,
            ActionType.END_TURN: self._handle_end_turn,
        }
        return handlers.get(action_type)

    def _handle_draw(self, state: GameState, action: Action) -> ActionResult:
        """Draw the top card of the deck, reshuffling the discard pile if needed."""
        events: list[Event] = []
        self.draw_card(state, events)
        return ActionResult.success_with_state(state, events)

    def _handle_discard(self, state: GameState, action: Action) -> ActionResult:
        """Move a card from hand to the discard pile."""
        card = state.move_card(action.payload.card_id, ZoneName.HAND, ZoneName.DISCARD_PILE)
        return ActionResult.success_with_state(
            state, [Event.card_moved(card, ZoneName.HAND, ZoneName.DISCARD_PILE)]
        )

    def _handle_play(self, state: GameState, action: Action) -> ActionResult:
        """Move a card from hand into play, then apply its effect."""
        card = state.move_card(action.payload.card_id, ZoneName.HAND, ZoneName.IN_PLAY)
        events = [Event.card_moved(card, ZoneName.HAND, ZoneName.IN_PLAY)]
        events.extend(resolve_card_effect(card.kind, state))
        self._check_game_lost(state, events)
        return ActionResult.success_with_state(state, events)

    def _handle_gain(self, state: GameState, action: Action) -> ActionResult:
        """Create a new card straight into the discard pile."""
        card = state.create_card(action.payload.kind)
        state.discard_pile.push(card)
        return ActionResult.success_with_state(
            state,
            [Event(EventType.CARD_CREATED, card=card, to_zone=ZoneName.DISCARD_PILE)],
        )

    def _handle_end_turn(self, state: GameState, action: Action) -> ActionResult:
        """
        Resolve the end of the turn.

        1. Cleanup: every in-play card goes to the discard pile
        2. Demons attack: stunned demons tick down, the rest hit resolve
        3. Draw-up: refill the hand to hand_size (cards left in hand stay)
        """
        events: list[Event] = []

        events.append(Event(EventType.PHASE_STARTED, phase=TurnPhase.CLEANUP))
        for card in list(state.in_play):
            state.move_card(card.card_id, ZoneName.IN_PLAY, ZoneName.DISCARD_PILE)
            events.append(Event.card_moved(card, ZoneName.IN_PLAY, ZoneName.DISCARD_PILE))

        events.append(Event(EventType.PHASE_STARTED, phase=TurnPhase.DEMONS_ATTACK))
        for demon in state.demons:
            if demon.stun_time > 0:
                demon.stun_time -= 1
                events.append(Event(
                    EventType.DEMON_STUN_TICKED, demon=demon.kind, amount=demon.stun_time,
                ))
            else:
                events.extend(self._demon_attack(state, demon))

        events.append(Event(EventType.PHASE_STARTED, phase=TurnPhase.DRAW_UP))
        self.draw_up(state, events)

        state.turn_number += 1
        self._check_game_lost(state, events)
        return ActionResult.success_with_state(state, events)

    def _demon_attack(self, state: GameState, demon: Demon) -> list[Event]:
        """Deal the demon's power to resolve, flooring at 0."""
        events = []
        remaining = state.resolve - demon.power
        state.resolve = max(0, remaining)
        events.append(Event(
            EventType.DEMON_ATTACKED, demon=demon.kind, amount=demon.power, resolve=state.resolve,
        ))
        if remaining < 0:
            events.append(Event(EventType.RESOLVE_UNDERFLOW, demon=demon.kind, resolve=0))
        return events

    def _check_game_lost(self, state: GameState, events: list[Event]):
        if state.is_lost and state.phase != GamePhase.GAME_OVER:
            state.phase = GamePhase.GAME_OVER
            events.append(Event(EventType.GAME_LOST, resolve=state.resolve))
            logger.info("Resolve reached 0 on turn %d - game lost", state.turn_number)

    def draw_card(self, state: GameState, events: list[Event]):
        """
        Move the top card of the deck into hand.

        An empty deck is first refilled from the discard pile and shuffled.
        Raises NoCardsAvailable when both are empty.
        """
        if state.deck.is_empty and not state.discard_pile.is_empty:
            self.reshuffle_discard(state, events)
        card = state.deck.pop_top()
        if card is None:
            raise NoCardsAvailable()
        state.hand.push(card)
        events.append(Event.card_moved(card, ZoneName.DECK, ZoneName.HAND))
        return card

    def reshuffle_discard(self, state: GameState, events: list[Event]):
        """Move the whole discard pile into the deck and shuffle the deck."""
        cards = state.discard_pile.clear()
        state.deck.cards.extend(cards)
        state.deck.shuffle(self.rng)
        events.append(Event(EventType.DECK_SHUFFLED, amount=len(cards)))
        logger.debug("Reshuffled %d cards from discard into deck", len(cards))

    def draw_up(self, state: GameState, events: list[Event]) -> int:
        """
        Draw until the hand holds hand_size cards.

        Stops early, without failing, once no cards are left anywhere.
        Returns the number of cards drawn.
        """
        to_draw = max(0, state.hand_size - state.hand.count)
        drawn = 0
        for _ in range(to_draw):
            try:
                self.draw_card(state, events)
            except NoCardsAvailable:
                logger.debug("Draw-up stopped after %d cards: no cards left", drawn)
                break
            drawn += 1
        return drawn


def apply_action(state: GameState, action: Action, rng: random.Random | None = None) -> ActionResult:
    """
    Convenience function to apply an action.

    Without an explicit rng the generator resumes from state.rng_state,
    so successive calls on a seeded state keep advancing one stream.
    """
    if rng is None:
        rng = random.Random(state.random_seed)
        if state.rng_state is not None:
            rng.setstate(state.rng_state)
    reducer = Reducer(rng=rng)
    return reducer.apply(state, action)
