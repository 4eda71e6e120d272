"""
Game Loop - The host-facing driver around a TurnEngine.

The loop:
1. Host turns user input into a verb call (click card -> play)
2. Engine validates and applies it
3. Listeners get the events so the host can animate
4. Host redraws from the returned GameView
5. Repeat until resolve hits 0
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from ..engine_core.action import ActionResult, Event
from ..engine_core.engine import TurnEngine
from ..engine_core.state import CardKind
from ..schemas import GameView

logger = logging.getLogger(__name__)

Listener = Callable[[list[Event]], None]


class LoopState(Enum):
    """State of the game loop."""
    PLAY_CARDS = "play_cards"
    GAME_OVER = "game_over"


@dataclass
class TurnResult:
    """
    Result of one verb, shaped for the host.

    Contains the events to animate, a fresh snapshot to draw,
    and any error to show the user.
    """
    success: bool
    loop_state: LoopState

    events: list[Event] = field(default_factory=list)
    view: GameView | None = None

    errors: list[str] = field(default_factory=list)
    error_code: str | None = None

    @property
    def game_lost(self) -> bool:
        return self.loop_state == LoopState.GAME_OVER


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(TurnEngine.new())
        loop.subscribe(animate)

        result = loop.play(card_id)
        if not result.success:
            flash(result.errors)
        redraw(result.view)
    """

    def __init__(self, engine: TurnEngine):
        self.engine = engine
        self._listeners: list[Listener] = []

    @property
    def state(self) -> LoopState:
        return LoopState.GAME_OVER if self.engine.is_over else LoopState.PLAY_CARDS

    def subscribe(self, listener: Listener):
        """
        Call `listener` with the events of every successful verb.

        A listener that raises is logged and skipped; the verb still counts.
        """
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        self._listeners.remove(listener)

    def view(self) -> GameView:
        """Snapshot of the current game for rendering."""
        return GameView.from_state(self.engine.state)

    def draw(self) -> TurnResult:
        return self._run(self.engine.draw())

    def discard(self, card_id: int) -> TurnResult:
        return self._run(self.engine.discard(card_id))

    def play(self, card_id: int) -> TurnResult:
        return self._run(self.engine.play(card_id))

    def gain(self, kind: CardKind) -> TurnResult:
        return self._run(self.engine.gain(kind))

    def end_turn(self) -> TurnResult:
        return self._run(self.engine.end_turn())

    def _run(self, result: ActionResult) -> TurnResult:
        if not result.success:
            return TurnResult(
                success=False,
                loop_state=self.state,
                view=self.view(),
                errors=[result.error] if result.error else [],
                error_code=result.error_code,
            )

        # The verb is already committed; listener errors are logged, not raised
        for listener in list(self._listeners):
            try:
                listener(result.events)
            except Exception:
                logger.exception("Listener %r failed", listener)

        return TurnResult(
            success=True,
            loop_state=self.state,
            events=result.events,
            view=self.view(),
        )
