"""
Session Manager - Creates and tracks game sessions.

LIFECYCLE:
1. Host starts a session -> new game built from settings (in-memory only)
2. During the game every verb goes through the session's GameLoop
3. Session ends -> dropped from the registry, nothing is saved
"""

from __future__ import annotations
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any

from ..config import Settings
from ..engine_core.engine import TurnEngine
from .game_loop import GameLoop

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    An ephemeral game session.

    Holds the loop (and through it the engine and GameState)
    for one play-through. State is NOT persisted.
    """
    session_id: str
    loop: GameLoop
    created_at: float
    settings: Settings = field(default_factory=Settings)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def engine(self) -> TurnEngine:
        return self.loop.engine

    def is_active(self) -> bool:
        """Check if the game is still going."""
        return not self.engine.is_over


class SessionManager:
    """
    Manages active sessions.

    Sessions live in memory only and are dropped when ended.
    """

    def __init__(self, settings: Settings | None = None):
        self.default_settings = settings or Settings()
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        settings: Settings | None = None,
        seed: int | None = None,
    ) -> Session:
        """Start a new game session."""
        settings = settings or self.default_settings
        session_id = str(uuid.uuid4())
        engine = TurnEngine.new(settings=settings, seed=seed)

        session = Session(
            session_id=session_id,
            loop=GameLoop(engine),
            created_at=time.time(),
            settings=settings,
        )
        self._sessions[session_id] = session
        logger.info("Session %s created", session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """End a session. Returns False if it did not exist."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info("Session %s ended after %d turns", session_id, session.engine.state.turn_number)
        return True

    def list_active_sessions(self) -> list[str]:
        """Ids of sessions whose game is not over."""
        return [sid for sid, s in self._sessions.items() if s.is_active()]
