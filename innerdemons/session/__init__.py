"""
Session Module - Host-facing game sessions.

A session represents one play-through:
- Created when the player starts a game
- Holds the engine, and through it the single GameState
- Destroyed when the game ends

Sessions are EPHEMERAL: nothing is written to disk.
"""

from .manager import SessionManager, Session
from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "SessionManager",
    "Session",
    "GameLoop",
    "LoopState",
    "TurnResult",
]
