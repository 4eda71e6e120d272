"""
Inner Demons - Turn-based card game engine

A single-player card game core: the player draws and plays cards while
Fear, Despair and Doubt chip away at their resolve every turn. Provides:
- Zone store (deck, hand, discard pile, in play) and demon roster
- Turn engine verbs and end-of-turn resolution
- Settings loading and read models for a presentation layer
"""

__version__ = "0.1.0"
