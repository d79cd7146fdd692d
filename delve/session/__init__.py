"""
Session Module - Runs a single play-through.

A session lives for one run only: it is created when the run starts and
discarded when the process ends. Nothing is persisted.
"""

from .game_loop import GameLoop, TurnResult
from .schemas import CardView, GameSnapshot, snapshot_from_state

__all__ = [
    "GameLoop",
    "TurnResult",
    "CardView",
    "GameSnapshot",
    "snapshot_from_state",
]
