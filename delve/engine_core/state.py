"""
Game State - The complete state of one dungeon run.

Design principles:
- Immutable: every transition returns a new GameState
- Owned by the game loop; the rules functions only see its fields
- Plain data: piles are tuples of Card values
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum

from .card import Card

Pile = tuple[Card, ...]


class GamePhase(Enum):
    """High-level game phases."""
    SETUP = "setup"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameState:
    """
    Game state at a point in time.

    party_force and necessary_progression are allowed to go below zero;
    the phase records what that means for the run.
    """
    deck: Pile = ()
    hand: Pile = ()
    discard_pile: Pile = ()
    resolved_card_pile: Pile = ()

    party_force: int = 100
    necessary_progression: int = 50

    # Switches on at the first recycle and never switches off
    danger_mode: bool = False

    phase: GamePhase = GamePhase.SETUP
    turn_number: int = 0

    @classmethod
    def initial(cls, party_force: int, necessary_progression: int) -> GameState:
        """Empty piles and starting resources, before the deck is built."""
        return cls(party_force=party_force, necessary_progression=necessary_progression)

    @property
    def is_over(self) -> bool:
        return self.phase in (GamePhase.WON, GamePhase.LOST)

    @property
    def card_count(self) -> int:
        """Cards still in play (everything but the resolved pile)."""
        return len(self.deck) + len(self.hand) + len(self.discard_pile)

    def card_in_slot(self, slot_index: int) -> Card | None:
        """The hand card at a zero-based slot, or None for an empty slot."""
        if 0 <= slot_index < len(self.hand):
            return self.hand[slot_index]
        return None

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)
