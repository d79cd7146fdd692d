"""
Pydantic Schemas for display - What a front end gets to see.

A snapshot is produced after every state transition (opening draw and each
resolution). Front ends render from the snapshot only and never touch
GameState directly.
"""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field

from ..engine_core.card import Card
from ..engine_core.state import GameState


class CardView(BaseModel):
    """Card information for display."""
    id: int
    content_kind: str
    terrain_kind: str
    progression: int
    alert_level: Optional[int] = None

    model_config = {"frozen": True}

    @classmethod
    def from_card(cls, card: Card) -> CardView:
        return cls(
            id=card.id,
            content_kind=card.content_kind.value,
            terrain_kind=card.terrain_kind.value,
            progression=card.progression,
            alert_level=card.alert_level,
        )

    def lines(self) -> list[str]:
        """Card face, one attribute per line."""
        lines = [f"T: {self.terrain_kind}", f"C: {self.content_kind}"]
        if self.alert_level is not None:
            lines.append(f"A: {self.alert_level}")
        lines.append(f"P: {self.progression}")
        return lines


class GameSnapshot(BaseModel):
    """Full display state after a transition."""
    deck_count: int
    discard_pile_count: int
    resolved_card_pile_count: int
    hand: list[CardView] = Field(default_factory=list)
    max_hand_count: int = 3

    danger_mode: bool = False
    party_force: int
    displayed_party_force: int = Field(description="Party force floored at zero")
    necessary_progression: int

    phase: str
    turn_number: int = 0

    def slots(self) -> list[Optional[CardView]]:
        """Hand padded with None up to max_hand_count."""
        padding = max(self.max_hand_count - len(self.hand), 0)
        return list(self.hand) + [None] * padding


def snapshot_from_state(state: GameState, max_hand_count: int = 3) -> GameSnapshot:
    """Build the display snapshot for a game state."""
    return GameSnapshot(
        deck_count=len(state.deck),
        discard_pile_count=len(state.discard_pile),
        resolved_card_pile_count=len(state.resolved_card_pile),
        hand=[CardView.from_card(card) for card in state.hand],
        max_hand_count=max_hand_count,
        danger_mode=state.danger_mode,
        party_force=state.party_force,
        displayed_party_force=max(state.party_force, 0),
        necessary_progression=state.necessary_progression,
        phase=state.phase.value,
        turn_number=state.turn_number,
    )
