"""
Enemy Enhancement - Enemies sharing a hand raise each other's alert.

Two enemies in hand: each gains one alert level. Three or more: each gains
two. Alert levels never exceed MAX_ALERT_LEVEL.

The function adds again on every call. Applying it once per draw is the
caller's job.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Sequence

from .card import Card, MAX_ALERT_LEVEL


def alert_increase_for(enemy_count: int) -> int:
    if enemy_count >= 3:
        return 2
    if enemy_count == 2:
        return 1
    return 0


def enhance_enemies_on_hand(hand: Sequence[Card]) -> tuple[Card, ...]:
    """Return the hand with enemy alert levels raised for the number of enemies present."""
    increase = alert_increase_for(sum(1 for card in hand if card.is_enemy))
    if not increase:
        return tuple(hand)

    return tuple(
        replace(card, alert_level=min(card.alert_level + increase, MAX_ALERT_LEVEL))
        if card.is_enemy else card
        for card in hand
    )
