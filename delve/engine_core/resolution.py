"""
Resolution - What happens to the party when a card is resolved.

Every card moves the party closer to the sanctum by its progression.
Enemies hurt more the weaker the party already is and the more alert
they are; traps deal a flat amount; treasure is free.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from .card import Card, ContentKind


DEFAULT_MAX_PARTY_FORCE = 100
ENEMY_BASE_DAMAGE = 8
ALERT_LEVEL_DAMAGE_STEP = 0.5
TRAP_DAMAGE = 16


@dataclass(frozen=True)
class ProgressResult:
    """New resource values after resolving one card."""
    new_necessary_progression: int
    new_party_force: int


def enemy_damage(
    party_force: int,
    alert_level: int,
    max_party_force: int = DEFAULT_MAX_PARTY_FORCE,
) -> int:
    """Damage dealt by an enemy, always rounded up."""
    party_force_ratio = party_force / max_party_force
    alert_level_ratio = 1.0 + alert_level * ALERT_LEVEL_DAMAGE_STEP
    return math.ceil(ENEMY_BASE_DAMAGE * (2 - party_force_ratio) * alert_level_ratio)


def progress(
    party_force: int,
    selected_card: Card,
    necessary_progression: int,
    max_party_force: int = DEFAULT_MAX_PARTY_FORCE,
) -> ProgressResult:
    """
    Resolve a card against the current party force and remaining progression.

    Both values may go to zero or below; deciding the outcome is up to the
    caller.
    """
    new_necessary_progression = necessary_progression - selected_card.progression

    new_party_force = party_force
    if selected_card.content_kind == ContentKind.ENEMY:
        new_party_force -= enemy_damage(party_force, selected_card.alert_level, max_party_force)
    elif selected_card.content_kind == ContentKind.TRAP:
        new_party_force -= TRAP_DAMAGE

    return ProgressResult(
        new_necessary_progression=new_necessary_progression,
        new_party_force=new_party_force,
    )
