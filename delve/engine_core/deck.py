"""
Deck Builder - Composes the starting dungeon deck.

The deck is built so that progression values and terrains are spread evenly:
both are dealt round-robin and shuffled independently before being paired
with content, so a card's terrain says nothing about its progression.
Sanctum enemies are stamped over an already shuffled deck, which is then
shuffled once more.
"""

from __future__ import annotations
import logging
import random
from collections import Counter

from .card import Card, ContentKind, TerrainKind, DEALT_TERRAINS, MAX_PROGRESSION, create_card
from .shuffle import RandomSource, shuffle

logger = logging.getLogger(__name__)

# Roughly one regular enemy in three starts alerted
ALERTED_ENEMY_CHANCE = 0.33
SANCTUM_ALERT_LEVEL = 1


def progression_sequence(total: int) -> list[int]:
    """5, 4, 3, 2, 1, 5, 4, ... of the given length."""
    return [MAX_PROGRESSION - (i % MAX_PROGRESSION) for i in range(total)]


def terrain_sequence(total: int) -> list[TerrainKind]:
    """corridor, crossroad, maze, hall, smallRoom, corridor, ... of the given length."""
    return [DEALT_TERRAINS[i % len(DEALT_TERRAINS)] for i in range(total)]


def create_deck(
    enemy_count: int,
    sanctum_count: int,
    trap_count: int,
    treasure_count: int,
    random_source: RandomSource = random.random,
) -> tuple[Card, ...]:
    """
    Build a shuffled starting deck.

    Args:
        enemy_count: Regular enemies dealt before the sanctum overwrite
        sanctum_count: Cards replaced by alerted sanctum enemies
        trap_count: Trap cards
        treasure_count: Treasure cards
        random_source: Uniform [0, 1) source used for every random choice

    Returns:
        The deck, front card first. Its length is
        enemy_count + trap_count + treasure_count; sanctum_count must not
        exceed that total.
    """
    total = enemy_count + trap_count + treasure_count

    progressions = shuffle(progression_sequence(total), random_source)
    terrains = shuffle(terrain_sequence(total), random_source)

    cursor = 0

    traps = []
    for _ in range(trap_count):
        traps.append(create_card(
            cursor, ContentKind.TRAP, terrains[cursor], progressions[cursor],
        ))
        cursor += 1

    enemies = []
    for _ in range(enemy_count):
        alert_level = 1 if random_source() < ALERTED_ENEMY_CHANCE else 0
        enemies.append(create_card(
            cursor, ContentKind.ENEMY, terrains[cursor], progressions[cursor],
            alert_level=alert_level,
        ))
        cursor += 1

    treasures = []
    for _ in range(treasure_count):
        treasures.append(create_card(
            cursor, ContentKind.TREASURE, terrains[cursor], progressions[cursor],
        ))
        cursor += 1

    deck = shuffle(traps + enemies + treasures, random_source)

    # The sanctum card takes over the slot's id; the replaced card leaves the deck
    for i in range(sanctum_count):
        replaced = deck[i]
        deck[i] = create_card(
            replaced.id,
            ContentKind.ENEMY,
            TerrainKind.SANCTUM,
            replaced.progression,
            alert_level=SANCTUM_ALERT_LEVEL,
        )

    deck = shuffle(deck, random_source)

    if logger.isEnabledFor(logging.DEBUG):
        composition = Counter(card.content_kind.value for card in deck)
        logger.debug(
            "Built deck of %d cards: %s (%d sanctum)",
            len(deck), dict(composition), sanctum_count,
        )

    return tuple(deck)
