"""
Pytest fixtures for Delve tests.
"""

from __future__ import annotations

import itertools
import random
from typing import Callable

import pytest

from ..config import GameSettings, get_settings
from ..engine_core.card import Card, ContentKind, TerrainKind
from ..engine_core.state import GamePhase, GameState


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; start every test from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> GameSettings:
    """Standard game settings, ignoring any local .env file."""
    return GameSettings(_env_file=None)


@pytest.fixture
def seeded_random() -> Callable[[], float]:
    """Deterministic random source."""
    return random.Random(1234).random


@pytest.fixture
def fixed_random() -> Callable[..., Callable[[], float]]:
    """Build a random source that cycles through the given values."""
    def build(*values: float) -> Callable[[], float]:
        cycle = itertools.cycle(values)
        return lambda: next(cycle)
    return build


@pytest.fixture
def make_card() -> Callable[..., Card]:
    """
    Build cards tersely.

    make_card(0, "enemy", alert_level=1) -> enemy in a corridor, progression 3
    """
    def build(
        id: int,
        content_kind: str = "treasure",
        terrain_kind: str = "corridor",
        progression: int = 3,
        alert_level: int | None = None,
    ) -> Card:
        if content_kind == "enemy" and alert_level is None:
            alert_level = 0
        return Card(
            id=id,
            content_kind=ContentKind(content_kind),
            terrain_kind=TerrainKind(terrain_kind),
            progression=progression,
            alert_level=alert_level,
        )
    return build


@pytest.fixture
def playing_state(make_card) -> GameState:
    """
    A run in progress: a mixed hand, five cards left in the deck,
    nothing discarded yet.
    """
    hand = (
        make_card(0, "enemy", progression=2, alert_level=0),
        make_card(1, "trap", progression=3),
        make_card(2, "treasure", progression=4),
    )
    deck = tuple(make_card(i, "treasure", progression=1) for i in range(3, 8))
    return GameState(
        deck=deck,
        hand=hand,
        party_force=100,
        necessary_progression=50,
        phase=GamePhase.PLAYING,
    )
