"""
Cards - The immutable card value and its factory.

A card never changes in place. Rules that alter a card (enemy enhancement,
sanctum overwrite) build a new value; the `id` field is what ties the two
together, so comparisons of "is this the same card" must use `id`.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidCardError


MIN_PROGRESSION = 1
MAX_PROGRESSION = 5
MIN_ALERT_LEVEL = 0
MAX_ALERT_LEVEL = 3


class ContentKind(Enum):
    """What the party meets when the card is resolved."""
    ENEMY = "enemy"
    TRAP = "trap"
    TREASURE = "treasure"


class TerrainKind(Enum):
    """Where the encounter takes place. SANCTUM is reserved for forced enemies."""
    CORRIDOR = "corridor"
    CROSSROAD = "crossroad"
    MAZE = "maze"
    HALL = "hall"
    SMALL_ROOM = "smallRoom"
    SANCTUM = "sanctum"


# Terrains dealt round-robin by the deck builder (sanctum is placed separately)
DEALT_TERRAINS = (
    TerrainKind.CORRIDOR,
    TerrainKind.CROSSROAD,
    TerrainKind.MAZE,
    TerrainKind.HALL,
    TerrainKind.SMALL_ROOM,
)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Card:
    """
    A single dungeon card.

    alert_level is only meaningful for enemies and is None for traps
    and treasures.
    """
    id: int
    content_kind: ContentKind
    terrain_kind: TerrainKind
    progression: int
    alert_level: int | None = None

    def __post_init__(self):
        if not _is_int(self.id) or self.id < 0:
            raise InvalidCardError("id", self.id, "must be a non-negative integer")
        if not isinstance(self.content_kind, ContentKind):
            raise InvalidCardError("content_kind", self.content_kind)
        if not isinstance(self.terrain_kind, TerrainKind):
            raise InvalidCardError("terrain_kind", self.terrain_kind)
        if not _is_int(self.progression) or not (
            MIN_PROGRESSION <= self.progression <= MAX_PROGRESSION
        ):
            raise InvalidCardError(
                "progression", self.progression,
                f"must be in [{MIN_PROGRESSION}, {MAX_PROGRESSION}]",
            )
        if self.content_kind == ContentKind.ENEMY:
            if not _is_int(self.alert_level) or not (
                MIN_ALERT_LEVEL <= self.alert_level <= MAX_ALERT_LEVEL
            ):
                raise InvalidCardError(
                    "alert_level", self.alert_level,
                    f"enemies need an alert level in [{MIN_ALERT_LEVEL}, {MAX_ALERT_LEVEL}]",
                )
        elif self.alert_level is not None:
            raise InvalidCardError(
                "alert_level", self.alert_level,
                f"{self.content_kind.value} cards have no alert level",
            )

    @property
    def is_enemy(self) -> bool:
        return self.content_kind == ContentKind.ENEMY

    def describe(self) -> str:
        """Short human-readable form, e.g. 'enemy@hall P3 A1'."""
        text = f"{self.content_kind.value}@{self.terrain_kind.value} P{self.progression}"
        if self.alert_level is not None:
            text += f" A{self.alert_level}"
        return text


def create_card(
    id: int,
    content_kind: ContentKind | str,
    terrain_kind: TerrainKind | str,
    progression: int,
    alert_level: int | None = None,
) -> Card:
    """
    Validate and build a card.

    Kinds may be given as enum members or their string values
    ("enemy", "smallRoom", ...).

    Raises:
        InvalidCardError: if any field falls outside its domain.
    """
    try:
        content = ContentKind(content_kind)
    except ValueError:
        raise InvalidCardError("content_kind", content_kind) from None
    try:
        terrain = TerrainKind(terrain_kind)
    except ValueError:
        raise InvalidCardError("terrain_kind", terrain_kind) from None

    return Card(
        id=id,
        content_kind=content,
        terrain_kind=terrain,
        progression=progression,
        alert_level=alert_level,
    )
