"""
Tests for card construction and validation.
"""

import dataclasses

import pytest

from ..engine_core.card import Card, ContentKind, TerrainKind, create_card
from ..errors import DelveError, InvalidCardError


class TestCreateCard:
    """Valid cards."""

    def test_enemy_from_strings(self):
        card = create_card(7, "enemy", "smallRoom", 4, alert_level=2)

        assert card.id == 7
        assert card.content_kind == ContentKind.ENEMY
        assert card.terrain_kind == TerrainKind.SMALL_ROOM
        assert card.progression == 4
        assert card.alert_level == 2
        assert card.is_enemy

    def test_enum_members_accepted(self):
        card = create_card(0, ContentKind.TRAP, TerrainKind.MAZE, 1)
        assert card.content_kind == ContentKind.TRAP
        assert card.alert_level is None

    def test_treasure_has_no_alert_level(self):
        card = create_card(1, "treasure", "hall", 5)
        assert card.alert_level is None
        assert not card.is_enemy

    @pytest.mark.parametrize("alert_level", [0, 1, 2, 3])
    def test_enemy_alert_bounds(self, alert_level):
        assert create_card(0, "enemy", "sanctum", 1, alert_level).alert_level == alert_level

    def test_describe(self):
        assert create_card(0, "enemy", "hall", 3, 1).describe() == "enemy@hall P3 A1"
        assert create_card(1, "trap", "maze", 2).describe() == "trap@maze P2"


class TestInvalidCard:
    """Out-of-domain fields raise InvalidCardError."""

    def test_unknown_content_kind(self):
        with pytest.raises(InvalidCardError) as exc_info:
            create_card(0, "boss", "hall", 3)
        assert exc_info.value.field == "content_kind"

    def test_unknown_terrain_kind(self):
        with pytest.raises(InvalidCardError) as exc_info:
            create_card(0, "trap", "cave", 3)
        assert exc_info.value.field == "terrain_kind"

    @pytest.mark.parametrize("progression", [0, 6, -1])
    def test_progression_out_of_range(self, progression):
        with pytest.raises(InvalidCardError) as exc_info:
            create_card(0, "treasure", "hall", progression)
        assert exc_info.value.field == "progression"
        assert exc_info.value.value == progression

    @pytest.mark.parametrize("alert_level", [None, -1, 4])
    def test_enemy_alert_level_out_of_range(self, alert_level):
        with pytest.raises(InvalidCardError) as exc_info:
            create_card(0, "enemy", "hall", 3, alert_level)
        assert exc_info.value.field == "alert_level"

    def test_non_enemy_with_alert_level(self):
        with pytest.raises(InvalidCardError):
            create_card(0, "trap", "hall", 3, alert_level=1)

    def test_negative_id(self):
        with pytest.raises(InvalidCardError):
            create_card(-1, "trap", "hall", 3)

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            create_card(0, "trap", "hall", 9)
        with pytest.raises(DelveError):
            create_card(0, "trap", "hall", 9)


class TestImmutability:
    """Cards are values; changes produce new cards."""

    def test_cannot_assign(self):
        card = create_card(0, "enemy", "hall", 3, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.alert_level = 2

    def test_replace_keeps_id_and_validates(self):
        card = create_card(5, "enemy", "hall", 3, 0)
        raised = dataclasses.replace(card, alert_level=2)

        assert raised.id == card.id
        assert raised.alert_level == 2
        assert card.alert_level == 0

        with pytest.raises(InvalidCardError):
            dataclasses.replace(card, alert_level=4)

    def test_equal_by_value(self):
        assert create_card(1, "trap", "hall", 2) == Card(1, ContentKind.TRAP, TerrainKind.HALL, 2)
