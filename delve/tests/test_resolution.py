"""
Tests for card resolution.
"""

import pytest

from ..engine_core.card import create_card
from ..engine_core.resolution import TRAP_DAMAGE, enemy_damage, progress


class TestProgress:

    def test_trap(self):
        card = create_card(0, "trap", "hall", 3)
        result = progress(100, card, 50)

        assert result.new_necessary_progression == 47
        assert result.new_party_force == 84

    def test_enemy_at_full_force(self):
        card = create_card(0, "enemy", "hall", 2, alert_level=0)
        result = progress(100, card, 50)

        assert result.new_necessary_progression == 48
        assert result.new_party_force == 92

    def test_alerted_enemy_against_weakened_party(self):
        # ratio 0.5, alert ratio 2.0: ceil(8 * 1.5 * 2) = 24
        card = create_card(0, "enemy", "hall", 2, alert_level=2)
        result = progress(50, card, 50)

        assert result.new_necessary_progression == 48
        assert result.new_party_force == 26

    def test_treasure_is_free(self):
        card = create_card(0, "treasure", "maze", 5)
        result = progress(37, card, 4)

        assert result.new_party_force == 37
        assert result.new_necessary_progression == -1

    def test_party_force_may_go_negative(self):
        card = create_card(0, "trap", "maze", 1)
        assert progress(10, card, 50).new_party_force == 10 - TRAP_DAMAGE

    def test_custom_max_party_force(self):
        card = create_card(0, "enemy", "hall", 1, alert_level=0)
        # ratio 0.5: ceil(8 * 1.5) = 12
        assert progress(100, card, 50, max_party_force=200).new_party_force == 88


class TestEnemyDamage:

    def test_rounds_up(self):
        # 8 * 1.01 = 8.08
        assert enemy_damage(99, 0) == 9

    @pytest.mark.parametrize("alert_level,expected", [(0, 8), (1, 12), (2, 16), (3, 20)])
    def test_scales_with_alert(self, alert_level, expected):
        assert enemy_damage(100, alert_level) == expected

    def test_weaker_party_takes_more(self):
        assert enemy_damage(20, 0) > enemy_damage(80, 0)

    def test_never_zero_for_a_standing_party(self):
        for party_force in range(1, 101):
            assert enemy_damage(party_force, 0) > 0
