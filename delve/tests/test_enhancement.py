"""
Tests for enemy enhancement.
"""

from ..engine_core.enhancement import alert_increase_for, enhance_enemies_on_hand


def alerts(hand):
    return [c.alert_level for c in hand]


class TestEnhancement:

    def test_two_enemies_gain_one(self, make_card):
        treasure = make_card(2, "treasure")
        hand = [make_card(0, "enemy", alert_level=0), make_card(1, "enemy", alert_level=1), treasure]

        result = enhance_enemies_on_hand(hand)

        assert alerts(result[:2]) == [1, 2]
        assert result[2] is treasure

    def test_three_enemies_gain_two(self, make_card):
        hand = [make_card(i, "enemy", alert_level=a) for i, a in enumerate([0, 1, 0])]
        assert alerts(enhance_enemies_on_hand(hand)) == [2, 3, 2]

    def test_single_enemy_unchanged(self, make_card):
        hand = (make_card(0, "enemy", alert_level=1), make_card(1, "trap"), make_card(2))
        assert enhance_enemies_on_hand(hand) == hand

    def test_no_enemies_unchanged(self, make_card):
        hand = (make_card(0, "trap"), make_card(1))
        assert enhance_enemies_on_hand(hand) == hand

    def test_empty_hand(self):
        assert enhance_enemies_on_hand([]) == ()

    def test_capped_at_three(self, make_card):
        hand = [make_card(i, "enemy", alert_level=2) for i in range(3)]
        assert alerts(enhance_enemies_on_hand(hand)) == [3, 3, 3]

    def test_keeps_ids_and_order(self, make_card):
        hand = [make_card(9, "enemy"), make_card(4), make_card(7, "enemy")]
        result = enhance_enemies_on_hand(hand)

        assert [c.id for c in result] == [9, 4, 7]
        assert [c.progression for c in result] == [c.progression for c in hand]

    def test_input_not_mutated(self, make_card):
        hand = [make_card(0, "enemy"), make_card(1, "enemy")]
        enhance_enemies_on_hand(hand)
        assert alerts(hand) == [0, 0]

    def test_not_idempotent(self, make_card):
        """Each call adds again; the game loop applies it once per draw."""
        hand = [make_card(0, "enemy", alert_level=0), make_card(1, "enemy", alert_level=1), make_card(2)]

        once = enhance_enemies_on_hand(hand)
        twice = enhance_enemies_on_hand(once)

        assert alerts(once[:2]) == [1, 2]
        assert alerts(twice[:2]) == [2, 3]
        assert twice != once


def test_alert_increase_table():
    assert [alert_increase_for(n) for n in range(5)] == [0, 0, 1, 2, 2]
