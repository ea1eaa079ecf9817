# Area: Question Tests
"""Tests for safe haven indexes and the winnings kept after a miss."""

import pytest

from hotseat_show._question.hot_seat_question import (
    PAYOUTS,
    get_safe_haven_index,
    get_safe_haven_payout,
)


class TestGetSafeHavenIndex:
    """Tests for get_safe_haven_index()."""

    @pytest.mark.parametrize("failed_index, expected", [
        (0, -1),
        (3, -1),
        (4, 4),
        (5, 4),
        (9, 9),
        (10, 9),
        (14, 14),
    ])
    def test_known_points(self, failed_index, expected):
        assert get_safe_haven_index(failed_index) == expected

    def test_negative_treated_as_zero(self):
        assert get_safe_haven_index(-1) == -1


class TestGetSafeHavenPayout:
    """Winnings fall back to the last milestone actually cleared."""

    def test_first_question_miss_wins_nothing(self):
        assert get_safe_haven_payout(0) == 0

    def test_before_first_milestone(self):
        assert get_safe_haven_payout(3) == 0

    def test_miss_on_milestone_keeps_nothing_new(self):
        # Question 5 (index 4) is the milestone itself
        assert get_safe_haven_payout(4) == 0

    def test_after_first_milestone(self):
        assert get_safe_haven_payout(5) == PAYOUTS[4]
        assert get_safe_haven_payout(9) == PAYOUTS[4]

    def test_after_second_milestone(self):
        assert get_safe_haven_payout(10) == PAYOUTS[9]
        assert get_safe_haven_payout(14) == PAYOUTS[9]
