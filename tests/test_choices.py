# Area: Question Tests
"""Tests for the four answer slots."""

import pytest

from hotseat_show._question.choices import (
    ALL_CHOICES,
    MAX_CHOICES,
    Choice,
    get_string,
    is_valid_choice,
    parse_choice,
)


class TestIsValidChoice:
    """Tests for is_valid_choice()."""

    def test_all_slots_valid(self):
        for value in range(MAX_CHOICES):
            assert is_valid_choice(value) is True

    def test_enum_members_valid(self):
        assert all(is_valid_choice(c) for c in ALL_CHOICES)

    def test_out_of_range_invalid(self):
        assert is_valid_choice(4) is False
        assert is_valid_choice(-1) is False

    def test_bool_is_not_a_choice(self):
        assert is_valid_choice(True) is False

    def test_non_numbers_invalid(self):
        assert is_valid_choice(None) is False
        assert is_valid_choice("A") is False
        assert is_valid_choice(2.5) is False


class TestGetString:
    """Tests for get_string()."""

    def test_letters(self):
        assert get_string(Choice.A) == "A"
        assert get_string(3) == "D"

    def test_invalid_is_empty(self):
        assert get_string(None) == ""
        assert get_string(9) == ""


class TestParseChoice:
    """Tests for parse_choice() — wire value conversion."""

    def test_int(self):
        assert parse_choice(2) is Choice.C

    def test_letter_any_case(self):
        assert parse_choice("b") is Choice.B
        assert parse_choice(" D ") is Choice.D

    def test_digit_string(self):
        assert parse_choice("0") is Choice.A

    @pytest.mark.parametrize("value", [4, -1, "E", "", None, True, [0]])
    def test_invalid_raises(self, value):
        with pytest.raises(ValueError):
            parse_choice(value)
