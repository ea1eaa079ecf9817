# Area: Question
"""
hotseat_show._question.choices — Answer slots
==============================================

The four symbolic answer slots shared by both round types. A slot is never
correct on its own; correctness is always relative to a question's
answer ordering.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional


class Choice(IntEnum):
    """One of the four answer slots. Wire value is 0..3."""
    A = 0
    B = 1
    C = 2
    D = 3


MAX_CHOICES = 4
VALID_CHOICES = frozenset(Choice)
ALL_CHOICES = (Choice.A, Choice.B, Choice.C, Choice.D)


def is_valid_choice(choice: Any) -> bool:
    """Return whether the given value is one of the four slots."""
    if isinstance(choice, bool):
        return False
    try:
        return int(choice) in VALID_CHOICES and int(choice) == choice
    except (TypeError, ValueError):
        return False


def get_string(choice: Optional[Choice]) -> str:
    """Return the letter for a choice, or '' when it isn't valid."""
    if is_valid_choice(choice):
        return Choice(choice).name
    return ""


def parse_choice(value: Any) -> Choice:
    """
    Convert a wire value (0..3 or 'A'..'D') into a Choice.

    Raises
    ------
    ValueError
        If the value names no slot.
    """
    if isinstance(value, str):
        letter = value.strip().upper()
        if letter in Choice.__members__:
            return Choice[letter]
        if letter.isdigit():
            value = int(letter)
    if is_valid_choice(value):
        return Choice(int(value))
    raise ValueError(f"Invalid choice: {value!r}")
