# Area: Question
"""
hotseat_show._question.hot_seat_question — Single-answer question
==================================================================

Stores and grades a hot seat question. Correctness is always evaluated
through the shuffle: a presented slot is correct when it shows the true
first-ranked choice.
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional, Set

from .choices import MAX_CHOICES, Choice
from .question import Question

# Payouts per question.
PAYOUTS = [
    100,
    200,
    300,
    500,
    1000,
    2000,
    4000,
    8000,
    16000,
    32000,
    64000,
    125000,
    250000,
    500000,
    1000000,
]

# Automatic wait times (ms) for final answer confirmations per question index.
# Later questions wait longer to build suspense.
FINAL_ANSWER_WAIT_TIMES = [
    1000,
    1000,
    1000,
    1000,
    1500,
    3000,
    3000,
    3000,
    3000,
    4000,
    5000,
    5000,
    5000,
    5000,
    7500,
]

# Automatic wait times (ms) for correct answer celebrations, sized to the audio cues.
CORRECT_WAIT_TIMES = [
    1000,
    1000,
    1000,
    1000,
    8000,
    5000,
    5000,
    5000,
    5000,
    8000,
    7000,
    7000,
    7000,
    7000,
    24000,
]

# Automatic wait times (ms) for question introductions. Longer where a flourish plays.
QUESTION_TEXT_WAIT_TIMES = [
    7000,
    1000,
    1000,
    1000,
    1000,
    7000,
    7000,
    7000,
    7000,
    7000,
    7000,
    7000,
    7000,
    7000,
    7000,
]

MONEY_STRINGS = [f"${payout:,}" for payout in PAYOUTS]

MAX_QUESTION_INDEX = len(PAYOUTS) - 1
SAFE_HAVEN_INTERVAL = 5


def get_safe_haven_index(failed_index: int) -> int:
    """Return the safe haven (fallback) index for a given index, or -1 if none."""
    one_indexed = max(0, failed_index) + 1
    return one_indexed - (one_indexed % SAFE_HAVEN_INTERVAL) - 1


def get_safe_haven_payout(failed_index: int) -> int:
    """
    Winnings kept after answering question ``failed_index`` wrongly.

    The safe haven is taken from the last question actually cleared, so a
    miss on a milestone question falls back to the previous milestone.
    """
    if failed_index <= 0:
        return 0
    banked = get_safe_haven_index(failed_index - 1)
    return PAYOUTS[banked] if banked >= 0 else 0


class HotSeatQuestion:
    """Hot seat question: shared core plus single-answer grading."""

    def __init__(self, question: Question, question_index: int = 0):
        if not 0 <= question_index <= MAX_QUESTION_INDEX:
            raise ValueError(f"question_index out of range: {question_index}")
        self.question = question
        self.question_index = question_index
        self.correct_choice_revealed_for_show_host = False
        self.correct_choice_revealed_for_all = False
        self.removed_choices: Set[Choice] = set()

    # ── Tier lookups ─────────────────────────────────────────

    @property
    def payout(self) -> int:
        return PAYOUTS[self.question_index]

    @property
    def final_answer_wait_ms(self) -> int:
        return FINAL_ANSWER_WAIT_TIMES[self.question_index]

    @property
    def correct_wait_ms(self) -> int:
        return CORRECT_WAIT_TIMES[self.question_index]

    @property
    def start_time(self):
        return self.question.start_time

    # ── Grading ──────────────────────────────────────────────

    def answer_is_correct(self, answer: Optional[Choice]) -> bool:
        """Return whether the given presented choice is correct."""
        if answer is None:
            return False
        return self.question.shuffled_choices[answer] == self.question.ordered_choices[0]

    def get_correct_choice(self) -> Optional[Choice]:
        """Return the presented choice of the correct answer, or None if not found."""
        return self.question.get_shuffled_choice(0)

    # ── Reveal ───────────────────────────────────────────────

    def get_remaining_ordered_choice_indexes(self) -> List[int]:
        """True-rank indexes of the choices that are still hidden."""
        remaining = []
        for index in range(MAX_CHOICES):
            presented = self.question.get_shuffled_choice(index)
            if presented is not None and not self.question.revealed_choices[presented]:
                remaining.append(index)
        return remaining

    def reveal_choice(self) -> Optional[Choice]:
        return self.question.reveal_choice()

    def all_choices_revealed(self) -> bool:
        return not self.get_remaining_ordered_choice_indexes()

    def mark_start_time(self, now=None) -> None:
        self.question.mark_start_time(now)

    def reveal_correct_choice_for_show_host(self) -> None:
        self.correct_choice_revealed_for_show_host = True

    def reveal_correct_choice_for_all(self) -> None:
        self.correct_choice_revealed_for_show_host = True
        self.correct_choice_revealed_for_all = True

    # ── Lifelines ────────────────────────────────────────────

    def apply_fifty_fifty(self, rng: Optional[random.Random] = None) -> List[Choice]:
        """Remove two wrong choices. Returns the removed presented choices."""
        if self.removed_choices:
            return []
        wrong = [self.question.get_shuffled_choice(i) for i in range(1, MAX_CHOICES)]
        removed = sorted((rng or random).sample(wrong, 2))
        self.removed_choices.update(removed)
        return removed

    def is_choice_removed(self, choice: Choice) -> bool:
        return choice in self.removed_choices

    # ── Compression ──────────────────────────────────────────

    def to_compressed(self, made_choice: Optional[Choice], show_correct_choice: bool) -> Dict[str, Any]:
        """Client-safe projection of the question for one viewer."""
        compressed = self.question.to_compressed([made_choice])
        if show_correct_choice:
            correct = self.get_correct_choice()
            compressed["correct_choice"] = int(correct) if correct is not None else None
        # Contestant UIs disable further input once a choice is locked in.
        compressed["choice_locked"] = made_choice is not None
        compressed["removed_choices"] = [int(c) for c in sorted(self.removed_choices)]
        compressed["question_index"] = self.question_index
        compressed["payout"] = MONEY_STRINGS[self.question_index]
        return compressed
