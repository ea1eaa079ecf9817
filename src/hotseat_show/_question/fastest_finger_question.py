# Area: Question
"""
hotseat_show._question.fastest_finger_question — Ranking question
==================================================================

Every contestant orders all four choices. Answers are revealed one at a
time in true order, then each ordering is graded to pick the hot seat
player.
"""

from __future__ import annotations

from itertools import combinations
from typing import Any, Dict, List, Sequence

from .choices import MAX_CHOICES, Choice
from .question import Question

# Awarded instead of the pair count when the whole ordering is right.
PERFECT_ANSWER_SCORE = 10


class FastestFingerQuestion:
    """Fastest finger question: shared core plus answer-reveal progress."""

    def __init__(self, question: Question):
        self.question = question
        self.revealed_answer_count = 0

    @property
    def start_time(self):
        return self.question.start_time

    def reveal_all_choices(self) -> None:
        self.question.reveal_all_choices()

    def mark_start_time(self, now=None) -> None:
        self.question.mark_start_time(now)

    # ── Answer reveal loop ───────────────────────────────────

    def reveal_answer(self) -> None:
        """Reveal the next choice of the true ordering."""
        if self.revealed_answer_count < MAX_CHOICES:
            self.revealed_answer_count += 1

    def revealed_all_answers(self) -> bool:
        return self.revealed_answer_count >= MAX_CHOICES

    def get_revealed_answers(self) -> List[Choice]:
        """Presented positions of the revealed answers, in true order."""
        return [
            self.question.get_shuffled_choice(i)
            for i in range(self.revealed_answer_count)
        ]

    # ── Grading ──────────────────────────────────────────────

    def get_answer_score(self, choices: Sequence[Choice]) -> int:
        """
        Grade a submitted ordering of presented choices.

        Returns the number of choice pairs placed in the right relative
        order (0..5), or PERFECT_ANSWER_SCORE for a fully correct
        ordering. Incomplete or repeated orderings score 0.
        """
        if len(choices) != MAX_CHOICES or len(set(choices)) != MAX_CHOICES:
            return 0

        ranks = [self.question.get_ordered_index(choice) for choice in choices]
        in_order = sum(1 for first, second in combinations(ranks, 2) if first < second)
        if in_order == len(list(combinations(range(MAX_CHOICES), 2))):
            return PERFECT_ANSWER_SCORE
        return in_order

    def to_compressed(self, made_choices: Sequence[Choice]) -> Dict[str, Any]:
        compressed = self.question.to_compressed(made_choices)
        compressed["revealed_answers"] = [int(c) for c in self.get_revealed_answers()]
        compressed["choice_locked"] = len(made_choices) >= MAX_CHOICES
        return compressed
