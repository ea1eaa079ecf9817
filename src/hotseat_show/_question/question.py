# Area: Question
"""
hotseat_show._question.question — Shared question core
=======================================================

Holds the raw content of a question, its true answer ordering, the
shuffled order in which choices are presented, and which presented
choices have been revealed. Both round types compose one of these.

Terminology
-----------
slot identity
    Index into ``content.choices`` (bank order).
presented position
    Where a choice is shown to viewers. ``shuffled_choices[p]`` is the
    slot identity shown at presented position ``p``.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .choices import ALL_CHOICES, MAX_CHOICES, Choice


@dataclass(frozen=True)
class QuestionContent:
    """Prompt plus the four answer texts, in bank order."""
    text: str
    choices: Tuple[str, str, str, str]
    category: str = ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "QuestionContent":
        choices = tuple(str(c) for c in data["choices"])
        if len(choices) != MAX_CHOICES:
            raise ValueError(
                f"Question needs exactly {MAX_CHOICES} choices, got {len(choices)}"
            )
        return cls(
            text=str(data["text"]),
            choices=choices,
            category=str(data.get("category", "")),
        )


def _as_permutation(values: Sequence[Any], name: str) -> Tuple[Choice, ...]:
    converted = tuple(Choice(int(v)) for v in values)
    if sorted(converted) != list(ALL_CHOICES):
        raise ValueError(f"{name} must be a permutation of all {MAX_CHOICES} choices")
    return converted


class Question:
    """
    Shuffled, revealable question core.

    ``ordered_choices`` is fixed at construction. Reveal flags only ever
    go from False to True, and ``start_time`` is only set once.
    """

    def __init__(
        self,
        content: QuestionContent,
        ordered_choices: Optional[Sequence[Any]] = None,
        shuffled_choices: Optional[Sequence[Any]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.content = content
        self.ordered_choices = _as_permutation(
            ordered_choices if ordered_choices is not None else ALL_CHOICES,
            "ordered_choices",
        )
        if shuffled_choices is None:
            shuffled = list(ALL_CHOICES)
            (rng or random).shuffle(shuffled)
            shuffled_choices = shuffled
        self.shuffled_choices = _as_permutation(shuffled_choices, "shuffled_choices")
        self.revealed_choices: Dict[Choice, bool] = {c: False for c in ALL_CHOICES}
        self.start_time: Optional[float] = None

    # ── Shuffle lookups ──────────────────────────────────────

    def get_shuffled_choice(self, ordered_index: int) -> Optional[Choice]:
        """Return the presented position of the given true-rank index."""
        target = self.ordered_choices[ordered_index]
        for position in ALL_CHOICES:
            if self.shuffled_choices[position] == target:
                return position
        return None

    def get_ordered_index(self, presented: Choice) -> int:
        """Return the true rank (0 = first) of a presented choice."""
        return self.ordered_choices.index(self.shuffled_choices[presented])

    def get_choice_text(self, presented: Choice) -> str:
        return self.content.choices[self.shuffled_choices[presented]]

    # ── Reveal ───────────────────────────────────────────────

    def reveal_choice(self) -> Optional[Choice]:
        """Reveal the next hidden presented choice, in presentation order."""
        for position in ALL_CHOICES:
            if not self.revealed_choices[position]:
                self.revealed_choices[position] = True
                return position
        return None

    def reveal_all_choices(self) -> None:
        for position in ALL_CHOICES:
            self.revealed_choices[position] = True

    def all_choices_revealed(self) -> bool:
        return all(self.revealed_choices.values())

    def mark_start_time(self, now: Optional[float] = None) -> None:
        """Start the answer clock. Later calls leave the first mark intact."""
        if self.start_time is None:
            self.start_time = time.monotonic() if now is None else now

    def elapsed_since_start(self, now: Optional[float] = None) -> Optional[float]:
        if self.start_time is None:
            return None
        return (time.monotonic() if now is None else now) - self.start_time

    # ── Compression ──────────────────────────────────────────

    def to_compressed(self, made_choices: Sequence[Optional[Choice]]) -> Dict[str, Any]:
        """Client-safe projection. Hidden choices are sent as None."""
        return {
            "text": self.content.text,
            "category": self.content.category,
            "choices": [
                self.get_choice_text(p) if self.revealed_choices[p] else None
                for p in ALL_CHOICES
            ],
            "made_choices": [int(c) for c in made_choices if c is not None],
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(text={self.content.text!r}, "
            f"ordered={[c.name for c in self.ordered_choices]}, "
            f"shuffled={[c.name for c in self.shuffled_choices]})"
        )


def make_question_list(entries: List[Dict[str, Any]]) -> List[QuestionContent]:
    """Parse a list of bank entries into QuestionContent objects."""
    return [QuestionContent.from_json(entry) for entry in entries]
