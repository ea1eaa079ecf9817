# Area: Question
"""
hotseat_show._question.question_session — Never-repeating question supply
==========================================================================

One session per round type. A session hands out fresh questions from its
bank, never repeating one for as long as the session lives, and builds
the correctly typed question object with a fresh random shuffle.
"""

from __future__ import annotations

import json
import logging
import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

from ..errors import QuestionBankExhaustedError
from .fastest_finger_question import FastestFingerQuestion
from .hot_seat_question import SAFE_HAVEN_INTERVAL, HotSeatQuestion
from .question import Question, QuestionContent, make_question_list

logger = logging.getLogger("hotseat_show.question")

DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_FASTEST_FINGER_BANK = DATA_DIR / "fastest_finger.json"
DEFAULT_HOT_SEAT_BANK = DATA_DIR / "hot_seat.json"


def load_bank(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Load a JSON question bank (a list of entries, or {"questions": [...]})."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("questions", [])
    if not isinstance(data, list):
        raise ValueError(f"Question bank {path} must hold a list of questions")
    return data


class QuestionSession(ABC):
    """
    Base session: tracks which bank entries were already handed out.

    Subclasses decide which entries are candidates and which question
    type to build.
    """

    name = "question"

    def __init__(self, entries: List[Dict[str, Any]], rng: Optional[random.Random] = None):
        self._entries = entries
        self._contents: List[QuestionContent] = make_question_list(entries)
        self._used: Set[int] = set()
        self._rng = rng or random.Random()

    @property
    def bank_size(self) -> int:
        return len(self._contents)

    def remaining(self) -> int:
        return self.bank_size - len(self._used)

    def reset(self) -> None:
        """Allow every question to be handed out again."""
        self._used.clear()

    def _unused_indexes(self) -> List[int]:
        return [i for i in range(self.bank_size) if i not in self._used]

    def _take(self, candidates: List[int]) -> QuestionContent:
        if not candidates:
            raise QuestionBankExhaustedError(self.name, self.bank_size)
        picked = self._rng.choice(candidates)
        self._used.add(picked)
        logger.debug(
            "%s session handed out question %d (%d left)",
            self.name, picked, self.remaining(),
        )
        return self._contents[picked]

    def _new_core(self, content: QuestionContent) -> Question:
        # Bank entries list choices in true order, so slot identity == rank.
        return Question(content, rng=self._rng)

    @abstractmethod
    def get_new_question(self, index: Optional[int] = None):
        """Return a fresh, never-repeated question."""
        pass


class FastestFingerSession(QuestionSession):
    """Keeps generating unused fastest finger questions."""

    name = "fastest_finger"

    @classmethod
    def from_file(cls, path: Union[str, Path, None] = None,
                  rng: Optional[random.Random] = None) -> "FastestFingerSession":
        return cls(load_bank(path or DEFAULT_FASTEST_FINGER_BANK), rng=rng)

    def get_new_question(self, index: Optional[int] = None) -> FastestFingerQuestion:
        content = self._take(self._unused_indexes())
        return FastestFingerQuestion(self._new_core(content))


class HotSeatSession(QuestionSession):
    """
    Keeps generating unused hot seat questions.

    Entries may carry a ``tier`` (0 for indexes 0-4, 1 for 5-9, 2 for
    10-14). A question of the matching tier is preferred; any unused
    question is used once the tier runs dry.
    """

    name = "hot_seat"

    def __init__(self, entries: List[Dict[str, Any]], rng: Optional[random.Random] = None):
        super().__init__(entries, rng=rng)
        self._tiers = [entry.get("tier") for entry in entries]

    @classmethod
    def from_file(cls, path: Union[str, Path, None] = None,
                  rng: Optional[random.Random] = None) -> "HotSeatSession":
        return cls(load_bank(path or DEFAULT_HOT_SEAT_BANK), rng=rng)

    def get_new_question(self, index: Optional[int] = None) -> HotSeatQuestion:
        question_index = index or 0
        tier = question_index // SAFE_HAVEN_INTERVAL
        unused = self._unused_indexes()
        same_tier = [i for i in unused if self._tiers[i] == tier]
        if not same_tier and unused:
            logger.info("No unused tier %d question left, using any tier", tier)
        content = self._take(same_tier or unused)
        return HotSeatQuestion(self._new_core(content), question_index=question_index)
