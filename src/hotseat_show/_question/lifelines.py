# Area: Question
"""
hotseat_show._question.lifelines — Lifeline kinds and audience polling
=======================================================================

The three hot seat lifelines, the confidence levels a phoned friend can
give, and the audience poll tally.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, Iterable, Optional

from .choices import ALL_CHOICES, Choice

SIMULATED_AUDIENCE_SIZE = 100


class Lifeline(Enum):
    """Lifelines available once per hot seat round."""
    FIFTY_FIFTY = "fiftyFifty"
    PHONE_A_FRIEND = "phoneAFriend"
    ASK_THE_AUDIENCE = "askTheAudience"


LIFELINE_ORDER = (Lifeline.FIFTY_FIFTY, Lifeline.PHONE_A_FRIEND, Lifeline.ASK_THE_AUDIENCE)


class Confidence(Enum):
    """How sure a phoned friend is about their answer."""
    GUESSING = "guessing"
    THINK_SO = "thinkSo"
    CERTAIN = "certain"


def tally_votes(votes: Iterable[Choice], removed: Iterable[Choice] = ()) -> Dict[int, int]:
    """Return whole-number percentages per presented choice."""
    removed = set(removed)
    counts = {c: 0 for c in ALL_CHOICES}
    for vote in votes:
        if vote in counts and vote not in removed:
            counts[vote] += 1
    total = sum(counts.values())
    if total == 0:
        return {int(c): 0 for c in ALL_CHOICES}
    percentages = {int(c): (counts[c] * 100) // total for c in ALL_CHOICES}
    # Hand rounding leftovers to the most voted choice so the poll sums to 100.
    leader = max(ALL_CHOICES, key=lambda c: counts[c])
    percentages[int(leader)] += 100 - sum(percentages.values())
    return percentages


def simulate_audience(correct: Optional[Choice], question_index: int,
                      removed: Iterable[Choice] = (),
                      rng: Optional[random.Random] = None) -> Dict[int, int]:
    """
    Poll a simulated studio audience.

    The audience leans toward the correct choice, less so on later
    questions. Used when no contestant voted.
    """
    rng = rng or random
    removed = set(removed)
    open_choices = [c for c in ALL_CHOICES if c not in removed]
    accuracy = max(0.3, 0.85 - 0.04 * question_index)
    votes = []
    for _ in range(SIMULATED_AUDIENCE_SIZE):
        if correct is not None and correct in open_choices and rng.random() < accuracy:
            votes.append(correct)
        else:
            votes.append(rng.choice(open_choices))
    return tally_votes(votes, removed)
