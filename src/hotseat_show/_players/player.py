# Area: Players
"""
hotseat_show._players.player — Participant state
=================================================

Tracks one participant across rounds: their connection, the answers
they have locked in this round, and what they have won.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .._question.choices import MAX_CHOICES, Choice
from .._question.lifelines import Confidence
from .sockets import GameSocket


class PlayerRole(Enum):
    """Role a participant plays in the current round."""
    SHOW_HOST = "showHost"
    HOT_SEAT = "hotSeat"
    CONTESTANT = "contestant"


@dataclass
class Player:
    """One participant, keyed by username."""
    username: str
    socket: Optional[GameSocket] = None
    active: bool = True
    fastest_finger_choices: List[Choice] = field(default_factory=list)
    fastest_finger_time: Optional[float] = None      # seconds from choice reveal to lock-in
    fastest_finger_score: Optional[int] = None
    hot_seat_choice: Optional[Choice] = None
    hot_seat_time: Optional[float] = None
    confidence: Optional[Confidence] = None          # set only by a phoned friend
    money: int = 0                                   # banked across rounds
    correct_answers: int = 0                         # play-along answers while not in the hot seat

    # ── Fastest finger ───────────────────────────────────────

    def fastest_finger_locked(self) -> bool:
        return len(self.fastest_finger_choices) >= MAX_CHOICES

    def choose_fastest_finger(self, choice: Choice, elapsed: Optional[float] = None) -> bool:
        """
        Append one choice to this player's ordering.

        Returns False when the ordering is already locked or the choice
        was already used. The lock-in time is recorded with the fourth
        choice.
        """
        if self.fastest_finger_locked() or choice in self.fastest_finger_choices:
            return False
        self.fastest_finger_choices.append(Choice(choice))
        if self.fastest_finger_locked():
            self.fastest_finger_time = elapsed
        return True

    def clear_fastest_finger(self) -> None:
        self.fastest_finger_choices = []
        self.fastest_finger_time = None
        self.fastest_finger_score = None

    # ── Hot seat ─────────────────────────────────────────────

    def choose_hot_seat(self, choice: Choice, elapsed: Optional[float] = None) -> None:
        self.hot_seat_choice = Choice(choice)
        self.hot_seat_time = elapsed

    def has_hot_seat_choice(self) -> bool:
        return self.hot_seat_choice is not None

    def set_confidence(self, confidence: Confidence) -> None:
        self.confidence = confidence

    def clear_all_answers(self) -> None:
        """Forget every answer given this round."""
        self.clear_fastest_finger()
        self.hot_seat_choice = None
        self.hot_seat_time = None
        self.confidence = None

    def reset(self) -> None:
        """Back to a fresh participant, keeping identity and connection."""
        self.clear_all_answers()
        self.money = 0
        self.correct_answers = 0

    def to_compressed(self) -> Dict[str, Any]:
        """Public view of this player. Never includes answers."""
        return {
            "username": self.username,
            "active": self.active,
            "money": self.money,
            "correct_answers": self.correct_answers,
            "fastest_finger_score": self.fastest_finger_score,
            "fastest_finger_time": self.fastest_finger_time,
        }
