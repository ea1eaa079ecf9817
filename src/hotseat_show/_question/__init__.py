# Area: Question
"""
Question layer — answer slots, question types and question supply.

This package handles:
- The four answer slots
- Shuffling and revealing question choices
- Fastest finger ordering grades
- Hot seat grading, payout tiers and safe havens
- Never-repeating question sessions per round type
"""

from .choices import Choice, MAX_CHOICES, ALL_CHOICES, is_valid_choice, get_string, parse_choice
from .question import Question, QuestionContent
from .fastest_finger_question import FastestFingerQuestion, PERFECT_ANSWER_SCORE
from .hot_seat_question import (
    HotSeatQuestion,
    PAYOUTS,
    FINAL_ANSWER_WAIT_TIMES,
    CORRECT_WAIT_TIMES,
    QUESTION_TEXT_WAIT_TIMES,
    MONEY_STRINGS,
    MAX_QUESTION_INDEX,
    get_safe_haven_index,
    get_safe_haven_payout,
)
from .question_session import QuestionSession, FastestFingerSession, HotSeatSession, load_bank
from .lifelines import Lifeline, Confidence, LIFELINE_ORDER, tally_votes, simulate_audience

__all__ = [
    "Choice",
    "MAX_CHOICES",
    "ALL_CHOICES",
    "is_valid_choice",
    "get_string",
    "parse_choice",
    "Question",
    "QuestionContent",
    "FastestFingerQuestion",
    "PERFECT_ANSWER_SCORE",
    "HotSeatQuestion",
    "PAYOUTS",
    "FINAL_ANSWER_WAIT_TIMES",
    "CORRECT_WAIT_TIMES",
    "QUESTION_TEXT_WAIT_TIMES",
    "MONEY_STRINGS",
    "MAX_QUESTION_INDEX",
    "get_safe_haven_index",
    "get_safe_haven_payout",
    "QuestionSession",
    "FastestFingerSession",
    "HotSeatSession",
    "load_bank",
    "Lifeline",
    "Confidence",
    "LIFELINE_ORDER",
    "tally_votes",
    "simulate_audience",
]
