"""
hotseat_show.types — TypedDict schemas for client payloads
===========================================================

This module documents the exact structure of the messages the game
server emits to each participant. Client authors should reference these
types when rendering a show.

All types are exported from the main package:

    from hotseat_show import ClientState, HotSeatQuestionView, ...

Use __annotations__ to inspect fields:

    >>> DialogActionView.__annotations__
    {'socket_event': <class 'str'>, 'text': <class 'str'>}
"""

from typing import Dict, List, Optional, TypedDict


# ============================================
# updateGame building blocks
# ============================================

class DialogActionView(TypedDict):
    """One button offered to the viewer."""
    socket_event: str       # e.g., "showHostCueFastestFingerQuestion"
    text: str               # e.g., "Cue fastest finger music"


class StepDialogView(TypedDict):
    """How the viewer can move the show on. No buttons means wait."""
    actions: List[DialogActionView]
    header: Optional[str]   # e.g., "Final answer?"


class PlayerView(TypedDict):
    """Public information about one participant. Never includes answers."""
    username: str
    active: bool
    role: str                               # "showHost" | "hotSeat" | "contestant"
    money: int
    correct_answers: int
    fastest_finger_score: Optional[int]
    fastest_finger_time: Optional[float]


class CelebrationBanner(TypedDict):
    header: str             # e.g., "Fastest finger winner"
    text: str               # e.g., "alice" or "$1,000"


class FastestFingerQuestionView(TypedDict):
    """Fastest finger question as seen by one viewer.

    Fields
    ------
    choices : List[Optional[str]]
        Texts at presented positions 0..3; None until revealed.
    made_choices : List[int]
        The viewer's own ordering so far.
    revealed_answers : List[int]
        Presented positions of the true ordering revealed so far.
    choice_locked : bool
        True once the viewer's ordering is complete.
    """
    text: str
    category: str
    choices: List[Optional[str]]
    made_choices: List[int]
    revealed_answers: List[int]
    choice_locked: bool


class HotSeatQuestionView(TypedDict, total=False):
    """Hot seat question as seen by one viewer.

    ``correct_choice`` is only present once the outcome is revealed to the
    viewer: to the show host at the final answer, to everyone at the
    victory or loss screen.
    """
    text: str
    category: str
    choices: List[Optional[str]]
    made_choices: List[int]
    choice_locked: bool
    correct_choice: Optional[int]
    removed_choices: List[int]
    question_index: int
    payout: str


class PhoneAFriendView(TypedDict, total=False):
    """The friend on the phone. Answer fields only for call participants and host."""
    username: str
    choice: Optional[int]
    confidence: Optional[str]   # "guessing" | "thinkSo" | "certain"


# ============================================
# updateGame
# ============================================

class ClientState(TypedDict):
    """Payload of every ``updateGame`` message."""
    socket_event: Optional[str]
    round: int
    username: str
    role: str
    players: List[PlayerView]
    show_host: Optional[str]
    hot_seat_player: Optional[str]
    step_dialog: Optional[StepDialogView]
    celebration_banner: Optional[CelebrationBanner]
    fastest_finger_question: Optional[FastestFingerQuestionView]
    hot_seat_question: Optional[HotSeatQuestionView]
    hot_seat_question_index: int
    winnings: int
    lifelines: Dict[str, bool]              # lifeline name -> used
    highlighted_lifeline: Optional[str]
    pending_lifeline: Optional[str]
    audience_results: Optional[Dict[int, int]]
    phone_a_friend: Optional[PhoneAFriendView]


# ============================================
# gameError / gameEnded
# ============================================

class GameErrorPayload(TypedDict):
    """Sent only to the participant whose message was rejected."""
    error_type: str         # e.g., "LATE_SUBMISSION"
    socket_event: str
    reason: str


class GameEndedPayload(TypedDict):
    """Broadcast when the game ends for an internal reason."""
    reason: str             # e.g., "QuestionBankExhaustedError"
    message: str
