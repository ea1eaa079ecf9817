# Area: Game
"""
hotseat_show._game.events — Phase and message names
====================================================

Every inbound message name the game server listens for. Most of them
name a phase of the show; the rest carry a participant's answer or
lifeline request.

Flow of one round (host-driven or timer-driven):
SHOW_FASTEST_FINGER_RULES -> CUE_FASTEST_FINGER_QUESTION
-> SHOW_FASTEST_FINGER_QUESTION_TEXT -> CUE_FASTEST_FINGER_THREE_STRIKES
-> REVEAL_FASTEST_FINGER_QUESTION_CHOICES -> FASTEST_FINGER_TIME_UP
-> CUE_FASTEST_FINGER_ANSWER_REVEAL_AUDIO -> REVEAL_FASTEST_FINGER_ANSWER (x4)
-> REVEAL_FASTEST_FINGER_RESULTS -> ACCEPT_HOT_SEAT_PLAYER
-> CUE_HOT_SEAT_RULES -> [HIGHLIGHT_LIFELINE (x3)]
-> CUE_HOT_SEAT_QUESTION -> SHOW_HOT_SEAT_QUESTION_TEXT
-> REVEAL_HOT_SEAT_CHOICE (x4) -> HOT_SEAT_CHOOSE -> HOT_SEAT_FINAL_ANSWER
-> REVEAL_HOT_SEAT_QUESTION_VICTORY -> CUE_HOT_SEAT_QUESTION ...
   or REVEAL_HOT_SEAT_QUESTION_LOSS -> SHOW_SCORES -> SHOW_FASTEST_FINGER_RULES
"""

from __future__ import annotations

from enum import Enum


class SocketEvent(Enum):
    """Inbound message names. Values are the wire names."""
    SHOW_HOST_SHOW_FASTEST_FINGER_RULES = "showHostShowFastestFingerRules"
    SHOW_HOST_CUE_FASTEST_FINGER_QUESTION = "showHostCueFastestFingerQuestion"
    SHOW_HOST_SHOW_FASTEST_FINGER_QUESTION_TEXT = "showHostShowFastestFingerQuestionText"
    SHOW_HOST_CUE_FASTEST_FINGER_THREE_STRIKES = "showHostCueFastestFingerThreeStrikes"
    SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES = "showHostRevealFastestFingerQuestionChoices"
    CONTESTANT_FASTEST_FINGER_CHOOSE = "contestantFastestFingerChoose"
    FASTEST_FINGER_TIME_UP = "fastestFingerTimeUp"
    SHOW_HOST_CUE_FASTEST_FINGER_ANSWER_REVEAL_AUDIO = "showHostCueFastestFingerAnswerRevealAudio"
    SHOW_HOST_REVEAL_FASTEST_FINGER_ANSWER = "showHostRevealFastestFingerAnswer"
    SHOW_HOST_REVEAL_FASTEST_FINGER_RESULTS = "showHostRevealFastestFingerResults"
    SHOW_HOST_ACCEPT_HOT_SEAT_PLAYER = "showHostAcceptHotSeatPlayer"
    SHOW_HOST_CUE_HOT_SEAT_RULES = "showHostCueHotSeatRules"
    SHOW_HOST_HIGHLIGHT_LIFELINE = "showHostHighlightLifeline"
    SHOW_HOST_CUE_HOT_SEAT_QUESTION = "showHostCueHotSeatQuestion"
    SHOW_HOST_SHOW_HOT_SEAT_QUESTION_TEXT = "showHostShowHotSeatQuestionText"
    SHOW_HOST_REVEAL_HOT_SEAT_CHOICE = "showHostRevealHotSeatChoice"
    SHOW_HOST_ASK_THE_AUDIENCE = "showHostAskTheAudience"
    SHOW_HOST_DO_FIFTY_FIFTY = "showHostDoFiftyFifty"
    SHOW_HOST_PHONE_A_FRIEND = "showHostPhoneAFriend"
    SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_VICTORY = "showHostRevealHotSeatQuestionVictory"
    SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_LOSS = "showHostRevealHotSeatQuestionLoss"
    SHOW_HOST_SHOW_SCORES = "showHostShowScores"
    CONTESTANT_CHOOSE = "contestantChoose"
    CONTESTANT_SET_CONFIDENCE = "contestantSetConfidence"
    HOT_SEAT_CHOOSE = "hotSeatChoose"
    HOT_SEAT_FINAL_ANSWER = "hotSeatFinalAnswer"
    HOT_SEAT_USE_LIFELINE = "hotSeatUseLifeline"
    HOT_SEAT_CONFIRM_LIFELINE = "hotSeatConfirmLifeline"
    HOT_SEAT_PICK_PHONE_A_FRIEND = "hotSeatPickPhoneAFriend"

    @classmethod
    def from_wire(cls, name: str) -> "SocketEvent":
        """Look up a member by wire name. Raises ValueError if unknown."""
        return cls(name)


# Messages carrying a participant's own input. They are authorized by
# role and phase inside their handlers.
PLAYER_EVENTS = frozenset({
    SocketEvent.CONTESTANT_FASTEST_FINGER_CHOOSE,
    SocketEvent.CONTESTANT_CHOOSE,
    SocketEvent.CONTESTANT_SET_CONFIDENCE,
    SocketEvent.HOT_SEAT_CHOOSE,
    SocketEvent.HOT_SEAT_USE_LIFELINE,
    SocketEvent.HOT_SEAT_PICK_PHONE_A_FRIEND,
})

# Every other message advances the show. A participant may only send one
# while a step dialog in their slot offers it.
DIALOG_EVENTS = frozenset(set(SocketEvent) - PLAYER_EVENTS)

# Outbound message names
UPDATE_GAME = "updateGame"
GAME_ERROR = "gameError"
GAME_ENDED = "gameEnded"
