# Area: Game
"""
Game Phase Handlers
===================

One handler per inbound message name. Every handler takes
``(server, player, payload)``; ``player`` is None when a timer fired it.
"""

from ..events import SocketEvent
from .fastest_finger import (
    show_fastest_finger_rules,
    cue_fastest_finger_question,
    show_fastest_finger_question_text,
    cue_fastest_finger_three_strikes,
    reveal_fastest_finger_question_choices,
    contestant_fastest_finger_choose,
    fastest_finger_time_up,
    cue_fastest_finger_answer_reveal_audio,
    reveal_fastest_finger_answer,
    reveal_fastest_finger_results,
    accept_hot_seat_player,
)
from .hot_seat import (
    cue_hot_seat_rules,
    highlight_lifeline,
    cue_hot_seat_question,
    show_hot_seat_question_text,
    reveal_hot_seat_choice,
    hot_seat_choose,
    hot_seat_final_answer,
    reveal_hot_seat_question_victory,
    reveal_hot_seat_question_victory_continuation,
    reveal_hot_seat_question_loss,
    show_scores,
    contestant_choose,
)
from .lifelines import (
    hot_seat_use_lifeline,
    hot_seat_confirm_lifeline,
    show_host_do_fifty_fifty,
    show_host_ask_the_audience,
    hot_seat_pick_phone_a_friend,
    show_host_phone_a_friend,
    contestant_set_confidence,
)

PHASE_HANDLERS = {
    SocketEvent.SHOW_HOST_SHOW_FASTEST_FINGER_RULES: show_fastest_finger_rules,
    SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_QUESTION: cue_fastest_finger_question,
    SocketEvent.SHOW_HOST_SHOW_FASTEST_FINGER_QUESTION_TEXT: show_fastest_finger_question_text,
    SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_THREE_STRIKES: cue_fastest_finger_three_strikes,
    SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES: reveal_fastest_finger_question_choices,
    SocketEvent.CONTESTANT_FASTEST_FINGER_CHOOSE: contestant_fastest_finger_choose,
    SocketEvent.FASTEST_FINGER_TIME_UP: fastest_finger_time_up,
    SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_ANSWER_REVEAL_AUDIO: cue_fastest_finger_answer_reveal_audio,
    SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_ANSWER: reveal_fastest_finger_answer,
    SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_RESULTS: reveal_fastest_finger_results,
    SocketEvent.SHOW_HOST_ACCEPT_HOT_SEAT_PLAYER: accept_hot_seat_player,
    SocketEvent.SHOW_HOST_CUE_HOT_SEAT_RULES: cue_hot_seat_rules,
    SocketEvent.SHOW_HOST_HIGHLIGHT_LIFELINE: highlight_lifeline,
    SocketEvent.SHOW_HOST_CUE_HOT_SEAT_QUESTION: cue_hot_seat_question,
    SocketEvent.SHOW_HOST_SHOW_HOT_SEAT_QUESTION_TEXT: show_hot_seat_question_text,
    SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE: reveal_hot_seat_choice,
    SocketEvent.SHOW_HOST_ASK_THE_AUDIENCE: show_host_ask_the_audience,
    SocketEvent.SHOW_HOST_DO_FIFTY_FIFTY: show_host_do_fifty_fifty,
    SocketEvent.SHOW_HOST_PHONE_A_FRIEND: show_host_phone_a_friend,
    SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_VICTORY: reveal_hot_seat_question_victory,
    SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_LOSS: reveal_hot_seat_question_loss,
    SocketEvent.SHOW_HOST_SHOW_SCORES: show_scores,
    SocketEvent.CONTESTANT_CHOOSE: contestant_choose,
    SocketEvent.CONTESTANT_SET_CONFIDENCE: contestant_set_confidence,
    SocketEvent.HOT_SEAT_CHOOSE: hot_seat_choose,
    SocketEvent.HOT_SEAT_FINAL_ANSWER: hot_seat_final_answer,
    SocketEvent.HOT_SEAT_USE_LIFELINE: hot_seat_use_lifeline,
    SocketEvent.HOT_SEAT_CONFIRM_LIFELINE: hot_seat_confirm_lifeline,
    SocketEvent.HOT_SEAT_PICK_PHONE_A_FRIEND: hot_seat_pick_phone_a_friend,
}

__all__ = [
    "PHASE_HANDLERS",
    "reveal_hot_seat_question_victory_continuation",
]
