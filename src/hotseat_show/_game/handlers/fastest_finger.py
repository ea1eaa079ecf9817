# Area: Game
"""
Fastest Finger Handlers
=======================

Phases from the fastest finger rules up to seating the winner.
"""

import logging

from ...errors import InvalidChoiceError, InvalidInputError, LateSubmissionError, UnauthorizedEventError
from ..._players.player import PlayerRole
from ..._shared import strings
from ..events import SocketEvent

logger = logging.getLogger("hotseat_show.game_server")


def show_fastest_finger_rules(server, player=None, payload=None):
    """First phase of every round."""
    state = server.enter(SocketEvent.SHOW_HOST_SHOW_FASTEST_FINGER_RULES)
    state.start_new_round()
    server.phase_logger.set_round(state.round_number)

    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_QUESTION,
        strings.CUE_FASTEST_FINGER_MUSIC,
        5000,
    ))
    server.update_game()


def cue_fastest_finger_question(server, player=None, payload=None):
    """Audio cue only. Also where a round with no qualifier starts over."""
    state = server.enter(SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_QUESTION)
    state.reset_fastest_finger()
    state.set_celebration_banner(None)

    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_SHOW_FASTEST_FINGER_QUESTION_TEXT,
        strings.SHOW_FASTEST_FINGER_QUESTION,
        3000,
    ))
    server.update_game()


def show_fastest_finger_question_text(server, player=None, payload=None):
    state = server.enter(SocketEvent.SHOW_HOST_SHOW_FASTEST_FINGER_QUESTION_TEXT)
    state.fastest_finger_question = server.fastest_finger_session.get_new_question()

    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_THREE_STRIKES,
        strings.REVEAL_FASTEST_FINGER_CHOICE,
        8000,
    ))
    server.update_game()


def cue_fastest_finger_three_strikes(server, player=None, payload=None):
    """Three strikes audio, then the choices are revealed no matter what."""
    state = server.enter(SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_THREE_STRIKES)
    state.set_show_host_step_dialog(None)
    server.update_game()

    server.arm_forced(SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES, 2500)


def reveal_fastest_finger_question_choices(server, player=None, payload=None):
    """Reveal all four choices and open the answer window."""
    state = server.enter(SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES)
    question = state.fastest_finger_question
    question.reveal_all_choices()
    question.mark_start_time(server.now())
    state.set_show_host_step_dialog(None)
    server.update_game()

    server.arm_forced(SocketEvent.FASTEST_FINGER_TIME_UP, 10000)


def contestant_fastest_finger_choose(server, player, payload):
    """
    Lock one more choice into a contestant's ordering.

    Only accepted while the answer window is open. Once every contestant
    has a complete ordering the window closes early.
    """
    state = server.state
    event = SocketEvent.CONTESTANT_FASTEST_FINGER_CHOOSE.value

    if state.get_role(player) is PlayerRole.SHOW_HOST:
        raise UnauthorizedEventError(event, player.username, "the show host does not compete")
    if server.current_socket_event is not SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES:
        raise LateSubmissionError(event, player.username, "fastest finger answers are closed")
    if player.fastest_finger_locked():
        raise InvalidInputError(event, player.username, "ordering already locked in")
    if payload.choice in player.fastest_finger_choices:
        raise InvalidChoiceError(event, player.username, f"choice {payload.choice.name} already placed")

    question = state.fastest_finger_question
    player.choose_fastest_finger(payload.choice, question.question.elapsed_since_start(server.now()))
    state.record_fastest_finger_lock(player)
    logger.debug(f"{player.username} fastest finger: {[c.name for c in player.fastest_finger_choices]}")
    server.update_game_for_player(player)

    if state.all_players_done_with_fastest_finger():
        server.trigger(SocketEvent.FASTEST_FINGER_TIME_UP)


def fastest_finger_time_up(server, player=None, payload=None):
    """
    Close the answer window.

    Reached either from the forced timer or from the last ordering
    locking in; whichever comes second finds the window already closed.
    """
    server.cancel_forced()
    if server.current_socket_event is not SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES:
        logger.debug("Fastest finger window already closed")
        return

    state = server.enter(SocketEvent.FASTEST_FINGER_TIME_UP)
    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_ANSWER_REVEAL_AUDIO,
        strings.CUE_FASTEST_FINGER_ANSWER_REVEAL_AUDIO,
        2500,
    ))
    server.update_game()


def cue_fastest_finger_answer_reveal_audio(server, player=None, payload=None):
    state = server.enter(SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_ANSWER_REVEAL_AUDIO)
    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_ANSWER,
        strings.REVEAL_FASTEST_FINGER_ANSWER,
        2500,
    ))
    server.update_game()


def reveal_fastest_finger_answer(server, player=None, payload=None):
    """Reveal the next choice of the true ordering; repeats until all four are out."""
    state = server.enter(SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_ANSWER)
    question = state.fastest_finger_question
    question.reveal_answer()

    if question.revealed_all_answers():
        dialog = server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_RESULTS,
            strings.REVEAL_FASTEST_FINGER_RESULTS,
            2000,
        )
    else:
        dialog = server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_ANSWER,
            strings.REVEAL_FASTEST_FINGER_ANSWER,
            2000,
        )
    state.set_show_host_step_dialog(dialog)
    server.update_game()


def reveal_fastest_finger_results(server, player=None, payload=None):
    """Grade every ordering. With no complete ordering, a new question is asked."""
    state = server.enter(SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_RESULTS)
    winner = state.grade_fastest_finger()

    if winner is not None:
        dialog = server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_ACCEPT_HOT_SEAT_PLAYER,
            strings.ACCEPT_HOT_SEAT_PLAYER,
            3000,
        )
    else:
        state.set_celebration_banner({"header": strings.NO_FASTEST_FINGER_WINNER, "text": ""})
        dialog = server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_QUESTION,
            strings.CUE_FASTEST_FINGER_MUSIC,
            3000,
        )
    state.set_show_host_step_dialog(dialog)
    server.update_game()


def accept_hot_seat_player(server, player=None, payload=None):
    """Fanfare for the fastest finger winner."""
    state = server.enter(SocketEvent.SHOW_HOST_ACCEPT_HOT_SEAT_PLAYER)
    hot_seat_player = state.require_hot_seat_player()
    state.set_celebration_banner({
        "header": strings.FASTEST_FINGER_WINNER,
        "text": hot_seat_player.username,
    })

    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_CUE_HOT_SEAT_RULES,
        strings.SHOW_HOT_SEAT_RULES,
        10000,
    ))
    server.update_game()
