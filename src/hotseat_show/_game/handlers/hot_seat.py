# Area: Game
"""
Hot Seat Handlers
=================

Phases from the hot seat rules through each question's outcome to the
end-of-round scores, plus contestant play-along answers.
"""

import logging

from ...errors import (
    GameStateError,
    InvalidChoiceError,
    InvalidInputError,
    LateSubmissionError,
    UnauthorizedEventError,
)
from ..._players.player import PlayerRole
from ..._question.hot_seat_question import (
    CORRECT_WAIT_TIMES,
    MAX_QUESTION_INDEX,
    MONEY_STRINGS,
    PAYOUTS,
    QUESTION_TEXT_WAIT_TIMES,
    get_safe_haven_payout,
)
from ..._shared import strings
from ..events import SocketEvent
from ..step_dialog import DialogAction, StepDialog

logger = logging.getLogger("hotseat_show.game_server")


def _rules_dialog(server):
    """Host may highlight each lifeline before cueing the first question."""
    state = server.state
    if state.player_show_host_present() and not state.all_lifelines_highlighted():
        server.plan_next(SocketEvent.SHOW_HOST_CUE_HOT_SEAT_QUESTION)
        return StepDialog(actions=(
            DialogAction(SocketEvent.SHOW_HOST_HIGHLIGHT_LIFELINE, strings.HIGHLIGHT_LIFELINE),
            DialogAction(SocketEvent.SHOW_HOST_CUE_HOT_SEAT_QUESTION, strings.CUE_HOT_SEAT_QUESTION),
        ))
    return server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_CUE_HOT_SEAT_QUESTION,
        strings.CUE_HOT_SEAT_QUESTION,
        5000,
    )


def cue_hot_seat_rules(server, player=None, payload=None):
    state = server.enter(SocketEvent.SHOW_HOST_CUE_HOT_SEAT_RULES)
    state.reset_fastest_finger()
    state.set_celebration_banner(None)

    state.set_show_host_step_dialog(_rules_dialog(server))
    server.update_game()


def highlight_lifeline(server, player=None, payload=None):
    state = server.enter(SocketEvent.SHOW_HOST_HIGHLIGHT_LIFELINE)
    state.highlight_next_lifeline()

    state.set_show_host_step_dialog(_rules_dialog(server))
    server.update_game()


def cue_hot_seat_question(server, player=None, payload=None):
    """'Let's play' cue. Moves on to the next question index."""
    state = server.enter(SocketEvent.SHOW_HOST_CUE_HOT_SEAT_QUESTION)
    state.set_celebration_banner(None)
    state.highlighted_lifeline = None
    if state.hot_seat_question_index >= MAX_QUESTION_INDEX:
        raise GameStateError(
            "No hot seat question left after the top prize",
            socket_event=SocketEvent.SHOW_HOST_CUE_HOT_SEAT_QUESTION.value,
            context={"hot_seat_question_index": state.hot_seat_question_index},
        )
    state.hot_seat_question_index += 1

    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_SHOW_HOT_SEAT_QUESTION_TEXT,
        strings.SHOW_HOT_SEAT_QUESTION,
        QUESTION_TEXT_WAIT_TIMES[state.hot_seat_question_index],
    ))
    server.update_game()


def show_hot_seat_question_text(server, player=None, payload=None):
    state = server.enter(SocketEvent.SHOW_HOST_SHOW_HOT_SEAT_QUESTION_TEXT)
    state.hot_seat_question = server.hot_seat_session.get_new_question(state.hot_seat_question_index)

    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE,
        strings.REVEAL_HOT_SEAT_CHOICE,
        4000,
    ))
    server.update_game()


def reveal_hot_seat_choice(server, player=None, payload=None):
    """
    Reveal the next choice; once all are shown, wait for the hot seat.

    Also where the game returns when the hot seat backs out of a final
    answer or a lifeline, or when a phone call ends.
    """
    state = server.enter(SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE)
    question = state.require_hot_seat_question()
    hot_seat_player = state.require_hot_seat_player()

    hot_seat_player.clear_all_answers()
    state.pending_lifeline = None
    question.reveal_choice()

    if not question.all_choices_revealed():
        state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE,
            strings.REVEAL_HOT_SEAT_CHOICE,
            1500,
        ))
    else:
        question.mark_start_time(server.now())
        resume_waiting(server)
    server.update_game()


def resume_waiting(server):
    """Nobody can advance the show until the hot seat answers."""
    state = server.state
    state.pending_lifeline = None
    state.set_show_host_step_dialog(None)
    state.set_hot_seat_step_dialog(None)


def hot_seat_choose(server, player, payload):
    """Record the hot seat's choice and ask whether it is final."""
    state = server.state
    event = SocketEvent.HOT_SEAT_CHOOSE.value

    if state.get_role(player) is not PlayerRole.HOT_SEAT:
        raise UnauthorizedEventError(event, player.username, "only the hot seat player may answer")
    if not state.awaiting_hot_seat_choice():
        raise LateSubmissionError(event, player.username, "not accepting hot seat answers now")
    if state.pending_lifeline is not None:
        raise InvalidInputError(event, player.username, "a lifeline is in progress")
    if player.has_hot_seat_choice():
        raise InvalidInputError(event, player.username, "choice is waiting for confirmation")
    question = state.hot_seat_question
    if question.is_choice_removed(payload.choice):
        raise InvalidChoiceError(event, player.username, f"choice {payload.choice.name} was removed")

    state = server.enter(SocketEvent.HOT_SEAT_CHOOSE)
    player.choose_hot_seat(payload.choice, question.question.elapsed_since_start(server.now()))

    dialog = server.get_yes_no_dialog(
        SocketEvent.HOT_SEAT_FINAL_ANSWER,
        SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE,
        strings.HOT_SEAT_FINAL_ANSWER,
    )
    if state.player_show_host_present():
        state.set_hot_seat_step_dialog(None)
        state.set_show_host_step_dialog(dialog)
    else:
        state.set_show_host_step_dialog(None)
        state.set_hot_seat_step_dialog(dialog)
    server.update_game()


def hot_seat_final_answer(server, player=None, payload=None):
    """Lock the answer in. Only the show host learns the outcome for now."""
    state = server.enter(SocketEvent.HOT_SEAT_FINAL_ANSWER)
    question = state.require_hot_seat_question()
    hot_seat_player = state.require_hot_seat_player()
    if hot_seat_player.hot_seat_choice is None:
        raise GameStateError(
            "Final answer without a hot seat choice",
            socket_event=SocketEvent.HOT_SEAT_FINAL_ANSWER.value,
            context={"hot_seat_player": hot_seat_player.username},
        )

    question.reveal_correct_choice_for_show_host()
    state.set_hot_seat_step_dialog(None)

    correct = question.answer_is_correct(hot_seat_player.hot_seat_choice)
    logger.info(
        f"{hot_seat_player.username} answered {hot_seat_player.hot_seat_choice.name} "
        f"on question {state.hot_seat_question_index + 1}: "
        f"{'correct' if correct else 'wrong'}"
    )
    if correct:
        dialog = server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_VICTORY,
            strings.HOT_SEAT_VICTORY,
            question.final_answer_wait_ms,
        )
    else:
        dialog = server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_LOSS,
            strings.HOT_SEAT_LOSS,
            question.final_answer_wait_ms,
        )
    state.set_show_host_step_dialog(dialog)
    server.update_game()


def reveal_hot_seat_question_victory(server, player=None, payload=None):
    """Show the outcome to everyone, then celebrate after a short pause."""
    state = server.enter(SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_VICTORY)
    question = state.require_hot_seat_question()
    state.set_show_host_step_dialog(None)
    state.set_hot_seat_step_dialog(None)
    question.reveal_correct_choice_for_all()
    state.score_contestants()
    server.update_game()

    server.arm_forced(
        lambda: reveal_hot_seat_question_victory_continuation(server, question),
        1000,
        label="victoryContinuation",
    )


def reveal_hot_seat_question_victory_continuation(server, question):
    """Banner with the money won, then the next question or the scores."""
    state = server.state
    if state is None or state.hot_seat_question is not question:
        logger.debug("Victory continuation for a stale question ignored")
        return

    index = state.hot_seat_question_index
    state.set_celebration_banner({"header": "", "text": MONEY_STRINGS[index]})
    state.round_winnings = PAYOUTS[index]
    state.reset_hot_seat_question()

    if index >= MAX_QUESTION_INDEX:
        dialog = server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_SHOW_SCORES,
            strings.SHOW_SCORES,
            CORRECT_WAIT_TIMES[index],
        )
    else:
        dialog = server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_CUE_HOT_SEAT_QUESTION,
            strings.CUE_HOT_SEAT_QUESTION,
            CORRECT_WAIT_TIMES[index],
        )
    state.set_show_host_step_dialog(dialog)
    server.update_game()


def reveal_hot_seat_question_loss(server, player=None, payload=None):
    """Show the outcome to everyone and fall back to the safe haven."""
    state = server.enter(SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_LOSS)
    question = state.require_hot_seat_question()
    state.set_show_host_step_dialog(None)
    state.set_hot_seat_step_dialog(None)
    question.reveal_correct_choice_for_all()
    state.score_contestants()

    state.round_winnings = get_safe_haven_payout(state.hot_seat_question_index)
    state.set_celebration_banner({
        "header": strings.TOTAL_WINNINGS,
        "text": f"${state.round_winnings:,}",
    })

    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_SHOW_SCORES,
        strings.SHOW_SCORES,
        5000,
    ))
    server.update_game()


def show_scores(server, player=None, payload=None):
    """Bank the round's winnings, then start the next round."""
    state = server.enter(SocketEvent.SHOW_HOST_SHOW_SCORES)
    hot_seat_player = state.hot_seat_player
    if hot_seat_player is not None:
        hot_seat_player.money += state.round_winnings
        logger.info(
            f"{hot_seat_player.username} banks ${state.round_winnings:,} "
            f"(total ${hot_seat_player.money:,})"
        )
    state.round_winnings = 0
    state.set_celebration_banner(None)
    state.reset_hot_seat_question()

    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_SHOW_FASTEST_FINGER_RULES,
        strings.NEXT_ROUND,
        10000,
    ))
    server.update_game()


def contestant_choose(server, player, payload):
    """A contestant plays along with the hot seat question. One choice, locked."""
    state = server.state
    event = SocketEvent.CONTESTANT_CHOOSE.value

    if state.get_role(player) is not PlayerRole.CONTESTANT:
        raise UnauthorizedEventError(event, player.username, "only contestants play along")
    if not state.awaiting_hot_seat_choice():
        raise LateSubmissionError(event, player.username, "not accepting contestant answers now")
    if player.has_hot_seat_choice():
        raise InvalidInputError(event, player.username, "choice already locked in")
    question = state.hot_seat_question
    if question.is_choice_removed(payload.choice):
        raise InvalidChoiceError(event, player.username, f"choice {payload.choice.name} was removed")

    player.choose_hot_seat(payload.choice, question.question.elapsed_since_start(server.now()))
    if player is state.phone_a_friend:
        # The hot seat and the host hear the friend's answer
        server.update_game()
    else:
        server.update_game_for_player(player)
