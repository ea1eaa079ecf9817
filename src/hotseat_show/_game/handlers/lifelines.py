# Area: Game
"""
Lifeline Handlers
=================

Fifty-fifty, ask the audience and phone a friend. Each lifeline can be
used once per round, only while the hot seat has not picked a choice.
"""

import logging

from ...errors import GameStateError, InvalidInputError, UnauthorizedEventError
from ..._players.player import PlayerRole
from ..._question.lifelines import Lifeline, simulate_audience, tally_votes
from ..._shared import strings
from ..events import SocketEvent
from ..step_dialog import StepDialog
from .hot_seat import resume_waiting

logger = logging.getLogger("hotseat_show.game_server")


def hot_seat_use_lifeline(server, player, payload):
    """The hot seat asks for a lifeline; they must confirm it first."""
    state = server.state
    event = SocketEvent.HOT_SEAT_USE_LIFELINE.value
    lifeline = payload.lifeline

    if state.get_role(player) is not PlayerRole.HOT_SEAT:
        raise UnauthorizedEventError(event, player.username, "only the hot seat player has lifelines")
    if not state.awaiting_hot_seat_choice() or player.has_hot_seat_choice():
        raise InvalidInputError(event, player.username, "lifelines are only available before choosing")
    if state.pending_lifeline is not None:
        raise InvalidInputError(event, player.username, "a lifeline is already in progress")
    if not state.lifeline_available(lifeline):
        raise InvalidInputError(event, player.username, f"{lifeline.value} is not available")

    state = server.enter(SocketEvent.HOT_SEAT_USE_LIFELINE)
    state.pending_lifeline = lifeline
    state.set_show_host_step_dialog(None)
    state.set_hot_seat_step_dialog(server.get_yes_no_dialog(
        SocketEvent.HOT_SEAT_CONFIRM_LIFELINE,
        SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE,
        strings.USE_LIFELINE,
    ))
    server.update_game()


def hot_seat_confirm_lifeline(server, player=None, payload=None):
    """Spend the pending lifeline and start it."""
    state = server.enter(SocketEvent.HOT_SEAT_CONFIRM_LIFELINE)
    lifeline = state.pending_lifeline
    if lifeline is None:
        raise GameStateError(
            "Lifeline confirmed with none pending",
            socket_event=SocketEvent.HOT_SEAT_CONFIRM_LIFELINE.value,
        )

    state.lifelines_used.add(lifeline)
    state.set_hot_seat_step_dialog(None)
    logger.info(f"Lifeline used: {lifeline.value}")

    if lifeline is Lifeline.FIFTY_FIFTY:
        state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_DO_FIFTY_FIFTY,
            strings.DO_FIFTY_FIFTY,
            2000,
        ))
    elif lifeline is Lifeline.ASK_THE_AUDIENCE:
        state.audience_poll_open = True
        state.audience_results = None
        state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
            SocketEvent.SHOW_HOST_ASK_THE_AUDIENCE,
            strings.CLOSE_AUDIENCE_POLL,
            10000,
        ))
    else:
        state.set_show_host_step_dialog(None)
        state.set_hot_seat_step_dialog(StepDialog(header=strings.PICK_PHONE_A_FRIEND))
    server.update_game()


def show_host_do_fifty_fifty(server, player=None, payload=None):
    state = server.enter(SocketEvent.SHOW_HOST_DO_FIFTY_FIFTY)
    question = state.require_hot_seat_question()
    removed = question.apply_fifty_fifty(state.rng)
    logger.info(f"Fifty-fifty removed {[c.name for c in removed]}")
    resume_waiting(server)
    server.update_game()


def show_host_ask_the_audience(server, player=None, payload=None):
    """Close the poll. Contestant votes count; a studio audience fills in otherwise."""
    state = server.enter(SocketEvent.SHOW_HOST_ASK_THE_AUDIENCE)
    question = state.require_hot_seat_question()
    votes = [p.hot_seat_choice for p in state.contestants() if p.hot_seat_choice is not None]

    if votes:
        state.audience_results = tally_votes(votes, question.removed_choices)
    else:
        state.audience_results = simulate_audience(
            question.get_correct_choice(),
            question.question_index,
            question.removed_choices,
            state.rng,
        )
    state.audience_poll_open = False
    logger.info(f"Audience poll: {state.audience_results}")
    resume_waiting(server)
    server.update_game()


def hot_seat_pick_phone_a_friend(server, player, payload):
    """The hot seat names the contestant to call."""
    state = server.state
    event = SocketEvent.HOT_SEAT_PICK_PHONE_A_FRIEND.value

    if state.get_role(player) is not PlayerRole.HOT_SEAT:
        raise UnauthorizedEventError(event, player.username, "only the hot seat player can phone a friend")
    if state.pending_lifeline is not Lifeline.PHONE_A_FRIEND \
            or Lifeline.PHONE_A_FRIEND not in state.lifelines_used \
            or state.phone_a_friend is not None:
        raise InvalidInputError(event, player.username, "no phone call to place")
    friend = state.player_map.get_player_by_username(payload.username)
    if friend is None or friend not in state.contestants():
        raise InvalidInputError(event, player.username, f"{payload.username} cannot be called")

    state = server.enter(SocketEvent.HOT_SEAT_PICK_PHONE_A_FRIEND)
    state.phone_a_friend = friend
    friend.confidence = None
    state.set_hot_seat_step_dialog(None)
    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_PHONE_A_FRIEND,
        strings.PHONE_A_FRIEND,
        2000,
    ))
    server.update_game()


def show_host_phone_a_friend(server, player=None, payload=None):
    """The call is live until the host or the clock ends it."""
    state = server.enter(SocketEvent.SHOW_HOST_PHONE_A_FRIEND)
    if state.phone_a_friend is None:
        raise GameStateError(
            "Phone call started with no friend picked",
            socket_event=SocketEvent.SHOW_HOST_PHONE_A_FRIEND.value,
        )
    state.set_show_host_step_dialog(server.get_one_choice_host_step_dialog(
        SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE,
        strings.END_PHONE_CALL,
        30000,
    ))
    server.update_game()


def contestant_set_confidence(server, player, payload):
    """The phoned friend says how sure they are."""
    state = server.state
    event = SocketEvent.CONTESTANT_SET_CONFIDENCE.value

    if player is not state.phone_a_friend \
            or server.current_socket_event is not SocketEvent.SHOW_HOST_PHONE_A_FRIEND:
        raise UnauthorizedEventError(event, player.username, "only a friend on the phone can answer")

    player.set_confidence(payload.confidence)
    server.update_game()
