# Area: Game
"""
hotseat_show._game.snapshot — Per-viewer client state
======================================================

Builds the ``updateGame`` payload for one viewer. Each viewer only sees
what their role may see: their own step dialog, their own answers, and
the correct hot seat choice only once it has been revealed to them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from .._players.player import Player, PlayerRole
from .._question.lifelines import LIFELINE_ORDER

if TYPE_CHECKING:
    from .server_state import ServerState


def build_client_state(state: "ServerState", viewer: Player,
                       socket_event: Optional[Any]) -> Dict[str, Any]:
    """Build the compressed client state for ``viewer``."""
    role = state.get_role(viewer)
    dialog = state.get_step_dialog_for(viewer)
    return {
        "socket_event": getattr(socket_event, "value", socket_event),
        "round": state.round_number,
        "username": viewer.username,
        "role": role.value,
        "players": [_player_view(state, player) for player in state.player_map],
        "show_host": state.show_host.username if state.show_host else None,
        "hot_seat_player": state.hot_seat_player.username if state.hot_seat_player else None,
        "step_dialog": dialog.to_compressed() if dialog is not None else None,
        "celebration_banner": state.celebration_banner,
        "fastest_finger_question": _fastest_finger_view(state, viewer),
        "hot_seat_question": _hot_seat_view(state, viewer, role),
        "hot_seat_question_index": state.hot_seat_question_index,
        "winnings": state.round_winnings,
        "lifelines": {
            lifeline.value: lifeline in state.lifelines_used for lifeline in LIFELINE_ORDER
        },
        "highlighted_lifeline": (
            state.highlighted_lifeline.value if state.highlighted_lifeline else None
        ),
        "pending_lifeline": state.pending_lifeline.value if state.pending_lifeline else None,
        "audience_results": state.audience_results,
        "phone_a_friend": _phone_a_friend_view(state, viewer, role),
    }


def _player_view(state: "ServerState", player: Player) -> Dict[str, Any]:
    view = player.to_compressed()
    view["role"] = state.get_role(player).value
    return view


def _fastest_finger_view(state: "ServerState", viewer: Player) -> Optional[Dict[str, Any]]:
    question = state.fastest_finger_question
    if question is None:
        return None
    return question.to_compressed(viewer.fastest_finger_choices)


def _hot_seat_view(state: "ServerState", viewer: Player,
                   role: PlayerRole) -> Optional[Dict[str, Any]]:
    question = state.hot_seat_question
    if question is None:
        return None
    if role is PlayerRole.CONTESTANT:
        made_choice = viewer.hot_seat_choice
    else:
        made_choice = state.hot_seat_player.hot_seat_choice if state.hot_seat_player else None
    show_correct = question.correct_choice_revealed_for_all or (
        role is PlayerRole.SHOW_HOST and question.correct_choice_revealed_for_show_host
    )
    return question.to_compressed(made_choice, show_correct)


def _phone_a_friend_view(state: "ServerState", viewer: Player,
                         role: PlayerRole) -> Optional[Dict[str, Any]]:
    friend = state.phone_a_friend
    if friend is None:
        return None
    view: Dict[str, Any] = {"username": friend.username}
    # Only the call participants and the host hear the friend's answer
    if role is not PlayerRole.CONTESTANT or viewer is friend:
        view["choice"] = int(friend.hot_seat_choice) if friend.hot_seat_choice is not None else None
        view["confidence"] = friend.confidence.value if friend.confidence else None
    return view
