# Area: Game
"""
hotseat_show._game.game_server — Game flow controller
======================================================

Routes inbound participant messages to phase handlers, decides for each
phase whether the show host or a timer moves the game on, and pushes a
filtered state snapshot to every participant after each change.

All work happens on one control thread: inbound messages are handled one
at a time and timers only fire from ``tick()``.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, Optional, Tuple, Union

from ..errors import (
    GameStateError,
    InvalidGameOptionsError,
    InvalidInputError,
    QuestionBankExhaustedError,
    UnauthorizedEventError,
)
from .._players.player import Player, PlayerRole
from .._players.player_map import PlayerMap
from .._players.sockets import GameSocket
from .._question.question_session import FastestFingerSession, HotSeatSession
from .._shared import strings
from .._shared.logging_config import log_game_error
from .._shared.phase_logger import get_phase_logger
from .events import DIALOG_EVENTS, GAME_ENDED, GAME_ERROR, UPDATE_GAME, SocketEvent
from .handlers import PHASE_HANDLERS
from .payloads import EmptyPayload, GameOptions, validate_payload
from .server_state import ServerState
from .step_dialog import DialogAction, StepDialog
from .timers import FORCED, TimerRegistry

logger = logging.getLogger("hotseat_show.game_server")

# Wait before the show carries on by itself after the host drops out
HOST_HANDOFF_WAIT_MS = 3000

GAME_ENDING_ERRORS = (QuestionBankExhaustedError, GameStateError)


class GameServer:
    """
    Server side of one game session.

    Parameters
    ----------
    player_map : PlayerMap
        Participants of the session.
    fastest_finger_session, hot_seat_session :
        Question supplies. Default to the bundled banks.
    time_scale : float
        Multiplies every automatic wait.
    rng : random.Random, optional
        Source of randomness for shuffles, lifelines and question picks.
    """

    def __init__(
        self,
        player_map: PlayerMap,
        fastest_finger_session: Optional[FastestFingerSession] = None,
        hot_seat_session: Optional[HotSeatSession] = None,
        time_scale: float = 1.0,
        rng: Optional[random.Random] = None,
    ):
        self.player_map = player_map
        self.rng = rng or random.Random()
        self.fastest_finger_session = fastest_finger_session or FastestFingerSession.from_file(rng=self.rng)
        self.hot_seat_session = hot_seat_session or HotSeatSession.from_file(rng=self.rng)
        self.timers = TimerRegistry(time_scale)
        self.phase_logger = get_phase_logger()

        self.state: Optional[ServerState] = None
        # Kept so participants who reconnect land in the right phase
        self.current_socket_event: Optional[SocketEvent] = None
        self._advanced_by = "timer"
        # Phase line waiting for the next advancement to be installed
        self._phase_entry: Optional[Tuple[str, str]] = None
        self._next_phase: Optional[Tuple[str, Optional[int]]] = None

    # ══════════════════════════════════════════════════════════
    # GAME LIFECYCLE
    # ══════════════════════════════════════════════════════════

    def is_in_game(self) -> bool:
        return self.state is not None

    def game_options_are_valid(self, options: Union[GameOptions, Dict[str, Any], None]) -> bool:
        """A host needs someone to host for, and somebody has to play."""
        return self._options_problem(self._coerce_options(options)) is None

    def _options_problem(self, options: GameOptions) -> Optional[str]:
        active = self.player_map.get_active_player_count()
        host_name = options.show_host_username
        if host_name is not None:
            host = self.player_map.get_player_by_username(host_name)
            if host is None or not host.active:
                return f"show host '{host_name}' is not connected"
            if active <= 1:
                return "a hosted game needs at least one contestant besides the host"
            active -= 1
        if active < 1:
            return "no active contestant"
        return None

    @staticmethod
    def _coerce_options(options: Union[GameOptions, Dict[str, Any], None]) -> GameOptions:
        if isinstance(options, GameOptions):
            return options
        return GameOptions.model_validate(options or {})

    def start_game(self, options: Union[GameOptions, Dict[str, Any], None] = None) -> None:
        """
        Start a game and enter the first phase.

        Raises
        ------
        InvalidGameOptionsError
            If the options cannot be satisfied by the connected players.
        """
        options = self._coerce_options(options)
        problem = self._options_problem(options)
        if problem is not None:
            raise InvalidGameOptionsError(problem, options.model_dump())
        if self.is_in_game():
            logger.warning("Starting a new game over a running one")
            self.end_game()

        self.state = ServerState(self.player_map, self.timers, rng=self.rng)
        self.state.set_show_host_by_username(options.show_host_username)
        self.current_socket_event = None
        logger.info(
            f"Game started with {self.player_map.get_active_player_count()} players, "
            f"show host: {options.show_host_username or 'none'}"
        )
        self._run_phase(SocketEvent.SHOW_HOST_SHOW_FASTEST_FINGER_RULES, advanced_by="timer")

    def end_game(self, reason: Optional[str] = None) -> None:
        """Discard the game, cancel every timer and reset all players."""
        self.timers.clear()
        if self.state is not None:
            logger.info(f"Game ended after round {self.state.round_number}"
                        + (f": {reason}" if reason else ""))
        self.state = None
        self.current_socket_event = None
        self.player_map.remove_inactive_players()
        self.player_map.do_all(lambda player: player.reset())

    def _abort_game(self, error: Exception) -> None:
        log_game_error(error)
        self.phase_logger.log_error(str(error))
        self.end_game(reason=error.__class__.__name__)
        self.player_map.emit_to_all(GAME_ENDED, {
            "reason": error.__class__.__name__,
            "message": str(error),
        })

    # ══════════════════════════════════════════════════════════
    # CONNECTIONS
    # ══════════════════════════════════════════════════════════

    def activate_listeners_for_socket(self, socket: GameSocket) -> None:
        for event in SocketEvent:
            socket.on(event.value, self._make_listener(socket, event))

    def _make_listener(self, socket: GameSocket, event: SocketEvent) -> Callable[[Any], None]:
        def listener(data: Any = None) -> None:
            self.handle_socket_event(socket, event, data)
        return listener

    def deactivate_listeners_for_socket(self, socket: GameSocket) -> None:
        for event in SocketEvent:
            socket.remove_all_listeners(event.value)

    def connect(self, username: str, socket: GameSocket) -> Player:
        """Join or rejoin a participant and catch them up on a running game."""
        player = self.player_map.add_player(username, socket)
        self.activate_listeners_for_socket(socket)
        if self.is_in_game():
            self.update_game_for_socket(socket)
        return player

    def disconnect(self, socket: GameSocket) -> Optional[Player]:
        """Mark a participant gone. A departing host hands the controls to the clock."""
        self.deactivate_listeners_for_socket(socket)
        player = self.player_map.deactivate_player(socket)
        if player is not None and self.is_in_game() and player is self.state.show_host:
            self._hand_off_host_dialog()
            self.update_game()
        return player

    def _hand_off_host_dialog(self) -> None:
        state = self.state
        dialog = state.show_host_step_dialog
        if dialog is None or not dialog.actions:
            return
        if dialog.offers(SocketEvent.HOT_SEAT_FINAL_ANSWER):
            state.set_show_host_step_dialog(None)
            state.set_hot_seat_step_dialog(dialog)
            return
        # Skip optional actions such as highlighting lifelines
        last = dialog.actions[-1]
        state.set_show_host_step_dialog(
            self.get_one_choice_host_step_dialog(last.socket_event, last.text, HOST_HANDOFF_WAIT_MS)
        )

    # ══════════════════════════════════════════════════════════
    # BROADCAST
    # ══════════════════════════════════════════════════════════

    def update_game(self) -> None:
        """Emit a customized snapshot to every active participant."""
        state = self.state
        self.player_map.emit_custom_to_all(
            UPDATE_GAME,
            lambda player: state.to_compressed_client_state(player, self.current_socket_event),
        )

    def update_game_for_socket(self, socket: GameSocket) -> None:
        """Emit a snapshot solely to the given socket."""
        player = self.player_map.get_player_by_socket(socket)
        if self.state is None or player is None:
            return
        socket.emit(UPDATE_GAME, self.state.to_compressed_client_state(player, self.current_socket_event))

    def update_game_for_player(self, player: Player) -> None:
        if player.socket is None:
            return
        try:
            self.update_game_for_socket(player.socket)
        except Exception as e:
            logger.warning(f"Failed to update {player.username}: {e}")

    # ══════════════════════════════════════════════════════════
    # STEP DIALOGS AND TIMERS
    # ══════════════════════════════════════════════════════════

    def get_one_choice_host_step_dialog(self, next_event: SocketEvent, host_label: str,
                                        auto_timeout_ms: int) -> StepDialog:
        """
        Host button for ``next_event`` if a host is present, otherwise a
        timer that fires ``next_event`` after ``auto_timeout_ms``.
        """
        if self.state.player_show_host_present():
            self.plan_next(next_event)
            return StepDialog(actions=(DialogAction(next_event, host_label),))
        self.plan_next(next_event, auto_timeout_ms)
        return StepDialog(
            timeout_func=self._timer_callback(next_event, "timer"),
            timeout_ms=auto_timeout_ms,
        )

    def get_yes_no_dialog(self, yes_event: SocketEvent, no_event: SocketEvent,
                          header: Optional[str] = None) -> StepDialog:
        self.plan_next(yes_event)
        return StepDialog(
            actions=(DialogAction(yes_event, strings.YES), DialogAction(no_event, strings.NO)),
            header=header,
        )

    def _timer_callback(self, event: SocketEvent, advanced_by: str) -> Callable[[], None]:
        def fire() -> None:
            self._run_phase(event, advanced_by=advanced_by)
        return fire

    def arm_forced(self, target: Union[SocketEvent, Callable[[], None]], delay_ms: int,
                   label: Optional[str] = None) -> None:
        """Schedule a continuation nobody can skip."""
        if isinstance(target, SocketEvent):
            callback = self._timer_callback(target, "forced")
            label = label or target.value
        else:
            continuation = target

            def callback() -> None:
                self._guarded(continuation)
        self.plan_next(label or "forced", delay_ms)
        self.timers.arm(FORCED, delay_ms, callback, label=label or "forced")

    def cancel_forced(self) -> bool:
        return self.timers.cancel(FORCED)

    def now(self) -> float:
        return self.timers.now()

    def tick(self) -> int:
        """Fire every expired timer. Returns how many fired."""
        if self.state is None:
            return 0
        return self.timers.fire_expired()

    # ══════════════════════════════════════════════════════════
    # DISPATCH
    # ══════════════════════════════════════════════════════════

    def enter(self, event: SocketEvent) -> ServerState:
        """Record entry into a phase. Returns the live state."""
        self._flush_phase_log(next_event=event.value)
        self.current_socket_event = event
        logger.info(event.value)
        self._phase_entry = (event.value, self._advanced_by)
        self._next_phase = None
        return self.state

    def plan_next(self, next_event: Union[SocketEvent, str], wait_ms: Optional[int] = None) -> None:
        """Note what advances the current phase. ``wait_ms`` is None for a button."""
        self._next_phase = (getattr(next_event, "value", next_event), wait_ms)

    def _flush_phase_log(self, next_event: Optional[str] = None) -> None:
        if self._phase_entry is None:
            return
        phase, advanced_by = self._phase_entry
        self._phase_entry = None
        planned = self._next_phase
        if planned is None and next_event is not None:
            # Handed straight on to another phase
            planned = (next_event, 0)
        upcoming, wait_ms = planned or (None, None)
        self.phase_logger.log_phase(phase, advanced_by, next_event=upcoming, wait_ms=wait_ms)

    def trigger(self, event: SocketEvent, player: Optional[Player] = None,
                payload: Any = None) -> None:
        """Run a handler directly from inside another handler."""
        PHASE_HANDLERS[event](self, player, payload if payload is not None else EmptyPayload())

    def handle_socket_event(self, socket: Optional[GameSocket], event: SocketEvent,
                            data: Any = None) -> None:
        """
        Handle one inbound message.

        Rejected messages leave the game untouched; only the sender hears
        about it through ``gameError``.
        """
        player = self.player_map.get_player_by_socket(socket)
        username = player.username if player is not None else None
        try:
            if self.state is None:
                raise InvalidInputError(event.value, username, "no game in progress")
            if player is None:
                raise UnauthorizedEventError(event.value, None, "unknown participant")
            payload = validate_payload(event, data, username)
            if event in DIALOG_EVENTS:
                dialog = self.state.get_step_dialog_for(player)
                if dialog is None or not dialog.offers(event):
                    raise UnauthorizedEventError(event.value, username, "not offered to you right now")
            self.phase_logger.log_event(username, event.value)
            self._run_phase(event, player, payload, advanced_by=self.state.get_role(player).value)
        except InvalidInputError as e:
            logger.warning(str(e), extra={"socket_event": event.value, "username": username})
            self.phase_logger.log_rejected(username, event.value, e.reason)
            if socket is not None:
                try:
                    socket.emit(GAME_ERROR, e.to_payload())
                except Exception as emit_error:
                    logger.warning(f"Failed to report rejection to {username}: {emit_error}")

    def _run_phase(self, event: SocketEvent, player: Optional[Player] = None,
                   payload: Any = None, advanced_by: str = "timer") -> None:
        self._advanced_by = advanced_by
        try:
            self._guarded(lambda: self.trigger(event, player, payload))
        finally:
            self._flush_phase_log()

    def _guarded(self, func: Callable[[], None]) -> None:
        """Run ``func``; errors that make the game unplayable end it."""
        if self.state is None:
            return
        try:
            func()
        except GAME_ENDING_ERRORS as e:
            self._abort_game(e)
        except InvalidInputError as e:
            if self._advanced_by in (PlayerRole.SHOW_HOST.value, PlayerRole.HOT_SEAT.value,
                                     PlayerRole.CONTESTANT.value):
                raise
            logger.warning(f"Scheduled step rejected: {e}")
