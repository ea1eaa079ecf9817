# Area: Game
"""
hotseat_show._game.server_state — Per-game authoritative state
===============================================================

Everything one running game knows: who hosts, who sits in the hot seat,
the active question of each round type, the step dialog of each slot,
the celebration banner and lifeline progress. Owned by one GameServer
and discarded when the game ends.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Any, Dict, List, Optional, Set

from ..errors import GameStateError
from .._players.player import Player, PlayerRole
from .._players.player_map import PlayerMap
from .._question.fastest_finger_question import FastestFingerQuestion
from .._question.hot_seat_question import HotSeatQuestion
from .._question.lifelines import LIFELINE_ORDER, Lifeline
from .snapshot import build_client_state
from .step_dialog import StepDialog
from .timers import HOT_SEAT_DIALOG, SHOW_HOST_DIALOG, TimerRegistry

logger = logging.getLogger("hotseat_show.server_state")


class ServerState:
    """
    Authoritative state of one game.

    Installing a step dialog with a timeout arms the matching timer slot;
    installing anything else into that slot cancels it.
    """

    def __init__(self, player_map: PlayerMap, timers: TimerRegistry,
                 rng: Optional[random.Random] = None):
        self.player_map = player_map
        self.timers = timers
        self.rng = rng or random.Random()

        self.round_number = 0
        self.show_host: Optional[Player] = None
        self.hot_seat_player: Optional[Player] = None
        self.celebration_banner: Optional[Dict[str, str]] = None
        self.show_host_step_dialog: Optional[StepDialog] = None
        self.hot_seat_step_dialog: Optional[StepDialog] = None

        self.fastest_finger_question: Optional[FastestFingerQuestion] = None
        self.fastest_finger_lock_order: List[str] = []

        self.hot_seat_question: Optional[HotSeatQuestion] = None
        self.hot_seat_question_index = -1
        self.round_winnings = 0

        self.lifelines_used: Set[Lifeline] = set()
        self.highlighted_lifeline: Optional[Lifeline] = None
        self.lifelines_highlighted = 0
        self.pending_lifeline: Optional[Lifeline] = None
        self.phone_a_friend: Optional[Player] = None
        self.audience_poll_open = False
        self.audience_results: Optional[Dict[int, int]] = None

    # ── Roles ────────────────────────────────────────────────

    def set_show_host_by_username(self, username: Optional[str]) -> None:
        if username is None:
            self.show_host = None
            return
        player = self.player_map.get_player_by_username(username)
        if player is None:
            raise GameStateError(
                f"Show host '{username}' is not connected",
                context={"show_host_username": username},
            )
        self.show_host = player

    def player_show_host_present(self) -> bool:
        return self.show_host is not None and self.show_host.active

    def get_role(self, player: Optional[Player]) -> PlayerRole:
        if player is not None and player is self.show_host:
            return PlayerRole.SHOW_HOST
        if player is not None and player is self.hot_seat_player:
            return PlayerRole.HOT_SEAT
        return PlayerRole.CONTESTANT

    def fastest_finger_contestants(self) -> List[Player]:
        """Active players competing for the hot seat."""
        return [p for p in self.player_map.active_players() if p is not self.show_host]

    def contestants(self) -> List[Player]:
        """Active players playing along with the hot seat question."""
        return [
            p for p in self.player_map.active_players()
            if p is not self.show_host and p is not self.hot_seat_player
        ]

    # ── Round lifecycle ──────────────────────────────────────

    def start_new_round(self) -> None:
        """Reset everything that belongs to a single round."""
        self.round_number += 1
        self.reset_fastest_finger()
        self.reset_hot_seat_question()
        self.hot_seat_player = None
        self.hot_seat_question_index = -1
        self.round_winnings = 0
        self.lifelines_used = set()
        self.highlighted_lifeline = None
        self.lifelines_highlighted = 0
        self.celebration_banner = None
        self.player_map.do_all(lambda player: player.clear_all_answers())
        logger.info(f"Round {self.round_number} started")

    def reset_fastest_finger(self) -> None:
        self.fastest_finger_question = None
        self.fastest_finger_lock_order = []
        self.player_map.do_all(lambda player: player.clear_fastest_finger())

    def reset_hot_seat_question(self) -> None:
        """Drop the active hot seat question and everything tied to it."""
        self.hot_seat_question = None
        self.pending_lifeline = None
        self.phone_a_friend = None
        self.audience_poll_open = False
        self.audience_results = None
        for player in self.player_map:
            player.hot_seat_choice = None
            player.hot_seat_time = None
            player.confidence = None

    # ── Fastest finger ───────────────────────────────────────

    def record_fastest_finger_lock(self, player: Player) -> None:
        if player.fastest_finger_locked() and player.username not in self.fastest_finger_lock_order:
            self.fastest_finger_lock_order.append(player.username)

    def all_players_done_with_fastest_finger(self) -> bool:
        contestants = self.fastest_finger_contestants()
        return bool(contestants) and all(p.fastest_finger_locked() for p in contestants)

    def grade_fastest_finger(self) -> Optional[Player]:
        """
        Score every ordering and seat the winner.

        Highest score wins; ties go to the faster lock-in, then to whoever
        locked in first. Returns None if nobody completed an ordering.
        """
        question = self.fastest_finger_question
        if question is None:
            raise GameStateError("No fastest finger question to grade")

        eligible = []
        for player in self.fastest_finger_contestants():
            player.fastest_finger_score = question.get_answer_score(player.fastest_finger_choices)
            if player.fastest_finger_locked():
                eligible.append(player)

        def rank(player: Player):
            elapsed = player.fastest_finger_time
            order = self.fastest_finger_lock_order
            position = order.index(player.username) if player.username in order else len(order)
            return (-player.fastest_finger_score,
                    elapsed if elapsed is not None else math.inf,
                    position)

        self.hot_seat_player = min(eligible, key=rank) if eligible else None
        if self.hot_seat_player is not None:
            logger.info(
                f"Fastest finger winner: {self.hot_seat_player.username} "
                f"(score {self.hot_seat_player.fastest_finger_score})"
            )
        else:
            logger.info("Nobody completed the fastest finger question")
        return self.hot_seat_player

    # ── Hot seat ─────────────────────────────────────────────

    def require_hot_seat_question(self) -> HotSeatQuestion:
        if self.hot_seat_question is None:
            raise GameStateError("No active hot seat question")
        return self.hot_seat_question

    def require_hot_seat_player(self) -> Player:
        if self.hot_seat_player is None:
            raise GameStateError("No hot seat player")
        return self.hot_seat_player

    def awaiting_hot_seat_choice(self) -> bool:
        """All choices are shown and the answer clock is running."""
        question = self.hot_seat_question
        return (
            question is not None
            and question.all_choices_revealed()
            and question.start_time is not None
            and not question.correct_choice_revealed_for_show_host
        )

    def score_contestants(self) -> None:
        """Credit play-along contestants who picked the correct choice."""
        question = self.require_hot_seat_question()
        for player in self.contestants():
            if question.answer_is_correct(player.hot_seat_choice):
                player.correct_answers += 1

    # ── Lifelines ────────────────────────────────────────────

    def lifeline_available(self, lifeline: Lifeline) -> bool:
        if lifeline in self.lifelines_used:
            return False
        if lifeline is Lifeline.PHONE_A_FRIEND:
            return bool(self.contestants())
        return True

    def highlight_next_lifeline(self) -> Optional[Lifeline]:
        if self.lifelines_highlighted >= len(LIFELINE_ORDER):
            self.highlighted_lifeline = None
            return None
        self.highlighted_lifeline = LIFELINE_ORDER[self.lifelines_highlighted]
        self.lifelines_highlighted += 1
        return self.highlighted_lifeline

    def all_lifelines_highlighted(self) -> bool:
        return self.lifelines_highlighted >= len(LIFELINE_ORDER)

    # ── Dialogs and banner ───────────────────────────────────

    def set_show_host_step_dialog(self, dialog: Optional[StepDialog]) -> None:
        self.show_host_step_dialog = dialog
        self._arm_dialog_timer(SHOW_HOST_DIALOG, dialog)

    def set_hot_seat_step_dialog(self, dialog: Optional[StepDialog]) -> None:
        self.hot_seat_step_dialog = dialog
        self._arm_dialog_timer(HOT_SEAT_DIALOG, dialog)

    def _arm_dialog_timer(self, key: str, dialog: Optional[StepDialog]) -> None:
        if dialog is not None and dialog.is_automatic:
            self.timers.arm(key, dialog.timeout_ms, dialog.timeout_func)
        else:
            self.timers.cancel(key)

    def get_step_dialog_for(self, player: Optional[Player]) -> Optional[StepDialog]:
        role = self.get_role(player)
        if role is PlayerRole.SHOW_HOST:
            return self.show_host_step_dialog
        if role is PlayerRole.HOT_SEAT:
            return self.hot_seat_step_dialog
        return None

    def set_celebration_banner(self, banner: Optional[Dict[str, str]]) -> None:
        self.celebration_banner = banner

    def to_compressed_client_state(self, viewer: Player, socket_event: Optional[Any]) -> Dict[str, Any]:
        return build_client_state(self, viewer, socket_event)
