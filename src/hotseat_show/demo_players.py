# Area: Shared
"""
hotseat_show.demo_players — Scripted participants
==================================================

Ready-to-use participants that play a local show over in-memory
sockets. They read the same ``updateGame`` snapshots a real client gets
and answer through the same messages.

Usage:
    from hotseat_show import ShowRunner, DemoContestant

    runner = ShowRunner()
    runner.add_player(DemoContestant("alice"))
    runner.run()
"""

from __future__ import annotations

import logging
import random
import time
from typing import Any, Dict, List, Optional

from ._game.events import GAME_ENDED, GAME_ERROR, UPDATE_GAME, SocketEvent
from ._players.sockets import LocalSocket
from ._question.choices import ALL_CHOICES
from ._question.lifelines import Confidence, Lifeline
from ._shared import strings

logger = logging.getLogger("hotseat_show.demo")


class DemoPlayer:
    """Base scripted participant: drains its socket and reacts to the latest snapshot."""

    def __init__(self, username: str, rng: Optional[random.Random] = None):
        self.username = username
        self.socket = LocalSocket(sid=f"demo-{username}")
        self.rng = rng or random.Random()
        self.last_state: Optional[Dict[str, Any]] = None
        self.errors: List[Dict[str, Any]] = []
        self.game_ended = False

    def send(self, event: SocketEvent, data: Optional[Dict[str, Any]] = None) -> None:
        self.socket.receive(event.value, data or {})

    def poll(self) -> None:
        """Handle everything the server sent since the last poll."""
        latest = None
        for event, data in self.socket.drain():
            if event == UPDATE_GAME:
                latest = data
            elif event == GAME_ERROR:
                self.errors.append(data)
                logger.debug(f"{self.username} rejected: {data.get('reason')}")
            elif event == GAME_ENDED:
                self.game_ended = True
        if latest is not None:
            self.last_state = latest
            self.on_update(latest)
        self.on_idle()

    def on_update(self, state: Dict[str, Any]) -> None:
        pass

    def on_idle(self) -> None:
        pass


def _open_choices(question: Dict[str, Any]) -> List[int]:
    removed = set(question.get("removed_choices", []))
    return [int(c) for c in ALL_CHOICES if int(c) not in removed]


class DemoContestant(DemoPlayer):
    """
    Contestant that competes in fastest finger and answers when seated.

    ``knowledge`` is the chance of knowing a hot seat answer outright; the
    bot otherwise leans on its lifelines or guesses.
    """

    def __init__(self, username: str, rng: Optional[random.Random] = None,
                 knowledge: float = 0.7):
        super().__init__(username, rng)
        self.knowledge = knowledge
        self._ordering: List[int] = []

    def on_update(self, state: Dict[str, Any]) -> None:
        role = state["role"]
        if role == "contestant":
            self._play_fastest_finger(state)
            self._play_along(state)
        elif role == "hotSeat":
            self._play_hot_seat(state)

    # ── Fastest finger ───────────────────────────────────────

    def _play_fastest_finger(self, state: Dict[str, Any]) -> None:
        question = state.get("fastest_finger_question")
        if state["socket_event"] != SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES.value:
            self._ordering = []
            return
        if question is None or question["choice_locked"]:
            return
        if not self._ordering:
            self._ordering = [int(c) for c in ALL_CHOICES]
            self.rng.shuffle(self._ordering)
        made = question["made_choices"]
        for choice in [c for c in self._ordering if c not in made]:
            self.send(SocketEvent.CONTESTANT_FASTEST_FINGER_CHOOSE, {"choice": choice})

    # ── Hot seat ─────────────────────────────────────────────

    def _play_along(self, state: Dict[str, Any]) -> None:
        question = state.get("hot_seat_question")
        if question is None or None in question["choices"] or "correct_choice" in question:
            return
        friend = state.get("phone_a_friend")
        if friend and friend["username"] == self.username and friend.get("confidence") is None \
                and state["socket_event"] == SocketEvent.SHOW_HOST_PHONE_A_FRIEND.value:
            confidence = self.rng.choice(list(Confidence))
            self.send(SocketEvent.CONTESTANT_SET_CONFIDENCE, {"confidence": confidence.value})
        if not question["choice_locked"]:
            self.send(SocketEvent.CONTESTANT_CHOOSE, {"choice": self.rng.choice(_open_choices(question))})

    def _play_hot_seat(self, state: Dict[str, Any]) -> None:
        dialog = state.get("step_dialog")
        if dialog is not None and dialog["actions"]:
            # Always commit: final answer yes, lifeline yes
            self.send(SocketEvent(dialog["actions"][0]["socket_event"]))
            return
        if dialog is not None and dialog.get("header") == strings.PICK_PHONE_A_FRIEND:
            friends = [p["username"] for p in state["players"]
                       if p["role"] == "contestant" and p["active"]]
            if friends:
                self.send(SocketEvent.HOT_SEAT_PICK_PHONE_A_FRIEND, {"username": self.rng.choice(friends)})
            return

        question = state.get("hot_seat_question")
        if question is None or question["choice_locked"] or None in question["choices"]:
            return
        if state.get("pending_lifeline") or state["socket_event"] not in (
            SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE.value,
            SocketEvent.SHOW_HOST_DO_FIFTY_FIFTY.value,
            SocketEvent.SHOW_HOST_ASK_THE_AUDIENCE.value,
        ):
            return

        audience = state.get("audience_results")
        if audience:
            best = max(audience, key=lambda c: audience[c])
            self.send(SocketEvent.HOT_SEAT_CHOOSE, {"choice": int(best)})
            return
        if self.rng.random() > self.knowledge:
            unused = [name for name, used in state["lifelines"].items() if not used]
            if unused and state["socket_event"] == SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE.value:
                lifeline = Lifeline(self.rng.choice(unused))
                self.send(SocketEvent.HOT_SEAT_USE_LIFELINE, {"lifeline": lifeline.value})
                return
        self.send(SocketEvent.HOT_SEAT_CHOOSE, {"choice": self.rng.choice(_open_choices(question))})


class DemoShowHost(DemoPlayer):
    """Show host that presses the offered button after a short pause."""

    def __init__(self, username: str = "host", rng: Optional[random.Random] = None,
                 think_seconds: float = 1.0):
        super().__init__(username, rng)
        self.think_seconds = think_seconds
        self._pending: Optional[SocketEvent] = None
        self._press_at = 0.0

    def on_update(self, state: Dict[str, Any]) -> None:
        dialog = state.get("step_dialog")
        if dialog is None or not dialog["actions"]:
            self._pending = None
            return
        events = [SocketEvent(action["socket_event"]) for action in dialog["actions"]]
        # Highlight lifelines sometimes, otherwise take the main action
        if SocketEvent.SHOW_HOST_HIGHLIGHT_LIFELINE in events and self.rng.random() < 0.5:
            choice = SocketEvent.SHOW_HOST_HIGHLIGHT_LIFELINE
        elif SocketEvent.HOT_SEAT_FINAL_ANSWER in events:
            choice = SocketEvent.HOT_SEAT_FINAL_ANSWER
        else:
            choice = events[-1]
        if choice is not self._pending:
            self._pending = choice
            self._press_at = time.monotonic() + self.think_seconds

    def on_idle(self) -> None:
        if self._pending is not None and time.monotonic() >= self._press_at:
            event, self._pending = self._pending, None
            self.send(event)
