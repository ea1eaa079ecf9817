# Area: Test Support
"""Shared fixtures: a controllable clock, in-memory sockets and game servers."""

import logging
import random
from unittest.mock import patch

import pytest

from hotseat_show._game.events import UPDATE_GAME, SocketEvent
from hotseat_show._game.game_server import GameServer
from hotseat_show._players.player_map import PlayerMap
from hotseat_show._players.sockets import LocalSocket
from hotseat_show._question.question_session import FastestFingerSession, HotSeatSession
from hotseat_show._shared.logging_formatters import disable_phase_mode


MOCK_TIME = "hotseat_show._game.timers.time"

FASTEST_FINGER_ENTRIES = [
    {"text": f"Order set {n}", "choices": ["one", "two", "three", "four"]}
    for n in range(4)
]

HOT_SEAT_ENTRIES = [
    {"text": f"Question {n}", "choices": ["right", "wrong1", "wrong2", "wrong3"], "tier": n // 5}
    for n in range(15)
]


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def advance(self, ms: float) -> None:
        self.now += ms / 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    disable_phase_mode()
    pkg_logger = logging.getLogger("hotseat_show")
    for handler in list(pkg_logger.handlers):
        handler.close()
    pkg_logger.handlers.clear()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def clock():
    fake = FakeClock()
    with patch(MOCK_TIME) as mock_time:
        mock_time.monotonic.side_effect = fake
        yield fake


@pytest.fixture
def player_map():
    return PlayerMap()


def make_server(player_map, ff_entries=None, hs_entries=None, seed=7):
    rng = random.Random(seed)
    return GameServer(
        player_map,
        fastest_finger_session=FastestFingerSession(
            list(ff_entries if ff_entries is not None else FASTEST_FINGER_ENTRIES), rng=rng),
        hot_seat_session=HotSeatSession(
            list(hs_entries if hs_entries is not None else HOT_SEAT_ENTRIES), rng=rng),
        rng=rng,
    )


@pytest.fixture
def server(player_map, clock):
    return make_server(player_map)


def join(server, *usernames):
    """Connect each username on a fresh socket. Returns {username: socket}."""
    sockets = {}
    for username in usernames:
        socket = LocalSocket(sid=f"sid-{username}")
        server.connect(username, socket)
        sockets[username] = socket
    return sockets


def send(socket, event: SocketEvent, data=None):
    return socket.receive(event.value, data)


def advance_until(server, clock, condition, step_ms=250, limit_ms=300000):
    """Move the clock forward in steps, firing timers, until ``condition()`` holds."""
    elapsed = 0
    while not condition():
        if elapsed >= limit_ms:
            raise AssertionError(
                f"Condition not reached after {limit_ms}ms, "
                f"stuck at {server.current_socket_event}"
            )
        clock.advance(step_ms)
        server.tick()
        elapsed += step_ms


def at(server, event: SocketEvent):
    return lambda: server.current_socket_event is event


def perfect_ordering(server):
    """Presented choices of the current fastest finger question, in true order."""
    question = server.state.fastest_finger_question.question
    return [question.get_shuffled_choice(i) for i in range(4)]


def submit_ordering(socket, ordering):
    for choice in ordering:
        send(socket, SocketEvent.CONTESTANT_FASTEST_FINGER_CHOOSE, {"choice": int(choice)})


def last_update(socket):
    return socket.last(UPDATE_GAME)
