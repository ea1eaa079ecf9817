"""
local_game.py — Drive a GameServer by hand
===========================================

Connects two participants over in-memory sockets and plays one round
with no show host, answering as a real client would: from the
``updateGame`` snapshots only. No runner, no demo bots.

Run with:  python local_game.py
"""

import random

from hotseat_show import GameServer, LocalSocket, PlayerMap, SocketEvent
from hotseat_show._game.events import GAME_ERROR, UPDATE_GAME


def latest_update(socket):
    """Drain a socket and return the newest snapshot (or None)."""
    latest = None
    for event, data in socket.drain():
        if event == UPDATE_GAME:
            latest = data
        elif event == GAME_ERROR:
            print(f"    rejected: {data['socket_event']} ({data['reason']})")
    return latest


def play(snapshot, socket, rng):
    """React to one snapshot the way a simple client would."""
    event = snapshot["socket_event"]
    ff = snapshot["fastest_finger_question"]
    hs = snapshot["hot_seat_question"]
    dialog = snapshot["step_dialog"]

    if event == SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES.value \
            and ff and not ff["choice_locked"]:
        ordering = [0, 1, 2, 3]
        rng.shuffle(ordering)
        for choice in ordering:
            socket.receive(SocketEvent.CONTESTANT_FASTEST_FINGER_CHOOSE.value, {"choice": choice})
        print(f"    {snapshot['username']} locks in {ordering}")
        return

    if snapshot["role"] != "hotSeat":
        return
    if dialog and dialog["actions"]:
        # "Final answer?" -> yes
        socket.receive(dialog["actions"][0]["socket_event"])
        return
    if hs and None not in hs["choices"] and not hs["choice_locked"] \
            and event == SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE.value:
        choice = rng.choice([c for c in range(4) if c not in hs["removed_choices"]])
        print(f"    {hs['payout']} question: {hs['text']} -> {hs['choices'][choice]}")
        socket.receive(SocketEvent.HOT_SEAT_CHOOSE.value, {"choice": choice})


def main():
    rng = random.Random(21)
    server = GameServer(PlayerMap(), time_scale=0, rng=rng)
    sockets = {name: LocalSocket(sid=name) for name in ("alice", "bob")}
    for name, socket in sockets.items():
        server.connect(name, socket)

    server.start_game({"show_host_username": None})
    last_event = None
    while server.is_in_game() and server.state.round_number < 2:
        server.tick()
        for socket in sockets.values():
            snapshot = latest_update(socket)
            if snapshot is None:
                continue
            if snapshot["socket_event"] != last_event:
                last_event = snapshot["socket_event"]
                print(f"[{last_event}]")
            play(snapshot, socket, rng)

    for player in server.player_map:
        print(f"{player.username:10} ${player.money:,}")
    server.end_game(reason="example finished")


if __name__ == "__main__":
    main()
