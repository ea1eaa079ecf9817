# Area: Players
"""
hotseat_show._players.player_map — Connected participants
==========================================================

Username-keyed map of every participant in a session. Handles joins,
reconnections and disconnections, and broadcasts to active sockets.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from .player import Player
from .sockets import GameSocket

logger = logging.getLogger("hotseat_show.player_map")


class PlayerMap:
    """Participants in join order, looked up by username or socket."""

    def __init__(self):
        self._players: Dict[str, Player] = {}

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players.values()))

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, username: object) -> bool:
        return username in self._players

    # ── Membership ───────────────────────────────────────────

    def add_player(self, username: str, socket: GameSocket) -> Player:
        """
        Join or rejoin a player.

        A known username is rebound to the new socket and marked active,
        keeping its round state. Otherwise a new player is created.
        """
        player = self._players.get(username)
        if player is not None:
            logger.info(f"Player {username} rejoined on {socket.sid}")
            player.socket = socket
            player.active = True
            return player

        player = Player(username=username, socket=socket)
        self._players[username] = player
        logger.info(f"Player {username} joined on {socket.sid}")
        return player

    def deactivate_player(self, socket: GameSocket) -> Optional[Player]:
        """Mark the player on this socket as disconnected."""
        player = self.get_player_by_socket(socket)
        if player is None:
            return None
        player.active = False
        player.socket = None
        logger.info(f"Player {player.username} disconnected")
        return player

    def remove_inactive_players(self) -> List[str]:
        """Drop every disconnected player. Returns the removed usernames."""
        removed = [name for name, player in self._players.items() if not player.active]
        for name in removed:
            del self._players[name]
        if removed:
            logger.info(f"Removed inactive players: {', '.join(removed)}")
        return removed

    # ── Lookup ───────────────────────────────────────────────

    def get_player_by_socket(self, socket: Optional[GameSocket]) -> Optional[Player]:
        if socket is None:
            return None
        for player in self._players.values():
            if player.socket is socket:
                return player
        return None

    def get_player_by_username(self, username: Optional[str]) -> Optional[Player]:
        if username is None:
            return None
        return self._players.get(username)

    def active_players(self) -> List[Player]:
        return [p for p in self._players.values() if p.active]

    def get_active_player_count(self) -> int:
        return len(self.active_players())

    def do_all(self, func: Callable[[Player], Any]) -> None:
        for player in list(self._players.values()):
            func(player)

    # ── Broadcast ────────────────────────────────────────────

    def emit_to_all(self, event: str, data: Any = None) -> None:
        self.emit_custom_to_all(event, lambda player: data)

    def emit_custom_to_all(self, event: str, build: Callable[[Player], Any]) -> None:
        """
        Emit a per-player payload to every active socket.

        A socket that fails to accept the message is logged and skipped;
        the others still receive theirs.
        """
        for player in self.active_players():
            if player.socket is None:
                continue
            try:
                player.socket.emit(event, build(player))
            except Exception as e:
                logger.warning(
                    f"Failed to emit {event} to {player.username}: {e}",
                    extra={"username": player.username},
                )
