# Area: Players
"""
Players layer — participants, their connections and broadcast.

This package handles:
- Per-participant answers, lock-in times and winnings
- Join, rejoin and disconnect bookkeeping
- Per-socket broadcast that tolerates failing connections
"""

from .player import Player, PlayerRole
from .player_map import PlayerMap
from .sockets import GameSocket, LocalSocket

__all__ = [
    "Player",
    "PlayerRole",
    "PlayerMap",
    "GameSocket",
    "LocalSocket",
]
