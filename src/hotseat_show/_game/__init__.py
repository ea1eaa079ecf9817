# Area: Game
"""
Game layer — phases, step dialogs, timers and the game server.

This package handles:
- The inbound message vocabulary and payload validation
- Host-or-timer advancement through step dialogs
- Per-game state and per-viewer snapshots
- Routing inbound messages to phase handlers
"""

from .events import SocketEvent, PLAYER_EVENTS, DIALOG_EVENTS, UPDATE_GAME, GAME_ERROR, GAME_ENDED
from .step_dialog import StepDialog, DialogAction
from .timers import TimerRegistry
from .payloads import GameOptions, validate_payload
from .server_state import ServerState
from .handlers import PHASE_HANDLERS
from .game_server import GameServer

__all__ = [
    "SocketEvent",
    "PLAYER_EVENTS",
    "DIALOG_EVENTS",
    "UPDATE_GAME",
    "GAME_ERROR",
    "GAME_ENDED",
    "StepDialog",
    "DialogAction",
    "TimerRegistry",
    "GameOptions",
    "validate_payload",
    "ServerState",
    "PHASE_HANDLERS",
    "GameServer",
]
