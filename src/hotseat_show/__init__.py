"""
hotseat_show — Hot Seat Trivia Show Server
===========================================

A multiplayer trivia show: a fastest finger round picks who sits in the
hot seat, who then climbs a fifteen-question money ladder. The server
is the single source of truth and pushes each participant a filtered
view of the game.

Quick Start (local demo):
    from hotseat_show import ShowRunner
    runner = ShowRunner(config={"demo_contestants": 3, "max_rounds": 1})
    runner.add_demo_players()
    runner.run()

Behind your own transport:
    from hotseat_show import GameServer, PlayerMap
    server = GameServer(PlayerMap())
    server.connect("alice", socket)     # socket: on / remove_all_listeners / emit
    server.start_game({"show_host_username": None})
    ...
    server.tick()                       # call regularly to fire timers

Type Definitions
----------------
All emitted payload types are available for import:

    from hotseat_show import ClientState, HotSeatQuestionView, GameErrorPayload
"""

from ._game import GameServer, GameOptions, SocketEvent, StepDialog
from ._players import PlayerMap, Player, PlayerRole, GameSocket, LocalSocket
from ._question import Choice, Lifeline, Confidence, FastestFingerSession, HotSeatSession
from ._runner_config import ShowConfig, load_config
from .demo_players import DemoContestant, DemoShowHost
from .runner import ShowRunner
from .errors import (
    HotSeatShowError,
    InvalidInputError,
    InvalidChoiceError,
    InvalidPayloadError,
    UnauthorizedEventError,
    LateSubmissionError,
    QuestionBankExhaustedError,
    GameStateError,
    InvalidGameOptionsError,
)
from .types import (
    DialogActionView,
    StepDialogView,
    PlayerView,
    CelebrationBanner,
    FastestFingerQuestionView,
    HotSeatQuestionView,
    PhoneAFriendView,
    ClientState,
    GameErrorPayload,
    GameEndedPayload,
)

__all__ = [
    # Main classes
    "GameServer",
    "GameOptions",
    "SocketEvent",
    "StepDialog",
    "PlayerMap",
    "Player",
    "PlayerRole",
    "GameSocket",
    "LocalSocket",
    "Choice",
    "Lifeline",
    "Confidence",
    "FastestFingerSession",
    "HotSeatSession",
    "ShowConfig",
    "load_config",
    "ShowRunner",
    "DemoContestant",
    "DemoShowHost",
    # Errors
    "HotSeatShowError",
    "InvalidInputError",
    "InvalidChoiceError",
    "InvalidPayloadError",
    "UnauthorizedEventError",
    "LateSubmissionError",
    "QuestionBankExhaustedError",
    "GameStateError",
    "InvalidGameOptionsError",
    # Payload types
    "DialogActionView",
    "StepDialogView",
    "PlayerView",
    "CelebrationBanner",
    "FastestFingerQuestionView",
    "HotSeatQuestionView",
    "PhoneAFriendView",
    "ClientState",
    "GameErrorPayload",
    "GameEndedPayload",
]
__version__ = "1.0.0"
