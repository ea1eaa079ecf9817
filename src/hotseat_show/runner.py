"""
hotseat_show.runner — Main event loop
======================================

The ShowRunner hosts a show on this machine: it owns the player map and
game server, connects participants over in-memory sockets, and drives
the single control loop that fires timers and lets participants react.
"""

from __future__ import annotations

import logging
import random
import signal
import time
from typing import Any, Dict, List, Optional, Union

from ._game.game_server import GameServer
from ._game.payloads import GameOptions
from ._players.player_map import PlayerMap
from ._question.question_session import FastestFingerSession, HotSeatSession
from ._runner_config import ShowConfig, validate_config
from ._shared.logging_config import setup_logging
from ._shared.logging_formatters import enable_phase_mode
from .demo_players import DemoContestant, DemoPlayer, DemoShowHost

logger = logging.getLogger("hotseat_show")


class ShowRunner:
    """
    Local show host.

    Usage
    -----
        from hotseat_show import ShowRunner

        runner = ShowRunner(config={"demo_contestants": 3, "max_rounds": 1})
        runner.add_demo_players()
        runner.run()
    """

    def __init__(self, config: Union[ShowConfig, Dict[str, Any], None] = None):
        if not isinstance(config, ShowConfig):
            config = validate_config(config or {})
        self.config = config
        self._running = False

        setup_logging(log_file_path=config.log_file, level=config.log_level)
        if config.phase_mode:
            enable_phase_mode()

        self.rng = random.Random(config.random_seed)
        self.player_map = PlayerMap()
        self.server = GameServer(
            self.player_map,
            fastest_finger_session=FastestFingerSession.from_file(
                config.fastest_finger_bank_path, rng=self.rng),
            hot_seat_session=HotSeatSession.from_file(
                config.hot_seat_bank_path, rng=self.rng),
            time_scale=config.time_scale,
            rng=self.rng,
        )
        self.players: List[DemoPlayer] = []
        self.show_host_username: Optional[str] = None

    # ── Participants ──────────────────────────────────────────

    def add_player(self, player: DemoPlayer) -> None:
        self.server.connect(player.username, player.socket)
        self.players.append(player)

    def add_demo_players(self) -> None:
        """Seat the configured number of demo contestants (and a host if asked)."""
        for number in range(1, self.config.demo_contestants + 1):
            self.add_player(DemoContestant(f"contestant{number}", rng=self.rng))
        if self.config.demo_show_host:
            host = DemoShowHost("host", rng=self.rng, think_seconds=self.config.time_scale)
            self.add_player(host)
            self.show_host_username = host.username

    # ── Main loop ─────────────────────────────────────────────

    def start(self) -> None:
        self.server.start_game(GameOptions(show_host_username=self.show_host_username))

    def step(self) -> int:
        """One loop iteration: fire due timers, then let every participant react."""
        fired = self.server.tick()
        for player in self.players:
            player.poll()
        return fired

    def _rounds_done(self) -> bool:
        state = self.server.state
        max_rounds = self.config.max_rounds
        return state is not None and max_rounds is not None and state.round_number > max_rounds

    def run(self) -> None:
        """
        Play the show. Blocks until the round limit is reached, the game
        ends, or the process is interrupted (Ctrl+C).
        """
        self._running = True

        def _signal_handler(sig, frame):
            logger.info("\nShutting down gracefully...")
            self._running = False
        signal.signal(signal.SIGINT, _signal_handler)

        logger.info("=" * 60)
        logger.info("  Hot Seat Show Runner — Starting")
        logger.info(f"  Players:   {', '.join(p.username for p in self.players)}")
        logger.info(f"  Host:      {self.show_host_username or 'automatic'}")
        logger.info(f"  Rounds:    {self.config.max_rounds or 'unlimited'}")
        logger.info(f"  Speed:     x{self.config.time_scale}")
        logger.info("=" * 60)

        self.start()
        while self._running and self.server.is_in_game():
            try:
                self.step()
                if self._rounds_done():
                    self._log_standings()
                    self.server.end_game(reason="round limit reached")
                    break
                time.sleep(self.config.poll_interval_seconds)
            except KeyboardInterrupt:
                break
            except Exception as e:
                logger.error(f"Loop error: {e}", exc_info=True)
                time.sleep(self.config.poll_interval_seconds)

        if self.server.is_in_game():
            self._log_standings()
            self.server.end_game(reason="runner stopped")
        logger.info("Runner stopped.")

    def _log_standings(self) -> None:
        for player in sorted(self.player_map, key=lambda p: p.money, reverse=True):
            logger.info(
                f"  {player.username:20} ${player.money:>11,}  "
                f"({player.correct_answers} play-along answers right)"
            )
