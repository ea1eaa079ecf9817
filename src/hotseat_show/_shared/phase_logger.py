# Area: Shared
"""
hotseat_show._shared.phase_logger — Phase transition logging
=============================================================

One colored terminal line per phase change, inbound participant event
and rejected message. Lines are only printed while phase mode is on.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Optional

from .logging_formatters import is_phase_mode_enabled

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Phase changes
ORANGE = "\033[38;5;208m"  # Participant events
RED = "\033[31m"           # Errors
RESET = "\033[0m"

# Who moves the game forward out of a phase
ADVANCED_BY = {
    "timer": "TIMER",
    "forced": "FORCED",
    "showHost": "SHOW-HOST",
    "hotSeat": "HOT-SEAT",
    "contestant": "CONTESTANT",
}


class PhaseLogger:
    """Logger for phase transitions and participant events."""

    def __init__(self):
        self._round = 0

    def set_round(self, round_number: int) -> None:
        """Set current round for logging context."""
        self._round = round_number

    def _now_ms(self) -> str:
        return datetime.now().strftime("%H:%M:%S:%f")[:-3]

    def _emit(self, line: str, stream=None) -> None:
        if is_phase_mode_enabled():
            print(line, file=stream or sys.stdout)

    def log_phase(
        self,
        socket_event: str,
        advanced_by: str = "timer",
        next_event: Optional[str] = None,
        wait_ms: Optional[int] = None,
    ) -> None:
        """Log entry into a phase."""
        by = ADVANCED_BY.get(advanced_by, advanced_by.upper())
        upcoming = next_event or "-"
        if wait_ms is not None:
            wait = f"{wait_ms}ms"
        elif next_event:
            wait = "CLICK"
        else:
            wait = "N/A"
        self._emit(
            f"{GREEN}{self._now_ms()} | ROUND: {self._round:3} | PHASE    | "
            f"{socket_event:40} | BY: {by:10} | NEXT: {upcoming:40} | WAIT: {wait}{RESET}"
        )

    def log_event(self, username: str, socket_event: str) -> None:
        """Log an inbound participant event."""
        self._emit(
            f"{ORANGE}{self._now_ms()} | ROUND: {self._round:3} | EVENT    | "
            f"{socket_event:40} | FROM: {username}{RESET}"
        )

    def log_rejected(self, username: Optional[str], socket_event: str, reason: str) -> None:
        """Log a rejected inbound message."""
        self._emit(
            f"{RED}[REJECTED] {self._now_ms()} | {socket_event} | "
            f"FROM: {username or 'unknown'} | {reason}{RESET}",
            stream=sys.stderr,
        )

    def log_error(self, description: str) -> None:
        """Log an error."""
        self._emit(f"{RED}[ERROR] {self._now_ms()} | {description}{RESET}", stream=sys.stderr)


# Global singleton instance
_phase_logger: Optional[PhaseLogger] = None


def get_phase_logger() -> PhaseLogger:
    """Get or create the global phase logger instance."""
    global _phase_logger
    if _phase_logger is None:
        _phase_logger = PhaseLogger()
    return _phase_logger
