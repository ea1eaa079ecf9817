# Area: Shared
"""
hotseat_show._shared.logging_formatters — Logging formatters and filters
========================================================================

Contains formatter/filter classes and the phase mode flag/functions.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Flag to control phase-only terminal output
_phase_mode_enabled = False


class PhaseFilter(logging.Filter):
    """Filter that suppresses terminal logs while phase mode is enabled.

    In phase mode the phase logger prints its own one-line transitions
    and the regular handlers stay quiet on the terminal.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        # Warnings and above still reach the terminal
        if record.levelno >= logging.WARNING:
            return True
        return not _phase_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    EXTRA_FIELDS = ("socket_event", "username", "error_type", "round")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in self.EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def enable_phase_mode() -> None:
    """Enable phase logging mode.

    In phase mode:
    - Standard INFO logs are suppressed from terminal
    - Only phase transitions and inbound events are shown
    - File logging remains unchanged for debugging
    """
    global _phase_mode_enabled
    _phase_mode_enabled = True


def disable_phase_mode() -> None:
    """Disable phase logging mode (restore standard logging)."""
    global _phase_mode_enabled
    _phase_mode_enabled = False


def is_phase_mode_enabled() -> bool:
    """Check if phase mode is enabled."""
    return _phase_mode_enabled
