# Area: Shared
"""
Shared utilities used across the game server.

This package contains:
- Logging configuration and formatters
- Phase transition logging
- Display strings
"""

from .logging_config import setup_logging, log_game_error, log_and_terminate
from .logging_formatters import (
    enable_phase_mode,
    disable_phase_mode,
    is_phase_mode_enabled,
)
from .phase_logger import get_phase_logger, PhaseLogger

__all__ = [
    "setup_logging",
    "log_game_error",
    "log_and_terminate",
    "enable_phase_mode",
    "disable_phase_mode",
    "is_phase_mode_enabled",
    "get_phase_logger",
    "PhaseLogger",
]
