# Area: Shared
"""
hotseat_show._shared.logging_config — Structured logging setup
==============================================================

Configures dual logging: terminal (colored) + file (JSON).
Provides game error logging and termination functions.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Union

from .logging_formatters import JSONFormatter, PhaseFilter, TerminalFormatter

if TYPE_CHECKING:
    from ..errors import HotSeatShowError

# Package logger
logger = logging.getLogger("hotseat_show")


def setup_logging(
    log_file_path: str = "hotseat_show.log",
    level: Union[int, str] = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'hotseat_show.log' in current dir.
    level : int or str
        Logging level. Defaults to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    pkg_logger = logging.getLogger("hotseat_show")
    pkg_logger.setLevel(level)
    pkg_logger.handlers.clear()

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(PhaseFilter())
    pkg_logger.addHandler(terminal_handler)

    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_game_error(error: "HotSeatShowError") -> None:
    """
    Log a game-ending error in the structured format.

    Parameters
    ----------
    error : HotSeatShowError
        An error providing ``format_error_log`` (QuestionBankExhaustedError
        or GameStateError).
    """
    error_block = error.format_error_log()

    # Print to terminal (bypassing logger for exact formatting)
    print(error_block, file=sys.stderr)

    logger.error(
        f"Game error: {error.__class__.__name__}: {error}",
        extra={
            "socket_event": getattr(error, "socket_event", None),
            "error_type": error.__class__.__name__,
        },
    )


def log_and_terminate(error: "HotSeatShowError", exit_code: int = 1) -> None:
    """
    Log the error and terminate the process.

    Parameters
    ----------
    error : HotSeatShowError
        The error to log.
    exit_code : int
        Exit code for the process. Defaults to 1.
    """
    if hasattr(error, "format_error_log"):
        log_game_error(error)
    else:
        logger.error(f"{error.__class__.__name__}: {error}")
    logger.critical("Process terminated due to game error")
    sys.exit(exit_code)
