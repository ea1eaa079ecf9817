"""
hotseat_show.errors — Custom exception classes
===============================================

Defines the exception hierarchy for the game server.

Two families:
- InvalidInputError and subclasses: a single inbound message was rejected.
  The game carries on and only the sender hears about it.
- QuestionBankExhaustedError / GameStateError: the running game cannot
  continue and is ended. These format a structured error block.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class HotSeatShowError(Exception):
    """Base exception for all hotseat_show errors."""
    pass


# ══════════════════════════════════════════════════════════════
# PER-MESSAGE ERRORS
# ══════════════════════════════════════════════════════════════

class InvalidInputError(HotSeatShowError):
    """Raised when an inbound message is rejected without touching game state."""

    error_type = "INVALID_INPUT"

    def __init__(self, socket_event: str, username: Optional[str], reason: str):
        self.socket_event = socket_event
        self.username = username
        self.reason = reason
        super().__init__(f"'{socket_event}' from {username or 'unknown'} rejected: {reason}")

    def to_payload(self) -> Dict[str, Any]:
        """Payload sent back to the triggering participant."""
        return {
            "error_type": self.error_type,
            "socket_event": self.socket_event,
            "reason": self.reason,
        }


class InvalidChoiceError(InvalidInputError):
    """Raised when a submitted choice is not one of the four slots."""

    error_type = "INVALID_CHOICE"


class InvalidPayloadError(InvalidInputError):
    """Raised when a message payload fails schema validation."""

    error_type = "INVALID_PAYLOAD"

    def __init__(self, socket_event: str, username: Optional[str], validation_errors: List[str]):
        self.validation_errors = validation_errors
        super().__init__(socket_event, username, "; ".join(validation_errors))


class UnauthorizedEventError(InvalidInputError):
    """Raised when a participant triggers a phase they are not offered."""

    error_type = "UNAUTHORIZED_EVENT"


class LateSubmissionError(InvalidInputError):
    """Raised when an answer arrives after its window has closed."""

    error_type = "LATE_SUBMISSION"


# ══════════════════════════════════════════════════════════════
# GAME-ENDING ERRORS
# ══════════════════════════════════════════════════════════════

class QuestionBankExhaustedError(HotSeatShowError):
    """Raised when a question session has no unused questions left."""

    def __init__(self, session_name: str, bank_size: int):
        self.session_name = session_name
        self.bank_size = bank_size
        super().__init__(
            f"Question session '{session_name}' exhausted all {bank_size} questions"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="QUESTION_BANK_EXHAUSTED",
            summary=str(self),
            context={"session": self.session_name, "bank_size": self.bank_size},
        )


class GameStateError(HotSeatShowError):
    """Raised when an internal game invariant is violated."""

    def __init__(self, message: str, socket_event: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        self.socket_event = socket_event
        self.context = context or {}
        super().__init__(message)

    def format_error_log(self) -> str:
        context = dict(self.context)
        if self.socket_event:
            context["socket_event"] = self.socket_event
        return _format_error_block(
            error_type="GAME_STATE_VIOLATION",
            summary=str(self),
            context=context,
        )


class InvalidGameOptionsError(HotSeatShowError):
    """Raised when a game is started with options that cannot be satisfied."""

    def __init__(self, reason: str, options: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.options = options or {}
        super().__init__(f"Invalid game options: {reason}")


def _format_error_block(error_type: str, summary: str, context: Dict[str, Any]) -> str:
    """Format a structured error block for the game log."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " GAME ERROR — GAME ENDED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Summary:      {summary}",
        "",
        " ── CONTEXT " + "─" * 52,
        _indent_json(context),
        "",
        "=" * 64,
        "",
    ]
    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
