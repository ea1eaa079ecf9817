# Area: Game
"""
hotseat_show._game.step_dialog — How the show moves on
=======================================================

A StepDialog describes how the game leaves the current phase for one
participant slot. It is exactly one of:

- actionable: buttons a human can press, no timeout
- automatic: no buttons, a callback fired after ``timeout_ms``
- inert: neither (the game waits on some other input)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from .events import SocketEvent


@dataclass(frozen=True)
class DialogAction:
    """One button: the message it sends and its label."""
    socket_event: SocketEvent
    text: str

    def to_compressed(self) -> Dict[str, Any]:
        return {"socket_event": self.socket_event.value, "text": self.text}


@dataclass(frozen=True)
class StepDialog:
    """Immutable advancement description. Recreated on every transition."""
    actions: Tuple[DialogAction, ...] = ()
    timeout_func: Optional[Callable[[], None]] = None
    timeout_ms: Optional[int] = None
    header: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "actions", tuple(self.actions))
        has_timeout = self.timeout_func is not None
        if has_timeout != (self.timeout_ms is not None):
            raise ValueError("timeout_func and timeout_ms must be given together")
        if has_timeout and self.actions:
            raise ValueError("A step dialog cannot have both actions and a timeout")
        if has_timeout and self.timeout_ms < 0:
            raise ValueError(f"timeout_ms must be >= 0, got {self.timeout_ms}")

    @property
    def is_actionable(self) -> bool:
        return bool(self.actions)

    @property
    def is_automatic(self) -> bool:
        return self.timeout_func is not None

    @property
    def is_inert(self) -> bool:
        return not self.actions and self.timeout_func is None

    def offers(self, socket_event: SocketEvent) -> bool:
        """Whether pressing a button here sends ``socket_event``."""
        return any(action.socket_event == socket_event for action in self.actions)

    def to_compressed(self) -> Dict[str, Any]:
        """Client view: buttons and header only."""
        return {
            "actions": [action.to_compressed() for action in self.actions],
            "header": self.header,
        }
