# Area: Players
"""
hotseat_show._players.sockets — Connection interface
=====================================================

The game server only needs four things from a real-time connection:
an identity, listener registration, listener removal and emission.
``LocalSocket`` is an in-memory connection used by the local runner,
the demo players and the tests.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

logger = logging.getLogger("hotseat_show.sockets")

Listener = Callable[[Any], None]

_sid_counter = itertools.count(1)


class GameSocket(Protocol):
    """Protocol for a participant connection."""

    sid: str

    def on(self, event: str, handler: Listener) -> None:
        ...

    def remove_all_listeners(self, event: str) -> None:
        ...

    def emit(self, event: str, data: Any = None) -> None:
        ...


class LocalSocket:
    """
    In-memory connection.

    Server-to-client emissions are queued in ``outbox``; ``receive``
    delivers a client-to-server message to the registered listener.
    """

    def __init__(self, sid: Optional[str] = None):
        self.sid = sid or f"local-{next(_sid_counter)}"
        self.connected = True
        self.outbox: List[Tuple[str, Any]] = []
        self._listeners: Dict[str, Listener] = {}

    def on(self, event: str, handler: Listener) -> None:
        self._listeners[event] = handler

    def remove_all_listeners(self, event: str) -> None:
        self._listeners.pop(event, None)

    def has_listener(self, event: str) -> bool:
        return event in self._listeners

    def emit(self, event: str, data: Any = None) -> None:
        if not self.connected:
            raise ConnectionError(f"Socket {self.sid} is disconnected")
        self.outbox.append((event, data))

    def receive(self, event: str, data: Any = None) -> bool:
        """Deliver a client message. Returns False if nothing listens for it."""
        handler = self._listeners.get(event)
        if handler is None:
            logger.debug(f"{self.sid}: no listener for {event}")
            return False
        handler(data if data is not None else {})
        return True

    def drain(self) -> List[Tuple[str, Any]]:
        """Return and clear everything emitted to this socket."""
        messages, self.outbox = self.outbox, []
        return messages

    def last(self, event: str) -> Optional[Any]:
        """Most recent payload emitted for an event, or None."""
        for name, data in reversed(self.outbox):
            if name == event:
                return data
        return None

    def disconnect(self) -> None:
        self.connected = False

    def __repr__(self) -> str:
        return f"LocalSocket({self.sid})"
