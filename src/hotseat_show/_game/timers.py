# Area: Game
"""
hotseat_show._game.timers — Scheduled continuations
====================================================

One registry per game server holds every pending timer, keyed by slot.
Arming a slot replaces whatever was pending there. Timers never fire on
their own: the control loop calls ``fire_expired`` between messages, so
callbacks run on the same thread as message handlers.
"""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

logger = logging.getLogger("hotseat_show.timers")

# Slot keys
SHOW_HOST_DIALOG = "showHostDialog"
HOT_SEAT_DIALOG = "hotSeatDialog"
FORCED = "forced"


@dataclass(order=True)
class _ScheduledCall:
    expires_at: float
    seq: int
    key: str = field(compare=False)
    label: str = field(compare=False)
    callback: Callable[[], None] = field(compare=False)


class TimerRegistry:
    """
    Pending timers keyed by slot.

    ``time_scale`` multiplies every delay; 0.5 runs the show at double
    speed.
    """

    def __init__(self, time_scale: float = 1.0) -> None:
        if time_scale < 0:
            raise ValueError(f"time_scale must be >= 0, got {time_scale}")
        self.time_scale = time_scale
        self._pending: Dict[str, _ScheduledCall] = {}
        self._seq = itertools.count()

    def now(self) -> float:
        return time.monotonic()

    def arm(self, key: str, delay_ms: float, callback: Callable[[], None],
            label: str = "") -> None:
        """Schedule ``callback`` under ``key``, cancelling what was there."""
        self.cancel(key)
        delay_seconds = max(0.0, delay_ms) / 1000.0 * self.time_scale
        self._pending[key] = _ScheduledCall(
            expires_at=self.now() + delay_seconds,
            seq=next(self._seq),
            key=key,
            label=label or key,
            callback=callback,
        )
        logger.debug("Timer armed: %s -> %s (%.0fms)", key, label or key, delay_ms)

    def cancel(self, key: str) -> bool:
        """Cancel the timer under ``key``. Returns whether one was pending."""
        entry = self._pending.pop(key, None)
        if entry is not None:
            logger.debug("Timer cancelled: %s -> %s", key, entry.label)
        return entry is not None

    def is_armed(self, key: str) -> bool:
        return key in self._pending

    def remaining_ms(self, key: str) -> Optional[float]:
        entry = self._pending.get(key)
        if entry is None:
            return None
        return max(0.0, entry.expires_at - self.now()) * 1000.0

    def next_expiry(self) -> Optional[float]:
        if not self._pending:
            return None
        return min(entry.expires_at for entry in self._pending.values())

    def fire_expired(self) -> int:
        """
        Run every timer that has expired, earliest first.

        Only timers armed before this call are considered; a callback that
        arms a new timer leaves it for the next call. A callback that
        cancels another pending timer prevents it from firing. Returns the
        number of callbacks run.
        """
        now = self.now()
        horizon = next(self._seq)
        fired = 0
        while True:
            due: List[_ScheduledCall] = sorted(
                entry for entry in self._pending.values()
                if entry.expires_at <= now and entry.seq < horizon
            )
            if not due:
                return fired
            entry = due[0]
            del self._pending[entry.key]
            logger.debug("Timer fired: %s -> %s", entry.key, entry.label)
            fired += 1
            entry.callback()

    def clear(self) -> None:
        """Cancel every pending timer."""
        self._pending.clear()
        logger.debug("All timers cleared")

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, key: object) -> bool:
        return key in self._pending
