"""Tick scheduling for the single-threaded event loop.

The loop blocks on keyboard input for at most time_until_tick() seconds and
then asks poll() whether a tick event is due.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


class TickClock:
    """Emits one tick per tick_rate seconds of monotonic time."""

    def __init__(
        self,
        tick_rate: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate}")
        self.tick_rate = tick_rate
        self._clock = clock
        self.last_tick = clock()
        self.tick_count = 0

    def time_until_tick(self) -> float:
        """Seconds left before the next tick is due, never negative."""
        remaining = self.tick_rate - (self._clock() - self.last_tick)
        return max(0.0, remaining)

    def poll(self) -> bool:
        """Return True (once) when a tick is due.

        Missed ticks are not replayed: a late poll yields a single tick and
        restarts the period from now.
        """
        now = self._clock()
        if now - self.last_tick < self.tick_rate:
            return False
        self.last_tick = now
        self.tick_count += 1
        return True
