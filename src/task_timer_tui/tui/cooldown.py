"""Minimum-interval gate for actions prone to key-repeat duplicates."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


class CooldownGate:
    """Allows an action again only after min_interval seconds have passed.

    Each action name has its own timestamp, so switching tabs does not
    block a toggle. A non-positive interval disables the gate.
    """

    def __init__(
        self,
        min_interval: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.min_interval = min_interval
        self._clock = clock
        self._last_allowed: dict[str, float] = {}

    @property
    def enabled(self) -> bool:
        return self.min_interval > 0

    def allow(self, action: str) -> bool:
        """Return True and record the time if action may fire now."""
        if not self.enabled:
            return True

        now = self._clock()
        last = self._last_allowed.get(action)
        if last is not None and now - last < self.min_interval:
            logger.debug(f"Cooldown suppressed {action!r} ({now - last:.3f}s since last)")
            return False

        self._last_allowed[action] = now
        return True

    def reset(self) -> None:
        self._last_allowed.clear()
