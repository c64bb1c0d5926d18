"""Timer list feature with tick-driven time accrual."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime, timedelta

from ..cooldown import CooldownGate
from ..models import Draft, Timer
from .base import EntityFeature

logger = logging.getLogger(__name__)

TIMER_FIELDS = ("title",)
DEFAULT_ACCRUAL_INTERVAL = 1.0


def _local_now() -> datetime:
    return datetime.now().astimezone()


class TimerFeature(EntityFeature[Timer]):
    """Timers tab: Enter starts or pauses the selected timer.

    Active timers gain the monotonic time elapsed between processed ticks.
    Ticks arriving before accrual_interval has passed are coalesced into the
    next processed one, so each timer is at most one interval behind.
    """

    def __init__(
        self,
        accrual_interval: float = DEFAULT_ACCRUAL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = _local_now,
        toggle_gate: CooldownGate | None = None,
    ) -> None:
        """Initialize timer feature.

        Args:
            accrual_interval: Minimum seconds between processed ticks
            clock: Monotonic clock used to measure elapsed time
            now: Wall clock used for Timer.created_at
            toggle_gate: Optional cooldown applied to the Enter toggle
        """
        super().__init__(
            name="timer",
            field_names=TIMER_FIELDS,
            build_entity=self._build_timer,
            toggle_entity=Timer.toggle,
            toggle_gate=toggle_gate,
        )
        self.accrual_interval = accrual_interval
        self._clock = clock
        self._now = now
        self.last_tick = clock()

    @property
    def active_count(self) -> int:
        return sum(1 for timer in self.items if timer.is_active)

    def _build_timer(self, draft: Draft) -> Timer:
        return Timer(title=draft.get("title"), created_at=self._now())

    def on_tick(self) -> bool:
        """Accrue elapsed time on active timers.

        Returns:
            True if the tick was processed, False if it was coalesced
        """
        now = self._clock()
        elapsed_seconds = now - self.last_tick
        if elapsed_seconds <= self.accrual_interval:
            return False

        elapsed = timedelta(seconds=elapsed_seconds)
        accrued = 0
        for timer in self.items:
            if timer.is_active:
                timer.accrue(elapsed)
                accrued += 1

        self.last_tick = now
        if accrued:
            logger.debug(f"Accrued {elapsed_seconds:.3f}s on {accrued} active timer(s)")
        return True
