"""Tests for TickClock scheduling."""

from __future__ import annotations

import pytest

from task_timer_tui.tui.ticker import TickClock


class FakeClock:
    def __init__(self) -> None:
        self.now = 10.0

    def __call__(self) -> float:
        return self.now


class TestTickClock:
    """Tick scheduling on a monotonic clock."""

    def test_rejects_non_positive_rate(self) -> None:
        with pytest.raises(ValueError):
            TickClock(0)

    def test_time_until_tick_counts_down(self) -> None:
        clock = FakeClock()
        ticker = TickClock(0.25, clock=clock)

        assert ticker.time_until_tick() == pytest.approx(0.25)
        clock.now += 0.1
        assert ticker.time_until_tick() == pytest.approx(0.15)
        clock.now += 1.0
        assert ticker.time_until_tick() == 0.0

    def test_poll_fires_once_per_period(self) -> None:
        clock = FakeClock()
        ticker = TickClock(0.25, clock=clock)

        assert ticker.poll() is False
        clock.now += 0.25
        assert ticker.poll() is True
        assert ticker.poll() is False
        assert ticker.tick_count == 1

    def test_late_poll_does_not_replay_missed_ticks(self) -> None:
        clock = FakeClock()
        ticker = TickClock(0.25, clock=clock)

        clock.now += 2.0
        assert ticker.poll() is True
        assert ticker.poll() is False
        assert ticker.tick_count == 1
