"""Tests for CooldownGate."""

from __future__ import annotations

from task_timer_tui.tui.cooldown import CooldownGate


class FakeClock:
    def __init__(self) -> None:
        self.now = 50.0

    def __call__(self) -> float:
        return self.now


class TestCooldownGate:
    """Minimum interval between repeated actions."""

    def test_disabled_gate_always_allows(self) -> None:
        gate = CooldownGate(0)

        assert gate.enabled is False
        assert all(gate.allow("next") for _ in range(5))

    def test_repeat_within_interval_blocked(self) -> None:
        clock = FakeClock()
        gate = CooldownGate(0.15, clock=clock)

        assert gate.allow("next") is True
        clock.now += 0.1
        assert gate.allow("next") is False
        clock.now += 0.1
        assert gate.allow("next") is True

    def test_blocked_attempt_does_not_extend_cooldown(self) -> None:
        """Only allowed actions reset the timer."""
        clock = FakeClock()
        gate = CooldownGate(0.15, clock=clock)

        gate.allow("next")
        clock.now += 0.1
        gate.allow("next")
        clock.now += 0.06

        assert gate.allow("next") is True

    def test_actions_are_independent(self) -> None:
        clock = FakeClock()
        gate = CooldownGate(1.0, clock=clock)

        assert gate.allow("next") is True
        assert gate.allow("previous") is True
        assert gate.allow("next") is False

    def test_reset(self) -> None:
        clock = FakeClock()
        gate = CooldownGate(1.0, clock=clock)
        gate.allow("next")

        gate.reset()

        assert gate.allow("next") is True
