"""Unit tests for AppState."""

from __future__ import annotations

from task_timer_tui.tui.models import AppTab, Task
from task_timer_tui.tui.state import AppState
from task_timer_tui.utils import Config


class TestAppState:
    """Aggregate state read by the renderer."""

    def test_defaults(self) -> None:
        state = AppState()

        assert state.active_tab is AppTab.TASKS
        assert state.active_feature is state.task_state
        assert state.should_quit is False
        assert state.help_panel_visible is False
        assert state.status_message is None
        assert state.popup_open is False

    def test_active_feature_follows_tab(self) -> None:
        state = AppState()
        state.tabs.next()

        assert state.active_tab is AppTab.TIMERS
        assert state.active_feature is state.timer_state

    def test_popup_open_reflects_active_feature(self) -> None:
        """A popup on the hidden tab does not count as open."""
        state = AppState()
        state.timer_state.open_create_popup()

        assert state.popup_open is False
        state.tabs.select(1)
        assert state.popup_open is True

    def test_features_are_independent(self) -> None:
        state = AppState()
        state.task_state.items.append(Task(title="a"))

        assert len(state.timer_state.items) == 0


class TestFromConfig:
    """Building state from Config."""

    def test_accrual_interval_applied(self) -> None:
        state = AppState.from_config(Config(accrual_interval_ms=500))

        assert state.timer_state.accrual_interval == 0.5

    def test_no_toggle_gate_by_default(self) -> None:
        state = AppState.from_config(Config(key_cooldown_ms=150))

        assert state.task_state.toggle_gate is None
        assert state.timer_state.toggle_gate is None

    def test_toggle_gate_when_enabled(self) -> None:
        state = AppState.from_config(Config(key_cooldown_ms=150, cooldown_toggles=True))

        assert state.task_state.toggle_gate is not None
        assert state.task_state.toggle_gate.min_interval == 0.15
        assert state.timer_state.toggle_gate is state.task_state.toggle_gate
