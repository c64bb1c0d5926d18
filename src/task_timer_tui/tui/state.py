"""Application state read by the renderer once per frame."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .cooldown import CooldownGate
from .features import EntityFeature, TaskFeature, TimerFeature
from .models import AppTab
from .tabs import TabsState

if TYPE_CHECKING:
    from ..utils import Config


@dataclass
class AppState:
    """Top-level state: tabs, both features, and UI flags."""

    tabs: TabsState = field(default_factory=TabsState)
    task_state: TaskFeature = field(default_factory=TaskFeature)
    timer_state: TimerFeature = field(default_factory=TimerFeature)
    should_quit: bool = False
    help_panel_visible: bool = False
    status_message: str | None = None

    @classmethod
    def from_config(
        cls, config: Config, clock: Callable[[], float] = time.monotonic
    ) -> AppState:
        """Build state with the accrual interval and toggle cooldown from config."""
        toggle_gate = None
        if config.cooldown_toggles and config.key_cooldown_ms > 0:
            toggle_gate = CooldownGate(config.key_cooldown_seconds, clock=clock)

        return cls(
            task_state=TaskFeature(toggle_gate=toggle_gate),
            timer_state=TimerFeature(
                accrual_interval=config.accrual_interval_seconds,
                clock=clock,
                toggle_gate=toggle_gate,
            ),
        )

    @property
    def active_tab(self) -> AppTab:
        return AppTab(self.tabs.index)

    @property
    def active_feature(self) -> EntityFeature:
        if self.active_tab is AppTab.TIMERS:
            return self.timer_state
        return self.task_state

    @property
    def popup_open(self) -> bool:
        return self.active_feature.is_creating
