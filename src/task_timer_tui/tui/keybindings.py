"""Keyboard input handling for TUI application.

Keys go to the feature on the active tab first. Only keys that feature
leaves unconsumed reach the global bindings (tab switching, help, quit), so
an open create popup suppresses all of them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import keys
from .cooldown import CooldownGate

if TYPE_CHECKING:
    from .state import AppState

logger = logging.getLogger(__name__)

# Digit shortcuts jump straight to a tab index
TAB_SHORTCUTS = {"1": 0, "2": 1}


class KeybindingHandler:
    """Dispatches key and tick events to the application state."""

    def __init__(self, app_state: AppState, cooldown: CooldownGate | None = None) -> None:
        """Initialize keybinding handler.

        Args:
            app_state: Application state mutated by key and tick events
            cooldown: Optional gate applied to the tab-switching bindings
        """
        self.app_state = app_state
        self.cooldown = cooldown or CooldownGate()

    def handle_key(self, key: str) -> tuple[bool, str | None]:
        """Process keyboard input and execute corresponding action.

        Args:
            key: Key name (e.g., "up", "enter") or a printable character

        Returns:
            Tuple of (handled, message):
                - handled: True if the key was consumed by a feature or a
                  global binding, False otherwise
                - message: Optional feedback message for the footer
        """
        if self.app_state.active_feature.on_keycode(key):
            return True, None

        if key in TAB_SHORTCUTS:
            return self._handle_jump_to_tab(TAB_SHORTCUTS[key])
        if key == keys.LEFT:
            return self._handle_previous_tab()
        if key == keys.RIGHT:
            return self._handle_next_tab()

        if key == "?":
            return self._handle_help()
        if key == keys.ESC:
            return self._handle_escape()
        if key == "q":
            return self._handle_quit()

        if keys.is_printable(key):
            return False, f"Key '{key}' not assigned"
        return False, f"Key {key!r} not assigned"

    def handle_tick(self) -> bool:
        """Advance time-based state. Only timers react to ticks."""
        return self.app_state.timer_state.on_tick()

    # Tab handlers

    def _handle_jump_to_tab(self, index: int) -> tuple[bool, str | None]:
        if not self.cooldown.allow(f"tab_select_{index}"):
            return True, None
        self.app_state.tabs.select(index)
        return True, None

    def _handle_previous_tab(self) -> tuple[bool, str | None]:
        if not self.cooldown.allow("tab_previous"):
            return True, None
        self.app_state.tabs.previous()
        return True, None

    def _handle_next_tab(self) -> tuple[bool, str | None]:
        if not self.cooldown.allow("tab_next"):
            return True, None
        self.app_state.tabs.next()
        return True, None

    # Meta handlers

    def _handle_help(self) -> tuple[bool, str | None]:
        """Toggle help panel visibility."""
        self.app_state.help_panel_visible = not self.app_state.help_panel_visible
        state = "visible" if self.app_state.help_panel_visible else "hidden"
        return True, f"Help panel {state}"

    def _handle_escape(self) -> tuple[bool, str | None]:
        """Handle ESC key - close help panel if open."""
        self.app_state.help_panel_visible = False
        return True, None

    def _handle_quit(self) -> tuple[bool, str | None]:
        """Set the quit flag; the main loop exits after this event."""
        logger.info("Quit requested")
        self.app_state.should_quit = True
        return True, None
