"""Main TUI application loop and layout.

This module drives the application: it polls stdin for keys, emits ticks at
the configured rate, dispatches both through KeybindingHandler, and renders
AppState with Rich after every event. Everything runs on one thread.
"""

from __future__ import annotations

import logging
import os
import select
import sys
import termios
import tty

from rich.console import Console
from rich.layout import Layout
from rich.live import Live

from ..utils import Config
from . import keys
from .cooldown import CooldownGate
from .keybindings import KeybindingHandler
from .models import AppTab
from .state import AppState
from .ticker import TickClock
from .tui_utils import get_terminal_size
from .views.create_popup import render_create_popup
from .views.footer_bar import render_footer_bar
from .views.help_panel import render_help_panel
from .views.tab_bar import render_tab_bar
from .views.task_list_panel import render_task_list_panel
from .views.timer_list_panel import render_timer_list_panel

logger = logging.getLogger(__name__)

# How long to wait for the rest of an escape sequence after "\x1b"
ESCAPE_SEQUENCE_TIMEOUT = 0.01


class TUIApp:
    """Main TUI application orchestrating all components."""

    def __init__(self, config: Config):
        """Initialize TUI application.

        Args:
            config: Runtime configuration
        """
        self.config = config
        self.console = Console()

        self.app_state = AppState.from_config(config)
        self.keybinding_handler = KeybindingHandler(
            self.app_state,
            cooldown=CooldownGate(config.key_cooldown_seconds),
        )
        self.tick_clock = TickClock(config.tick_rate_seconds)

        self._old_terminal_settings: list | None = None

        self.terminal_width, self.terminal_height = get_terminal_size()
        self.min_terminal_cols = config.min_terminal_cols
        self.min_terminal_rows = config.min_terminal_rows

    @property
    def should_quit(self) -> bool:
        return self.app_state.should_quit

    @should_quit.setter
    def should_quit(self, value: bool) -> None:
        self.app_state.should_quit = value

    def _check_terminal_size(self) -> bool:
        """Check if terminal meets minimum size requirements.

        Returns:
            True if terminal is large enough, False otherwise
        """
        self.terminal_width, self.terminal_height = get_terminal_size()
        return (
            self.terminal_width >= self.min_terminal_cols
            and self.terminal_height >= self.min_terminal_rows
        )

    def _build_layout(self) -> Layout:
        """Build the layout for the current state.

        Returns:
            Rich Layout with all panels configured
        """
        layout = Layout()

        layout.split_column(
            Layout(name="tabs", size=3),
            Layout(name="main", ratio=1),
            Layout(name="footer", size=1),
        )

        if self.app_state.help_panel_visible:
            layout["main"].update(Layout(name="help"))
            return layout

        if self.app_state.popup_open:
            draft = self.app_state.active_feature.draft
            field_count = len(draft.field_names) if draft else 1
            layout["main"].split_column(
                Layout(name="list", ratio=1),
                Layout(name="popup", size=field_count + 4),
            )
        else:
            layout["main"].split_column(Layout(name="list", ratio=1))

        return layout

    def _render_layout(self, layout: Layout) -> None:
        """Render all panels into the layout.

        Args:
            layout: Layout to render into
        """
        state = self.app_state
        enhanced = self.config.enhanced_graphics

        layout["tabs"].update(render_tab_bar(state.tabs.titles, state.tabs.index, self.config.title))

        if state.help_panel_visible:
            layout["help"].update(render_help_panel())
        else:
            feature = state.active_feature
            if state.active_tab is AppTab.TIMERS:
                panel = render_timer_list_panel(
                    feature.items.items, feature.items.selected_index, enhanced
                )
            else:
                panel = render_task_list_panel(
                    feature.items.items, feature.items.selected_index, enhanced
                )
            layout["list"].update(panel)

            if state.popup_open and feature.draft is not None:
                layout["popup"].update(render_create_popup(feature.draft, feature.name))

        footer = render_footer_bar(
            popup_open=state.popup_open,
            active_timer_count=state.timer_state.active_count,
            status_message=state.status_message,
            terminal_width=self.terminal_width,
        )
        layout["footer"].update(footer)

    def _read_char(self, timeout: float) -> str | None:
        """Read one character from stdin if it arrives within timeout.

        Reads the file descriptor directly; a buffered sys.stdin.read would
        swallow the rest of an escape sequence where select cannot see it.
        """
        fd = sys.stdin.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        data = os.read(fd, 1)
        if not data:
            return None

        # UTF-8 lead byte announces how many continuation bytes follow
        lead = data[0]
        if lead >= 0xC0:
            extra = 1 if lead < 0xE0 else 2 if lead < 0xF0 else 3
            data += os.read(fd, extra)
        return data.decode("utf-8", errors="replace")

    def _read_escape_sequence(self) -> str | None:
        """Decode the remainder of a sequence that started with ESC.

        Returns:
            Key name, "esc" for a lone ESC, or None for unknown sequences
        """
        intro = self._read_char(ESCAPE_SEQUENCE_TIMEOUT)
        if intro is None:
            return keys.ESC
        if intro not in ("[", "O"):
            # Alt+key; not bound to anything
            return None

        params = ""
        while True:
            char = self._read_char(ESCAPE_SEQUENCE_TIMEOUT)
            if char is None:
                return None
            if "@" <= char <= "~":
                break
            params += char

        if params:
            logger.debug(f"Ignoring escape sequence with parameters {params!r}{char}")
            return None
        return keys.CSI_KEYS.get(char)

    def _poll_keyboard(self, timeout: float = 0.1) -> str | None:
        """Poll for keyboard input with timeout.

        Args:
            timeout: Timeout in seconds

        Returns:
            Key name or printable character if a key was pressed, None otherwise
        """
        try:
            char = self._read_char(timeout)
        except (OSError, ValueError) as err:
            logger.warning(f"Error reading keyboard input: {err}")
            return None

        if char is None:
            return None
        if char == "\x1b":
            return self._read_escape_sequence()
        if char in keys.CONTROL_KEYS:
            return keys.CONTROL_KEYS[char]
        if keys.is_printable(char):
            return char
        return None

    def _handle_key(self, key: str) -> None:
        """Dispatch a key and record the feedback message."""
        handled, message = self.keybinding_handler.handle_key(key)
        if message:
            self.app_state.status_message = message
        elif handled:
            self.app_state.status_message = None

    def _setup_terminal(self) -> None:
        """Put stdin into cbreak mode so keys arrive unbuffered."""
        try:
            self._old_terminal_settings = termios.tcgetattr(sys.stdin)
            tty.setcbreak(sys.stdin.fileno())
        except (termios.error, AttributeError, ValueError, OSError) as err:
            logger.warning(f"Could not switch terminal to cbreak mode: {err}")
            self._old_terminal_settings = None

    def _restore_terminal(self) -> None:
        """Restore terminal settings saved by _setup_terminal."""
        if self._old_terminal_settings is None:
            return
        try:
            termios.tcsetattr(sys.stdin, termios.TCSADRAIN, self._old_terminal_settings)
        except (termios.error, ValueError) as err:
            logger.warning(f"Could not restore terminal settings: {err}")
        self._old_terminal_settings = None

    def run(self) -> int:
        """Run the main TUI event loop.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            self._setup_terminal()
            layout = self._build_layout()

            with Live(
                layout,
                console=self.console,
                auto_refresh=False,
                screen=True,
            ) as live:
                logger.info("TUI main loop started")

                while not self.should_quit:
                    key = self._poll_keyboard(timeout=self.tick_clock.time_until_tick())
                    if key:
                        self._handle_key(key)

                    if self.tick_clock.poll():
                        self.keybinding_handler.handle_tick()

                    if not self._check_terminal_size():
                        self.app_state.status_message = (
                            f"Terminal too small! Need {self.min_terminal_cols}x"
                            f"{self.min_terminal_rows}, got {self.terminal_width}x"
                            f"{self.terminal_height}"
                        )
                    elif (
                        self.app_state.status_message
                        and "Terminal too small" in self.app_state.status_message
                    ):
                        self.app_state.status_message = None

                    layout = self._build_layout()
                    self._render_layout(layout)
                    live.update(layout, refresh=True)

            logger.info("TUI main loop exited")
            return 0

        except KeyboardInterrupt:
            logger.info("TUI interrupted by user")
            return 130

        except Exception as err:
            logger.error(f"TUI crashed: {err}", exc_info=True)
            self.console.print(f"[red]Error: {err}[/red]")
            return 1

        finally:
            self._restore_terminal()
            logger.info("TUI cleanup complete")
