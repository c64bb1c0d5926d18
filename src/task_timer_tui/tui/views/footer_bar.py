"""Footer bar renderer for status indicators.

This module provides the render_footer_bar function that displays the
current mode, the last status message, and help hints.
"""

from __future__ import annotations

from rich.text import Text

from ..tui_utils import truncate_text


def render_footer_bar(
    popup_open: bool,
    active_timer_count: int = 0,
    status_message: str | None = None,
    terminal_width: int = 80,
) -> Text:
    """Build Rich Text displaying footer status bar.

    Args:
        popup_open: Whether the create popup is capturing input
        active_timer_count: Number of running timers
        status_message: Current feedback message to display, if any
        terminal_width: Terminal width for truncation calculations

    Returns:
        Rich Text component ready for rendering
    """
    parts = []

    if popup_open:
        parts.append(("EDITING", "bold yellow"))
    elif active_timer_count > 0:
        timer_text = (
            f"{active_timer_count} timer running"
            if active_timer_count == 1
            else f"{active_timer_count} timers running"
        )
        parts.append((timer_text, "green"))
    else:
        parts.append(("No timers running", "dim"))

    help_hint = "Press ? for help · q to quit"

    if status_message:
        # Format: "[mode] | [message] | [hint]"
        available_width = terminal_width - len(parts[0][0]) - len(help_hint) - 6

        if available_width > 10:
            parts.append((" | ", "dim"))
            parts.append((truncate_text(status_message, available_width), "red"))

    parts.append((" | ", "dim"))
    parts.append((help_hint, "cyan"))

    footer = Text()
    for text, style in parts:
        footer.append(text, style=style)

    return footer
