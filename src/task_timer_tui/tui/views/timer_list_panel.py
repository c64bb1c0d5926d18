"""Timer list panel renderer."""

from __future__ import annotations

from collections.abc import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models import Timer
from ..tui_utils import format_duration, get_timer_badge, truncate_text

MAX_TITLE_LENGTH = 50


def render_timer_list_panel(
    timers: Sequence[Timer],
    selected_index: int | None,
    enhanced_graphics: bool = True,
) -> Panel:
    """Build Rich Panel listing timers with their accumulated time.

    Args:
        timers: Timers in display order
        selected_index: Cursor position, or None for no selection
        enhanced_graphics: Use unicode glyphs for status icons

    Returns:
        Rich Panel component with timer table
    """
    table = Table(
        show_header=True,
        header_style="bold green",
        border_style="blue",
        padding=(0, 1),
        expand=True,
    )
    table.add_column("State", style="cyan", no_wrap=True, width=6)
    table.add_column("Timer", style="white")
    table.add_column("Active", style="yellow", no_wrap=True, width=10)
    table.add_column("Created", style="dim", no_wrap=True, width=16)

    for index, timer in enumerate(timers):
        icon, color = get_timer_badge(timer.is_active, enhanced_graphics)
        row_style = "reverse" if index == selected_index else None
        table.add_row(
            Text(icon, style=color),
            Text(truncate_text(timer.title, MAX_TITLE_LENGTH)),
            format_duration(timer.time_active),
            timer.created_at.strftime("%Y-%m-%d %H:%M"),
            style=row_style,
        )

    if not timers:
        table.add_row("", "[dim italic]No timers yet, press n to add one[/dim italic]", "", "")

    running = sum(1 for timer in timers if timer.is_active)
    hints = "[dim](↑/↓: move · Enter: start/pause · n: new · d: delete)[/dim]"
    title = f"[bold white]Active Timers[/bold white] [dim]({running} running)[/dim] {hints}"

    return Panel(table, title=title, border_style="green", padding=(0, 1))
