"""Task list panel renderer."""

from __future__ import annotations

from collections.abc import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models import Task
from ..tui_utils import get_task_badge, truncate_text

MAX_TITLE_LENGTH = 60


def render_task_list_panel(
    tasks: Sequence[Task],
    selected_index: int | None,
    enhanced_graphics: bool = True,
) -> Panel:
    """Build Rich Panel listing tasks with the cursor row highlighted.

    Args:
        tasks: Tasks in display order
        selected_index: Cursor position, or None for no selection
        enhanced_graphics: Use unicode glyphs for status icons

    Returns:
        Rich Panel component with task table
    """
    table = Table(
        show_header=True,
        header_style="bold cyan",
        border_style="blue",
        padding=(0, 1),
        expand=True,
    )
    table.add_column("Done", style="cyan", no_wrap=True, width=6)
    table.add_column("Task", style="white")
    table.add_column("Description", style="dim")

    for index, task in enumerate(tasks):
        icon, color = get_task_badge(task.is_completed, enhanced_graphics)
        title = Text(
            truncate_text(task.title, MAX_TITLE_LENGTH),
            style="strike" if task.is_completed else "",
        )
        row_style = "reverse" if index == selected_index else None
        table.add_row(Text(icon, style=color), title, Text(task.description), style=row_style)

    if not tasks:
        table.add_row("", "[dim italic]No tasks yet, press n to add one[/dim italic]", "")

    done = sum(1 for task in tasks if task.is_completed)
    hints = "[dim](↑/↓: move · Enter: toggle · n: new · d: delete)[/dim]"
    title = f"[bold white]Tasks[/bold white] [dim]({done}/{len(tasks)} done)[/dim] {hints}"

    return Panel(table, title=title, border_style="blue", padding=(0, 1))
