"""Tab bar renderer showing the app title and the active tab."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text


def render_tab_bar(titles: tuple[str, ...], active_index: int, app_title: str) -> Panel:
    """Build Rich Panel with one label per tab, the active one highlighted.

    Args:
        titles: Tab titles in display order
        active_index: Index of the active tab
        app_title: Title shown on the panel border

    Returns:
        Rich Panel component ready for rendering
    """
    bar = Text()
    for index, title in enumerate(titles):
        if index:
            bar.append(" │ ", style="dim")
        label = f"{index + 1} {title}"
        if index == active_index:
            bar.append(label, style="bold yellow")
        else:
            bar.append(label, style="green")

    return Panel(bar, title=f"[bold white]{app_title}[/bold white]", border_style="blue")
