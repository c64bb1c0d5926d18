"""Help panel renderer for keybinding reference."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table


def render_help_panel() -> Panel:
    """Build Rich Panel displaying keybinding reference table.

    Returns:
        Rich Panel component with categorized keybindings
    """
    table = Table(
        show_header=True,
        header_style="bold magenta",
        border_style="blue",
        padding=(0, 1),
    )
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Action", style="yellow")
    table.add_column("Description", style="white")

    table.add_row("", "[bold cyan]Lists[/bold cyan]", "", style="bold")
    table.add_row("↑/↓", "Navigate", "Move selection, wrapping at the ends")
    table.add_row("Enter", "Toggle", "Complete a task / start or pause a timer")
    table.add_row("n", "New", "Open the create popup")
    table.add_row("d", "Delete", "Delete the selected entry")

    table.add_row("", "", "")
    table.add_row("", "[bold yellow]Create popup[/bold yellow]", "", style="bold")
    table.add_row("Enter", "Create", "Add the entry and close the popup")
    table.add_row("Esc", "Cancel", "Discard the draft")
    table.add_row("Tab", "Next field", "Switch between title and description")

    table.add_row("", "", "")
    table.add_row("", "[bold green]Tabs[/bold green]", "", style="bold")
    table.add_row("←/→", "Switch tab", "Previous / next tab")
    table.add_row("1/2", "Jump", "Go to Tasks / Timers")

    table.add_row("", "", "")
    table.add_row("", "[bold magenta]Meta[/bold magenta]", "", style="bold")
    table.add_row("?", "Help", "Toggle this help panel")
    table.add_row("Esc", "Close", "Close help panel")
    table.add_row("q", "Quit", "Exit (not while a popup is open)")

    return Panel(
        table,
        title="[bold white]Keybindings[/bold white]",
        border_style="blue",
        padding=(1, 2),
    )
