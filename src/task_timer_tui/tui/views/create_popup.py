"""Create popup renderer for the draft being typed."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models import Draft


def render_create_popup(draft: Draft, entity_name: str) -> Panel:
    """Build Rich Panel showing each draft field, the focused one with a caret.

    Args:
        draft: Draft buffers and focus
        entity_name: Entity kind for the title (e.g. "task")

    Returns:
        Rich Panel component for the popup
    """
    table = Table.grid(padding=(0, 1))
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    for index, (name, value) in enumerate(zip(draft.field_names, draft.values)):
        text = Text(value)
        if index == draft.focused_field:
            text.append("█", style="blink")
            label = f"> {name.capitalize()}"
        else:
            label = f"  {name.capitalize()}"
        table.add_row(label, text)

    hints = "Enter: create · Esc: cancel"
    if len(draft.field_names) > 1:
        hints += " · Tab: next field"

    return Panel(
        table,
        title=f"[bold white]New {entity_name}[/bold white]",
        subtitle=f"[dim]{hints}[/dim]",
        border_style="yellow",
        padding=(1, 2),
    )
