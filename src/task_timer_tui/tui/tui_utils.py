"""TUI utility functions for formatting and display helpers."""

import shutil
from datetime import timedelta


def format_duration(duration: timedelta | float) -> str:
    """
    Format a duration to HH:MM:SS string.

    Args:
        duration: timedelta or number of seconds (can be float)

    Returns:
        String formatted as HH:MM:SS (e.g., "01:23:45")

    Examples:
        >>> format_duration(0)
        '00:00:00'
        >>> format_duration(timedelta(hours=1, minutes=1, seconds=1.6))
        '01:01:01'
        >>> format_duration(86400)
        '24:00:00'
    """
    if isinstance(duration, timedelta):
        seconds = duration.total_seconds()
    else:
        seconds = float(duration)
    if seconds < 0:
        seconds = 0

    total_seconds = int(seconds)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def truncate_text(text: str, max_len: int) -> str:
    """
    Truncate text to max length, adding ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Truncated text with "..." suffix if text exceeds max_len

    Examples:
        >>> truncate_text("short", 10)
        'short'
        >>> truncate_text("this is a long text", 10)
        'this is...'
    """
    if len(text) <= max_len:
        return text

    if max_len <= 3:
        return "..."[:max(max_len, 0)]

    return text[: max_len - 3] + "..."


def get_terminal_size() -> tuple[int, int]:
    """
    Get terminal size as (columns, rows) tuple.

    Returns:
        Tuple of (columns, rows), defaults to (80, 24) if unavailable
    """
    try:
        size = shutil.get_terminal_size(fallback=(80, 24))
        return (size.columns, size.lines)
    except (OSError, ValueError):
        return (80, 24)


def get_task_badge(is_completed: bool, enhanced_graphics: bool = True) -> tuple[str, str]:
    """
    Get glyph and color for a task's completion state.

    Examples:
        >>> get_task_badge(True)
        ('✓', 'green')
        >>> get_task_badge(False, enhanced_graphics=False)
        ('[ ]', 'dim')
    """
    if enhanced_graphics:
        return ("✓", "green") if is_completed else ("○", "dim")
    return ("[x]", "green") if is_completed else ("[ ]", "dim")


def get_timer_badge(is_active: bool, enhanced_graphics: bool = True) -> tuple[str, str]:
    """
    Get glyph and color for a timer's running state.

    Examples:
        >>> get_timer_badge(True)
        ('▶', 'yellow')
        >>> get_timer_badge(False, enhanced_graphics=False)
        ('||', 'dim')
    """
    if enhanced_graphics:
        return ("▶", "yellow") if is_active else ("■", "dim")
    return (">", "yellow") if is_active else ("||", "dim")
