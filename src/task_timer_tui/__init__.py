"""Tabbed terminal task list and activity timers."""

__version__ = "0.1.0"
