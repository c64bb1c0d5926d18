"""Custom exceptions for TUI operations.

The interactive core never raises: navigation on empty lists and stale
selections are no-ops. These exceptions cover the layers around it.
"""


class TUIError(Exception):
    """Base exception for all TUI-related errors."""


class ConfigError(TUIError):
    """Raised when configuration is invalid or cannot be loaded."""
