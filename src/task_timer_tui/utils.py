"""Shared helpers for loading runtime configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from .tui.exceptions import ConfigError

DEFAULT_LOG_DIR = Path("~/.cache/task-timer-tui")


def _positive_int(payload: dict, key: str, default: int) -> int:
    """Read an integer option that must be strictly positive."""
    try:
        value = int(payload.get(key, default))
    except (TypeError, ValueError) as err:
        raise ConfigError(f"{key} must be an integer, got {payload.get(key)!r}") from err
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {value}")
    return value


def _bool_option(payload: dict, key: str, default: bool) -> bool:
    """Read a flag that must be a JSON boolean."""
    value = payload.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


@dataclass(frozen=True)
class Config:
    """Runtime configuration loaded from config.json."""

    title: str = "Task Timer"
    tick_rate_ms: int = 250
    accrual_interval_ms: int = 1000
    key_cooldown_ms: int = 0
    cooldown_toggles: bool = False
    enhanced_graphics: bool = True
    min_terminal_cols: int = 60
    min_terminal_rows: int = 16
    log_dir: Path = DEFAULT_LOG_DIR.expanduser()

    @property
    def tick_rate_seconds(self) -> float:
        return self.tick_rate_ms / 1000

    @property
    def accrual_interval_seconds(self) -> float:
        return self.accrual_interval_ms / 1000

    @property
    def key_cooldown_seconds(self) -> float:
        return self.key_cooldown_ms / 1000

    @classmethod
    def from_dict(cls, payload: dict) -> Config:
        """Create a Config object from a raw dictionary."""
        if not isinstance(payload, dict):
            raise ConfigError("config root must be a JSON object")

        key_cooldown_ms = payload.get("key_cooldown_ms", 0)
        if not isinstance(key_cooldown_ms, int) or isinstance(key_cooldown_ms, bool):
            raise ConfigError(f"key_cooldown_ms must be an integer, got {key_cooldown_ms!r}")
        if key_cooldown_ms < 0:
            raise ConfigError(f"key_cooldown_ms must not be negative, got {key_cooldown_ms}")

        log_dir = Path(str(payload.get("log_dir", DEFAULT_LOG_DIR))).expanduser()

        return cls(
            title=str(payload.get("title", "Task Timer")),
            tick_rate_ms=_positive_int(payload, "tick_rate_ms", 250),
            accrual_interval_ms=_positive_int(payload, "accrual_interval_ms", 1000),
            key_cooldown_ms=key_cooldown_ms,
            cooldown_toggles=_bool_option(payload, "cooldown_toggles", False),
            enhanced_graphics=_bool_option(payload, "enhanced_graphics", True),
            min_terminal_cols=_positive_int(payload, "min_terminal_cols", 60),
            min_terminal_rows=_positive_int(payload, "min_terminal_rows", 16),
            log_dir=log_dir,
        )


def load_config(path: Path | None) -> Config:
    """Load configuration from the provided path.

    A missing path yields the defaults; an unreadable or malformed file raises
    ConfigError.
    """
    if path is None:
        return Config()
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as err:
        raise ConfigError(f"Config file not found: {path}") from err
    except OSError as err:
        raise ConfigError(f"Cannot read config file {path}: {err}") from err
    except json.JSONDecodeError as err:
        raise ConfigError(f"Invalid JSON in {path}: {err}") from err
    return Config.from_dict(data)
