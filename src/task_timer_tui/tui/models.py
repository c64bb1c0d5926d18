"""State data models for the TUI application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum


class AppTab(Enum):
    """Tabs in display order; the value is the tab index."""

    TASKS = 0
    TIMERS = 1

    @property
    def title(self) -> str:
        return self.name.capitalize()


TAB_TITLES: tuple[str, ...] = tuple(tab.title for tab in AppTab)


@dataclass
class Task:
    """A to-do entry."""

    title: str
    description: str = ""
    is_completed: bool = False

    def toggle(self) -> None:
        self.is_completed = not self.is_completed


@dataclass
class Timer:
    """A stopwatch accumulating the time it spends active.

    time_active only ever grows, and only while is_active is set.
    """

    title: str
    created_at: datetime
    is_active: bool = False
    time_active: timedelta = field(default_factory=timedelta)

    def toggle(self) -> None:
        self.is_active = not self.is_active

    def accrue(self, elapsed: timedelta) -> None:
        """Add elapsed time if the timer is running."""
        if self.is_active and elapsed > timedelta(0):
            self.time_active += elapsed


@dataclass
class Draft:
    """Text buffers for an entity being typed into the create popup."""

    field_names: tuple[str, ...]
    values: list[str] = field(default_factory=list)
    focused_field: int = 0

    def __post_init__(self) -> None:
        if not self.field_names:
            raise ValueError("Draft needs at least one field")
        if not self.values:
            self.values = ["" for _ in self.field_names]

    @classmethod
    def empty(cls, field_names: tuple[str, ...]) -> Draft:
        return cls(field_names=field_names)

    @property
    def focused_name(self) -> str:
        return self.field_names[self.focused_field]

    def get(self, name: str) -> str:
        return self.values[self.field_names.index(name)]

    def as_dict(self) -> dict[str, str]:
        return dict(zip(self.field_names, self.values))

    def type_char(self, char: str) -> None:
        self.values[self.focused_field] += char

    def backspace(self) -> None:
        self.values[self.focused_field] = self.values[self.focused_field][:-1]

    def focus_next(self) -> None:
        self.focused_field = (self.focused_field + 1) % len(self.field_names)

    def focus_previous(self) -> None:
        self.focused_field = (self.focused_field - 1) % len(self.field_names)


@dataclass
class PopupState:
    """Create-popup sub-state owned by one feature."""

    field_names: tuple[str, ...]
    is_open: bool = False
    draft: Draft | None = None

    def open(self) -> Draft:
        self.draft = Draft.empty(self.field_names)
        self.is_open = True
        return self.draft

    def close(self) -> Draft | None:
        """Close the popup and hand back the discarded draft."""
        draft = self.draft
        self.draft = None
        self.is_open = False
        return draft
