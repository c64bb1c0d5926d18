"""Active-tab tracking over a fixed set of tab titles."""

from __future__ import annotations

from .models import TAB_TITLES


class TabsState:
    """Index into titles that always stays in range."""

    def __init__(self, titles: tuple[str, ...] = TAB_TITLES) -> None:
        if not titles:
            raise ValueError("TabsState needs at least one tab")
        self.titles = titles
        self.index = 0

    def next(self) -> None:
        self.index = (self.index + 1) % len(self.titles)

    def previous(self) -> None:
        self.index = (self.index - 1) % len(self.titles)

    def select(self, index: int) -> bool:
        """Jump to index; out-of-range indices are ignored.

        Returns:
            True if the active tab changed
        """
        if not 0 <= index < len(self.titles) or index == self.index:
            return False
        self.index = index
        return True

    @property
    def active_title(self) -> str:
        return self.titles[self.index]
