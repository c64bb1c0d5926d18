"""Ordered list with an optional single-selection cursor.

The list owns both the items and the cursor so selection rules can be
exercised without any rendering library.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StatefulList(Generic[T]):
    """Items plus a cursor that is either an index or None.

    The cursor starts unset, even when items are supplied, and is only
    established by navigation. After a deletion the cursor is None exactly
    when the list is empty.
    """

    def __init__(self) -> None:
        self._items: list[T] = []
        self._selected: int | None = None

    @classmethod
    def with_items(cls, items: Iterable[T]) -> StatefulList[T]:
        """Create a list holding items with no selection."""
        stateful = cls()
        stateful._items = list(items)
        return stateful

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"StatefulList(items={len(self._items)}, selected={self._selected})"

    @property
    def items(self) -> tuple[T, ...]:
        """Snapshot of the items in display order."""
        return tuple(self._items)

    @property
    def selected_index(self) -> int | None:
        return self._selected

    @property
    def selected(self) -> T | None:
        """Item under the cursor, or None when nothing is selected."""
        if self._selected is None or self._selected >= len(self._items):
            return None
        return self._items[self._selected]

    def next(self) -> None:
        """Move the cursor down, wrapping from the last item to the first."""
        if not self._items:
            return
        if self._selected is None or self._selected + 1 >= len(self._items):
            self._selected = 0
        else:
            self._selected += 1

    def previous(self) -> None:
        """Move the cursor up, wrapping from the first item to the last."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
        elif self._selected == 0:
            self._selected = len(self._items) - 1
        else:
            # Clamp first in case the cursor outlived a shorter list
            self._selected = min(self._selected, len(self._items)) - 1

    def append(self, item: T) -> None:
        """Add item at the tail without moving the cursor."""
        self._items.append(item)

    def delete_selected(self) -> T | None:
        """Remove the selected item and return it.

        Returns None when nothing is selected or the cursor no longer points
        inside the list.
        """
        index = self._selected
        if index is None or index >= len(self._items):
            return None

        removed = self._items.pop(index)

        if not self._items:
            self._selected = None
        elif index == 0:
            self._selected = 0
        else:
            self.previous()

        logger.debug(
            f"Deleted item at index {index}, {len(self._items)} left, "
            f"cursor now {self._selected}"
        )
        return removed
