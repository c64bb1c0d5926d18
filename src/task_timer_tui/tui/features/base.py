"""List-backed feature with a modal create popup.

Both tabs share this state machine. While browsing, keys move the cursor,
toggle or delete the selected entity, or open the popup; keys the feature
does not know are left for the global bindings. While the popup is open the
feature captures every key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from .. import keys
from ..cooldown import CooldownGate
from ..models import Draft, PopupState
from ..stateful_list import StatefulList

logger = logging.getLogger(__name__)

T = TypeVar("T")

TOGGLE_ACTION = "toggle"


class EntityFeature(Generic[T]):
    """Browsing/creating key handler over a StatefulList of entities."""

    def __init__(
        self,
        name: str,
        field_names: tuple[str, ...],
        build_entity: Callable[[Draft], T],
        toggle_entity: Callable[[T], None],
        toggle_gate: CooldownGate | None = None,
    ) -> None:
        """Initialize feature state.

        Args:
            name: Entity kind used in log messages (e.g. "task")
            field_names: Draft fields in focus order; the first gets focus on open
            build_entity: Builds a new entity from a committed draft
            toggle_entity: Flips the entity's status flag in place
            toggle_gate: Optional cooldown applied to the Enter toggle
        """
        self.name = name
        self.items: StatefulList[T] = StatefulList.with_items([])
        self.popup = PopupState(field_names)
        self._build_entity = build_entity
        self._toggle_entity = toggle_entity
        self.toggle_gate = toggle_gate

    @property
    def is_creating(self) -> bool:
        return self.popup.is_open

    @property
    def draft(self) -> Draft | None:
        return self.popup.draft

    def on_keycode(self, key: str) -> bool:
        """Handle a key press.

        Returns:
            True if the key was consumed, False if it should fall through
            to the global bindings
        """
        if self.popup.is_open:
            self._on_popup_keycode(key)
            return True

        if key == keys.UP:
            self.items.previous()
            return True
        if key == keys.DOWN:
            self.items.next()
            return True
        if key == keys.ENTER:
            self._handle_toggle_selected()
            return True
        if key == "d":
            self._handle_delete_selected()
            return True
        if key == "n":
            self.open_create_popup()
            return True

        return False

    def open_create_popup(self) -> None:
        self.popup.open()
        logger.debug(f"Opened create popup for new {self.name}")

    def close_create_popup(self) -> None:
        self.popup.close()
        logger.debug(f"Closed create popup for {self.name}")

    def commit_draft(self) -> T:
        """Append an entity built from the draft and close the popup."""
        draft = self.popup.close() or Draft.empty(self.popup.field_names)
        entity = self._build_entity(draft)
        self.items.append(entity)
        logger.debug(f"Created {self.name} {draft.get(draft.field_names[0])!r}")
        return entity

    def _handle_toggle_selected(self) -> None:
        entity = self.items.selected
        if entity is None:
            return
        if self.toggle_gate is not None and not self.toggle_gate.allow(TOGGLE_ACTION):
            return
        self._toggle_entity(entity)

    def _handle_delete_selected(self) -> None:
        removed = self.items.delete_selected()
        if removed is not None:
            logger.debug(f"Deleted {self.name}, {len(self.items)} remaining")

    def _on_popup_keycode(self, key: str) -> None:
        draft = self.popup.draft
        if draft is None:
            draft = self.popup.open()

        if key == keys.ENTER:
            self.commit_draft()
        elif key == keys.ESC:
            self.close_create_popup()
        elif key == keys.BACKSPACE:
            draft.backspace()
        elif key == keys.TAB:
            draft.focus_next()
        elif key == keys.BACKTAB:
            draft.focus_previous()
        elif keys.is_printable(key):
            draft.type_char(key)
