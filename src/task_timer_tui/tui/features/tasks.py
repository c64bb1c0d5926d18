"""Task list feature."""

from __future__ import annotations

from ..cooldown import CooldownGate
from ..models import Draft, Task
from .base import EntityFeature

TASK_FIELDS = ("title", "description")


def _build_task(draft: Draft) -> Task:
    return Task(title=draft.get("title"), description=draft.get("description"))


class TaskFeature(EntityFeature[Task]):
    """Tasks tab: Enter marks the selected task done or not done."""

    def __init__(self, toggle_gate: CooldownGate | None = None) -> None:
        super().__init__(
            name="task",
            field_names=TASK_FIELDS,
            build_entity=_build_task,
            toggle_entity=Task.toggle,
            toggle_gate=toggle_gate,
        )

    @property
    def completed_count(self) -> int:
        return sum(1 for task in self.items if task.is_completed)
