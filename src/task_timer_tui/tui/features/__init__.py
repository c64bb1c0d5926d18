"""Per-tab features sharing the browse/create key handling."""

from .base import EntityFeature
from .tasks import TaskFeature
from .timers import TimerFeature

__all__ = ["EntityFeature", "TaskFeature", "TimerFeature"]
