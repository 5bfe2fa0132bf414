# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

# Timestamp used when a task is created without a due date.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Tasks are never edited in place: the store creates them once and only
    ever replaces or drops them. `tags` keeps the caller's order.
    """

    id: int
    text: str
    tags: tuple[str, ...]
    due: datetime

    def due_on(self, year: int, month: int, day: int) -> bool:
        # Calendar date in the timestamp's own timezone.
        return (self.due.year, self.due.month, self.due.day) == (year, month, day)
