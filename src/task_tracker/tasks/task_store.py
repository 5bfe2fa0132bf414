# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from datetime import datetime

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    """Raised when no task with the requested id is stored."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"id = {task_id} not found")
        self.task_id = task_id


class TaskStore:
    """
    In-memory task store.

    State:
    - tasks keyed by id (iteration order is not part of the contract)
    - next_id counter, starts at 0 and only ever grows

    Thread-safety:
    - one lock guards the mapping and the counter together
    - every public method holds it for its whole body, reads included
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[int, Task] = {}
        self._next_id = 0
        logger.info("TaskStore ready (in-memory)")

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def create_task(self, text: str, tags: Iterable[str], due: datetime) -> int:
        """Store a new task and return the id assigned to it."""
        with self._lock:
            task_id = self._next_id
            self._tasks[task_id] = Task(id=task_id, text=text, tags=tuple(tags or ()), due=due)
            self._next_id += 1

        logger.debug("Task added id=%s due=%s", task_id, due)
        return task_id

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return task

    def delete_task(self, task_id: int) -> None:
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]

        logger.debug("Task deleted id=%s", task_id)

    def delete_all_tasks(self) -> None:
        """Drop every task. The id counter keeps going, so ids are never reused."""
        with self._lock:
            dropped = len(self._tasks)
            self._tasks = {}

        logger.info("Deleted all tasks count=%s", dropped)

    def list_all_tasks(self) -> list[Task]:
        with self._lock:
            return list(self._tasks.values())

    def list_tasks_by_tag(self, tag: str) -> list[Task]:
        """
        Tasks carrying `tag` (exact, case-sensitive match).

        A task that repeats the tag is still returned once.
        """
        with self._lock:
            return [t for t in self._tasks.values() if tag in t.tags]

    def list_tasks_by_due_date(self, year: int, month: int, day: int) -> list[Task]:
        with self._lock:
            return [t for t in self._tasks.values() if t.due_on(year, month, day)]
