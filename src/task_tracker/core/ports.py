# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the HTTP layer.

Routes depend on this Protocol instead of the concrete TaskStore,
which keeps the store swappable and makes handlers easy to test with fakes.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Protocol


class TaskRepo(Protocol):
    """The seven task operations plus a count used for diagnostics."""

    def create_task(self, text: str, tags: Iterable[str], due: datetime) -> int: ...
    def get_task(self, task_id: int) -> Any: ...
    def delete_task(self, task_id: int) -> None: ...
    def delete_all_tasks(self) -> None: ...

    def list_all_tasks(self) -> list[Any]: ...
    def list_tasks_by_tag(self, tag: str) -> list[Any]: ...
    def list_tasks_by_due_date(self, year: int, month: int, day: int) -> list[Any]: ...

    def count_tasks(self) -> int: ...
