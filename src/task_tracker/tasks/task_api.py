# src/task_tracker/tasks/task_api.py

"""
Glue between JSON payloads and the task store.

The HTTP layer calls these helpers so that request parsing and response
encoding live next to the task model rather than inside route functions.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from ..core.ports import TaskRepo
from .task_models import ZERO_TIME, Task

logger = logging.getLogger(__name__)


def parse_due(raw: Any) -> datetime:
    """
    Parse an ISO-8601 timestamp.

    None means "no due date" and maps to ZERO_TIME.
    Timestamps without an offset are taken as UTC.
    """
    if raw is None:
        return ZERO_TIME
    if not isinstance(raw, str):
        raise ValueError("due must be an ISO-8601 string")
    try:
        due = datetime.fromisoformat(raw.strip())
    except ValueError as e:
        raise ValueError(f"invalid due timestamp: {raw!r}") from e
    if due.tzinfo is None:
        due = due.replace(tzinfo=timezone.utc)
    return due


def parse_create_payload(payload: Any) -> tuple[str, list[str], datetime]:
    """Validate the shape of a create request and return (text, tags, due)."""
    if not isinstance(payload, dict):
        raise ValueError("expected a JSON object")

    text = payload.get("text", "")
    if text is None:
        text = ""
    if not isinstance(text, str):
        raise ValueError("text must be a string")

    tags = payload.get("tags")
    if tags is None:
        tags = []
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ValueError("tags must be a list of strings")

    return text, tags, parse_due(payload.get("due"))


def create_task_from_payload(store: TaskRepo, payload: Any) -> int:
    """Convenience helper: parse a create request and store the task."""
    text, tags, due = parse_create_payload(payload)
    task_id = store.create_task(text, tags, due)
    logger.info("Created task id=%s tags=%s", task_id, tags)
    return task_id


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "tags": list(task.tags),
        "due": task.due.isoformat(),
    }


def tasks_to_list(tasks: list[Task]) -> list[dict[str, Any]]:
    return [task_to_dict(t) for t in tasks]
