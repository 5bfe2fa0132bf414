# src/task_tracker/web/routes.py

"""
HTTP request router.

Builds a Flask app around an AppState:
- /task/           POST create, GET list all, DELETE delete all
- /task/<id>       GET one, DELETE one
- /tag/<tag>       GET tasks carrying the tag (rest of the path, slashes included)
- /due/<y>/<m>/<d> GET tasks due on that date

Errors are returned as JSON: {"error": "..."}.
"""

from __future__ import annotations

import logging
import re

from flask import Flask, Response, abort, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from ..core.state import AppState
from ..tasks.task_api import create_task_from_payload, task_to_dict, tasks_to_list
from ..tasks.task_store import TaskNotFoundError

logger = logging.getLogger(__name__)

# ASCII digits only, short enough to stay well inside int() limits.
_INT_RE = re.compile(r"[+-]?[0-9]{1,18}")

# Methods Flask adds on its own; not worth listing in error messages.
_IMPLICIT_METHODS = {"HEAD", "OPTIONS"}


def _parse_int(raw: str, what: str) -> int:
    if not _INT_RE.fullmatch(raw):
        abort(400, description=f"{what} must be an integer, got {raw!r}")
    return int(raw)


def _json_error(message: str, status: int) -> Response:
    resp = jsonify(error=message)
    resp.status_code = status
    return resp


def create_app(state: AppState) -> Flask:
    """Application factory: one app per AppState (tests build their own)."""
    app = Flask(__name__)
    store = state.task_store

    # ---- error translation ----

    @app.errorhandler(TaskNotFoundError)
    def _handle_not_found(e: TaskNotFoundError) -> Response:
        return _json_error(str(e), 404)

    @app.errorhandler(HTTPException)
    def _handle_http_error(e: HTTPException) -> Response:
        code = e.code or 500
        if isinstance(e, MethodNotAllowed):
            allowed = [m for m in (e.valid_methods or []) if m not in _IMPLICIT_METHODS]
            resp = _json_error(
                f"expect method {', '.join(sorted(allowed))} at {request.path}, got {request.method}",
                code,
            )
            resp.headers["Allow"] = ", ".join(e.valid_methods or [])
            return resp
        return _json_error(e.description or e.name, code)

    # ---- /task/ ----

    @app.post("/task/")
    def create_task() -> tuple[Response, int]:
        logger.info("handling task create at %s", request.path)
        payload = request.get_json(silent=True)
        if payload is None:
            abort(400, description="expected a JSON body")
        try:
            task_id = create_task_from_payload(store, payload)
        except ValueError as e:
            abort(400, description=str(e))
        return jsonify(id=task_id), 201

    @app.get("/task/")
    def get_all_tasks() -> Response:
        logger.info("handling get all tasks at %s", request.path)
        return jsonify(tasks_to_list(store.list_all_tasks()))

    @app.delete("/task/")
    def delete_all_tasks() -> tuple[str, int]:
        logger.info("handling delete all tasks at %s", request.path)
        store.delete_all_tasks()
        return "", 200

    # ---- /task/<id> ----

    # Canonical form has no trailing slash; the slash form is an alias.
    @app.get("/task/<raw_id>")
    @app.get("/task/<raw_id>/")
    def get_task(raw_id: str) -> Response:
        logger.info("handling get task at %s", request.path)
        task = store.get_task(_parse_int(raw_id, "id"))
        return jsonify(task_to_dict(task))

    @app.delete("/task/<raw_id>")
    @app.delete("/task/<raw_id>/")
    def delete_task(raw_id: str) -> tuple[str, int]:
        logger.info("handling delete task at %s", request.path)
        store.delete_task(_parse_int(raw_id, "id"))
        return "", 200

    # ---- queries ----

    @app.get("/tag/<path:tag>")
    def tasks_by_tag(tag: str) -> Response:
        logger.info("handling tasks by tag at %s", request.path)
        return jsonify(tasks_to_list(store.list_tasks_by_tag(tag)))

    @app.get("/due/<raw_year>/<raw_month>/<raw_day>")
    @app.get("/due/<raw_year>/<raw_month>/<raw_day>/")
    def tasks_by_due_date(raw_year: str, raw_month: str, raw_day: str) -> Response:
        logger.info("handling tasks by due date at %s", request.path)
        year = _parse_int(raw_year, "year")
        month = _parse_int(raw_month, "month")
        day = _parse_int(raw_day, "day")
        if not 1 <= month <= 12:
            abort(400, description=f"expect month in 1..12, got {month}")
        if not 1 <= day <= 31:
            abort(400, description=f"expect day in 1..31, got {day}")
        return jsonify(tasks_to_list(store.list_tasks_by_due_date(year, month, day)))

    return app
