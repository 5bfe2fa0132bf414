# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) log directory exists,
- wires the concrete TaskStore into AppState,
- builds the Flask app on top of that state.
"""

from __future__ import annotations

import logging

from flask import Flask

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore
from ..web.routes import create_app

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.log_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(settings=settings, task_store=TaskStore())


def build_app(state: AppState) -> Flask:
    app = create_app(state)
    app.config["DEBUG"] = bool(getattr(state.settings, "debug", False))
    logger.info("Routes registered: %s", sorted(r.rule for r in app.url_map.iter_rules()))
    return app
