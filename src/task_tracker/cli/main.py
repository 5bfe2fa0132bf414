# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then serves the HTTP API
on a threaded server until interrupted.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import build_app, create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s on %s:%s...", settings.app_name, settings.host, settings.port)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    app = build_app(state)

    try:
        # One thread per request; the store does its own locking.
        app.run(
            host=settings.host,
            port=settings.port,
            debug=settings.debug,
            threaded=True,
            use_reloader=False,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    finally:
        logger.info("Bye. tasks_in_memory=%s", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
