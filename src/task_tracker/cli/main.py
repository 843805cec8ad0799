# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then serves the HTTP API with uvicorn.
Signals (Ctrl+C / SIGTERM) are handled by uvicorn; the app lifespan closes the store.
"""

from __future__ import annotations

import logging

import uvicorn

from ..api.app import create_app
from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    setup_logging(
        log_dir=settings.data_dir if settings.log_to_file else None,
        console_level=console_level,
    )

    logger.info(
        "Starting %s on %s:%s (storage=%s)",
        settings.app_name,
        settings.host,
        settings.port,
        settings.storage_backend,
    )

    state = create_initial_state(settings=settings)
    app = create_app(state)

    # log_config=None keeps uvicorn on our root handlers.
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
