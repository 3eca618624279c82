"""Command-line entrypoint that serves the API with uvicorn."""

import logging

import uvicorn

from exercise_tracker.api.app import create_app
from exercise_tracker.config import Settings
from exercise_tracker.containers import build_container


def main() -> None:
    """Build the app and serve it on the configured port."""
    settings = Settings()
    app = create_app(build_container(settings))
    logging.getLogger(__name__).info(
        "Your app is listening on port %s", settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")
