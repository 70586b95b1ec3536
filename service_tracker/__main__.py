"""Run the service tracker HTTP server.

Usage:
  python -m service_tracker --port 8080
  TRACKER_PORT=9000 LOG_LEVEL=DEBUG service-tracker

The process exits with status 1 if the settings are invalid or the listener
cannot be started.
"""
from __future__ import annotations

import sys
import logging
import argparse
from typing import List, Optional

import uvicorn

from service_tracker.api.main import create_app
from service_tracker.config import ServerSettings, load_settings
from service_tracker.constants import LOG_FORMAT
from service_tracker.exceptions import ConfigurationError, StartupError
from service_tracker.tracker import ServiceTracker

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None, defaults: Optional[ServerSettings] = None) -> ServerSettings:
    defaults = defaults or load_settings()
    p = argparse.ArgumentParser(prog="service-tracker", description="In-memory service tracking counter")
    p.add_argument("--host", default=defaults.host)
    p.add_argument("--port", type=int, default=defaults.port)
    p.add_argument("--log-level", default=defaults.log_level)
    args = p.parse_args(argv)
    return ServerSettings(host=args.host, port=args.port, log_level=args.log_level.upper())


def serve(settings: ServerSettings) -> None:
    """Build the app around a fresh tracker and serve it until shutdown.

    Raises:
        StartupError: the listener could not be bound.
    """
    app = create_app(tracker=ServiceTracker(), settings=settings)
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    except OSError as e:
        raise StartupError("Failed to start listener", host=settings.host, port=settings.port, original_error=e) from e
    except SystemExit as e:
        # uvicorn logs bind failures itself and exits non-zero
        if e.code:
            raise StartupError("Failed to start listener", host=settings.host, port=settings.port, original_error=e) from e


def main(argv: Optional[List[str]] = None) -> int:
    settings = parse_args(argv)

    errors = settings.validate()
    if errors:
        logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT)
        logger.error(str(ConfigurationError("Invalid server settings", errors)))
        return 1

    logging.basicConfig(level=getattr(logging, settings.log_level), format=LOG_FORMAT)
    try:
        serve(settings)
    except StartupError as e:
        logger.error(str(e), exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
