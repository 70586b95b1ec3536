"""
Configuration for the service tracker HTTP server.

Settings come from defaults in ``service_tracker.constants``, overridden by
environment variables (TRACKER_HOST, TRACKER_PORT, LOG_LEVEL). Command line
options in ``service_tracker.__main__`` override both.
"""

import os
import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional

from service_tracker.constants import (
    HOST_DEFAULT, PORT_DEFAULT, PORT_MIN, PORT_MAX,
    LOG_LEVEL_DEFAULT, LOG_LEVELS,
    ENV_HOST, ENV_PORT, ENV_LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@dataclass
class ServerSettings:
    """HTTP server configuration settings.

    Attributes:
        host: Interface to bind (e.g., '0.0.0.0', '127.0.0.1')
        port: TCP port to listen on
        log_level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
    """
    host: str = HOST_DEFAULT
    port: int = PORT_DEFAULT
    log_level: str = LOG_LEVEL_DEFAULT

    def validate(self) -> List[str]:
        """Validate settings and return list of error messages (empty if valid)."""
        errors = []
        if not self.host or not isinstance(self.host, str):
            errors.append("Host must be a non-empty string")
        if not isinstance(self.port, int) or not (PORT_MIN <= self.port <= PORT_MAX):
            errors.append(f"Port must be an integer between {PORT_MIN} and {PORT_MAX}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"Log level must be one of {sorted(LOG_LEVELS)}")
        return errors


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ServerSettings:
    """Build settings from defaults and environment variables.

    Unparsable values are logged and the default is kept.
    """
    env = os.environ if environ is None else environ
    settings = ServerSettings()

    host = env.get(ENV_HOST)
    if host:
        settings.host = host

    port = env.get(ENV_PORT)
    if port:
        try:
            settings.port = int(port)
        except (ValueError, TypeError):
            logger.warning(f"Invalid {ENV_PORT} environment variable: {port}")

    log_level = env.get(ENV_LOG_LEVEL)
    if log_level:
        settings.log_level = log_level.upper()

    return settings
