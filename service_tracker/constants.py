"""
Constants and default values for the service tracker.

Centralizes the defaults used by the settings loader and the HTTP layer so
the values are defined in one place.
"""

SERVICE_NAME = "service-tracker"
VERSION = "0.1.0"

# Network defaults
HOST_DEFAULT = "0.0.0.0"
PORT_DEFAULT = 8080
PORT_MIN = 1
PORT_MAX = 65535

# Logging
LOG_LEVEL_DEFAULT = "INFO"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Environment variable names
ENV_HOST = "TRACKER_HOST"
ENV_PORT = "TRACKER_PORT"
ENV_LOG_LEVEL = "LOG_LEVEL"
