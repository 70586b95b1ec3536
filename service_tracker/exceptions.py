"""
Custom exception classes for the service tracker.

Store operations cannot fail, so these cover the process edges only:
configuration problems and listener startup failures.
"""

from typing import List, Optional


class ServiceTrackerException(Exception):
    """Base exception for all service tracker errors."""
    pass


class ConfigurationError(ServiceTrackerException):
    """Exception raised when the server settings fail validation.

    Attributes:
        errors: Validation messages reported by the settings
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])

    def __str__(self) -> str:
        base = super().__str__()
        if self.errors:
            return f"{base}: {'; '.join(self.errors)}"
        return base


class StartupError(ServiceTrackerException):
    """Exception raised when the HTTP listener cannot be started.

    Attributes:
        host: Interface the server tried to bind
        port: TCP port the server tried to bind
        original_error: The underlying exception that caused this error
    """

    def __init__(self, message: str, host: str = None, port: int = None, original_error: Exception = None):
        """Initialize StartupError.

        Args:
            message: Human-readable error message
            host: Bind address (optional)
            port: Bind port (optional)
            original_error: Underlying exception (optional)
        """
        super().__init__(message)
        self.host = host
        self.port = port
        self.original_error = original_error

    def __str__(self) -> str:
        base = super().__str__()
        if self.host is not None and self.port is not None:
            base = f"{base} ({self.host}:{self.port})"
        if self.original_error:
            return f"{base}: {self.original_error}"
        return base
