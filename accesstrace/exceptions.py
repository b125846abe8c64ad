"""Custom exception classes for the accesstrace application.

This module defines custom exception classes that provide meaningful
error messages and context for the failure scenarios of an export run.
"""


class AccesstraceError(Exception):
    """Base exception class for all accesstrace errors.

    All custom exceptions in the application inherit from this class,
    so the CLI can catch every expected failure with a single except clause.
    """

    def __init__(self, message: str, suggestion: str = ""):
        """Initialize the exception.

        Args:
            message: The error message describing what went wrong
            suggestion: Optional suggestion for how to fix the problem
        """
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return a formatted error message with suggestion if available."""
        if self.suggestion:
            return f"{self.message}{'.' if not self.message.endswith('.') else ''} {self.suggestion}"
        return self.message


class ConfigurationError(AccesstraceError):
    """Raised when there's an error in the configuration.

    This includes invalid configuration values, missing required settings,
    or improperly formatted configuration files.
    """

    pass


class ValidationError(AccesstraceError):
    """Raised when input validation fails."""

    pass


class LogStoreConnectionError(AccesstraceError):
    """Raised when the connection to the remote log store fails."""

    pass


class LogStoreQueryError(AccesstraceError):
    """Raised when a page query against the log store fails."""

    pass


class TelemetryConnectionError(AccesstraceError):
    """Raised when the telemetry collector cannot be reached."""

    pass


class RecordError(AccesstraceError):
    """Raised when an access log record cannot be turned into a span.

    Either a required field is missing or an identifier is not a UUID.
    """

    pass
