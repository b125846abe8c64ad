"""Error handling utilities for the accesstrace application.

This module provides centralized error handling so that every abort
reports the underlying error the same way.
"""

import sys

from accesstrace.exceptions import AccesstraceError
from accesstrace.log import logger


def handle_error(error: BaseException, exit_on_error: bool = False) -> None:
    """Handle an error by logging it and optionally exiting.

    Args:
        error: The exception that was raised
        exit_on_error: If True, exit the program after logging the error
    """

    if isinstance(error, AccesstraceError):
        logger.error(f"{error}")
    else:
        logger.error(f"Unexpected error: {error}")
        logger.debug("Stack trace:", exc_info=error)

    if exit_on_error:
        sys.exit(1)
