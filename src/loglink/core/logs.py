"""Log helper functions for creating LogEntry objects."""

import time
from typing import Any

from loglink.core.models import LogEntry


def log(level: str, message: str, **fields: Any) -> LogEntry:
    """Create a log entry with automatic timestamp.

    Args:
        level: Log level (e.g., "INFO", "ERROR", "DEBUG")
        message: The log message
        **fields: Additional user fields of any type

    Returns:
        LogEntry with current timestamp
    """
    return LogEntry(
        timestamp=time.time(),
        level=level,
        message=message,
        fields=dict(fields),
    )


def info(message: str, **fields: Any) -> LogEntry:
    """Create an INFO log entry with automatic timestamp."""
    return log("INFO", message, **fields)


def error(message: str, **fields: Any) -> LogEntry:
    """Create an ERROR log entry with automatic timestamp."""
    return log("ERROR", message, **fields)


def debug(message: str, **fields: Any) -> LogEntry:
    """Create a DEBUG log entry with automatic timestamp."""
    return log("DEBUG", message, **fields)


def warn(message: str, **fields: Any) -> LogEntry:
    """Create a WARNING log entry with automatic timestamp.

    The level name matches the stdlib logging name, so it renders as
    "warning".
    """
    return log("WARNING", message, **fields)
