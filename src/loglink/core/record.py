"""Assemble a flat log record from base, linking and user fields."""

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from loglink.core.fields import FieldValue, field_value
from loglink.core.models import LinkingMetadata, LogEntry

LogRecord = dict[str, FieldValue]

# Keys owned by the base entry; nothing else may write them
RESERVED_KEYS = frozenset(
    {
        "timestamp",
        "log.level",
        "message",
        "file.name",
        "line.number",
        "method.name",
    }
)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def epoch_millis(timestamp: float | datetime) -> int:
    """Convert a timestamp to integer milliseconds since the Unix epoch.

    Args:
        timestamp: Unix seconds, or a datetime. Naive datetimes are UTC.

    Returns:
        Milliseconds since the epoch, rounded to the nearest millisecond.
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=UTC)
        delta = timestamp - _EPOCH
        return round(delta / timedelta(milliseconds=1))
    return round(timestamp * 1000)


def base_fields(entry: LogEntry) -> dict[str, Any]:
    """Return the reserved fields of entry as raw values."""
    fields: dict[str, Any] = {
        "timestamp": epoch_millis(entry.timestamp),
        "log.level": entry.level.lower(),
        "message": entry.message,
    }
    caller = entry.caller
    if caller is not None:
        fields["file.name"] = caller.file
        fields["line.number"] = caller.line
        if caller.function:
            fields["method.name"] = caller.function
    return fields


def assemble(
    entry: LogEntry,
    linking: LinkingMetadata | None,
    user_fields: Mapping[str, Any] | None = None,
) -> LogRecord:
    """Merge one entry's fields into a flat record.

    On key collision, reserved base fields win over linking fields, which
    win over user fields. Overridden values are dropped, never duplicated.
    User fields named like a reserved key are dropped even when the entry
    has no value for it (e.g. file.name without caller info).

    Args:
        entry: The base log entry.
        linking: Linking metadata for this call, if any.
        user_fields: User fields; defaults to entry.fields.

    Returns:
        A fresh mapping of key to FieldValue.
    """
    if user_fields is None:
        user_fields = entry.fields

    record: LogRecord = {
        key: field_value(value)
        for key, value in user_fields.items()
        if key not in RESERVED_KEYS
    }
    if linking is not None:
        for key, value in linking.as_fields().items():
            record[key] = field_value(value)
    for key, value in base_fields(entry).items():
        record[key] = field_value(value)
    return record
