"""NDJSON encoder for log records."""

import json
from collections.abc import Iterable

from loglink.core.fields import serialize
from loglink.core.models import FormatterConfig
from loglink.core.record import LogRecord

_DEFAULT_CONFIG = FormatterConfig()


def _members(record: LogRecord, config: FormatterConfig) -> list[str]:
    separator = ": " if config.pretty else ":"
    members = []
    for key, value in record.items():
        if not isinstance(key, str):
            raise TypeError(f"record keys must be str, not {type(key).__name__}")
        name = json.dumps(key, ensure_ascii=config.ensure_ascii)
        token = serialize(value, ensure_ascii=config.ensure_ascii)
        members.append(f"{name}{separator}{token}")
    return members


def encode_record(record: LogRecord, config: FormatterConfig | None = None) -> bytes:
    """Encode one log record as a JSON object.

    Args:
        record: Mapping of key to FieldValue.
        config: Output style. Defaults to compact, newline-terminated.

    Returns:
        UTF-8 bytes of the JSON object followed by the line terminator.

    Raises:
        TypeError: If a record key is not a string.
    """
    config = config or _DEFAULT_CONFIG
    members = _members(record, config)

    if not members:
        text = "{}"
    elif config.pretty:
        pad = " " * config.indent
        body = ",\n".join(pad + member for member in members)
        text = "{\n" + body + "\n}"
    else:
        text = "{" + ",".join(members) + "}"

    return text.encode("utf-8", errors="replace") + config.line_terminator


def encode_records(
    records: Iterable[LogRecord], config: FormatterConfig | None = None
) -> bytes:
    """Encode log records one after another.

    Args:
        records: An iterable of LogRecord mappings.
        config: Output style applied to every record.

    Returns:
        Concatenated encoded records. Empty bytes if no records.
    """
    return b"".join(encode_record(record, config) for record in records)
