"""Emit assembled records to a sink, dropping records that fail to encode."""

import logging

from loglink.core.encoding.ndjson import encode_record
from loglink.core.models import FormatterConfig
from loglink.core.ports import LogSinkPort
from loglink.core.record import LogRecord

logger = logging.getLogger(__name__)


def emit(record: LogRecord, config: FormatterConfig | None = None) -> bytes | None:
    """Render a record, or return None if the record cannot be encoded.

    Failures are scoped to this record: it is dropped, a warning is logged
    and nothing is retried.
    """
    try:
        return encode_record(record, config)
    except (TypeError, ValueError) as exc:
        logger.warning("Dropping log record that could not be encoded: %s", exc)
        return None


def write_record(
    record: LogRecord,
    sink: LogSinkPort,
    config: FormatterConfig | None = None,
) -> bool:
    """Emit a record and write it to sink.

    Args:
        record: The assembled record.
        sink: Destination for the encoded bytes.
        config: Output style.

    Returns:
        True if bytes were written, False if the record was dropped.
    """
    data = emit(record, config)
    if data is None:
        return False
    sink.write(data)
    return True
