"""loglink - log records linked to distributed traces.

Enriches structured log entries with the linking metadata of the active
tracing transaction (entity.name, entity.type, hostname, trace.id,
span.id) and writes each one as a flat JSON object.
"""

from loglink.adapters.context import (
    current_context,
    reset_tracing_context,
    set_tracing_context,
    use_tracing_context,
)
from loglink.adapters.host import resolve_hostname
from loglink.adapters.logging import ContextProvider, LinkingHandler
from loglink.adapters.sinks.in_memory import InMemorySink
from loglink.adapters.tracing.in_memory import (
    InMemoryTracingContext,
    InMemoryTransaction,
    start_transaction,
)
from loglink.core.emitter import emit, write_record
from loglink.core.encoding.ndjson import encode_record, encode_records
from loglink.core.fields import FieldValue, field_value, serialize, serialize_value
from loglink.core.formatter import RecordFormatter
from loglink.core.linking import link
from loglink.core.logs import debug, error, info, log, warn
from loglink.core.models import (
    Caller,
    FormatterConfig,
    LinkingMetadata,
    LogEntry,
    TransactionMetadata,
)
from loglink.core.ports import LogSinkPort, TracingContext, TransactionHandle
from loglink.core.record import LogRecord, assemble, epoch_millis

__all__ = [
    "Caller",
    "ContextProvider",
    "FieldValue",
    "FormatterConfig",
    "InMemorySink",
    "InMemoryTracingContext",
    "InMemoryTransaction",
    "LinkingHandler",
    "LinkingMetadata",
    "LogEntry",
    "LogRecord",
    "LogSinkPort",
    "RecordFormatter",
    "TracingContext",
    "TransactionHandle",
    "TransactionMetadata",
    "assemble",
    "current_context",
    "debug",
    "emit",
    "encode_record",
    "encode_records",
    "epoch_millis",
    "error",
    "field_value",
    "info",
    "link",
    "log",
    "reset_tracing_context",
    "resolve_hostname",
    "serialize",
    "serialize_value",
    "set_tracing_context",
    "start_transaction",
    "use_tracing_context",
    "warn",
    "write_record",
]
