"""Python logging handler adapter for loglink.

This adapter bridges Python's standard library logging module to the
RecordFormatter, so every record passing through the handler is enriched
with linking metadata and written as one JSON object.
"""

import logging
import sys
import traceback
from collections.abc import Callable
from typing import Any

from loglink.adapters.context import current_context
from loglink.adapters.host import resolve_hostname as _resolve_hostname
from loglink.core.formatter import RecordFormatter
from loglink.core.models import Caller, FormatterConfig, LogEntry
from loglink.core.ports import HostnameResolver, LogSinkPort

# Returns the execution context to link a record against
ContextProvider = Callable[[], object | None]

# Standard LogRecord attributes that should not be treated as user fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

_UNKNOWN_FILE = "(unknown file)"
_UNKNOWN_FUNCTION = "(unknown function)"


def _class_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def caller_from_record(record: logging.LogRecord) -> Caller | None:
    """Return the call site logging recorded, or None if it is unknown."""
    if not record.pathname or record.pathname == _UNKNOWN_FILE:
        return None
    function = None
    if record.funcName and record.funcName != _UNKNOWN_FUNCTION:
        function = f"{record.module}.{record.funcName}"
    return Caller(file=record.pathname, line=record.lineno, function=function)


def fields_from_record(
    record: logging.LogRecord,
    exclude: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """Collect user fields from a LogRecord.

    Extra attributes passed via the logging call become fields as they
    are; exception info becomes error.class, error.message and error.stack.
    """
    fields: dict[str, Any] = {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_LOGRECORD_ATTRS and key not in exclude
    }

    if record.exc_info:
        exc_type, exc_value, exc_tb = record.exc_info
        if exc_type is not None:
            fields["error.class"] = _class_name(exc_type)
        if exc_value is not None:
            fields["error.message"] = str(exc_value)
        if exc_tb is not None:
            fields["error.stack"] = "".join(
                traceback.format_exception(exc_type, exc_value, exc_tb)
            )
    return fields


def entry_from_record(
    record: logging.LogRecord,
    report_caller: bool = True,
    exclude: frozenset[str] = frozenset(),
) -> LogEntry:
    """Convert a stdlib LogRecord into a LogEntry."""
    return LogEntry(
        timestamp=record.created,
        level=record.levelname,
        message=record.getMessage(),
        caller=caller_from_record(record) if report_caller else None,
        fields=fields_from_record(record, exclude),
    )


class LinkingHandler(logging.Handler):
    """Logging handler that writes enriched JSON records to a binary sink.

    The context for each record is taken from ``extra={"context": ctx}``
    on the logging call, falling back to the context provider.

    Example:
        ```python
        from loglink import LinkingHandler, use_tracing_context

        logging.getLogger().addHandler(LinkingHandler())
        with use_tracing_context(ctx):
            logging.getLogger(__name__).info("Hello World!")
        ```
    """

    def __init__(
        self,
        stream: LogSinkPort | None = None,
        config: FormatterConfig | None = None,
        context_provider: ContextProvider | None = current_context,
        context_attr: str = "context",
        report_caller: bool = True,
        resolve_hostname: HostnameResolver | None = _resolve_hostname,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler.

        Args:
            stream: Binary sink for encoded records. Defaults to
                sys.stderr.buffer, looked up at emit time.
            config: Output style for the records.
            context_provider: Called when a record carries no context
                attribute. None disables the fallback.
            context_attr: LogRecord attribute holding a per-call context.
            report_caller: Include file.name, line.number and method.name.
            resolve_hostname: Host lookup used when the tracing agent does
                not report a hostname.
            level: Handler level threshold.
        """
        super().__init__(level)
        self._stream = stream
        self._context_provider = context_provider
        self._context_attr = context_attr
        self._report_caller = report_caller
        self._record_formatter = RecordFormatter(
            config=config or FormatterConfig(),
            resolve_hostname=resolve_hostname,
        )

    @property
    def stream(self) -> LogSinkPort:
        """The sink records are written to."""
        if self._stream is None:
            return sys.stderr.buffer
        return self._stream

    def _context_for(self, record: logging.LogRecord) -> object | None:
        context = getattr(record, self._context_attr, None)
        if context is None and self._context_provider is not None:
            context = self._context_provider()
        return context

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record to the sink.

        Args:
            record: The log record to emit.
        """
        try:
            entry = entry_from_record(
                record,
                report_caller=self._report_caller,
                exclude=frozenset({self._context_attr}),
            )
            self._record_formatter.write(entry, self.stream, self._context_for(record))
            flush = getattr(self.stream, "flush", None)
            if flush is not None:
                flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
