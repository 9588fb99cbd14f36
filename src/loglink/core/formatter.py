"""Stateless pipeline from log entry to encoded record."""

from dataclasses import dataclass, field

from loglink.core.emitter import emit, write_record
from loglink.core.linking import link
from loglink.core.models import FormatterConfig, LogEntry
from loglink.core.ports import HostnameResolver, LogSinkPort
from loglink.core.record import LogRecord, assemble


@dataclass(frozen=True)
class RecordFormatter:
    """Link, assemble and emit log entries.

    The formatter holds configuration only. Linking metadata is derived
    from the context passed to each call, so one formatter (and one entry)
    can be reused across calls with different contexts.

    Example:
        ```python
        formatter = RecordFormatter(resolve_hostname=resolve_hostname)
        formatter.write(info("Hello World!"), sys.stderr.buffer, context=ctx)
        ```
    """

    config: FormatterConfig = field(default_factory=FormatterConfig)
    resolve_hostname: HostnameResolver | None = None

    def build(self, entry: LogEntry, context: object | None = None) -> LogRecord:
        """Assemble the record for entry under context."""
        linking = link(context, self.resolve_hostname)
        return assemble(entry, linking)

    def format(self, entry: LogEntry, context: object | None = None) -> bytes | None:
        """Return the encoded record, or None if it was dropped."""
        return emit(self.build(entry, context), self.config)

    def write(
        self,
        entry: LogEntry,
        sink: LogSinkPort,
        context: object | None = None,
    ) -> bool:
        """Write the encoded record to sink; return False if it was dropped."""
        return write_record(self.build(entry, context), sink, self.config)
