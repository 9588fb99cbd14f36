"""Core domain models for log enrichment."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

ENTITY_TYPE_SERVICE = "SERVICE"


@dataclass(frozen=True)
class Caller:
    """Call-site information supplied by the logging framework.

    Attributes:
        file: Source file path.
        line: Line number within the file.
        function: Qualified function name, if known.
    """

    file: str
    line: int
    function: str | None = None


@dataclass(frozen=True)
class LogEntry:
    """A structured log entry before enrichment.

    Entries are immutable, so a single entry can be formatted any number of
    times against different execution contexts.

    Attributes:
        timestamp: Unix timestamp in seconds, or a datetime (naive means UTC).
        level: Log level name (e.g., INFO, ERROR, DEBUG).
        message: The log message.
        caller: Call-site information, when the framework reports it.
        fields: Additional user-supplied fields of any type.
    """

    timestamp: float | datetime
    level: str
    message: str
    caller: Caller | None = None
    fields: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TransactionMetadata:
    """Linking data reported by a tracing agent for one transaction.

    Sampling decisions and ids are made by the agent; this is a plain copy.
    """

    entity_name: str
    entity_type: str = ENTITY_TYPE_SERVICE
    hostname: str | None = None
    distributed_tracing_enabled: bool = False
    sampled: bool = False
    trace_id: str = ""
    span_sampling_enabled: bool = False
    span_id: str = ""


@dataclass(frozen=True)
class LinkingMetadata:
    """Fields tying a log record to a traced transaction.

    Attributes:
        entity_name: Name of the service emitting the record.
        entity_type: Entity kind, "SERVICE" by default.
        hostname: Host name, None when it could not be resolved.
        trace_id: Set only for sampled transactions with tracing enabled.
        span_id: Set only when span sampling also applies.
    """

    entity_name: str
    entity_type: str = ENTITY_TYPE_SERVICE
    hostname: str | None = None
    trace_id: str | None = None
    span_id: str | None = None

    def as_fields(self) -> dict[str, str]:
        """Return the present linking fields keyed by their output names."""
        fields = {
            "entity.name": self.entity_name,
            "entity.type": self.entity_type,
        }
        if self.hostname:
            fields["hostname"] = self.hostname
        if self.trace_id:
            fields["trace.id"] = self.trace_id
        if self.span_id:
            fields["span.id"] = self.span_id
        return fields


@dataclass(frozen=True)
class FormatterConfig:
    """Output style for emitted records.

    Attributes:
        pretty: Render one key per line instead of a compact object.
        indent: Indentation width used when pretty is set.
        ensure_ascii: Escape non-ASCII characters in keys and strings.
        line_terminator: Bytes appended after each record.
    """

    pretty: bool = False
    indent: int = 2
    ensure_ascii: bool = False
    line_terminator: bytes = b"\n"
