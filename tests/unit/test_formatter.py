"""Tests for the RecordFormatter pipeline."""

import json
import threading
from collections.abc import Callable

import pytest

from loglink.adapters.sinks.in_memory import InMemorySink
from loglink.adapters.tracing.in_memory import InMemoryTracingContext
from loglink.core.formatter import RecordFormatter
from loglink.core.models import Caller, FormatterConfig, LogEntry
from tests.helpers import (
    SPAN_ID,
    TEST_HOST,
    TEST_TIME,
    TEST_TIME_MILLIS,
    TRACE_ID,
    assert_record_matches,
)

ContextFactory = Callable[..., InMemoryTracingContext]

ENTRY = LogEntry(
    timestamp=TEST_TIME,
    level="INFO",
    message="Hello World!",
    caller=Caller("/app/main.py", 7, "main.handler"),
)

BASE = {
    "timestamp": TEST_TIME_MILLIS,
    "log.level": "info",
    "message": "Hello World!",
    "file.name": "/app/main.py",
    "line.number": 7,
    "method.name": "main.handler",
}

LINKED = {
    **BASE,
    "entity.name": "AppName",
    "entity.type": "SERVICE",
    "hostname": TEST_HOST,
}


def _decode(data: bytes | None) -> dict[str, object]:
    assert data is not None
    return json.loads(data)


@pytest.mark.core
class TestRecordFormatter:
    """Tests for RecordFormatter.format() and write()."""

    def test_no_context(self, formatter: RecordFormatter) -> None:
        """Without a context only base and caller fields appear."""
        assert_record_matches(_decode(formatter.format(ENTRY)), BASE)

    def test_no_transaction(self, formatter: RecordFormatter) -> None:
        """A context with no active transaction adds nothing."""
        result = formatter.format(ENTRY, InMemoryTracingContext())
        assert_record_matches(_decode(result), BASE)

    def test_distributed_tracing_disabled(
        self, formatter: RecordFormatter, make_context: ContextFactory
    ) -> None:
        """An active transaction adds entity and host fields."""
        result = formatter.format(ENTRY, make_context())
        assert_record_matches(_decode(result), LINKED)

    def test_sampled_false(
        self, formatter: RecordFormatter, make_context: ContextFactory
    ) -> None:
        """An unsampled transaction adds no trace or span id."""
        result = formatter.format(ENTRY, make_context(distributed_tracing=True))
        assert_record_matches(_decode(result), LINKED)

    def test_sampled_true(
        self, formatter: RecordFormatter, make_context: ContextFactory
    ) -> None:
        """A sampled transaction adds trace and span ids."""
        ctx = make_context(distributed_tracing=True, sampled=True)
        result = formatter.format(ENTRY, ctx)
        assert_record_matches(
            _decode(result), {**LINKED, "trace.id": TRACE_ID, "span.id": SPAN_ID}
        )

    def test_entry_used_twice(
        self, formatter: RecordFormatter, make_context: ContextFactory
    ) -> None:
        """Reusing an entry with a new context does not keep old trace ids."""
        first = formatter.format(ENTRY, make_context(distributed_tracing=True, sampled=True))
        second = formatter.format(ENTRY, make_context())

        assert "trace.id" in _decode(first)
        assert_record_matches(_decode(second), LINKED)

    def test_custom_field(
        self, formatter: RecordFormatter, make_context: ContextFactory
    ) -> None:
        """User fields appear next to the linking fields."""
        entry = LogEntry(TEST_TIME, "INFO", "Hello World!", ENTRY.caller, {"zip": "zap"})
        result = formatter.format(entry, make_context())
        assert_record_matches(_decode(result), {**LINKED, "zip": "zap"})

    def test_unserializable_field_does_not_break_record(
        self, formatter: RecordFormatter
    ) -> None:
        """A function-valued field falls back to its repr."""
        entry = LogEntry(TEST_TIME, "INFO", "Hello World!", fields={"func": lambda: None})
        record = _decode(formatter.format(entry))
        assert str(record["func"]).startswith("<function")

    def test_broken_number_field_does_not_raise(
        self, formatter: RecordFormatter, sink: InMemorySink
    ) -> None:
        """A number whose conversion raises is written as its repr."""

        class BrokenInt(int):
            def __int__(self) -> int:
                raise RuntimeError("boom")

        entry = LogEntry(TEST_TIME, "INFO", "Hello World!", fields={"x": BrokenInt(7)})
        assert formatter.write(entry, sink) is True
        assert sink.records()[0]["x"] == "7"

    def test_failing_hostname_resolver_omits_host(
        self, sink: InMemorySink, make_context: ContextFactory
    ) -> None:
        """A resolver that raises leaves the hostname out of the record."""

        def fail() -> str:
            raise OSError("no host")

        formatter = RecordFormatter(resolve_hostname=fail)
        assert formatter.write(ENTRY, sink, make_context()) is True
        record = sink.records()[0]
        assert record["entity.name"] == "AppName"
        assert "hostname" not in record

    def test_pretty_config(self) -> None:
        """The config passes through to the emitter."""
        formatter = RecordFormatter(FormatterConfig(pretty=True))
        result = formatter.format(ENTRY)
        assert result is not None
        assert result.startswith(b"{\n  ")
        assert_record_matches(_decode(result), BASE)

    def test_write_to_sink(self, formatter: RecordFormatter, sink: InMemorySink) -> None:
        """write() sends the encoded record to the sink."""
        assert formatter.write(ENTRY, sink) is True
        assert_record_matches(sink.records()[0], BASE)

    def test_concurrent_use(
        self,
        formatter: RecordFormatter,
        sink: InMemorySink,
        make_context: ContextFactory,
    ) -> None:
        """One formatter can serve many threads with different contexts."""
        sampled = make_context(distributed_tracing=True, sampled=True)
        plain = make_context()

        def worker(ctx: InMemoryTracingContext) -> None:
            for _ in range(50):
                formatter.write(ENTRY, sink, ctx)

        threads = [
            threading.Thread(target=worker, args=(ctx,)) for ctx in (sampled, plain) * 4
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        records = sink.records()
        assert len(records) == 400
        assert sum("trace.id" in record for record in records) == 200
