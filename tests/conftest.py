"""Shared test fixtures for all test modules."""

import logging
from collections.abc import Callable, Iterator
from datetime import datetime

import pytest

from loglink.adapters.logging import LinkingHandler
from loglink.adapters.sinks.in_memory import InMemorySink
from loglink.adapters.tracing.in_memory import (
    InMemoryTracingContext,
    start_transaction,
)
from loglink.core.formatter import RecordFormatter

from tests.helpers import SPAN_ID, TEST_HOST, TEST_TIME, TRACE_ID


@pytest.fixture
def fixed_time() -> datetime:
    """Wall-clock instant 2014-11-28T01:01:00Z."""
    return TEST_TIME


@pytest.fixture
def sink() -> InMemorySink:
    """Fixture providing an empty in-memory sink."""
    return InMemorySink()


@pytest.fixture
def formatter() -> RecordFormatter:
    """Formatter whose host lookup always answers TEST_HOST."""
    return RecordFormatter(resolve_hostname=lambda: TEST_HOST)


@pytest.fixture
def make_context() -> Callable[..., InMemoryTracingContext]:
    """Factory fixture for contexts with one active transaction.

    Usage:
        def test_something(make_context):
            ctx = make_context(distributed_tracing=True, sampled=True)
    """

    def _context(
        distributed_tracing: bool = False,
        sampled: bool = False,
        span_sampling: bool = True,
    ) -> InMemoryTracingContext:
        return start_transaction(
            "AppName",
            distributed_tracing=distributed_tracing,
            sampled=sampled,
            trace_id=TRACE_ID,
            span_id=SPAN_ID,
            span_sampling=span_sampling,
        )

    return _context


@pytest.fixture
def linked_logger(sink: InMemorySink) -> Iterator[logging.Logger]:
    """Logger wired to a LinkingHandler writing into the sink fixture."""
    logger = logging.getLogger("loglink.tests.linked")
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(LinkingHandler(sink, resolve_hostname=lambda: TEST_HOST))
    yield logger
    logger.handlers.clear()
