"""Tracing adapters implementing the TracingContext port."""

from loglink.adapters.tracing.in_memory import (
    InMemoryTracingContext,
    InMemoryTransaction,
    start_transaction,
)

__all__ = [
    "InMemoryTracingContext",
    "InMemoryTransaction",
    "start_transaction",
]
