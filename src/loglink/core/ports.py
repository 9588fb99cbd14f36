"""Port interfaces for the collaborators loglink borrows.

These protocols define what the core needs from a tracing agent and from
an output sink. The core depends only on these interfaces, never on a
concrete agent or stream.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from loglink.core.models import TransactionMetadata

HostnameResolver = Callable[[], str | None]


@runtime_checkable
class TransactionHandle(Protocol):
    """Port for an active transaction owned by a tracing agent."""

    def linking_metadata(self) -> TransactionMetadata:
        """Return the agent's linking data for this transaction."""
        ...


@runtime_checkable
class TracingContext(Protocol):
    """Port for an execution context that carries tracing state.

    Examples: InMemoryTracingContext, or a thin wrapper around an APM
    agent's current-transaction lookup.
    """

    def active_transaction(self) -> TransactionHandle | None:
        """Return the active transaction, or None when nothing is traced."""
        ...


@runtime_checkable
class LogSinkPort(Protocol):
    """Port for the destination of emitted records.

    Any binary stream (sys.stderr.buffer, io.BytesIO, an open file)
    satisfies this protocol. Concurrency discipline belongs to the sink.
    """

    def write(self, data: bytes) -> object:
        """Write one rendered record."""
        ...
