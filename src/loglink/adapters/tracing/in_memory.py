"""In-memory tracing adapters.

A fixed stand-in for a tracing agent. Suitable for testing and for
applications that know their linking data up front.
"""

from dataclasses import dataclass

from loglink.core.models import TransactionMetadata


@dataclass(frozen=True)
class InMemoryTransaction:
    """In-memory implementation of TransactionHandle.

    Returns the same metadata on every call.
    """

    metadata: TransactionMetadata

    def linking_metadata(self) -> TransactionMetadata:
        """Return the stored metadata."""
        return self.metadata


@dataclass(frozen=True)
class InMemoryTracingContext:
    """In-memory implementation of TracingContext.

    Args:
        transaction: The active transaction, or None for a context that
            carries a tracing capability but no running transaction.
    """

    transaction: InMemoryTransaction | None = None

    def active_transaction(self) -> InMemoryTransaction | None:
        """Return the active transaction, if any."""
        return self.transaction


def start_transaction(
    entity_name: str,
    *,
    hostname: str | None = None,
    distributed_tracing: bool = False,
    sampled: bool = False,
    trace_id: str = "",
    span_id: str = "",
    span_sampling: bool = True,
) -> InMemoryTracingContext:
    """Return a context with one active in-memory transaction.

    Args:
        entity_name: Application name reported as entity.name.
        hostname: Host name reported by the agent, if known.
        distributed_tracing: Whether distributed tracing is enabled.
        sampled: The agent's sampling decision for the transaction.
        trace_id: Trace id the agent assigned.
        span_id: Id of the current span.
        span_sampling: Whether span-level sampling applies.
    """
    metadata = TransactionMetadata(
        entity_name=entity_name,
        hostname=hostname,
        distributed_tracing_enabled=distributed_tracing,
        sampled=sampled,
        trace_id=trace_id,
        span_sampling_enabled=span_sampling,
        span_id=span_id,
    )
    return InMemoryTracingContext(InMemoryTransaction(metadata))
