"""Derive linking metadata from an execution context.

The linker only reads what the tracing agent reports: it never generates
ids or makes sampling decisions, and it never caches anything between
calls.
"""

from loglink.core.models import LinkingMetadata, TransactionMetadata
from loglink.core.ports import HostnameResolver, TracingContext


def _trace_ids(meta: TransactionMetadata) -> tuple[str | None, str | None]:
    if not (meta.distributed_tracing_enabled and meta.sampled and meta.trace_id):
        return None, None
    if meta.span_sampling_enabled and meta.span_id:
        return meta.trace_id, meta.span_id
    return meta.trace_id, None


def link(
    context: object | None,
    resolve_hostname: HostnameResolver | None = None,
) -> LinkingMetadata | None:
    """Extract linking metadata from whatever tracing state context carries.

    Args:
        context: The execution context for this call. Anything that does not
            implement TracingContext is treated as carrying no tracing state.
        resolve_hostname: Fallback host lookup used when the agent does not
            report a hostname. When absent, when it returns None, or when
            it raises, the hostname field is omitted.

    Returns:
        LinkingMetadata when a transaction is active, otherwise None.
    """
    if context is None or not isinstance(context, TracingContext):
        return None
    txn = context.active_transaction()
    if txn is None:
        return None

    meta = txn.linking_metadata()
    hostname = meta.hostname
    if not hostname and resolve_hostname is not None:
        try:
            hostname = resolve_hostname()
        except Exception:
            hostname = None
    trace_id, span_id = _trace_ids(meta)
    return LinkingMetadata(
        entity_name=meta.entity_name,
        entity_type=meta.entity_type,
        hostname=hostname,
        trace_id=trace_id,
        span_id=span_id,
    )
