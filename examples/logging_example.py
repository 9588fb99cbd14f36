"""Example of linking stdlib logging output to traced transactions.

Run with:
    python examples/logging_example.py

Output:
    One JSON object per line on stderr. The second and third records carry
    entity.name, entity.type and hostname; the third also carries trace.id
    and span.id because its transaction is sampled.
"""

import logging

from loglink import LinkingHandler, start_transaction, use_tracing_context

logger = logging.getLogger("example")
logger.setLevel(logging.INFO)
logger.addHandler(LinkingHandler())


def handle_request(user_id: int) -> None:
    """Log inside whatever transaction is bound to the current context."""
    logger.info("handling request", extra={"user_id": user_id})


if __name__ == "__main__":
    logger.info("starting up")

    # Transaction without distributed tracing: entity and host only
    with use_tracing_context(start_transaction("ExampleApp")):
        handle_request(1)

    # Sampled distributed trace: trace.id and span.id are linked too
    sampled = start_transaction(
        "ExampleApp",
        distributed_tracing=True,
        sampled=True,
        trace_id="d9466896a525ccbf",
        span_id="bcfb32e050b264b8",
    )
    logger.info("explicit context", extra={"context": sampled, "user_id": 2})
