"""Context-local binding of the current tracing context.

Code that cannot pass a context to every logging call can bind one for
the duration of a request or task. The binding lives in a ContextVar, so
it is isolated across threads and asyncio tasks without locking.
"""

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager

from loglink.core.ports import TracingContext

_current_context: contextvars.ContextVar[TracingContext | None] = (
    contextvars.ContextVar("loglink_tracing_context", default=None)
)


def current_context() -> TracingContext | None:
    """Return the tracing context bound to the current execution context."""
    return _current_context.get()


def set_tracing_context(context: TracingContext | None) -> contextvars.Token:
    """Bind context and return a token for reset_tracing_context."""
    return _current_context.set(context)


def reset_tracing_context(token: contextvars.Token) -> None:
    """Restore the binding that was active before set_tracing_context."""
    _current_context.reset(token)


@contextmanager
def use_tracing_context(context: TracingContext | None) -> Iterator[None]:
    """Bind context for the duration of a with block.

    Example:
        ```python
        with use_tracing_context(ctx):
            logger.info("handled request")  # linked to ctx's transaction
        ```
    """
    token = set_tracing_context(context)
    try:
        yield
    finally:
        reset_tracing_context(token)
