"""Best-effort host name resolution."""

import socket


def resolve_hostname() -> str | None:
    """Return the local host name, or None if it cannot be determined."""
    try:
        name = socket.gethostname()
    except OSError:
        return None
    return name or None
