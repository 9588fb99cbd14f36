"""In-memory sink adapter."""

import json
import threading
from typing import Any


class InMemorySink:
    """In-memory implementation of LogSinkPort.

    Stores each written chunk in a list. Suitable for testing and for
    capturing output where no stream is available. Writes are guarded by
    a lock, so the sink may be shared across threads.
    """

    def __init__(self) -> None:
        self._chunks: list[bytes] = []
        self._lock = threading.Lock()

    def write(self, data: bytes) -> int:
        """Store one encoded record."""
        with self._lock:
            self._chunks.append(bytes(data))
        return len(data)

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        with self._lock:
            return b"".join(self._chunks)

    def records(self) -> list[dict[str, Any]]:
        """Decode every written chunk as a JSON object."""
        with self._lock:
            chunks = list(self._chunks)
        return [json.loads(chunk) for chunk in chunks]

    def clear(self) -> None:
        """Discard everything written so far."""
        with self._lock:
            self._chunks.clear()
