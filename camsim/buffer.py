"""A thread-safe store of encoded messages waiting to be sent."""

from __future__ import annotations

import threading


class MessageBuffer:
    """Collects encoded messages in order; safe to share between threads."""

    def __init__(self) -> None:
        self._items: list[bytes] = []
        self._lock = threading.Lock()

    def add(self, message: bytes) -> None:
        """Append one encoded message."""
        with self._lock:
            self._items.append(bytes(message))

    def items(self) -> list[bytes]:
        """Return a snapshot of the stored messages in insertion order."""
        with self._lock:
            return list(self._items)

    def clear(self) -> None:
        """Drop every stored message."""
        with self._lock:
            self._items.clear()

    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)