"""Monotonic request-id allocation shared by every dispatcher of a runtime."""

from __future__ import annotations

import threading


class RequestIdCounter:
    """Hand out 1, 2, 3, ... exactly once each; never resets."""

    def __init__(self, *, start: int = 1) -> None:
        self._next = int(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Return the id the next call to `next_id()` will allocate."""
        with self._lock:
            return self._next


__all__ = ["RequestIdCounter"]
