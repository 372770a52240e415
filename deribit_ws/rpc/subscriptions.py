"""Instrument -> callback registry for order-book subscriptions.

Only the registration side lives here. Delivering pushed frames to the stored
callbacks is the job of an external consumer that reads `get()`.
"""

from __future__ import annotations

import threading
from typing import Any
from collections.abc import Callable

from deribit_ws.config.rpc import BOOK_CHANNEL_INTERVAL

MarketDataCallback = Callable[[dict[str, Any]], None]


def channel_name(instrument: str) -> str:
    return f"book.{instrument}.{BOOK_CHANNEL_INTERVAL}"


class SubscriptionRegistry:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._callbacks: dict[str, MarketDataCallback] = {}

    def register(self, instrument: str, callback: MarketDataCallback) -> None:
        """Store `callback` for `instrument`, replacing any earlier one."""
        if not callable(callback):
            raise TypeError("subscription callback must be callable")
        with self._lock:
            self._callbacks[instrument] = callback

    def get(self, instrument: str) -> MarketDataCallback | None:
        with self._lock:
            return self._callbacks.get(instrument)

    def instruments(self) -> list[str]:
        with self._lock:
            return list(self._callbacks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._callbacks)


__all__ = ["MarketDataCallback", "SubscriptionRegistry", "channel_name"]
