"""Transport channel connection state."""

from __future__ import annotations

import enum


class ConnectionState(enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


__all__ = ["ConnectionState"]
