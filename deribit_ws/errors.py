"""Error taxonomy for the exchange client.

Every failure surfaced by the transport or the dispatcher is one of the
dataclass exceptions below. They all derive from `ExchangeClientError` so a
caller can catch the whole family at the reporting edge.
"""

from __future__ import annotations

from dataclasses import dataclass


class ExchangeClientError(Exception):
    """Base class for all client errors."""


@dataclass(frozen=True, slots=True)
class ChannelConnectionError(ExchangeClientError):
    """Resolution, socket, TLS or upgrade failure while connecting."""

    host: str
    resource_path: str
    cause: str

    def __str__(self) -> str:
        return f"connection to {self.host}{self.resource_path} failed: {self.cause}"


@dataclass(frozen=True, slots=True)
class NotConnectedError(ExchangeClientError):
    """send/receive attempted while the channel is disconnected."""

    operation: str

    def __str__(self) -> str:
        return f"cannot {self.operation}: channel is not connected"


@dataclass(frozen=True, slots=True)
class TransportError(ExchangeClientError):
    """Write or read failure on a connected channel."""

    operation: str
    cause: str

    def __str__(self) -> str:
        return f"{self.operation} failed: {self.cause}"


@dataclass(frozen=True, slots=True)
class ProtocolError(ExchangeClientError):
    """Inbound frame could not be interpreted as a structured response."""

    reason: str
    preview: str = ""

    def __str__(self) -> str:
        if self.preview:
            return f"malformed response ({self.reason}): {self.preview}"
        return f"malformed response ({self.reason})"


@dataclass(frozen=True, slots=True)
class OperationError(ExchangeClientError):
    """The exchange answered with an `error` object."""

    operation: str
    method: str
    message: str
    code: int | None = None

    def __str__(self) -> str:
        return self.message


__all__ = [
    "ChannelConnectionError",
    "ExchangeClientError",
    "NotConnectedError",
    "OperationError",
    "ProtocolError",
    "TransportError",
]
