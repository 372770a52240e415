"""Deribit JSON-RPC client over a single secure WebSocket, with latency metrics."""

from .rpc import RequestDispatcher, RequestIdCounter, SubscriptionRegistry
from .metrics import MetricsCollector
from .transport import TransportChannel
from .errors import (
    OperationError,
    ProtocolError,
    TransportError,
    NotConnectedError,
    ExchangeClientError,
    ChannelConnectionError,
)

__all__ = [
    "ChannelConnectionError",
    "ExchangeClientError",
    "MetricsCollector",
    "NotConnectedError",
    "OperationError",
    "ProtocolError",
    "RequestDispatcher",
    "RequestIdCounter",
    "SubscriptionRegistry",
    "TransportChannel",
    "TransportError",
]
