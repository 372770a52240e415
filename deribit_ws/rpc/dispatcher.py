"""Map domain calls onto the exchange's JSON-RPC method table.

Each call performs exactly one send/receive cycle on the channel. A
per-dispatcher lock keeps at most one cycle in flight, since responses are
not correlated back to their request id.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from deribit_ws.rpc.ids import RequestIdCounter
from deribit_ws.state.outcome import RpcOutcome
from deribit_ws.rpc.subscriptions import SubscriptionRegistry, MarketDataCallback, channel_name
from deribit_ws.config.rpc import (
    RPC_METHOD_BUY,
    RPC_METHOD_AUTH,
    RPC_METHOD_EDIT,
    AUTH_GRANT_TYPE,
    ORDER_TYPE_LIMIT,
    RPC_METHOD_CANCEL,
    RPC_METHOD_SUBSCRIBE,
    DEFAULT_POSITIONS_KIND,
    RPC_METHOD_GET_POSITIONS,
    DEFAULT_ORDER_BOOK_DEPTH,
    RPC_METHOD_GET_ORDER_BOOK,
)
from deribit_ws.config.metrics import (
    OP_AUTHENTICATION,
    OP_ORDER_CREATION,
    OP_POSITIONS_FETCH,
    OP_MARKET_DEPTH_FETCH,
    OP_ORDER_CANCELLATION,
    OP_ORDER_MODIFICATION,
    OP_MARKET_DATA_SUBSCRIPTION,
)

from .parser import extract_error
from .envelope import build_envelope, encode_envelope

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from deribit_ws.transport.channel import TransportChannel
    from deribit_ws.metrics.collector import MetricsCollector


class RequestDispatcher:
    def __init__(
        self,
        channel: TransportChannel,
        metrics: MetricsCollector,
        *,
        request_ids: RequestIdCounter | None = None,
        subscriptions: SubscriptionRegistry | None = None,
    ) -> None:
        self._channel = channel
        self._metrics = metrics
        self._ids = request_ids or RequestIdCounter()
        self._subscriptions = subscriptions if subscriptions is not None else SubscriptionRegistry()
        self._inflight = threading.Lock()

    @property
    def subscriptions(self) -> SubscriptionRegistry:
        return self._subscriptions

    def execute(self, method: str, params: Mapping[str, Any], *, operation: str) -> RpcOutcome:
        """Run one round trip and return the outcome without raising for RPC errors.

        Transport, connection and protocol failures propagate unchanged.
        """
        envelope = build_envelope(self._ids.next_id(), method, params)
        text = encode_envelope(envelope)
        logger.debug("%s request method=%s id=%s", operation, method, envelope.id)

        with self._inflight:
            checkpoint = self._metrics.start(operation)
            self._channel.send(text)
            response = self._channel.receive()
            self._metrics.stop(checkpoint, operation)

        error = extract_error(response)
        if error is not None:
            logger.warning(
                "%s failed method=%s id=%s code=%s: %s",
                operation,
                method,
                envelope.id,
                error.code,
                error.message,
            )
        return RpcOutcome(operation=operation, method=method, response=response, error=error)

    def authenticate(self, client_id: str, client_secret: str) -> dict[str, Any]:
        params = {
            "grant_type": AUTH_GRANT_TYPE,
            "client_id": client_id,
            "client_secret": client_secret,
        }
        return self.execute(RPC_METHOD_AUTH, params, operation=OP_AUTHENTICATION).unwrap()

    def place_order(self, instrument: str, amount: float, price: float) -> dict[str, Any]:
        params = {
            "instrument_name": instrument,
            "amount": amount,
            "type": ORDER_TYPE_LIMIT,
            "price": price,
        }
        return self.execute(RPC_METHOD_BUY, params, operation=OP_ORDER_CREATION).unwrap()

    def cancel_order(self, order_id: str) -> dict[str, Any]:
        params = {"order_id": order_id}
        return self.execute(RPC_METHOD_CANCEL, params, operation=OP_ORDER_CANCELLATION).unwrap()

    def modify_order(self, order_id: str, price: float, amount: float) -> dict[str, Any]:
        params = {
            "order_id": order_id,
            "price": price,
            "amount": amount,
            "post_only": True,
        }
        return self.execute(RPC_METHOD_EDIT, params, operation=OP_ORDER_MODIFICATION).unwrap()

    def get_order_book(self, instrument: str, depth: int = DEFAULT_ORDER_BOOK_DEPTH) -> dict[str, Any]:
        params = {"instrument_name": instrument, "depth": depth}
        return self.execute(RPC_METHOD_GET_ORDER_BOOK, params, operation=OP_MARKET_DEPTH_FETCH).unwrap()

    def get_positions(self, kind: str = DEFAULT_POSITIONS_KIND) -> dict[str, Any]:
        params = {"kind": kind}
        return self.execute(RPC_METHOD_GET_POSITIONS, params, operation=OP_POSITIONS_FETCH).unwrap()

    def subscribe(self, instrument: str, callback: MarketDataCallback) -> dict[str, Any]:
        # Registered before the request goes out.
        self._subscriptions.register(instrument, callback)
        params = {"channels": [channel_name(instrument)]}
        return self.execute(RPC_METHOD_SUBSCRIBE, params, operation=OP_MARKET_DATA_SUBSCRIPTION).unwrap()


__all__ = ["RequestDispatcher"]
