from __future__ import annotations

import json
import time
import threading
from typing import Any

import pytest

from deribit_ws.rpc.ids import RequestIdCounter
from deribit_ws.rpc.dispatcher import RequestDispatcher
from deribit_ws.rpc.subscriptions import SubscriptionRegistry
from deribit_ws.state.connection import ConnectionState
from deribit_ws.transport.channel import TransportChannel
from deribit_ws.metrics.collector import MetricsCollector
from deribit_ws.errors import OperationError, TransportError, NotConnectedError


class _FakeChannel:
    """Records outbound envelopes and replays canned responses."""

    def __init__(self, responses: list[dict[str, Any]] | None = None, clock: Any = None) -> None:
        self.responses = list(responses or [])
        self.sent: list[dict[str, Any]] = []
        self.clock = clock
        self.receive_error: Exception | None = None

    def send(self, text: str) -> None:
        self.sent.append(json.loads(text))

    def receive(self) -> dict[str, Any]:
        if self.receive_error is not None:
            raise self.receive_error
        if self.clock is not None:
            self.clock.now_ns += 10_000_000
        if self.responses:
            return self.responses.pop(0)
        return {"jsonrpc": "2.0", "id": self.sent[-1]["id"], "result": {}}


class _DisconnectedChannel:
    def send(self, text: str) -> None:
        raise NotConnectedError(operation="send")

    def receive(self) -> dict[str, Any]:
        raise NotConnectedError(operation="receive")


class _Clock:
    def __init__(self) -> None:
        self.now_ns = 0

    def __call__(self) -> int:
        return self.now_ns


def _dispatcher(responses: list[dict[str, Any]] | None = None) -> tuple[RequestDispatcher, _FakeChannel, MetricsCollector]:
    channel = _FakeChannel(responses)
    metrics = MetricsCollector()
    return RequestDispatcher(channel, metrics), channel, metrics


@pytest.mark.parametrize(
    ("call", "method", "params"),
    [
        (
            lambda d: d.authenticate("key", "secret"),
            "public/auth",
            {"grant_type": "client_credentials", "client_id": "key", "client_secret": "secret"},
        ),
        (
            lambda d: d.place_order("BTC-PERPETUAL", 10.0, 25000.5),
            "private/buy",
            {"instrument_name": "BTC-PERPETUAL", "amount": 10.0, "type": "limit", "price": 25000.5},
        ),
        (
            lambda d: d.cancel_order("O-1"),
            "private/cancel",
            {"order_id": "O-1"},
        ),
        (
            lambda d: d.modify_order("O-1", 26000.0, 20.0),
            "private/edit",
            {"order_id": "O-1", "price": 26000.0, "amount": 20.0, "post_only": True},
        ),
        (
            lambda d: d.get_order_book("ETH-PERPETUAL"),
            "public/get_order_book",
            {"instrument_name": "ETH-PERPETUAL", "depth": 10},
        ),
        (
            lambda d: d.get_positions(),
            "private/get_positions",
            {"kind": "future"},
        ),
    ],
)
def test_method_table(call, method: str, params: dict[str, Any]) -> None:
    dispatcher, channel, _metrics = _dispatcher()
    call(dispatcher)

    (envelope,) = channel.sent
    assert envelope == {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}


def test_cancel_returns_response_unmodified() -> None:
    reply = {"jsonrpc": "2.0", "id": 1, "result": {"order_id": "O-1", "status": "cancelled"}}
    dispatcher, _channel, _metrics = _dispatcher([reply])
    assert dispatcher.cancel_order("O-1") == reply


def test_error_response_raises_operation_error() -> None:
    reply = {"jsonrpc": "2.0", "id": 1, "error": {"code": 10009, "message": "not_enough_funds"}}
    dispatcher, _channel, _metrics = _dispatcher([reply])

    with pytest.raises(OperationError) as exc:
        dispatcher.place_order("BTC-PERPETUAL", 10.0, 25000.0)
    assert exc.value.message == "not_enough_funds"
    assert str(exc.value) == "not_enough_funds"
    assert exc.value.code == 10009
    assert exc.value.method == "private/buy"
    assert exc.value.operation == "Order Creation"


def test_execute_returns_explicit_outcome() -> None:
    err = {"jsonrpc": "2.0", "id": 1, "error": {"code": 13009, "message": "unauthorized"}}
    ok = {"jsonrpc": "2.0", "id": 2, "result": []}
    dispatcher, _channel, _metrics = _dispatcher([err, ok])

    failed = dispatcher.execute("private/get_positions", {"kind": "future"}, operation="Positions Fetch")
    assert failed.ok is False
    assert failed.error is not None and failed.error.message == "unauthorized"
    assert failed.response == err

    succeeded = dispatcher.execute("private/get_positions", {"kind": "option"}, operation="Positions Fetch")
    assert succeeded.ok is True
    assert succeeded.unwrap() == ok


def test_request_ids_increase_by_one_per_call() -> None:
    ids = RequestIdCounter()
    channel = _FakeChannel()
    first = RequestDispatcher(channel, MetricsCollector(), request_ids=ids)
    second = RequestDispatcher(channel, MetricsCollector(), request_ids=ids)

    first.get_positions()
    second.get_order_book("BTC-PERPETUAL", depth=5)
    first.cancel_order("O-9")

    assert [e["id"] for e in channel.sent] == [1, 2, 3]
    assert ids.peek() == 4


def test_ids_are_consumed_even_when_operation_fails() -> None:
    reply = {"jsonrpc": "2.0", "id": 1, "error": {"code": 1, "message": "boom"}}
    dispatcher, channel, _metrics = _dispatcher([reply])
    with pytest.raises(OperationError):
        dispatcher.cancel_order("x")
    dispatcher.cancel_order("y")
    assert [e["id"] for e in channel.sent] == [1, 2]


def test_round_trip_is_timed_under_operation_label() -> None:
    clock = _Clock()
    channel = _FakeChannel(clock=clock)
    metrics = MetricsCollector(clock_ns=clock)
    dispatcher = RequestDispatcher(channel, metrics)

    dispatcher.place_order("BTC-PERPETUAL", 1.0, 100.0)
    dispatcher.place_order("BTC-PERPETUAL", 1.0, 101.0)
    dispatcher.get_positions()

    assert metrics.stats("Order Creation").count == 2
    assert metrics.average("Order Creation") == pytest.approx(10.0)
    assert metrics.stats("Positions Fetch").count == 1


def test_transport_errors_propagate_unwrapped() -> None:
    dispatcher, channel, metrics = _dispatcher()
    channel.receive_error = TransportError(operation="receive", cause="reset by peer")

    with pytest.raises(TransportError):
        dispatcher.get_order_book("BTC-PERPETUAL")
    assert metrics.stats("Market Depth Fetch") is None


def test_not_connected_propagates_unwrapped() -> None:
    dispatcher = RequestDispatcher(_DisconnectedChannel(), MetricsCollector())
    with pytest.raises(NotConnectedError):
        dispatcher.get_positions()


def test_subscribe_registers_callback_before_request() -> None:
    dispatcher, channel, _metrics = _dispatcher()
    seen: list[str] = []

    def on_book(msg: dict[str, Any]) -> None:
        seen.append(msg["channel"])

    dispatcher.subscribe("BTC-PERPETUAL", on_book)

    (envelope,) = channel.sent
    assert envelope["method"] == "public/subscribe"
    assert envelope["params"] == {"channels": ["book.BTC-PERPETUAL.100ms"]}
    assert dispatcher.subscriptions.get("BTC-PERPETUAL") is on_book
    assert seen == []


def test_subscribe_keeps_registration_when_exchange_rejects() -> None:
    reply = {"jsonrpc": "2.0", "id": 1, "error": {"code": 11050, "message": "bad_request"}}
    dispatcher, _channel, _metrics = _dispatcher([reply])

    with pytest.raises(OperationError):
        dispatcher.subscribe("ETH-PERPETUAL", lambda msg: None)
    assert dispatcher.subscriptions.instruments() == ["ETH-PERPETUAL"]


def test_injected_registry_is_used_even_when_empty() -> None:
    registry = SubscriptionRegistry()
    dispatcher = RequestDispatcher(_FakeChannel(), MetricsCollector(), subscriptions=registry)

    dispatcher.subscribe("BTC-PERPETUAL", lambda msg: None)

    assert dispatcher.subscriptions is registry
    assert registry.instruments() == ["BTC-PERPETUAL"]


class _LateReplyWebSocket:
    """Times out on the first read; the reply then arrives late and stays queued."""

    def __init__(self) -> None:
        self.queued: list[str] = []
        self.timeouts_left = 1
        self.closed = False

    def send(self, text: str) -> None:
        request = json.loads(text)
        self.queued.append(json.dumps({"jsonrpc": "2.0", "id": request["id"], "result": {"for": request["method"]}}))

    def recv(self, timeout: float | None = None) -> str:
        if self.timeouts_left:
            self.timeouts_left -= 1
            raise TimeoutError()
        return self.queued.pop(0)

    def close(self, code: int = 1000, reason: str = "") -> None:
        self.closed = True


def test_timed_out_reply_is_never_returned_to_next_call() -> None:
    ws = _LateReplyWebSocket()
    channel = TransportChannel(connect_fn=lambda url, **_: ws, recv_timeout_s=0.01)
    channel.connect("test.deribit.com", "/ws/api/v2")
    dispatcher = RequestDispatcher(channel, MetricsCollector())

    with pytest.raises(TransportError):
        dispatcher.place_order("BTC-PERPETUAL", 1.0, 100.0)
    assert channel.state is ConnectionState.DISCONNECTED
    assert ws.closed is True

    with pytest.raises(NotConnectedError):
        dispatcher.cancel_order("O-1")


class _OverlapRecordingChannel:
    def __init__(self) -> None:
        self._guard = threading.Lock()
        self.busy = False
        self.overlaps = 0
        self.pending: list[int] = []
        self.ids: list[int] = []

    def send(self, text: str) -> None:
        with self._guard:
            if self.busy:
                self.overlaps += 1
            self.busy = True
            rid = json.loads(text)["id"]
            self.pending.append(rid)
            self.ids.append(rid)
        time.sleep(0.001)

    def receive(self) -> dict[str, Any]:
        time.sleep(0.001)
        with self._guard:
            rid = self.pending.pop(0)
            self.busy = False
        return {"jsonrpc": "2.0", "id": rid, "result": {}}


def test_concurrent_calls_never_overlap_on_the_channel() -> None:
    channel = _OverlapRecordingChannel()
    dispatcher = RequestDispatcher(channel, MetricsCollector())
    threads_n, calls_per_thread = 6, 20
    barrier = threading.Barrier(threads_n)
    replies: list[dict[str, Any]] = []
    replies_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        for _ in range(calls_per_thread):
            reply = dispatcher.get_positions()
            with replies_lock:
                replies.append(reply)

    threads = [threading.Thread(target=worker) for _ in range(threads_n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    total = threads_n * calls_per_thread
    assert channel.overlaps == 0
    assert sorted(channel.ids) == list(range(1, total + 1))
    assert len(replies) == total
