"""Single secure WebSocket channel to the exchange.

The channel is a plain blocking text-frame pipe with two states. It does not
serialize concurrent callers; `RequestDispatcher` keeps one cycle in flight.
"""

from __future__ import annotations

import ssl
import logging
from typing import Any
from collections.abc import Callable

from websockets.sync.client import connect as ws_connect
from websockets.exceptions import WebSocketException

from deribit_ws.rpc.parser import parse_response
from deribit_ws.state.connection import ConnectionState
from deribit_ws.config.exchange import WSS_DEFAULT_PORT, WS_CLOSE_NORMAL_CODE, DEFAULT_DERIBIT_PORT
from deribit_ws.errors import ProtocolError, TransportError, NotConnectedError, ChannelConnectionError

from .tls import build_ssl_context

logger = logging.getLogger(__name__)

ConnectFn = Callable[..., Any]


def build_ws_url(host: str, resource_path: str, port: int = DEFAULT_DERIBIT_PORT) -> str:
    host = (host or "").strip().rstrip("/")
    if not host:
        raise ValueError("host must be a non-empty string")
    path = (resource_path or "").strip()
    if not path.startswith("/"):
        path = f"/{path}"
    netloc = host if int(port) == WSS_DEFAULT_PORT else f"{host}:{int(port)}"
    return f"wss://{netloc}{path}"


class TransportChannel:
    def __init__(
        self,
        *,
        port: int = DEFAULT_DERIBIT_PORT,
        connect_timeout_s: float | None = None,
        recv_timeout_s: float | None = None,
        ssl_context: ssl.SSLContext | None = None,
        connect_fn: ConnectFn | None = None,
    ) -> None:
        self.port = int(port)
        self.connect_timeout_s = connect_timeout_s
        self.recv_timeout_s = recv_timeout_s
        self._ssl_context = ssl_context
        self._connect = connect_fn or ws_connect
        self._ws: Any | None = None
        self._state = ConnectionState.DISCONNECTED
        self.url: str | None = None

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    def connect(self, host: str, resource_path: str) -> None:
        """Resolve, open TCP, verify TLS, then upgrade to WebSocket on `resource_path`."""
        if self.is_connected:
            raise ChannelConnectionError(host=host, resource_path=resource_path, cause="channel already connected")

        try:
            url = build_ws_url(host, resource_path, self.port)
        except ValueError as exc:
            raise ChannelConnectionError(host=host, resource_path=resource_path, cause=str(exc)) from exc

        try:
            ssl_context = self._ssl_context or build_ssl_context()
            # The websockets client closes its socket itself when any stage fails.
            ws = self._connect(url, ssl=ssl_context, open_timeout=self.connect_timeout_s)
        except (OSError, WebSocketException) as exc:
            logger.warning("Network error during connection to %s: %s", url, exc)
            raise ChannelConnectionError(
                host=host,
                resource_path=resource_path,
                cause=f"{type(exc).__name__}: {exc}",
            ) from exc

        self._ws = ws
        self.url = url
        self._state = ConnectionState.CONNECTED
        logger.info("Connected to exchange at %s", url)

    def send(self, text: str) -> None:
        ws = self._require_connection("send")
        try:
            ws.send(text)
        except (OSError, WebSocketException) as exc:
            logger.warning("Network error during transmission: %s", exc)
            raise TransportError(operation="send", cause=f"{type(exc).__name__}: {exc}") from exc
        logger.debug("Transmitted %d chars", len(text))

    def receive(self) -> dict[str, Any]:
        ws = self._require_connection("receive")
        try:
            frame = ws.recv(timeout=self.recv_timeout_s)
        except TimeoutError as exc:
            logger.warning("Network error during reception: no frame within %ss", self.recv_timeout_s)
            # A timed-out cycle ends the connection; its late reply must not answer a later request.
            self.disconnect()
            raise TransportError(operation="receive", cause=f"timed out after {self.recv_timeout_s}s") from exc
        except (OSError, WebSocketException) as exc:
            logger.warning("Network error during reception: %s", exc)
            raise TransportError(operation="receive", cause=f"{type(exc).__name__}: {exc}") from exc

        if not isinstance(frame, str):
            raise ProtocolError(reason="expected a text frame, got binary")
        logger.debug("Received: %s", frame)
        return parse_response(frame)

    def disconnect(self) -> None:
        if not self.is_connected:
            return

        ws, self._ws = self._ws, None
        self._state = ConnectionState.DISCONNECTED
        try:
            ws.close(code=WS_CLOSE_NORMAL_CODE)
        except (OSError, WebSocketException):
            logger.debug("close handshake failed", exc_info=True)
        logger.info("Disconnected from exchange")

    def _require_connection(self, operation: str) -> Any:
        if self._state is not ConnectionState.CONNECTED or self._ws is None:
            raise NotConnectedError(operation=operation)
        return self._ws


__all__ = ["TransportChannel", "build_ws_url"]
