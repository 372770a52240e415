"""Exchange endpoint configuration (env names and defaults only)."""

from __future__ import annotations

ENV_DERIBIT_HOST = "DERIBIT_HOST"
ENV_DERIBIT_PORT = "DERIBIT_PORT"
ENV_DERIBIT_WS_PATH = "DERIBIT_WS_PATH"
ENV_DERIBIT_CONNECT_TIMEOUT_S = "DERIBIT_CONNECT_TIMEOUT_S"
ENV_DERIBIT_RECV_TIMEOUT_S = "DERIBIT_RECV_TIMEOUT_S"

WSS_DEFAULT_PORT = 443

DEFAULT_DERIBIT_HOST = "test.deribit.com"
DEFAULT_DERIBIT_PORT = WSS_DEFAULT_PORT
DEFAULT_DERIBIT_WS_PATH = "/ws/api/v2"

# 0 disables the deadline (block until the peer answers).
DEFAULT_DERIBIT_CONNECT_TIMEOUT_S = 10.0
DEFAULT_DERIBIT_RECV_TIMEOUT_S = 30.0

WS_CLOSE_NORMAL_CODE = 1000

__all__ = [
    "DEFAULT_DERIBIT_CONNECT_TIMEOUT_S",
    "DEFAULT_DERIBIT_HOST",
    "DEFAULT_DERIBIT_PORT",
    "DEFAULT_DERIBIT_RECV_TIMEOUT_S",
    "DEFAULT_DERIBIT_WS_PATH",
    "ENV_DERIBIT_CONNECT_TIMEOUT_S",
    "ENV_DERIBIT_HOST",
    "ENV_DERIBIT_PORT",
    "ENV_DERIBIT_RECV_TIMEOUT_S",
    "ENV_DERIBIT_WS_PATH",
    "WSS_DEFAULT_PORT",
    "WS_CLOSE_NORMAL_CODE",
]
