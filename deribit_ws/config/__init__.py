"""Configuration module exports (env names, defaults and protocol constants)."""

from .rpc import JSONRPC_VERSION
from .exchange import DEFAULT_DERIBIT_HOST, DEFAULT_DERIBIT_WS_PATH
from .metrics import DEFAULT_METRICS_HISTORY_CAPACITY

__all__ = [
    "DEFAULT_DERIBIT_HOST",
    "DEFAULT_DERIBIT_WS_PATH",
    "DEFAULT_METRICS_HISTORY_CAPACITY",
    "JSONRPC_VERSION",
]
