"""JSON-RPC wire protocol constants."""

from __future__ import annotations

JSONRPC_VERSION = "2.0"

# Envelope keys
RPC_KEY_JSONRPC = "jsonrpc"
RPC_KEY_ID = "id"
RPC_KEY_METHOD = "method"
RPC_KEY_PARAMS = "params"
RPC_KEY_ERROR = "error"
RPC_KEY_CODE = "code"
RPC_KEY_MESSAGE = "message"

# Method table
RPC_METHOD_AUTH = "public/auth"
RPC_METHOD_BUY = "private/buy"
RPC_METHOD_CANCEL = "private/cancel"
RPC_METHOD_EDIT = "private/edit"
RPC_METHOD_GET_ORDER_BOOK = "public/get_order_book"
RPC_METHOD_GET_POSITIONS = "private/get_positions"
RPC_METHOD_SUBSCRIBE = "public/subscribe"

AUTH_GRANT_TYPE = "client_credentials"
ORDER_TYPE_LIMIT = "limit"
DEFAULT_ORDER_BOOK_DEPTH = 10
DEFAULT_POSITIONS_KIND = "future"
BOOK_CHANNEL_INTERVAL = "100ms"

__all__ = [
    "AUTH_GRANT_TYPE",
    "BOOK_CHANNEL_INTERVAL",
    "DEFAULT_ORDER_BOOK_DEPTH",
    "DEFAULT_POSITIONS_KIND",
    "JSONRPC_VERSION",
    "ORDER_TYPE_LIMIT",
    "RPC_KEY_CODE",
    "RPC_KEY_ERROR",
    "RPC_KEY_ID",
    "RPC_KEY_JSONRPC",
    "RPC_KEY_MESSAGE",
    "RPC_KEY_METHOD",
    "RPC_KEY_PARAMS",
    "RPC_METHOD_AUTH",
    "RPC_METHOD_BUY",
    "RPC_METHOD_CANCEL",
    "RPC_METHOD_EDIT",
    "RPC_METHOD_GET_ORDER_BOOK",
    "RPC_METHOD_GET_POSITIONS",
    "RPC_METHOD_SUBSCRIBE",
]
