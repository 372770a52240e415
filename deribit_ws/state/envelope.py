"""Outbound JSON-RPC request envelope (dataclass only)."""

from __future__ import annotations

from typing import Any
from dataclasses import field, dataclass

from deribit_ws.config.rpc import (
    RPC_KEY_ID,
    RPC_KEY_METHOD,
    RPC_KEY_PARAMS,
    JSONRPC_VERSION,
    RPC_KEY_JSONRPC,
)


@dataclass(frozen=True, slots=True)
class Envelope:
    id: int
    method: str
    params: dict[str, Any] = field(default_factory=dict)
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            RPC_KEY_JSONRPC: self.jsonrpc,
            RPC_KEY_ID: self.id,
            RPC_KEY_METHOD: self.method,
            RPC_KEY_PARAMS: dict(self.params),
        }


__all__ = ["Envelope"]
