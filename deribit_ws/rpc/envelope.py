"""JSON-RPC envelope construction and encoding."""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping

import orjson

from deribit_ws.state.envelope import Envelope


def build_envelope(request_id: int, method: str, params: Mapping[str, Any] | None = None) -> Envelope:
    if not isinstance(method, str) or not method.strip():
        raise ValueError("envelope method must be a non-empty string")
    return Envelope(id=int(request_id), method=method, params=dict(params or {}))


def encode_envelope(envelope: Envelope) -> str:
    return orjson.dumps(envelope.to_dict()).decode("utf-8")


__all__ = ["build_envelope", "encode_envelope"]
