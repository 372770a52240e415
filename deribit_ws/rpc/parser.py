"""Inbound frame parsing/validation for JSON-RPC responses."""

from __future__ import annotations

from typing import Any

import orjson

from deribit_ws.errors import ProtocolError
from deribit_ws.state.outcome import RpcErrorDetail
from deribit_ws.config.rpc import RPC_KEY_CODE, RPC_KEY_ERROR, RPC_KEY_MESSAGE

_PREVIEW_CHARS = 200


def _preview(raw: str | bytes) -> str:
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, (bytes, bytearray)) else str(raw)
    return text[:_PREVIEW_CHARS]


def parse_response(raw: str | bytes) -> dict[str, Any]:
    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ProtocolError(reason=f"invalid JSON: {exc}", preview=_preview(raw)) from exc

    if not isinstance(msg, dict):
        raise ProtocolError(reason="response must be a JSON object", preview=_preview(raw))
    return msg


def extract_error(response: dict[str, Any]) -> RpcErrorDetail | None:
    """Return the error carried by a response, or None for a success reply."""
    if RPC_KEY_ERROR not in response:
        return None

    error = response[RPC_KEY_ERROR]
    if isinstance(error, dict):
        message = error.get(RPC_KEY_MESSAGE)
        code = error.get(RPC_KEY_CODE)
        return RpcErrorDetail(
            message=message if isinstance(message, str) else str(error),
            code=code if isinstance(code, int) and not isinstance(code, bool) else None,
        )
    # Malformed error object: surface it verbatim rather than dropping it.
    return RpcErrorDetail(message=str(error))


__all__ = ["extract_error", "parse_response"]
