"""Explicit success/failure variants for one RPC round trip."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass

from deribit_ws.errors import OperationError


@dataclass(frozen=True, slots=True)
class RpcErrorDetail:
    message: str
    code: int | None = None


@dataclass(frozen=True, slots=True)
class RpcOutcome:
    """Either the exchange response or the error object it carried.

    `response` is always the full decoded frame, failures included.
    """

    operation: str
    method: str
    response: dict[str, Any]
    error: RpcErrorDetail | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> dict[str, Any]:
        if self.error is not None:
            raise OperationError(
                operation=self.operation,
                method=self.method,
                message=self.error.message,
                code=self.error.code,
            )
        return self.response


__all__ = ["RpcErrorDetail", "RpcOutcome"]
