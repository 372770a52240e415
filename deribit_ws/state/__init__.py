from .runtime import RuntimeDeps
from .envelope import Envelope
from .settings import AppSettings
from .connection import ConnectionState
from .outcome import RpcOutcome, RpcErrorDetail
from .metrics import Checkpoint, LatencyRecord, OperationStats

__all__ = [
    "AppSettings",
    "Checkpoint",
    "ConnectionState",
    "Envelope",
    "LatencyRecord",
    "OperationStats",
    "RpcErrorDetail",
    "RpcOutcome",
    "RuntimeDeps",
]
