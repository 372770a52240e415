"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from deribit_ws.config.secrets import ENV_DERIBIT_CLIENT_ID, ENV_DERIBIT_CLIENT_SECRET
from deribit_ws.state.settings import (
    AppSettings,
    MetricsSettings,
    ExchangeSettings,
    CredentialSettings,
)
from deribit_ws.config.metrics import (
    ENV_METRICS_HISTORY_CAPACITY,
    ENV_METRICS_DETAILED_LOGGING,
    DEFAULT_METRICS_HISTORY_CAPACITY,
    DEFAULT_METRICS_DETAILED_LOGGING,
)
from deribit_ws.config.exchange import (
    ENV_DERIBIT_HOST,
    ENV_DERIBIT_PORT,
    ENV_DERIBIT_WS_PATH,
    DEFAULT_DERIBIT_HOST,
    DEFAULT_DERIBIT_PORT,
    DEFAULT_DERIBIT_WS_PATH,
    ENV_DERIBIT_RECV_TIMEOUT_S,
    ENV_DERIBIT_CONNECT_TIMEOUT_S,
    DEFAULT_DERIBIT_RECV_TIMEOUT_S,
    DEFAULT_DERIBIT_CONNECT_TIMEOUT_S,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _timeout_env(name: str, default: float) -> float | None:
    value = _float_env(name, default)
    if value <= 0:
        return None
    return value


def _load_exchange_settings() -> ExchangeSettings:
    port = _int_env(ENV_DERIBIT_PORT, DEFAULT_DERIBIT_PORT)
    if port <= 0 or port > 65535:
        port = DEFAULT_DERIBIT_PORT

    return ExchangeSettings(
        host=_str_env(ENV_DERIBIT_HOST, DEFAULT_DERIBIT_HOST),
        port=port,
        resource_path=_str_env(ENV_DERIBIT_WS_PATH, DEFAULT_DERIBIT_WS_PATH),
        connect_timeout_s=_timeout_env(ENV_DERIBIT_CONNECT_TIMEOUT_S, DEFAULT_DERIBIT_CONNECT_TIMEOUT_S),
        recv_timeout_s=_timeout_env(ENV_DERIBIT_RECV_TIMEOUT_S, DEFAULT_DERIBIT_RECV_TIMEOUT_S),
    )


def _load_credential_settings() -> CredentialSettings:
    return CredentialSettings(
        client_id=(os.getenv(ENV_DERIBIT_CLIENT_ID) or "").strip(),
        client_secret=(os.getenv(ENV_DERIBIT_CLIENT_SECRET) or "").strip(),
    )


def _load_metrics_settings() -> MetricsSettings:
    capacity = _int_env(ENV_METRICS_HISTORY_CAPACITY, DEFAULT_METRICS_HISTORY_CAPACITY)
    return MetricsSettings(
        history_capacity=max(0, capacity),
        detailed_logging=_bool_env(ENV_METRICS_DETAILED_LOGGING, DEFAULT_METRICS_DETAILED_LOGGING),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        exchange=_load_exchange_settings(),
        credentials=_load_credential_settings(),
        metrics=_load_metrics_settings(),
    )


__all__ = ["load_settings"]
