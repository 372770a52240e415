"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExchangeSettings:
    host: str
    port: int
    resource_path: str
    connect_timeout_s: float | None
    recv_timeout_s: float | None


@dataclass(frozen=True, slots=True)
class CredentialSettings:
    client_id: str
    client_secret: str

    @property
    def present(self) -> bool:
        return bool(self.client_id and self.client_secret)


@dataclass(frozen=True, slots=True)
class MetricsSettings:
    history_capacity: int
    detailed_logging: bool


@dataclass(frozen=True, slots=True)
class AppSettings:
    exchange: ExchangeSettings
    credentials: CredentialSettings
    metrics: MetricsSettings


__all__ = [
    "AppSettings",
    "CredentialSettings",
    "ExchangeSettings",
    "MetricsSettings",
]
