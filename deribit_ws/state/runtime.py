"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from dataclasses import dataclass

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from deribit_ws.rpc.ids import RequestIdCounter
    from deribit_ws.state.settings import AppSettings
    from deribit_ws.rpc.dispatcher import RequestDispatcher
    from deribit_ws.transport.channel import TransportChannel
    from deribit_ws.metrics.collector import MetricsCollector


@dataclass(slots=True)
class RuntimeDeps:
    settings: AppSettings
    metrics: MetricsCollector
    request_ids: RequestIdCounter
    channel: TransportChannel
    dispatcher: RequestDispatcher

    def shutdown(self) -> None:
        try:
            self.channel.disconnect()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
