"""Runtime dependency construction (metrics, id counter, channel, dispatcher)."""

from __future__ import annotations

import logging

from deribit_ws.state import RuntimeDeps
from deribit_ws.rpc.ids import RequestIdCounter
from deribit_ws.state.settings import AppSettings
from deribit_ws.rpc.dispatcher import RequestDispatcher
from deribit_ws.config.metrics import OP_CONNECTION_SETUP
from deribit_ws.transport.channel import TransportChannel, ConnectFn
from deribit_ws.metrics.collector import MetricsCollector

from .settings_loader import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings, *, connect_fn: ConnectFn | None = None) -> RuntimeDeps:
    """Wire the collaborators for one exchange session without touching the network."""
    metrics = MetricsCollector(
        history_capacity=settings.metrics.history_capacity,
        detailed_logging=settings.metrics.detailed_logging,
    )
    request_ids = RequestIdCounter()
    channel = TransportChannel(
        port=settings.exchange.port,
        connect_timeout_s=settings.exchange.connect_timeout_s,
        recv_timeout_s=settings.exchange.recv_timeout_s,
        connect_fn=connect_fn,
    )
    dispatcher = RequestDispatcher(channel, metrics, request_ids=request_ids)
    return RuntimeDeps(
        settings=settings,
        metrics=metrics,
        request_ids=request_ids,
        channel=channel,
        dispatcher=dispatcher,
    )


def open_runtime(settings: AppSettings | None = None, *, connect_fn: ConnectFn | None = None) -> RuntimeDeps:
    """Build the runtime and connect its channel, timing the handshake."""
    settings = settings or load_settings()
    deps = build_runtime_deps(settings, connect_fn=connect_fn)

    checkpoint = deps.metrics.start(OP_CONNECTION_SETUP)
    deps.channel.connect(settings.exchange.host, settings.exchange.resource_path)
    deps.metrics.stop(checkpoint, OP_CONNECTION_SETUP)

    logger.info("runtime: ready host=%s", settings.exchange.host)
    return deps


__all__ = ["RuntimeDeps", "build_runtime_deps", "open_runtime"]
