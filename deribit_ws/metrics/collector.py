"""Thread-safe latency recorder with bounded history and running aggregates."""

from __future__ import annotations

import time
import logging
import threading
import collections
from collections.abc import Callable
from datetime import datetime, timezone

from deribit_ws.config.metrics import NS_PER_MS, DEFAULT_METRICS_HISTORY_CAPACITY
from deribit_ws.state.metrics import Checkpoint, LatencyRecord, OperationStats

from .report import format_sample

logger = logging.getLogger(__name__)

ClockFn = Callable[[], int]
WallFn = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MetricsCollector:
    """Record operation durations and keep per-operation min/max/sum/count.

    History is a FIFO of at most `history_capacity` samples; the oldest sample
    is evicted first. A capacity of 0 keeps aggregates only. Every read and
    write goes through one lock, and nothing blocks while holding it.
    """

    def __init__(
        self,
        *,
        history_capacity: int = DEFAULT_METRICS_HISTORY_CAPACITY,
        detailed_logging: bool = False,
        clock_ns: ClockFn | None = None,
        wall_fn: WallFn | None = None,
    ) -> None:
        self.history_capacity = max(0, int(history_capacity))
        self._clock_ns = clock_ns or time.perf_counter_ns
        self._wall = wall_fn or _utc_now
        self._lock = threading.Lock()
        self._history: collections.deque[LatencyRecord] = collections.deque(maxlen=self.history_capacity)
        self._stats: dict[str, OperationStats] = {}
        self._detailed_logging = bool(detailed_logging)

    @property
    def detailed_logging(self) -> bool:
        return self._detailed_logging

    def set_detailed_logging(self, enabled: bool) -> None:
        self._detailed_logging = bool(enabled)

    def start(self, label: str | None = None) -> Checkpoint:
        checkpoint = Checkpoint(started_ns=self._clock_ns(), label=label)
        if label and self._detailed_logging:
            logger.info("%s started", label)
        return checkpoint

    def stop(self, checkpoint: Checkpoint, operation: str) -> float:
        elapsed_ms = (self._clock_ns() - checkpoint.started_ns) / NS_PER_MS
        return self.record(operation, elapsed_ms)

    def record(self, operation: str, duration_ms: float) -> float:
        duration_ms = float(duration_ms)
        entry = LatencyRecord(operation=operation, duration_ms=duration_ms, timestamp=self._wall())
        with self._lock:
            self._history.append(entry)
            stats = self._stats.get(operation)
            if stats is None:
                stats = OperationStats()
                self._stats[operation] = stats
            stats.add(duration_ms)
            aggregate = stats.copy()

        if self._detailed_logging:
            logger.info("%s", format_sample(operation, duration_ms, aggregate))
        return duration_ms

    def average(self, operation: str) -> float:
        with self._lock:
            stats = self._stats.get(operation)
            return stats.average_ms if stats is not None else 0.0

    def stats(self, operation: str) -> OperationStats | None:
        with self._lock:
            stats = self._stats.get(operation)
            return stats.copy() if stats is not None else None

    def all_stats(self) -> dict[str, OperationStats]:
        with self._lock:
            return {name: stats.copy() for name, stats in self._stats.items()}

    def snapshot(self) -> dict[str, float]:
        with self._lock:
            return {name: stats.average_ms for name, stats in self._stats.items()}

    def history(self) -> list[LatencyRecord]:
        with self._lock:
            return list(self._history)

    def reset(self) -> None:
        with self._lock:
            self._history.clear()
            self._stats.clear()


__all__ = ["MetricsCollector"]
