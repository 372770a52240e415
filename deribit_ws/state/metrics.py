"""Latency metrics records (dataclasses only)."""

from __future__ import annotations

import math
from datetime import datetime
from dataclasses import field, dataclass


@dataclass(frozen=True, slots=True)
class Checkpoint:
    """Opaque start marker handed out by `MetricsCollector.start()`."""

    started_ns: int
    label: str | None = None


@dataclass(frozen=True, slots=True)
class LatencyRecord:
    operation: str
    duration_ms: float
    timestamp: datetime


@dataclass(slots=True)
class OperationStats:
    """Running aggregate for one operation name."""

    min_ms: float = field(default=math.inf)
    max_ms: float = 0.0
    total_ms: float = 0.0
    count: int = 0

    def add(self, duration_ms: float) -> None:
        self.min_ms = min(self.min_ms, duration_ms)
        self.max_ms = max(self.max_ms, duration_ms)
        self.total_ms += duration_ms
        self.count += 1

    @property
    def average_ms(self) -> float:
        if self.count == 0:
            return 0.0
        return self.total_ms / self.count

    def copy(self) -> OperationStats:
        return OperationStats(
            min_ms=self.min_ms,
            max_ms=self.max_ms,
            total_ms=self.total_ms,
            count=self.count,
        )


__all__ = ["Checkpoint", "LatencyRecord", "OperationStats"]
