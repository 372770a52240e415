"""Human-readable formatting of latency samples and aggregates."""

from __future__ import annotations

from collections.abc import Mapping

from deribit_ws.state.metrics import OperationStats


def format_sample(operation: str, duration_ms: float, stats: OperationStats) -> str:
    return (
        f"{operation} completed in {duration_ms:.3f} ms "
        f"(avg={stats.average_ms:.3f} min={stats.min_ms:.3f} max={stats.max_ms:.3f} count={stats.count})"
    )


def format_summary(all_stats: Mapping[str, OperationStats]) -> list[str]:
    """Return one line per operation, slowest average first."""
    if not all_stats:
        return ["no latency samples recorded"]

    width = max(len("operation"), *(len(name) for name in all_stats))
    ordered = sorted(all_stats.items(), key=lambda item: item[1].average_ms, reverse=True)
    lines = [f"{'operation':<{width}}  {'avg_ms':>10}  {'min_ms':>10}  {'max_ms':>10}  {'count':>6}"]
    for name, stats in ordered:
        lines.append(
            f"{name:<{width}}  {stats.average_ms:>10.3f}  {stats.min_ms:>10.3f}  {stats.max_ms:>10.3f}  {stats.count:>6}"
        )
    return lines


__all__ = ["format_sample", "format_summary"]
