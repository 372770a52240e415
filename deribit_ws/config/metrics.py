"""Latency metrics configuration (env names, defaults and operation labels)."""

from __future__ import annotations

ENV_METRICS_HISTORY_CAPACITY = "METRICS_HISTORY_CAPACITY"
ENV_METRICS_DETAILED_LOGGING = "METRICS_DETAILED_LOGGING"

# 0 keeps running aggregates only (timer mode, no sample history).
DEFAULT_METRICS_HISTORY_CAPACITY = 1000
DEFAULT_METRICS_DETAILED_LOGGING = False

NS_PER_MS = 1_000_000.0

OP_CONNECTION_SETUP = "Connection Setup"
OP_AUTHENTICATION = "Authentication"
OP_ORDER_CREATION = "Order Creation"
OP_ORDER_CANCELLATION = "Order Cancellation"
OP_ORDER_MODIFICATION = "Order Modification"
OP_MARKET_DEPTH_FETCH = "Market Depth Fetch"
OP_POSITIONS_FETCH = "Positions Fetch"
OP_MARKET_DATA_SUBSCRIPTION = "Market Data Subscription"
OP_TOTAL_OPERATION_TIME = "Total Operation Time"

__all__ = [
    "DEFAULT_METRICS_DETAILED_LOGGING",
    "DEFAULT_METRICS_HISTORY_CAPACITY",
    "ENV_METRICS_DETAILED_LOGGING",
    "ENV_METRICS_HISTORY_CAPACITY",
    "NS_PER_MS",
    "OP_AUTHENTICATION",
    "OP_CONNECTION_SETUP",
    "OP_MARKET_DATA_SUBSCRIPTION",
    "OP_MARKET_DEPTH_FETCH",
    "OP_ORDER_CANCELLATION",
    "OP_ORDER_CREATION",
    "OP_ORDER_MODIFICATION",
    "OP_POSITIONS_FETCH",
    "OP_TOTAL_OPERATION_TIME",
]
