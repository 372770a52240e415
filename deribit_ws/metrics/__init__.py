from .collector import MetricsCollector
from .report import format_sample, format_summary

__all__ = ["MetricsCollector", "format_sample", "format_summary"]
