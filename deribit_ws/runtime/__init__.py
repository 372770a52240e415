"""Runtime package: settings loading, logging setup and dependency wiring."""

from .logging import configure_logging
from .settings_loader import load_settings
from .dependencies import open_runtime, build_runtime_deps

__all__ = ["build_runtime_deps", "configure_logging", "load_settings", "open_runtime"]
