"""Credential configuration (env names only; values are never defaulted)."""

from __future__ import annotations

ENV_DERIBIT_CLIENT_ID = "DERIBIT_CLIENT_ID"
ENV_DERIBIT_CLIENT_SECRET = "DERIBIT_CLIENT_SECRET"

__all__ = ["ENV_DERIBIT_CLIENT_ID", "ENV_DERIBIT_CLIENT_SECRET"]
