"""TLS context for the exchange connection."""

from __future__ import annotations

import ssl


def build_ssl_context() -> ssl.SSLContext:
    """Client context that verifies the peer against the system trust store."""
    ctx = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)
    ctx.check_hostname = True
    ctx.verify_mode = ssl.CERT_REQUIRED
    return ctx


__all__ = ["build_ssl_context"]
