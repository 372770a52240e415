from .tls import build_ssl_context
from .channel import TransportChannel, build_ws_url

__all__ = ["TransportChannel", "build_ssl_context", "build_ws_url"]
