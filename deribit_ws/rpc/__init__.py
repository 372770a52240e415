from .ids import RequestIdCounter
from .dispatcher import RequestDispatcher
from .parser import extract_error, parse_response
from .envelope import build_envelope, encode_envelope
from .subscriptions import SubscriptionRegistry, channel_name

__all__ = [
    "RequestDispatcher",
    "RequestIdCounter",
    "SubscriptionRegistry",
    "build_envelope",
    "channel_name",
    "encode_envelope",
    "extract_error",
    "parse_response",
]
