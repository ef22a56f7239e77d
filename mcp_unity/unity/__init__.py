from .bridge import UnityBridge
from .pending import PendingRequests
from .router import route_reply
from .envelope import Reply, ErrorPayload, parse_reply, encode_request

__all__ = [
    "ErrorPayload",
    "PendingRequests",
    "Reply",
    "UnityBridge",
    "encode_request",
    "parse_reply",
    "route_reply",
]
