"""WebSocket protocol configuration and constants."""

from __future__ import annotations

# Request/reply envelope keys
WS_KEY_ID = "id"
WS_KEY_METHOD = "method"
WS_KEY_PARAMS = "params"
WS_KEY_RESULT = "result"
WS_KEY_ERROR = "error"
WS_KEY_ERROR_MESSAGE = "message"
WS_KEY_ERROR_DETAILS = "details"

# Identifies the MCP client to the Unity editor (also sent as Origin).
WS_HEADER_CLIENT_NAME = "X-Client-Name"

ENV_WS_PING_INTERVAL_S = "UNITY_WS_PING_INTERVAL_S"
ENV_WS_PING_TIMEOUT_S = "UNITY_WS_PING_TIMEOUT_S"
ENV_WS_MAX_MESSAGE_BYTES = "UNITY_WS_MAX_MESSAGE_BYTES"

DEFAULT_WS_PING_INTERVAL_S = 20.0
DEFAULT_WS_PING_TIMEOUT_S = 20.0
# Console log pages with stack traces can get large.
DEFAULT_WS_MAX_MESSAGE_BYTES = 16 * 1024 * 1024

WS_UNKNOWN_ERROR_MESSAGE = "Unknown error"

__all__ = [
    "WS_KEY_ID",
    "WS_KEY_METHOD",
    "WS_KEY_PARAMS",
    "WS_KEY_RESULT",
    "WS_KEY_ERROR",
    "WS_KEY_ERROR_MESSAGE",
    "WS_KEY_ERROR_DETAILS",
    "WS_HEADER_CLIENT_NAME",
    "ENV_WS_PING_INTERVAL_S",
    "ENV_WS_PING_TIMEOUT_S",
    "ENV_WS_MAX_MESSAGE_BYTES",
    "DEFAULT_WS_PING_INTERVAL_S",
    "DEFAULT_WS_PING_TIMEOUT_S",
    "DEFAULT_WS_MAX_MESSAGE_BYTES",
    "WS_UNKNOWN_ERROR_MESSAGE",
]
