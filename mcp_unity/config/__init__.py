"""Configuration module exports (env-resolved constants only)."""

from .bridge import (
    DEFAULT_UNITY_PORT,
    DEFAULT_REQUEST_TIMEOUT_S,
    DEFAULT_CONNECT_TIMEOUT_S,
)

__all__ = [
    "DEFAULT_CONNECT_TIMEOUT_S",
    "DEFAULT_REQUEST_TIMEOUT_S",
    "DEFAULT_UNITY_PORT",
]
