"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# websockets logs every handshake and keepalive at DEBUG/INFO.
SHOW_WEBSOCKET_LOGS: bool = (os.getenv("SHOW_WEBSOCKET_LOGS") or "").strip().lower() in {"1", "true", "yes"}

__all__ = ["LOG_FORMAT", "LOG_LEVEL", "SHOW_WEBSOCKET_LOGS"]
