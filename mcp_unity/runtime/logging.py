"""Logging initialization."""

from __future__ import annotations

import sys
import logging

from mcp_unity.config.logging import LOG_LEVEL, LOG_FORMAT, SHOW_WEBSOCKET_LOGS


def configure_logging() -> None:
    # stdout carries the MCP stdio protocol; every log line must go to stderr.
    if not SHOW_WEBSOCKET_LOGS:
        logging.getLogger("websockets").setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, stream=sys.stderr)


__all__ = ["configure_logging"]
