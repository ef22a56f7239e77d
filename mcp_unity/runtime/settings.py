"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from mcp_unity.state.settings import AppSettings, BridgeSettings, ServerSettings
from mcp_unity.config.websocket import (
    ENV_WS_PING_TIMEOUT_S,
    ENV_WS_PING_INTERVAL_S,
    ENV_WS_MAX_MESSAGE_BYTES,
    DEFAULT_WS_PING_TIMEOUT_S,
    DEFAULT_WS_PING_INTERVAL_S,
    DEFAULT_WS_MAX_MESSAGE_BYTES,
)
from mcp_unity.config.bridge import (
    ENV_UNITY_HOST,
    ENV_UNITY_WS_PATH,
    DEFAULT_UNITY_HOST,
    ENV_MCP_SERVER_NAME,
    DEFAULT_UNITY_WS_PATH,
    ENV_UNITY_CLIENT_NAME,
    DEFAULT_MCP_SERVER_NAME,
    DEFAULT_UNITY_CLIENT_NAME,
    DEFAULT_CONNECT_TIMEOUT_S,
    DEFAULT_REQUEST_TIMEOUT_S,
    ENV_UNITY_CONNECT_TIMEOUT_S,
    ENV_UNITY_REQUEST_TIMEOUT_S,
)

from .port import resolve_port


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _positive(value: float, default: float) -> float:
    return value if value > 0 else default


def _normalize_path(path: str) -> str:
    path = path.strip() or DEFAULT_UNITY_WS_PATH
    return path if path.startswith("/") else f"/{path}"


def _load_bridge_settings() -> BridgeSettings:
    connect_timeout = _float_env(ENV_UNITY_CONNECT_TIMEOUT_S, DEFAULT_CONNECT_TIMEOUT_S)
    request_timeout = _float_env(ENV_UNITY_REQUEST_TIMEOUT_S, DEFAULT_REQUEST_TIMEOUT_S)

    return BridgeSettings(
        host=_str_env(ENV_UNITY_HOST, DEFAULT_UNITY_HOST),
        port=resolve_port(),
        path=_normalize_path(_str_env(ENV_UNITY_WS_PATH, DEFAULT_UNITY_WS_PATH)),
        client_name=_str_env(ENV_UNITY_CLIENT_NAME, DEFAULT_UNITY_CLIENT_NAME),
        connect_timeout_s=_positive(connect_timeout, DEFAULT_CONNECT_TIMEOUT_S),
        request_timeout_s=_positive(request_timeout, DEFAULT_REQUEST_TIMEOUT_S),
        # 0 disables keepalive pings.
        ping_interval_s=max(0.0, _float_env(ENV_WS_PING_INTERVAL_S, DEFAULT_WS_PING_INTERVAL_S)),
        ping_timeout_s=_positive(_float_env(ENV_WS_PING_TIMEOUT_S, DEFAULT_WS_PING_TIMEOUT_S), DEFAULT_WS_PING_TIMEOUT_S),
        max_message_bytes=max(1, _int_env(ENV_WS_MAX_MESSAGE_BYTES, DEFAULT_WS_MAX_MESSAGE_BYTES)),
    )


def _load_server_settings() -> ServerSettings:
    return ServerSettings(name=_str_env(ENV_MCP_SERVER_NAME, DEFAULT_MCP_SERVER_NAME))


def load_settings() -> AppSettings:
    return AppSettings(
        bridge=_load_bridge_settings(),
        server=_load_server_settings(),
    )


__all__ = ["load_settings"]
