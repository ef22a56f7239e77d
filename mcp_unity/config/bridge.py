"""Unity connection configuration (env names and defaults)."""

from __future__ import annotations

from pathlib import Path

ENV_UNITY_HOST = "UNITY_HOST"
ENV_UNITY_PORT = "UNITY_PORT"
ENV_UNITY_PORT_FILE = "UNITY_PORT_FILE"
ENV_UNITY_WS_PATH = "UNITY_WS_PATH"
ENV_UNITY_CLIENT_NAME = "UNITY_CLIENT_NAME"
ENV_UNITY_CONNECT_TIMEOUT_S = "UNITY_CONNECT_TIMEOUT_S"
ENV_UNITY_REQUEST_TIMEOUT_S = "UNITY_REQUEST_TIMEOUT_S"
ENV_MCP_SERVER_NAME = "MCP_SERVER_NAME"

DEFAULT_UNITY_HOST = "localhost"
DEFAULT_UNITY_PORT = 8090
DEFAULT_UNITY_WS_PATH = "/McpUnity"
DEFAULT_UNITY_CLIENT_NAME = ""
DEFAULT_CONNECT_TIMEOUT_S = 10.0
DEFAULT_REQUEST_TIMEOUT_S = 10.0
DEFAULT_MCP_SERVER_NAME = "MCP Unity Server"

# Written by the Unity editor package next to the server checkout.
DEFAULT_UNITY_PORT_FILE = Path(__file__).resolve().parents[2] / "port.txt"

# Windows keeps user-level environment variables under this key.
WINDOWS_ENV_REGISTRY_KEY = "Environment"

PORT_MIN = 1
PORT_MAX = 65535

__all__ = [
    "ENV_UNITY_HOST",
    "ENV_UNITY_PORT",
    "ENV_UNITY_PORT_FILE",
    "ENV_UNITY_WS_PATH",
    "ENV_UNITY_CLIENT_NAME",
    "ENV_UNITY_CONNECT_TIMEOUT_S",
    "ENV_UNITY_REQUEST_TIMEOUT_S",
    "ENV_MCP_SERVER_NAME",
    "DEFAULT_UNITY_HOST",
    "DEFAULT_UNITY_PORT",
    "DEFAULT_UNITY_WS_PATH",
    "DEFAULT_UNITY_CLIENT_NAME",
    "DEFAULT_CONNECT_TIMEOUT_S",
    "DEFAULT_REQUEST_TIMEOUT_S",
    "DEFAULT_MCP_SERVER_NAME",
    "DEFAULT_UNITY_PORT_FILE",
    "WINDOWS_ENV_REGISTRY_KEY",
    "PORT_MIN",
    "PORT_MAX",
]
