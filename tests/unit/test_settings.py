from __future__ import annotations

from pathlib import Path

import pytest

from mcp_unity.runtime.settings import load_settings

_ENV_VARS = (
    "UNITY_HOST",
    "UNITY_PORT",
    "UNITY_WS_PATH",
    "UNITY_CLIENT_NAME",
    "UNITY_CONNECT_TIMEOUT_S",
    "UNITY_REQUEST_TIMEOUT_S",
    "UNITY_WS_PING_INTERVAL_S",
    "UNITY_WS_PING_TIMEOUT_S",
    "UNITY_WS_MAX_MESSAGE_BYTES",
    "MCP_SERVER_NAME",
)


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a port.txt in the checkout from leaking into the tests.
    monkeypatch.setenv("UNITY_PORT_FILE", str(tmp_path / "missing-port.txt"))


def test_defaults() -> None:
    settings = load_settings()
    bridge = settings.bridge

    assert bridge.url == "ws://localhost:8090/McpUnity"
    assert bridge.client_name == ""
    assert bridge.connect_timeout_s == 10.0
    assert bridge.request_timeout_s == 10.0
    assert bridge.ping_interval_s == 20.0
    assert bridge.max_message_bytes == 16 * 1024 * 1024
    assert settings.server.name == "MCP Unity Server"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNITY_HOST", "127.0.0.1")
    monkeypatch.setenv("UNITY_PORT", "9001")
    monkeypatch.setenv("UNITY_WS_PATH", "Bridge")
    monkeypatch.setenv("UNITY_CLIENT_NAME", "Claude Desktop")
    monkeypatch.setenv("UNITY_REQUEST_TIMEOUT_S", "2.5")
    monkeypatch.setenv("UNITY_WS_PING_INTERVAL_S", "0")
    monkeypatch.setenv("MCP_SERVER_NAME", "Editor Tools")

    settings = load_settings()

    assert settings.bridge.url == "ws://127.0.0.1:9001/Bridge"
    assert settings.bridge.client_name == "Claude Desktop"
    assert settings.bridge.request_timeout_s == 2.5
    assert settings.bridge.ping_interval_s == 0.0
    assert settings.server.name == "Editor Tools"


def test_port_file_is_used_when_env_is_unset(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    port_file = tmp_path / "port.txt"
    port_file.write_text("8765\n", encoding="utf-8")
    monkeypatch.setenv("UNITY_PORT_FILE", str(port_file))

    assert load_settings().bridge.port == 8765


@pytest.mark.parametrize("raw", ["0", "-1", "soon", ""])
def test_invalid_timeouts_fall_back_to_defaults(raw: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNITY_CONNECT_TIMEOUT_S", raw)
    monkeypatch.setenv("UNITY_REQUEST_TIMEOUT_S", raw)

    bridge = load_settings().bridge

    assert bridge.connect_timeout_s == 10.0
    assert bridge.request_timeout_s == 10.0
