"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BridgeSettings:
    host: str
    port: int
    path: str
    client_name: str
    connect_timeout_s: float
    request_timeout_s: float
    ping_interval_s: float
    ping_timeout_s: float
    max_message_bytes: int

    @property
    def url(self) -> str:
        return f"ws://{self.host}:{self.port}{self.path}"


@dataclass(frozen=True, slots=True)
class ServerSettings:
    name: str


@dataclass(frozen=True, slots=True)
class AppSettings:
    bridge: BridgeSettings
    server: ServerSettings


__all__ = [
    "AppSettings",
    "BridgeSettings",
    "ServerSettings",
]
