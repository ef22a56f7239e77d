"""Unity port discovery.

The Unity editor package publishes the port its WebSocket server listens on
through one of several stores. Each store is a `PortSource`: a callable that
returns the raw configured value or None. Sources are tried in order and the
first value that parses as a TCP port wins.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from collections.abc import Callable, Sequence

from mcp_unity.config.bridge import (
    PORT_MAX,
    PORT_MIN,
    ENV_UNITY_PORT,
    DEFAULT_UNITY_PORT,
    ENV_UNITY_PORT_FILE,
    DEFAULT_UNITY_PORT_FILE,
    WINDOWS_ENV_REGISTRY_KEY,
)

if sys.platform == "win32":
    import winreg

logger = logging.getLogger(__name__)

PortSource = Callable[[], str | None]


def port_from_env() -> str | None:
    return os.getenv(ENV_UNITY_PORT)


def port_from_platform() -> str | None:
    """Read UNITY_PORT from the per-user registry environment on Windows.

    Editors launched from the Start menu do not see variables set after
    login, but the registry always has the current value. Other platforms
    only have the process environment, which `port_from_env` already covers.
    """
    if sys.platform != "win32":
        return None
    try:
        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, WINDOWS_ENV_REGISTRY_KEY) as key:
            value, _kind = winreg.QueryValueEx(key, ENV_UNITY_PORT)
    except OSError as exc:
        logger.debug("registry lookup for %s failed: %s", ENV_UNITY_PORT, exc)
        return None
    return str(value)


def port_file_path() -> Path:
    raw = (os.getenv(ENV_UNITY_PORT_FILE) or "").strip()
    return Path(raw).expanduser() if raw else DEFAULT_UNITY_PORT_FILE


def port_from_file(path: Path | None = None) -> str | None:
    target = path or port_file_path()
    try:
        if not target.is_file():
            return None
        return target.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Error reading %s: %s", target, exc)
        return None


def parse_port(raw: str | None) -> int | None:
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None
    try:
        port = int(value)
    except ValueError:
        return None
    if port < PORT_MIN or port > PORT_MAX:
        return None
    return port


DEFAULT_PORT_SOURCES: tuple[PortSource, ...] = (
    port_from_env,
    port_from_platform,
    port_from_file,
)


def resolve_port(sources: Sequence[PortSource] = DEFAULT_PORT_SOURCES, default: int = DEFAULT_UNITY_PORT) -> int:
    for source in sources:
        raw = source()
        if raw is None or not raw.strip():
            continue
        port = parse_port(raw)
        if port is None:
            logger.warning("Ignoring invalid Unity port %r from %s", raw, getattr(source, "__name__", source))
            continue
        logger.info("Using port %s from %s", port, getattr(source, "__name__", source))
        return port
    logger.info("No Unity port configured, using default port: %s", default)
    return default


__all__ = [
    "DEFAULT_PORT_SOURCES",
    "PortSource",
    "parse_port",
    "port_file_path",
    "port_from_env",
    "port_from_file",
    "port_from_platform",
    "resolve_port",
]
