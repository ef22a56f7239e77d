"""Runtime dependency construction (Unity bridge + tool registry)."""

from __future__ import annotations

import logging

from mcp_unity.state import RuntimeDeps
from mcp_unity.unity import UnityBridge
from mcp_unity.tools import build_tool_registry
from mcp_unity.state.settings import AppSettings

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    bridge = UnityBridge(settings.bridge)
    logger.info("Using port: %s for Unity WebSocket connection", settings.bridge.port)

    return RuntimeDeps(
        bridge=bridge,
        tools=build_tool_registry(bridge),
        settings=settings,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
