"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from mcp_unity.tools import ToolRegistry
    from mcp_unity.unity import UnityBridge
    from mcp_unity.state.settings import AppSettings


@dataclass(slots=True)
class RuntimeDeps:
    bridge: UnityBridge
    tools: ToolRegistry
    settings: AppSettings

    async def startup(self) -> None:
        await self.bridge.start(self.settings.bridge.client_name or None)

    async def shutdown(self) -> None:
        try:
            await self.bridge.stop()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
