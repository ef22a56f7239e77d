"""Tool definitions and their registration on the MCP server."""

from __future__ import annotations

import time
import logging
import functools
from typing import Any, Protocol
from dataclasses import dataclass
from collections.abc import Callable, Awaitable

from mcp.server.fastmcp import FastMCP

logger = logging.getLogger(__name__)

ToolHandler = Callable[..., Awaitable[str]]


class RequestSender(Protocol):
    async def send_request(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        request_id: str | None = None,
    ) -> Any: ...


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    name: str
    description: str
    handler: ToolHandler


def _with_logging(tool: ToolDefinition) -> ToolHandler:
    @functools.wraps(tool.handler)
    async def run(**params: Any) -> str:
        logger.info("Executing tool: %s %s", tool.name, params)
        started = time.perf_counter()
        try:
            result = await tool.handler(**params)
        except Exception as exc:
            logger.error("Tool execution failed: %s: %s", tool.name, exc)
            raise
        logger.info("Tool execution successful: %s (%.0fms)", tool.name, (time.perf_counter() - started) * 1000)
        return result

    return run


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def add(self, tool: ToolDefinition) -> None:
        if tool.name in self._tools:
            raise ValueError(f"tool already registered: {tool.name}")
        self._tools[tool.name] = tool
        logger.info("Registering tool: %s", tool.name)

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def get_all(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def register_with_server(self, server: FastMCP) -> None:
        for tool in self._tools.values():
            server.add_tool(
                _with_logging(tool),
                name=tool.name,
                description=tool.description,
                structured_output=False,
            )


__all__ = [
    "RequestSender",
    "ToolDefinition",
    "ToolHandler",
    "ToolRegistry",
]
