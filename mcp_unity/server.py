"""MCP stdio server exposing Unity editor tools."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from mcp.server.fastmcp import FastMCP

from mcp_unity.state import RuntimeDeps
from mcp_unity.runtime.logging import configure_logging
from mcp_unity.runtime.dependencies import build_runtime_deps

logger = logging.getLogger(__name__)


def build_server(deps: RuntimeDeps) -> FastMCP:
    @asynccontextmanager
    async def _lifespan(_server: FastMCP) -> AsyncIterator[RuntimeDeps]:
        await deps.startup()
        logger.info("MCP Server started and ready")
        try:
            yield deps
        finally:
            logger.info("Shutting down...")
            await deps.shutdown()

    server = FastMCP(deps.settings.server.name, lifespan=_lifespan)
    deps.tools.register_with_server(server)
    return server


def main() -> None:
    configure_logging()
    deps = build_runtime_deps()
    server = build_server(deps)
    try:
        server.run("stdio")
    except KeyboardInterrupt:
        logger.info("Interrupted")


__all__ = ["build_server", "main"]
