"""Runtime package.

Keep this module dependency-light: importing `mcp_unity.runtime.*` from unit
tests should not start the MCP server or open sockets.
"""

__all__: list[str] = []
