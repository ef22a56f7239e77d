"""MCP server bridging tool calls to a running Unity editor."""

__version__ = "1.0.0"

__all__ = ["__version__"]
