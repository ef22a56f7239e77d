from .catalog import build_tool_registry
from .registry import ToolRegistry, RequestSender, ToolDefinition

__all__ = ["RequestSender", "ToolDefinition", "ToolRegistry", "build_tool_registry"]
