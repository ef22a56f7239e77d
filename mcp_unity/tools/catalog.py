"""The set of tools this server exposes."""

from __future__ import annotations

from collections.abc import Callable

from .menu_item import create_menu_item_tool
from .console_logs import create_console_logs_tool
from .notify_message import create_notify_message_tool
from .registry import ToolRegistry, RequestSender, ToolDefinition

TOOL_FACTORIES: tuple[Callable[[RequestSender], ToolDefinition], ...] = (
    create_menu_item_tool,
    create_console_logs_tool,
    create_notify_message_tool,
)


def build_tool_registry(sender: RequestSender) -> ToolRegistry:
    registry = ToolRegistry()
    for factory in TOOL_FACTORIES:
        registry.add(factory(sender))
    return registry


__all__ = ["TOOL_FACTORIES", "build_tool_registry"]
