"""Execute a Unity editor menu item by path."""

from __future__ import annotations

from typing import Any, Annotated

from pydantic import Field

from mcp_unity.errors import ToolExecutionError
from mcp_unity.config.tools import METHOD_EXECUTE_MENU_ITEM

from .registry import RequestSender, ToolDefinition

TOOL_NAME = "execute_menu_item"
TOOL_DESCRIPTION = "Executes a Unity menu item by path"

MenuPathParam = Annotated[
    str,
    Field(min_length=1, description='The path to the menu item to execute (e.g. "GameObject/Create Empty")'),
]


def _reply_message(response: Any) -> str | None:
    if isinstance(response, dict) and isinstance(response.get("message"), str):
        return response["message"] or None
    return None


def create_menu_item_tool(sender: RequestSender) -> ToolDefinition:
    async def execute_menu_item(menuPath: MenuPathParam) -> str:  # noqa: N803
        response = await sender.send_request(METHOD_EXECUTE_MENU_ITEM, {"menuPath": menuPath})
        if not isinstance(response, dict) or not response.get("success"):
            raise ToolExecutionError(_reply_message(response) or f"Failed to execute menu item: {menuPath}")
        return _reply_message(response) or f"Successfully executed menu item: {menuPath}"

    return ToolDefinition(name=TOOL_NAME, description=TOOL_DESCRIPTION, handler=execute_menu_item)


__all__ = ["TOOL_NAME", "create_menu_item_tool"]
