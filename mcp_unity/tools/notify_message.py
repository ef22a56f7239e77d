"""Show a message in the Unity editor console."""

from __future__ import annotations

from typing import Literal, Annotated

from pydantic import Field

from mcp_unity.errors import ToolExecutionError
from mcp_unity.config.tools import METHOD_NOTIFY_MESSAGE

from .registry import RequestSender, ToolDefinition

TOOL_NAME = "notify_message"
TOOL_DESCRIPTION = "Sends a message to the Unity console"

MessageType = Literal["info", "warning", "error"]

MessageParam = Annotated[str, Field(min_length=1, description="The message to display in the Unity console")]
MessageTypeParam = Annotated[
    MessageType,
    Field(description="The type of message (info, warning, error) - defaults to info"),
]


def create_notify_message_tool(sender: RequestSender) -> ToolDefinition:
    async def notify_message(message: MessageParam, type: MessageTypeParam = "info") -> str:  # noqa: A002
        response = await sender.send_request(METHOD_NOTIFY_MESSAGE, {"message": message, "type": type})
        if not isinstance(response, dict) or not response.get("success"):
            detail = response.get("message") if isinstance(response, dict) else None
            raise ToolExecutionError(detail or "Failed to send message to Unity")
        return f"Message displayed: {message}"

    return ToolDefinition(name=TOOL_NAME, description=TOOL_DESCRIPTION, handler=notify_message)


__all__ = ["TOOL_NAME", "create_notify_message_tool"]
