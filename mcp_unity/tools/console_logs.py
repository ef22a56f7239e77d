"""Paged retrieval of the Unity console log."""

from __future__ import annotations

from typing import Any, Literal, Annotated

import orjson
from pydantic import Field

from mcp_unity.errors import ToolExecutionError
from mcp_unity.config.tools import (
    CONSOLE_LOGS_MAX_LIMIT,
    METHOD_GET_CONSOLE_LOGS,
    CONSOLE_LOGS_DEFAULT_LIMIT,
    CONSOLE_LOGS_DEFAULT_OFFSET,
)

from .registry import RequestSender, ToolDefinition

TOOL_NAME = "get_console_logs"
TOOL_DESCRIPTION = "Retrieves logs from the Unity console with pagination support to avoid token limits"

LogType = Literal["info", "warning", "error"]

LogTypeParam = Annotated[
    LogType | None,
    Field(description="The type of logs to retrieve (info, warning, error) - defaults to all logs if not specified"),
]
OffsetParam = Annotated[
    int,
    Field(ge=0, description="Starting index for pagination (0-based, defaults to 0)"),
]
LimitParam = Annotated[
    int,
    Field(
        ge=1,
        le=CONSOLE_LOGS_MAX_LIMIT,
        description=f"Maximum number of logs to return (defaults to 50, max {CONSOLE_LOGS_MAX_LIMIT} to avoid token limits)",
    ),
]
IncludeStackTraceParam = Annotated[
    bool,
    Field(
        description=(
            "Whether to include stack trace in logs. Set to false to save most of the tokens unless stack traces "
            "are needed for debugging. Default: true"
        )
    ),
]


def format_logs_response(response: Any) -> str:
    if not isinstance(response, dict) or not response.get("success"):
        message = response.get("message") if isinstance(response, dict) else None
        raise ToolExecutionError(message or "Failed to fetch logs from Unity")
    body = response.get("data") or response.get("logs") or response
    return orjson.dumps(body, option=orjson.OPT_INDENT_2).decode("utf-8")


def create_console_logs_tool(sender: RequestSender) -> ToolDefinition:
    async def get_console_logs(
        logType: LogTypeParam = None,  # noqa: N803
        offset: OffsetParam = CONSOLE_LOGS_DEFAULT_OFFSET,
        limit: LimitParam = CONSOLE_LOGS_DEFAULT_LIMIT,
        includeStackTrace: IncludeStackTraceParam = True,  # noqa: N803
    ) -> str:
        response = await sender.send_request(
            METHOD_GET_CONSOLE_LOGS,
            {
                "logType": logType,
                "offset": offset,
                "limit": limit,
                "includeStackTrace": includeStackTrace,
            },
        )
        return format_logs_response(response)

    return ToolDefinition(name=TOOL_NAME, description=TOOL_DESCRIPTION, handler=get_console_logs)


__all__ = ["TOOL_NAME", "create_console_logs_tool", "format_logs_response"]
