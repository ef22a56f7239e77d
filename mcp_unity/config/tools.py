"""Tool parameter limits and Unity method names."""

from __future__ import annotations

METHOD_GET_CONSOLE_LOGS = "get_console_logs"
METHOD_EXECUTE_MENU_ITEM = "execute_menu_item"
METHOD_NOTIFY_MESSAGE = "notify_message"

CONSOLE_LOGS_DEFAULT_OFFSET = 0
CONSOLE_LOGS_DEFAULT_LIMIT = 50
CONSOLE_LOGS_MAX_LIMIT = 500

__all__ = [
    "METHOD_GET_CONSOLE_LOGS",
    "METHOD_EXECUTE_MENU_ITEM",
    "METHOD_NOTIFY_MESSAGE",
    "CONSOLE_LOGS_DEFAULT_OFFSET",
    "CONSOLE_LOGS_DEFAULT_LIMIT",
    "CONSOLE_LOGS_MAX_LIMIT",
]
