"""Shared error types for the MCP Unity bridge."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorType(str, Enum):
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    TOOL_EXECUTION = "tool_execution"
    VALIDATION = "validation"


class BridgeError(Exception):
    """Base error surfaced to tool callers.

    Carries a machine-readable `error_type`, a human-readable message and,
    for errors reported by Unity, the structured details it sent along.
    """

    error_type: ErrorType = ErrorType.VALIDATION

    def __init__(self, message: str, details: Any = None, *, error_type: ErrorType | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        if error_type is not None:
            self.error_type = error_type

    def __str__(self) -> str:
        return f"{self.error_type.value}: {self.message}"


class PeerConnectionError(BridgeError):
    """Raised when the Unity socket cannot be established or was lost."""

    error_type = ErrorType.CONNECTION


class RequestTimeoutError(BridgeError):
    """Raised when Unity does not answer a request before its deadline."""

    error_type = ErrorType.TIMEOUT


class ToolExecutionError(BridgeError):
    """Raised when Unity answers a request with an error payload."""

    error_type = ErrorType.TOOL_EXECUTION


__all__ = [
    "BridgeError",
    "ErrorType",
    "PeerConnectionError",
    "RequestTimeoutError",
    "ToolExecutionError",
]
