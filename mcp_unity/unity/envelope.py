"""Request/reply envelopes exchanged with the Unity editor."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass

import orjson

from mcp_unity.config.websocket import (
    WS_KEY_ID,
    WS_KEY_ERROR,
    WS_KEY_PARAMS,
    WS_KEY_METHOD,
    WS_KEY_RESULT,
    WS_KEY_ERROR_DETAILS,
    WS_KEY_ERROR_MESSAGE,
    WS_UNKNOWN_ERROR_MESSAGE,
)


@dataclass(frozen=True, slots=True)
class ErrorPayload:
    message: str
    details: Any = None


@dataclass(frozen=True, slots=True)
class Reply:
    request_id: str | None
    result: Any = None
    error: ErrorPayload | None = None


def build_request(request_id: str, method: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
    return {
        WS_KEY_ID: request_id,
        WS_KEY_METHOD: method,
        WS_KEY_PARAMS: params or {},
    }


def encode_request(request_id: str, method: str, params: dict[str, Any] | None = None) -> str:
    return orjson.dumps(build_request(request_id, method, params)).decode("utf-8")


def _parse_error(raw_error: Any) -> ErrorPayload:
    if isinstance(raw_error, dict):
        message = raw_error.get(WS_KEY_ERROR_MESSAGE)
        return ErrorPayload(
            message=message if isinstance(message, str) and message else WS_UNKNOWN_ERROR_MESSAGE,
            details=raw_error.get(WS_KEY_ERROR_DETAILS),
        )
    if isinstance(raw_error, str) and raw_error:
        return ErrorPayload(message=raw_error)
    return ErrorPayload(message=WS_UNKNOWN_ERROR_MESSAGE)


def _has_error(raw_error: Any) -> bool:
    # Empty objects and arrays still mark a failed request.
    return isinstance(raw_error, (dict, list)) or bool(raw_error)


def parse_reply(raw: str | bytes) -> Reply:
    try:
        msg = orjson.loads(raw)
    except Exception as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ValueError("message must be a JSON object")

    request_id = msg.get(WS_KEY_ID)
    if not isinstance(request_id, str) or not request_id:
        request_id = None

    raw_error = msg.get(WS_KEY_ERROR)
    if _has_error(raw_error):
        return Reply(request_id=request_id, error=_parse_error(raw_error))
    return Reply(request_id=request_id, result=msg.get(WS_KEY_RESULT))


__all__ = ["ErrorPayload", "Reply", "build_request", "encode_request", "parse_reply"]
