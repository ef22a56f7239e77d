"""Route replies from Unity to the request that is waiting for them."""

from __future__ import annotations

import logging

from mcp_unity.errors import ToolExecutionError

from .envelope import parse_reply
from .pending import PendingRequests

logger = logging.getLogger(__name__)


def route_reply(pending: PendingRequests, raw: str | bytes) -> bool:
    """Complete the pending request a raw frame answers.

    Returns True when a waiter was completed. Malformed frames are logged and
    dropped; frames for unknown ids (a reply that lost the race against its
    timeout, for example) are dropped without touching the table.
    """
    try:
        reply = parse_reply(raw)
    except ValueError as exc:
        logger.error("Error parsing WebSocket message: %s", exc)
        return False

    if reply.request_id is None or reply.request_id not in pending:
        logger.debug("Dropping reply for unknown request id=%s", reply.request_id)
        return False

    if reply.error is not None:
        return pending.reject(
            reply.request_id,
            ToolExecutionError(reply.error.message, reply.error.details),
        )
    return pending.resolve(reply.request_id, reply.result)


__all__ = ["route_reply"]
