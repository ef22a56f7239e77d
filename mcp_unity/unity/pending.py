"""Table of requests awaiting a reply from Unity."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable

from mcp_unity.state import PendingRequest
from mcp_unity.errors import BridgeError, ErrorType

logger = logging.getLogger(__name__)


class PendingRequests:
    """Map request ids to their completion futures and expiry timers.

    Each id is present at most once. Removing an entry always cancels its
    timer, and removing an absent id is a no-op, so a reply, a timeout and a
    teardown can race for the same id and exactly one of them wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, PendingRequest] = {}

    def __contains__(self, request_id: object) -> bool:
        return request_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def ids(self) -> list[str]:
        return list(self._entries)

    def get(self, request_id: str) -> PendingRequest | None:
        return self._entries.get(request_id)

    def add(self, request_id: str, entry: PendingRequest) -> None:
        if request_id in self._entries:
            raise BridgeError(
                f"Request id already pending: {request_id}",
                error_type=ErrorType.VALIDATION,
            )
        self._entries[request_id] = entry

    def pop(self, request_id: str) -> PendingRequest | None:
        entry = self._entries.pop(request_id, None)
        if entry is not None:
            entry.cancel_timer()
        return entry

    def resolve(self, request_id: str, result: Any) -> bool:
        entry = self.pop(request_id)
        if entry is None:
            return False
        if not entry.future.done():
            entry.future.set_result(result)
        return True

    def reject(self, request_id: str, exc: BaseException) -> bool:
        entry = self.pop(request_id)
        if entry is None:
            return False
        if not entry.future.done():
            entry.future.set_exception(exc)
        return True

    def reject_all(self, exc_factory: Callable[[], BaseException]) -> int:
        drained = 0
        # reject() mutates the dict.
        for request_id in list(self._entries):
            if self.reject(request_id, exc_factory()):
                drained += 1
        if drained:
            logger.debug("rejected %s pending request(s)", drained)
        return drained


__all__ = ["PendingRequests"]
