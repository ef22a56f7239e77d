"""In-flight request records (dataclasses only)."""

from __future__ import annotations

import asyncio
from typing import Any
from dataclasses import dataclass


@dataclass(slots=True)
class PendingRequest:
    future: asyncio.Future[Any]
    timer: asyncio.TimerHandle

    def cancel_timer(self) -> None:
        self.timer.cancel()


__all__ = ["PendingRequest"]
