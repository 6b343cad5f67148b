"""Time sources and frame schedulers driving the draw animation.

The lottery never sleeps. It asks a :class:`FrameScheduler` for a callback on
the next display refresh and reads elapsed time from a :class:`Clock`. The
manual implementations let callers step the animation explicitly.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, List, Protocol, Tuple

FrameCallback = Callable[[], None]


class Clock(Protocol):
    def now(self) -> float:
        """Return the current time in milliseconds."""


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> Any:
        """Schedule ``callback`` for the next refresh and return a handle."""

    def cancel(self, handle: Any) -> None:
        """Drop a previously requested frame."""


class MonotonicClock:
    def now(self) -> float:
        return time.monotonic() * 1000.0


class AsyncioFrameScheduler:
    """Fires frame callbacks on the running event loop at a fixed cadence."""

    def __init__(self, interval_ms: float = 16.0) -> None:
        self.interval_ms = interval_ms

    def request_frame(self, callback: FrameCallback) -> asyncio.TimerHandle:
        loop = asyncio.get_running_loop()
        return loop.call_later(self.interval_ms / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class ManualClock:
    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> None:
        self._now += ms


class ManualFrameScheduler:
    """Queues frame callbacks until :meth:`run_frame` is called."""

    def __init__(self) -> None:
        self._pending: List[Tuple[int, FrameCallback]] = []
        self._next_handle = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        self._next_handle += 1
        self._pending.append((self._next_handle, callback))
        return self._next_handle

    def cancel(self, handle: int) -> None:
        self._pending = [item for item in self._pending if item[0] != handle]

    def run_frame(self) -> int:
        """Run every callback queued before this call and return how many ran."""

        due, self._pending = self._pending, []
        for _, callback in due:
            callback()
        return len(due)
