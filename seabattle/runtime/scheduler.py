"""Deferred one-shot callbacks on a manually advanced clock."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from heapq import heappop, heappush

Callback = Callable[[], None]


@dataclass(slots=True)
class _Pending:
    handle: int
    due_seconds: float
    callback: Callback
    cancelled: bool = False


class Scheduler:
    """Runs callbacks once their due time is reached.

    Time only moves through `advance`/`run_due`, so hosts drive it from their
    frame loop and tests drive it by hand.
    """

    def __init__(self) -> None:
        self._now_seconds = 0.0
        self._next_handle = 1
        self._pending: dict[int, _Pending] = {}
        self._heap: list[tuple[float, int]] = []

    @property
    def now_seconds(self) -> float:
        return self._now_seconds

    @property
    def pending_count(self) -> int:
        return sum(1 for item in self._pending.values() if not item.cancelled)

    def call_later(self, delay_seconds: float, callback: Callback) -> int:
        """Schedule `callback` to run after `delay_seconds`; returns a handle."""
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        handle = self._next_handle
        self._next_handle += 1
        due = self._now_seconds + delay_seconds
        self._pending[handle] = _Pending(handle=handle, due_seconds=due, callback=callback)
        heappush(self._heap, (due, handle))
        return handle

    def cancel(self, handle: int) -> None:
        item = self._pending.get(handle)
        if item is not None:
            item.cancelled = True

    def cancel_all(self) -> None:
        for item in self._pending.values():
            item.cancelled = True

    def advance(self, delta_seconds: float) -> int:
        """Move the clock forward and run what became due."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Run callbacks due at or before `now_seconds`; returns how many ran."""
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = now_seconds
        executed = 0
        while self._heap and self._heap[0][0] <= self._now_seconds:
            _, handle = heappop(self._heap)
            item = self._pending.pop(handle, None)
            if item is None or item.cancelled:
                continue
            item.callback()
            executed += 1
        return executed
