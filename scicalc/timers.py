"""Deferred callbacks for transient display messages.

The calculator is single-threaded: instead of firing on a timer thread,
callbacks are queued against a monotonic clock and run by the host loop
between input events via run_due().
"""

from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass(order=True)
class _Deferred:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)


class DeferredQueue:
    """Callbacks ordered by due time, run explicitly by the owner."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._heap: list[_Deferred] = []
        self._seq = itertools.count()

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> None:
        """Schedule ``callback`` to run once ``delay_s`` seconds have passed."""
        heapq.heappush(
            self._heap, _Deferred(self._clock() + max(delay_s, 0.0), next(self._seq), callback)
        )

    def run_due(self) -> int:
        """Run every callback whose time has come, oldest first.

        Returns the number of callbacks run.
        """
        now = self._clock()
        ran = 0
        while self._heap and self._heap[0].due <= now:
            heapq.heappop(self._heap).callback()
            ran += 1
        return ran

    def next_due_in(self) -> float | None:
        """Seconds until the next callback is due, or None if the queue is empty."""
        if not self._heap:
            return None
        return max(self._heap[0].due - self._clock(), 0.0)

    def __len__(self) -> int:
        return len(self._heap)
