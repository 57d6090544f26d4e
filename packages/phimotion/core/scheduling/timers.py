"""Timer backends for the sequence scheduler.

The scheduler only needs "call this after N milliseconds" plus cancellation,
so the platform timer is injected:

- ``AsyncioTimerBackend``: real timers on an asyncio event loop.
- ``ManualTimerBackend``: virtual clock advanced explicitly; used by tests and
  offline schedule previews. Not thread-safe (use per-test instance).
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
import heapq
import itertools
import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], None]


@runtime_checkable
class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled before it fires."""

    def cancel(self) -> None: ...


@runtime_checkable
class TimerBackend(Protocol):
    """Schedules callbacks after a delay in milliseconds."""

    def call_later(self, delay_ms: int, callback: TimerCallback) -> TimerHandle: ...


class AsyncioTimerBackend:
    """Timers backed by ``loop.call_later``.

    Args:
        loop: Event loop to schedule on. If None, the running loop at the
            time of each ``call_later`` call is used.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay_ms: int, callback: TimerCallback) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(0, delay_ms) / 1000.0, callback)


@dataclass(order=True)
class ManualTimer:
    """Timer entry on a :class:`ManualTimerBackend` virtual clock."""

    due_ms: int
    seq: int
    callback: TimerCallback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)
    fired: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimerBackend:
    """Virtual-clock timer backend.

    Timers fire in (due time, scheduling order) when the clock is advanced.
    Callbacks may schedule further timers; those fire in the same
    ``advance`` call if they fall inside the window.

    Example:
        >>> timers = ManualTimerBackend()
        >>> fired = []
        >>> _ = timers.call_later(100, lambda: fired.append("a"))
        >>> timers.advance(99)
        0
        >>> timers.advance(1)
        1
        >>> fired
        ['a']
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._queue: list[ManualTimer] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: int, callback: TimerCallback) -> ManualTimer:
        timer = ManualTimer(
            due_ms=self.now_ms + max(0, int(delay_ms)),
            seq=next(self._counter),
            callback=callback,
        )
        heapq.heappush(self._queue, timer)
        return timer

    @property
    def pending(self) -> int:
        """Number of scheduled timers that have neither fired nor been cancelled."""
        return sum(1 for t in self._queue if not t.cancelled)

    def next_due(self) -> int | None:
        live = [t.due_ms for t in self._queue if not t.cancelled]
        return min(live) if live else None

    def advance(self, ms: int) -> int:
        """Move the clock forward by ``ms``, firing due timers. Returns fire count."""
        target = self.now_ms + max(0, int(ms))
        fired = 0

        while self._queue and self._queue[0].due_ms <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now_ms = timer.due_ms
            timer.fired = True
            timer.callback()
            fired += 1

        self.now_ms = target
        return fired

    def run_all(self, max_timers: int = 10_000) -> int:
        """Fire timers until none remain (or ``max_timers`` fired, for loops)."""
        fired = 0
        while fired < max_timers:
            due = self.next_due()
            if due is None:
                break
            fired += self.advance(due - self.now_ms)
        if fired >= max_timers:
            logger.debug("run_all stopped after %d timers", fired)
        return fired
