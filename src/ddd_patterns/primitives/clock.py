import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class IClock(Protocol):
    """
    Protocol for wall-clock time sources.
    Readings are milliseconds and never decrease between calls.
    """

    def now_ms(self) -> float:
        """Returns the current reading in milliseconds."""
        ...


class SystemClock(IClock):
    """
    Default clock backed by ``time.monotonic``.
    Immune to system clock adjustments.
    """

    def now_ms(self) -> float:
        return time.monotonic() * 1000


class ManualClock(IClock):
    """
    Deterministic clock for tests.

    Time only moves when told to: via :meth:`advance`, :meth:`set`, or by
    ``tick_ms`` which is added after every reading so that busy-poll loops
    make progress without real waiting.
    """

    def __init__(self, start_ms: float = 0.0, *, tick_ms: float = 0.0) -> None:
        if tick_ms < 0:
            raise ValueError("tick_ms must be non-negative")
        self._now = start_ms
        self.tick_ms = tick_ms
        self.reads = 0

    def now_ms(self) -> float:
        reading = self._now
        self._now += self.tick_ms
        self.reads += 1
        return reading

    def advance(self, delta_ms: float) -> None:
        if delta_ms < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now += delta_ms

    def set(self, now_ms: float) -> None:
        if now_ms < self._now:
            raise ValueError("ManualClock cannot move backwards")
        self._now = now_ms
