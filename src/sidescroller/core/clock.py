"""
Clock sources for the simulation.

All game timing reads timestamps in milliseconds from a clock object
instead of calling the system timer directly, so runs can be replayed
deterministically in tests.
"""

import time


class Clock:
    """Monotonic millisecond timestamp source."""

    def now(self) -> float:
        raise NotImplementedError


class MonotonicClock(Clock):
    """Wall clock backed by time.monotonic()."""

    def __init__(self) -> None:
        self._origin = time.monotonic()

    def now(self) -> float:
        return (time.monotonic() - self._origin) * 1000.0


class ManualClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        """Move time forward and return the new timestamp."""
        self._now += max(0.0, ms)
        return self._now

    def set(self, ms: float) -> None:
        self._now = ms
