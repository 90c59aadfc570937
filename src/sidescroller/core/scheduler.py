"""
Refresh-driven tick scheduling.

Mirrors the request-animation-frame model: a callback is requested once,
runs on the next display refresh, and must request itself again to keep
a loop going. Handles can be cancelled; a cancelled handle that still
gets pumped is a no-op.
"""

from dataclasses import dataclass, field
from typing import Callable
import logging

logger = logging.getLogger(__name__)

TickCallback = Callable[[float], None]


@dataclass
class TickHandle:
    """A pending tick request."""
    callback: TickCallback
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class TickScheduler:
    """
    Runs requested tick callbacks once per refresh.

    The host calls pump(now) on every display refresh. Callbacks requested
    during a pump run on the following pump, never the current one, so a
    self-rescheduling loop advances exactly one tick per refresh. Refreshes
    the host skips are simply lost; nothing is queued up.
    """

    def __init__(self) -> None:
        self._pending: list[TickHandle] = []

    def request(self, callback: TickCallback) -> TickHandle:
        handle = TickHandle(callback)
        self._pending.append(handle)
        return handle

    @property
    def has_pending(self) -> bool:
        return any(h.pending for h in self._pending)

    def pump(self, now: float) -> int:
        """
        Run every callback requested before this call.

        Args:
            now: Current timestamp in milliseconds

        Returns:
            Number of callbacks that actually ran
        """
        due, self._pending = self._pending, []
        ran = 0
        for handle in due:
            if not handle.pending:
                continue
            handle.fired = True
            handle.callback(now)
            ran += 1
        return ran

    def cancel_all(self) -> None:
        for handle in self._pending:
            handle.cancel()
        self._pending.clear()


@dataclass
class Deadline:
    """
    Cancellable one-shot timer checked by timestamp comparison.

    Used instead of a deferred callback so expiry happens inside the tick
    that observes it.
    """
    due_at: float | None = None
    _listeners: list[Callable[[], None]] = field(default_factory=list, repr=False)

    @property
    def armed(self) -> bool:
        return self.due_at is not None

    def arm(self, now: float, duration: float) -> None:
        """Start or replace the timer."""
        self.due_at = now + duration

    def cancel(self) -> None:
        self.due_at = None

    def expired(self, now: float) -> bool:
        return self.due_at is not None and now >= self.due_at

    def poll(self, now: float) -> bool:
        """Disarm and return True if the deadline has passed."""
        if not self.expired(now):
            return False
        self.due_at = None
        for listener in self._listeners:
            try:
                listener()
            except Exception as e:
                logger.error(f"Error in deadline listener: {e}")
        return True

    def on_expire(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)
