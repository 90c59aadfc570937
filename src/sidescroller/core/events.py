"""
Event bus for the side scroller.

Provides pub/sub messaging between the engine and its hosts
(simulator window, HUD, persistence).
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
import logging
import time
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    ACTION_PRESS = auto()
    ACTION_RELEASE = auto()

    # Commands
    START = auto()
    RESTART = auto()

    # Run lifecycle
    PHASE_CHANGED = auto()
    RUN_STARTED = auto()
    GAME_OVER = auto()

    # Gameplay
    ENTITY_SPAWNED = auto()
    SCORE_CHANGED = auto()
    HIGH_SCORE = auto()
    POWERUP_COLLECTED = auto()
    BOOST_STARTED = auto()
    BOOST_ENDED = auto()
    JUMP = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    Handlers run synchronously inside emit(), so engine events land
    within the tick that raised them.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._event_history: list[Event] = []
        self._history_limit = 100

    def subscribe(
        self,
        event_type: EventType | str,
        handler: Handler
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Subscribe to all events. Returns an unsubscribe function."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event to every matching handler immediately."""
        self._add_to_history(event)

        handlers = self._handlers.get(event.type, []) + self._global_handlers
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler: {e}")

    def _add_to_history(self, event: Event) -> None:
        """Add event to history, maintaining limit."""
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(
        self,
        event_type: EventType | str | None = None,
        limit: int = 10
    ) -> list[Event]:
        """Get recent events from history."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]


def action_event(
    action_name: str,
    pressed: bool,
    key: str | None = None,
    source: str = "keyboard",
) -> Event:
    """Create an action press/release event.

    ``key`` names the physical key so aliases of one action are held
    independently.
    """
    event_type = EventType.ACTION_PRESS if pressed else EventType.ACTION_RELEASE
    data = {"action": action_name}
    if key is not None:
        data["key"] = key
    return Event(event_type, data=data, source=source)


def command_event(restart: bool = False, source: str = "ui") -> Event:
    """Create a start or restart command event."""
    return Event(EventType.RESTART if restart else EventType.START, source=source)
