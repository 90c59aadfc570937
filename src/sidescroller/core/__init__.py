"""Core framework components for the side scroller."""

from .state import Phase, StateMachine
from .events import EventBus, Event, EventType
from .clock import Clock, MonotonicClock, ManualClock
from .scheduler import TickScheduler, TickHandle, Deadline
from .input import Action, InputState

__all__ = [
    "Phase",
    "StateMachine",
    "EventBus",
    "Event",
    "EventType",
    "Clock",
    "MonotonicClock",
    "ManualClock",
    "TickScheduler",
    "TickHandle",
    "Deadline",
    "Action",
    "InputState",
]
