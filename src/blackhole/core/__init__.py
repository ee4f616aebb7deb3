"""Core framework components: events, session states and spawn timers."""

from .state import State, StateMachine
from .events import EventBus, Event, EventType
from .scheduler import SpawnScheduler, IntervalTimer, RandomIntervalTimer

__all__ = [
    "State",
    "StateMachine",
    "EventBus",
    "Event",
    "EventType",
    "SpawnScheduler",
    "IntervalTimer",
    "RandomIntervalTimer",
]
