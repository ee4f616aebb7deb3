"""
Event bus system for the game.

Provides pub/sub messaging between the host window and the session
controller. Handlers run on the caller's thread; the host serializes
everything, so there is no locking.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Awaitable
from enum import Enum, auto
import asyncio
import logging
import time
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    KEY_DOWN = auto()
    KEY_UP = auto()

    # Host events
    VISIBILITY_HIDDEN = auto()
    VISIBILITY_SHOWN = auto()
    ASSETS_LOADED = auto()

    # Session events
    SESSION_STARTED = auto()
    SESSION_PAUSED = auto()
    SESSION_RESUMED = auto()
    SESSION_RESET = auto()
    GAME_OVER = auto()

    # Gameplay events
    SHIELD_COLLECTED = auto()
    SHIELD_CONSUMED = auto()

    # System events
    TICK = auto()


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
    timestamp: float = field(default_factory=time.monotonic)


SyncHandler = Callable[[Event], None]
AsyncHandler = Callable[[Event], Awaitable[None]]
Handler = SyncHandler | AsyncHandler


class EventBus:
    """
    Central event bus for component communication.

    Events can be emitted immediately or queued and drained once per frame.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._queue: list[Event] = []
        self._event_history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(
        self,
        event_type: EventType | str,
        handler: Handler
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function (sync or async)

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
        """
        Emit an event immediately (synchronous handlers only).

        For async handlers, use queue_event.
        """
        self._add_to_history(event)
        self._dispatch_sync(event)

    def queue_event(self, event: Event) -> None:
        """Queue an event for the next process_queue call."""
        self._queue.append(event)

    async def process_queue(self) -> None:
        """Process all queued events in arrival order."""
        pending, self._queue = self._queue, []
        for event in pending:
            self._add_to_history(event)
            await self._dispatch_async(event)

    def _dispatch_sync(self, event: Event) -> None:
        """Dispatch event to synchronous handlers only."""
        handlers = self._handlers.get(event.type, []) + self._global_handlers

        for handler in handlers:
            if asyncio.iscoroutinefunction(handler):
                continue
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type}: {e}")

    async def _dispatch_async(self, event: Event) -> None:
        """Dispatch event to all handlers (sync and async)."""
        handlers = self._handlers.get(event.type, []) + self._global_handlers

        tasks = []
        for handler in handlers:
            if asyncio.iscoroutinefunction(handler):
                tasks.append(asyncio.create_task(handler(event)))
            else:
                try:
                    handler(event)
                except Exception as e:
                    logger.error(f"Error in sync handler for {event.type}: {e}")

        if tasks:
            results = await asyncio.gather(*tasks, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    logger.error(f"Error in async handler: {result}")

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

    def clear_history(self) -> None:
        """Clear event history."""
        self._event_history.clear()


def key_event(action: str, pressed: bool, source: str = "keyboard") -> Event:
    """Create a key down/up event for a logical action."""
    event_type = EventType.KEY_DOWN if pressed else EventType.KEY_UP
    return Event(event_type, data={"action": action}, source=source)


def visibility_event(visible: bool, source: str = "window") -> Event:
    """Create a visibility change event."""
    event_type = EventType.VISIBILITY_SHOWN if visible else EventType.VISIBILITY_HIDDEN
    return Event(event_type, source=source)


def tick_event(delta_ms: float, frame: int) -> Event:
    """Create a frame tick event."""
    return Event(EventType.TICK, data={"delta_ms": delta_ms, "frame": frame})
