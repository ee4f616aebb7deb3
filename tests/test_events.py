import asyncio

from blackhole.core.events import (
    Event,
    EventBus,
    EventType,
    key_event,
    tick_event,
    visibility_event,
)


def test_emit_reaches_subscribers():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.TICK, received.append)

    bus.emit(tick_event(16.0, 3))

    assert len(received) == 1
    assert received[0].data == {"delta_ms": 16.0, "frame": 3}


def test_unsubscribe():
    bus = EventBus()
    received = []
    unsubscribe = bus.subscribe(EventType.GAME_OVER, received.append)
    unsubscribe()
    bus.emit(Event(EventType.GAME_OVER))
    assert received == []


def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    received = []

    def broken(event):
        raise ValueError("bad handler")

    bus.subscribe(EventType.KEY_DOWN, broken)
    bus.subscribe(EventType.KEY_DOWN, received.append)
    bus.emit(key_event("left", pressed=True))

    assert len(received) == 1


def test_subscribe_all_and_history_limit():
    bus = EventBus(history_limit=3)
    everything = []
    bus.subscribe_all(everything.append)

    for i in range(5):
        bus.emit(tick_event(16.0, i))

    assert len(everything) == 5
    history = bus.get_history(EventType.TICK)
    assert [e.data["frame"] for e in history] == [2, 3, 4]

    bus.clear_history()
    assert bus.get_history() == []


def test_queued_events_reach_async_handlers():
    bus = EventBus()
    received = []

    async def handler(event):
        received.append(event.type)

    bus.subscribe(EventType.SESSION_STARTED, handler)
    bus.queue_event(Event(EventType.SESSION_STARTED))
    asyncio.run(bus.process_queue())

    assert received == [EventType.SESSION_STARTED]


def test_emit_skips_async_handlers():
    bus = EventBus()
    received = []

    async def handler(event):
        received.append(event.type)

    bus.subscribe(EventType.SESSION_STARTED, handler)
    bus.emit(Event(EventType.SESSION_STARTED))

    assert received == []
    assert not hasattr(bus, "emit_async")


def test_helper_event_types():
    assert key_event("jump", pressed=False).type == EventType.KEY_UP
    assert key_event("jump", pressed=True).data == {"action": "jump"}
    assert visibility_event(False).type == EventType.VISIBILITY_HIDDEN
    assert visibility_event(True).type == EventType.VISIBILITY_SHOWN
