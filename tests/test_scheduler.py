import random

import pytest

from blackhole.core.scheduler import IntervalTimer, RandomIntervalTimer, SpawnScheduler


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_interval_timer_fires_on_schedule():
    counter = Counter()
    timer = IntervalTimer("platforms", 280, counter)
    timer.start()

    assert timer.advance(100) == 0
    assert timer.advance(100) == 0
    assert timer.advance(100) == 1
    assert counter.calls == 1
    assert timer.remaining_ms == pytest.approx(260)


def test_long_frame_fires_every_elapsed_period():
    counter = Counter()
    timer = IntervalTimer("platforms", 280, counter)
    timer.start()

    assert timer.advance(600) == 2
    assert timer.remaining_ms == pytest.approx(240)
    assert timer.fire_count == 2


def test_inactive_timer_does_nothing():
    counter = Counter()
    timer = IntervalTimer("platforms", 10, counter)
    assert timer.advance(1000) == 0
    assert counter.calls == 0


def test_callback_can_stop_its_timer():
    timer = IntervalTimer("asteroids", 10, lambda: timer.stop())
    timer.start()
    assert timer.advance(100) == 1
    assert not timer.active


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        IntervalTimer("bad", 0, lambda: None)
    with pytest.raises(ValueError):
        RandomIntervalTimer("bad", 500, 100, lambda: None, random.Random())


def test_random_interval_stays_in_range():
    timer = RandomIntervalTimer("asteroids", 3000, 5000, lambda: None, random.Random(7))
    for _ in range(100):
        timer.start()
        assert 3000 <= timer.remaining_ms <= 5000


def test_scheduler_rejects_duplicate_names():
    scheduler = SpawnScheduler()
    scheduler.add(IntervalTimer("platforms", 280, lambda: None))
    with pytest.raises(ValueError):
        scheduler.add(IntervalTimer("platforms", 300, lambda: None))


def test_scheduler_start_is_idempotent():
    scheduler = SpawnScheduler()
    timer = scheduler.add(IntervalTimer("platforms", 280, lambda: None))
    scheduler.start()
    scheduler.advance(100)

    scheduler.start()

    assert timer.remaining_ms == pytest.approx(180)
    assert scheduler.pending() == ["platforms"]


def test_scheduler_stop_and_restart():
    scheduler = SpawnScheduler()
    timer = scheduler.add(IntervalTimer("platforms", 280, lambda: None))
    scheduler.add(IntervalTimer("shield", 10000, lambda: None))
    scheduler.start()
    scheduler.advance(100)

    scheduler.stop()
    assert not scheduler.is_running
    assert scheduler.pending() == []

    scheduler.restart()
    assert scheduler.is_running
    assert timer.remaining_ms == pytest.approx(280)
    assert len(scheduler) == 2
    assert scheduler.get("shield") is not None
    assert scheduler.get("missing") is None
