"""
Tick-driven spawn timers.

Timers are accumulators advanced by the session once per frame with the
real elapsed milliseconds, so spawn cadence does not depend on any host
timer API and replays exactly under a seeded RNG.
"""

from abc import ABC, abstractmethod
from typing import Callable
import logging
import random

logger = logging.getLogger(__name__)


class Timer(ABC):
    """Base class for a named, restartable countdown."""

    def __init__(self, name: str, callback: Callable[[], None]) -> None:
        self.name = name
        self.callback = callback
        self._active = False
        self._remaining_ms = 0.0
        self.fire_count = 0

    @property
    def active(self) -> bool:
        return self._active

    @property
    def remaining_ms(self) -> float:
        return self._remaining_ms

    @abstractmethod
    def _next_delay(self) -> float:
        """Delay in milliseconds until the next firing."""
        ...

    def start(self) -> None:
        self._active = True
        self._remaining_ms = self._next_delay()
        logger.debug(f"Timer {self.name} started ({self._remaining_ms:.0f} ms)")

    def stop(self) -> None:
        if self._active:
            logger.debug(f"Timer {self.name} stopped")
        self._active = False

    def advance(self, delta_ms: float) -> int:
        """
        Advance the countdown, firing the callback for every elapsed period.

        Returns:
            Number of times the callback fired
        """
        if not self._active:
            return 0

        fired = 0
        self._remaining_ms -= delta_ms
        while self._active and self._remaining_ms <= 0:
            self.callback()
            fired += 1
            self.fire_count += 1
            # The callback may have ended the session
            if not self._active:
                break
            self._remaining_ms += self._next_delay()
        return fired


class IntervalTimer(Timer):
    """Fires every ``interval_ms``."""

    def __init__(self, name: str, interval_ms: float, callback: Callable[[], None]) -> None:
        if interval_ms <= 0:
            raise ValueError(f"Timer {name}: interval must be positive, got {interval_ms}")
        super().__init__(name, callback)
        self.interval_ms = interval_ms

    def _next_delay(self) -> float:
        return self.interval_ms


class RandomIntervalTimer(Timer):
    """Re-arms itself with a fresh uniform delay in [min_ms, max_ms] after each firing."""

    def __init__(
        self,
        name: str,
        min_ms: float,
        max_ms: float,
        callback: Callable[[], None],
        rng: random.Random,
    ) -> None:
        if min_ms <= 0 or max_ms < min_ms:
            raise ValueError(f"Timer {name}: invalid range [{min_ms}, {max_ms}]")
        super().__init__(name, callback)
        self.min_ms = min_ms
        self.max_ms = max_ms
        self._rng = rng

    def _next_delay(self) -> float:
        return self._rng.random() * (self.max_ms - self.min_ms) + self.min_ms


class SpawnScheduler:
    """Owns the spawn timers of one session and their lifecycle."""

    def __init__(self) -> None:
        self._timers: dict[str, Timer] = {}

    def add(self, timer: Timer) -> Timer:
        if timer.name in self._timers:
            raise ValueError(f"Timer already registered: {timer.name}")
        self._timers[timer.name] = timer
        return timer

    def get(self, name: str) -> Timer | None:
        return self._timers.get(name)

    def start(self) -> None:
        """Start every stopped timer. Timers already running are left alone."""
        for timer in self._timers.values():
            if not timer.active:
                timer.start()

    def stop(self) -> None:
        """Cancel all pending timers."""
        for timer in self._timers.values():
            timer.stop()

    def restart(self) -> None:
        """Stop everything and start again from fresh countdowns."""
        self.stop()
        self.start()

    def advance(self, delta_ms: float) -> None:
        for timer in list(self._timers.values()):
            timer.advance(delta_ms)

    @property
    def is_running(self) -> bool:
        return any(timer.active for timer in self._timers.values())

    def pending(self) -> list[str]:
        """Names of the timers that are still armed."""
        return [name for name, timer in self._timers.items() if timer.active]

    def __len__(self) -> int:
        return len(self._timers)
