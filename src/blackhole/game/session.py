"""
Session controller.

Owns the world, spawn timers and session state, and runs the per-frame
loop: timers and elapsed time, platform landing, player physics, then
(once running) entity motion, pickups and the two ways to lose.
"""

from dataclasses import dataclass
from enum import Enum
import logging
import random

from blackhole.config.variants import GameConfig
from blackhole.core.events import Event, EventBus, EventType
from blackhole.core.scheduler import IntervalTimer, RandomIntervalTimer, SpawnScheduler
from blackhole.core.state import State, StateMachine
from blackhole.game import collision, physics
from blackhole.game.collision import HitResult
from blackhole.game.spawner import Spawner
from blackhole.game.world import Action, Canvas, World
from blackhole.storage.highscore import HighScoreBoard, MemoryHighScoreStore, format_time

logger = logging.getLogger(__name__)


class Cause(Enum):
    """Why a session ended."""
    METEOR = "Game Over! (Hit by a meteor.)"
    BLACKHOLE = "Game Over! (Swallowed by the black hole.)"


@dataclass(frozen=True)
class GameOverSummary:
    cause: Cause
    elapsed: float
    best: float
    new_record: bool

    def message(self) -> str:
        """Human-readable end-of-session text."""
        best_line = f"Best time: {format_time(self.best)}s"
        if self.new_record:
            best_line += " (NEW RECORD!)"
        return "\n".join([
            self.cause.value,
            "",
            f"Survival time: {format_time(self.elapsed)}s",
            best_line,
        ])


class GameSession:
    """
    One play session from splash screen to game over.

    The host drives it with tick(delta_ms) once per frame and forwards
    key presses, visibility changes and asset loading, either directly or
    through an EventBus after attach().
    """

    BASELINE_FRAME_SECONDS = 1.0 / 60.0

    def __init__(
        self,
        config: GameConfig,
        canvas: Canvas | None = None,
        board: HighScoreBoard | None = None,
        rng: random.Random | None = None,
        event_bus: EventBus | None = None,
        fx_rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.canvas = canvas or Canvas()
        self.board = board or HighScoreBoard(MemoryHighScoreStore())
        self.rng = rng or random.Random()
        # Cosmetic draws never touch the gameplay generator
        self.fx_rng = fx_rng or random.Random()
        self.event_bus = event_bus or EventBus()
        self.state_machine = StateMachine(State.LOADING)
        self._unsubscribers: list = []

        self.world: World
        self.spawner: Spawner
        self.scheduler: SpawnScheduler
        self._build()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _build(self) -> None:
        self.world = World.create(self.config, self.canvas)
        self.spawner = Spawner(self.world, self.config, self.rng)
        self.scheduler = self._build_scheduler()

        self.summary: GameOverSummary | None = None
        self.elapsed = 0.0
        self.frame = 0
        self._clock_ms = 0.0
        self._start_ms = 0.0
        self._baseline_next_frame = True

    def _build_scheduler(self) -> SpawnScheduler:
        scheduler = SpawnScheduler()
        scheduler.add(IntervalTimer(
            "platforms", self.config.platforms.spawn_interval_ms, self._spawn_platform
        ))

        ac = self.config.asteroids
        if ac.fixed_interval:
            scheduler.add(IntervalTimer("asteroids", ac.min_interval_ms, self._spawn_asteroid))
        else:
            scheduler.add(RandomIntervalTimer(
                "asteroids", ac.min_interval_ms, ac.max_interval_ms, self._spawn_asteroid, self.rng
            ))

        if self.config.features.shield:
            scheduler.add(IntervalTimer(
                "shield", self.config.shield.spawn_interval_ms, self._spawn_shield
            ))
        return scheduler

    def _spawn_platform(self) -> None:
        self.spawner.spawn_platform(self.elapsed)

    def _spawn_asteroid(self) -> None:
        self.spawner.spawn_asteroid()

    def _spawn_shield(self) -> None:
        self.spawner.spawn_shield()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> State:
        return self.state_machine.state

    @property
    def is_running(self) -> bool:
        return self.state_machine.is_running

    @property
    def has_started(self) -> bool:
        return self.state_machine.has_started

    @property
    def is_over(self) -> bool:
        return self.state_machine.is_over

    @property
    def best(self) -> float:
        return self.board.best

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def ready(self) -> None:
        """Assets are loaded: lay out the starfield and the start platforms."""
        if self.state != State.LOADING:
            return

        if self.config.stars.count:
            self.spawner.spawn_stars(self.fx_rng)
        self.spawner.spawn_initial_platforms()
        self.state_machine.transition(State.READY)

    def start(self) -> bool:
        """Begin play. Only allowed from the splash screen while standing on a platform."""
        if self.state != State.READY or not self.world.player.can_jump:
            return False

        self.state_machine.transition(State.RUNNING)
        self._start_ms = self._clock_ms
        self.scheduler.start()
        self._emit(EventType.SESSION_STARTED)
        return True

    def hide(self) -> None:
        """Window hidden: cancel spawn timers and freeze the session."""
        self.scheduler.stop()
        if self.state == State.RUNNING:
            self.state_machine.transition(State.PAUSED)
            self._emit(EventType.SESSION_PAUSED, {"elapsed": self.elapsed})

    def show(self) -> None:
        """Window visible again: keep elapsed time and re-arm the timers."""
        if self.state != State.PAUSED:
            return

        self._start_ms = self._clock_ms - self.elapsed * 1000.0
        self._baseline_next_frame = True
        self.state_machine.transition(State.RUNNING)
        self.scheduler.start()
        self._emit(EventType.SESSION_RESUMED, {"elapsed": self.elapsed})

    def game_over(self, cause: Cause) -> GameOverSummary | None:
        """Terminal transition: stop timers, record the time, publish the summary."""
        if self.is_over:
            return self.summary

        self.scheduler.stop()
        if not self.state_machine.transition(State.GAME_OVER):
            return None

        new_record = self.board.submit(self.elapsed)
        self.summary = GameOverSummary(
            cause=cause,
            elapsed=self.elapsed,
            best=self.board.best,
            new_record=new_record,
        )
        logger.info(
            f"Game over ({cause.name.lower()}) after {format_time(self.elapsed)}s"
            f"{' - new record' if new_record else ''}"
        )
        self._emit(EventType.GAME_OVER, {
            "summary": self.summary,
            "message": self.summary.message(),
        })
        return self.summary

    def reset(self) -> None:
        """Throw the session away and return to the splash screen."""
        self.scheduler.stop()
        self._build()
        self.state_machine.reset(State.LOADING)
        self.ready()
        self._emit(EventType.SESSION_RESET)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def press(self, action: Action) -> None:
        self.world.held.add(action)

        if action in (Action.LEFT, Action.RIGHT) and self.state == State.READY:
            self.start()

        if action == Action.JUMP:
            collision.press_jump(self.world, self.config, started=self.is_running)

    def release(self, action: Action) -> None:
        self.world.held.discard(action)

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def tick(self, delta_ms: float) -> None:
        """Advance the simulation by one frame of ``delta_ms`` real milliseconds."""
        if self.state in (State.PAUSED, State.GAME_OVER):
            return

        if self._baseline_next_frame:
            delta_seconds = self.BASELINE_FRAME_SECONDS
            self._baseline_next_frame = False
        else:
            delta_seconds = delta_ms / 1000.0
        dt_scale = physics.frame_scale(delta_seconds, self.config)

        self._clock_ms += delta_ms
        running = self.is_running
        world = self.world

        if running:
            self.elapsed = round((self._clock_ms - self._start_ms) / 1000.0, 1)
            world.timers.decay(dt_scale)
            self.scheduler.advance(delta_ms)

        collision.check_platform_collision(world, self.config)
        physics.apply_player_physics(world, self.config, self.elapsed, dt_scale, started=running)

        if running:
            physics.advance_platforms(world, self.config, self.elapsed, dt_scale)
            physics.advance_asteroids(world, dt_scale)

            if self.config.features.shield:
                physics.advance_shield(world, self.config, self.elapsed, dt_scale)
                if collision.check_shield_pickup(world):
                    self._emit(EventType.SHIELD_COLLECTED)

            hit = collision.check_asteroid_collision(world, self.config)
            if hit is HitResult.SHIELDED:
                self._emit(EventType.SHIELD_CONSUMED)
            elif hit is HitResult.FATAL:
                self.game_over(Cause.METEOR)
                return

            if collision.check_blackhole(world):
                self.game_over(Cause.BLACKHOLE)
                return

            physics.advance_stars(world, self.fx_rng)

        physics.decay_player_effects(world)
        self.frame += 1

    # ------------------------------------------------------------------
    # Event bus wiring
    # ------------------------------------------------------------------

    def attach(self) -> None:
        """Subscribe to host events on the session's event bus."""
        if self._unsubscribers:
            return
        bus = self.event_bus
        self._unsubscribers = [
            bus.subscribe(EventType.TICK, self._on_tick),
            bus.subscribe(EventType.KEY_DOWN, self._on_key_down),
            bus.subscribe(EventType.KEY_UP, self._on_key_up),
            bus.subscribe(EventType.VISIBILITY_HIDDEN, lambda event: self.hide()),
            bus.subscribe(EventType.VISIBILITY_SHOWN, lambda event: self.show()),
            bus.subscribe(EventType.ASSETS_LOADED, lambda event: self.ready()),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _on_tick(self, event: Event) -> None:
        self.tick(event.data.get("delta_ms", 1000.0 / 60.0))

    def _on_key_down(self, event: Event) -> None:
        action = self._action_from(event)
        if action is not None:
            self.press(action)

    def _on_key_up(self, event: Event) -> None:
        action = self._action_from(event)
        if action is not None:
            self.release(action)

    @staticmethod
    def _action_from(event: Event) -> Action | None:
        try:
            return Action(event.data.get("action"))
        except ValueError:
            return None

    def _emit(self, event_type: EventType, data: dict | None = None) -> None:
        self.event_bus.emit(Event(event_type, data=data or {}, source="session"))
