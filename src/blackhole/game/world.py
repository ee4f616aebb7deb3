"""Mutable state of one play session."""

from dataclasses import dataclass, field
from enum import Enum

from blackhole.config.variants import GameConfig
from blackhole.game.entities import Asteroid, BlackHole, Platform, Player, ShieldPickup, Star


class Action(str, Enum):
    """Logical inputs the game reacts to."""
    LEFT = "left"
    RIGHT = "right"
    JUMP = "jump"


@dataclass(frozen=True)
class Canvas:
    width: float = 400.0
    height: float = 600.0


@dataclass
class JumpTimers:
    """Coyote and jump-buffer countdowns, measured in 60 Hz frames."""
    coyote: float = 0.0
    buffer: float = 0.0

    def clear(self) -> None:
        self.coyote = 0.0
        self.buffer = 0.0

    def decay(self, amount: float) -> None:
        if self.coyote > 0:
            self.coyote -= amount
        if self.buffer > 0:
            self.buffer -= amount
        # Fractional decay can overshoot
        if self.coyote < 0:
            self.coyote = 0.0
        if self.buffer < 0:
            self.buffer = 0.0


@dataclass
class World:
    """Every entity of a session plus the held-key state."""
    canvas: Canvas
    player: Player
    blackhole: BlackHole
    platforms: list[Platform] = field(default_factory=list)
    asteroids: list[Asteroid] = field(default_factory=list)
    shield: ShieldPickup | None = None
    stars: list[Star] = field(default_factory=list)
    timers: JumpTimers = field(default_factory=JumpTimers)
    held: set[Action] = field(default_factory=set)

    @classmethod
    def create(cls, config: GameConfig, canvas: Canvas) -> "World":
        """Build a world with the player centred near the top and the hole below the canvas."""
        pc = config.player
        player = Player(
            x=canvas.width / 2 - pc.width / 2,
            y=pc.start_y,
            width=pc.width,
            height=pc.height,
            jump_power=pc.jump_power,
        )
        blackhole = BlackHole(
            x=canvas.width / 2,
            y=canvas.height + config.blackhole.offset_below,
            radius=config.blackhole.radius,
        )
        return cls(canvas=canvas, player=player, blackhole=blackhole)

    def is_held(self, action: Action) -> bool:
        return action in self.held
