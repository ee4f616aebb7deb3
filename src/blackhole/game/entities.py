"""Entity records for the simulation. Positions are canvas pixels, y grows downward."""

from dataclasses import dataclass


@dataclass
class Player:
    """The jumper. (x, y) is the top-left corner."""
    x: float
    y: float
    width: float = 30.0
    height: float = 30.0
    vx: float = 0.0
    vy: float = 0.0
    jump_power: float = -16.0
    can_jump: bool = False
    has_shield: bool = False
    shield_hit_timer: int = 0

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class BlackHole:
    """Gravity well below the visible area."""
    x: float
    y: float
    radius: float


@dataclass
class Platform:
    """Falling ledge. (x, y) is the top-left corner."""
    x: float
    y: float
    width: float
    height: float
    hit_timer: int = 0


@dataclass
class Asteroid:
    """Meteor. (x, y) is the center."""
    x: float
    y: float
    radius: float
    vx: float
    vy: float


@dataclass
class ShieldPickup:
    """Shield item. (x, y) is the top-left of its bounding square."""
    x: float
    y: float
    radius: float

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.radius, self.y + self.radius


@dataclass
class Star:
    """Decorative background star."""
    x: float
    y: float
    radius: float
    speed: float
