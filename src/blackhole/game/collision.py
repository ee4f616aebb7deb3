"""
Collision checks and the jump state machine.

A player is Grounded (can_jump), Airborne with coyote frames left, or
Airborne without them. Landing refills the coyote window; a jump press
arms the buffer so a press just before touching down still counts.
"""

from enum import Enum
import math

from blackhole.config.variants import GameConfig
from blackhole.game.world import World


class HitResult(Enum):
    MISS = "miss"
    SHIELDED = "shielded"
    FATAL = "fatal"


def perform_jump(world: World) -> None:
    player = world.player
    player.vy = player.jump_power
    player.can_jump = False
    world.timers.clear()


def check_platform_collision(world: World, config: GameConfig) -> bool:
    """
    Land the player on any platform it is falling onto, then resolve a buffered jump.

    The vertical test accepts any bottom edge inside or past the platform's top
    band, so a fast fall cannot tunnel through a thin platform in one frame.

    Returns:
        True if the player landed this frame
    """
    player = world.player
    timers = world.timers
    landed = False

    for platform in world.platforms:
        collide_x = (
            player.x + player.width > platform.x
            and player.x < platform.x + platform.width
        )
        if (
            collide_x
            and player.vy >= 0
            and player.bottom >= platform.y
            and player.y < platform.y + platform.height
        ):
            player.y = platform.y - player.height
            player.vy = 0
            player.can_jump = True
            timers.coyote = config.jump.coyote_frames
            platform.hit_timer = config.platforms.hit_frames
            landed = True

    if not landed and timers.coyote <= 0:
        player.can_jump = False

    if (player.can_jump or timers.coyote > 0) and timers.buffer > 0:
        perform_jump(world)

    return landed


def press_jump(world: World, config: GameConfig, started: bool) -> bool:
    """
    Handle a jump key press.

    Returns:
        True if the jump fired immediately
    """
    if not started:
        return False

    world.timers.buffer = config.jump.buffer_frames

    in_coyote = config.features.coyote_jump and world.timers.coyote > 0
    if world.player.can_jump or in_coyote:
        perform_jump(world)
        return True
    return False


def check_asteroid_collision(world: World, config: GameConfig) -> HitResult:
    """Circle test against the player centre. A shield absorbs exactly one asteroid."""
    player = world.player
    px, py = player.center
    reach = player.width / 2

    for i in range(len(world.asteroids) - 1, -1, -1):
        asteroid = world.asteroids[i]
        distance = math.hypot(asteroid.x - px, asteroid.y - py)
        if distance < asteroid.radius + reach:
            if player.has_shield:
                player.has_shield = False
                player.shield_hit_timer = config.shield.hit_frames
                del world.asteroids[i]
                return HitResult.SHIELDED
            return HitResult.FATAL

    return HitResult.MISS


def check_blackhole(world: World) -> bool:
    """True once the player centre is inside the event horizon."""
    px, py = world.player.center
    distance = math.hypot(px - world.blackhole.x, py - world.blackhole.y)
    return distance < world.blackhole.radius


def check_shield_pickup(world: World) -> bool:
    """Collect the shield pickup on contact. Returns True if collected."""
    shield = world.shield
    if shield is None:
        return False

    px, py = world.player.center
    sx, sy = shield.center
    if math.hypot(sx - px, sy - py) < shield.radius + world.player.width / 2:
        world.player.has_shield = True
        world.shield = None
        return True
    return False
