"""
Physics step: difficulty curves, player integration and entity motion.

All velocities are in pixels per 60 Hz frame. ``dt_scale`` converts a
frame's real duration to that baseline: it is 1.0 for fixed-tick
variants and ``delta_seconds * 60`` for delta-time variants. Friction and
hit-flash timers are deliberately left per-frame in both modes.
"""

import math
import random

from blackhole.config.variants import GameConfig, PhysicsConfig, PlatformConfig
from blackhole.game.world import Action, World

BASELINE_FPS = 60.0


def platform_height(elapsed: float, platforms: PlatformConfig) -> float:
    """Platform thickness after ``elapsed`` seconds, thinning linearly to a floor."""
    if platforms.thinning_duration <= 0:
        ratio = 1.0
    else:
        ratio = min(max(elapsed, 0.0) / platforms.thinning_duration, 1.0)
    height = platforms.base_height - platforms.max_thinning * ratio
    return max(height, platforms.base_height - platforms.max_thinning)


def gravity_at(elapsed: float, physics: PhysicsConfig) -> float:
    return physics.base_gravity + elapsed * physics.gravity_rate


def blackhole_strength_at(elapsed: float, physics: PhysicsConfig) -> float:
    return physics.base_blackhole_strength + elapsed * physics.blackhole_strength_rate


def fall_speed_at(elapsed: float, platforms: PlatformConfig) -> float:
    return platforms.base_fall_speed + elapsed * platforms.fall_speed_rate


def frame_scale(delta_seconds: float, config: GameConfig) -> float:
    """Convert a frame duration into the 60 Hz baseline multiplier."""
    if not config.features.delta_time:
        return 1.0
    return delta_seconds * BASELINE_FPS


def blackhole_pull(world: World, strength: float, physics: PhysicsConfig) -> tuple[float, float]:
    """Inverse-square force on the player centre, towards the hole centre."""
    px, py = world.player.center
    dx = world.blackhole.x - px
    dy = world.blackhole.y - py
    dist_sq = dx * dx + dy * dy
    min_sq = physics.min_pull_distance * physics.min_pull_distance
    if dist_sq < min_sq:
        dist_sq = min_sq

    force = strength / dist_sq
    dist = math.sqrt(dist_sq)
    return (dx / dist) * force, (dy / dist) * force


def apply_player_physics(
    world: World,
    config: GameConfig,
    elapsed: float,
    dt_scale: float,
    started: bool,
) -> None:
    """Advance the player one frame: input, gravity, pull, integration, damping, clamp."""
    player = world.player
    physics = config.physics

    # Steering is a flat per-frame impulse
    if world.is_held(Action.LEFT):
        player.vx -= config.player.move_accel
    if world.is_held(Action.RIGHT):
        player.vx += config.player.move_accel

    if started:
        player.vy += gravity_at(elapsed, physics) * dt_scale

        fx, fy = blackhole_pull(world, blackhole_strength_at(elapsed, physics), physics)
        player.vx += fx * physics.pull_scale * dt_scale
        player.vy += fy * physics.pull_scale * dt_scale

    player.x += player.vx * dt_scale
    player.y += player.vy * dt_scale

    # Damping runs after integration
    player.vx *= physics.friction_x
    player.vy *= physics.friction_y

    max_x = world.canvas.width - player.width
    if player.x < 0:
        player.x = 0
        player.vx = 0
    elif player.x > max_x:
        player.x = max_x
        player.vx = 0


def advance_platforms(world: World, config: GameConfig, elapsed: float, dt_scale: float) -> None:
    """Move platforms down, decay their hit flash and drop the ones below the canvas."""
    speed = fall_speed_at(elapsed, config.platforms)
    limit = world.canvas.height + config.platforms.offscreen_margin

    for platform in world.platforms:
        platform.y += speed * dt_scale
        if platform.hit_timer > 0:
            platform.hit_timer -= 1

    world.platforms[:] = [p for p in world.platforms if p.y <= limit]


def advance_asteroids(world: World, dt_scale: float) -> None:
    """Move asteroids and prune the ones that left the canvas."""
    width = world.canvas.width
    height = world.canvas.height

    for asteroid in world.asteroids:
        asteroid.x += asteroid.vx * dt_scale
        asteroid.y += asteroid.vy * dt_scale

    world.asteroids[:] = [
        a for a in world.asteroids
        if not (a.y > height + a.radius or a.x < -a.radius or a.x > width + a.radius)
    ]


def advance_shield(world: World, config: GameConfig, elapsed: float, dt_scale: float) -> None:
    """The shield pickup falls with the platforms."""
    if world.shield is None:
        return

    world.shield.y += fall_speed_at(elapsed, config.platforms) * dt_scale
    if world.shield.y > world.canvas.height + config.shield.size:
        world.shield = None


def advance_stars(world: World, rng: random.Random) -> None:
    """Scroll the starfield one frame, wrapping stars back to the top."""
    for star in world.stars:
        star.y += star.speed
        if star.y > world.canvas.height:
            star.y = 0
            star.x = rng.random() * world.canvas.width


def decay_player_effects(world: World) -> None:
    if world.player.shield_hit_timer > 0:
        world.player.shield_hit_timer -= 1
