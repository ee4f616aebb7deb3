"""Entity creation for platforms, asteroids, shield pickups and the starfield."""

import logging
import random

from blackhole.config.variants import GameConfig
from blackhole.game.entities import Asteroid, Platform, ShieldPickup, Star
from blackhole.game.physics import platform_height
from blackhole.game.world import World

logger = logging.getLogger(__name__)


class Spawner:
    """
    Creates entities into a world.

    Every gameplay draw comes from ``rng`` in a fixed order, so a seeded
    generator replays the same platforms, meteors and spawn intervals.
    """

    START_PLATFORM_GAP = 5.0
    INITIAL_TOP = 60.0
    INITIAL_SPREAD = 0.45

    def __init__(self, world: World, config: GameConfig, rng: random.Random) -> None:
        self.world = world
        self.config = config
        self.rng = rng

    def spawn_initial_platforms(self) -> None:
        """Place the start platform under the player plus a scattered upper set."""
        world = self.world
        player = world.player
        pc = self.config.platforms
        height = platform_height(0.0, pc)

        world.platforms.clear()
        start = Platform(
            x=player.x + player.width / 2 - pc.width / 2,
            y=player.y + player.height + self.START_PLATFORM_GAP,
            width=pc.width,
            height=height,
        )
        world.platforms.append(start)

        # Stand on it so the first frame already counts as grounded
        player.y = start.y - player.height
        player.vy = 0
        player.can_jump = True

        for _ in range(pc.initial_count - 1):
            x = self.rng.random() * (world.canvas.width - pc.width)
            y = self.INITIAL_TOP + self.rng.random() * (world.canvas.height * self.INITIAL_SPREAD)
            world.platforms.append(Platform(x=x, y=y, width=pc.width, height=height))

        logger.debug(f"Spawned {len(world.platforms)} initial platforms")

    def spawn_platform(self, elapsed: float) -> Platform:
        """Append a platform just above the canvas, thinned for the current time."""
        pc = self.config.platforms
        height = platform_height(elapsed, pc)
        platform = Platform(
            x=self.rng.random() * (self.world.canvas.width - pc.width),
            y=-height,
            width=pc.width,
            height=height,
        )
        self.world.platforms.append(platform)
        return platform

    def spawn_asteroid(self) -> Asteroid:
        ac = self.config.asteroids
        radius = self.rng.random() * (ac.max_radius - ac.min_radius) + ac.min_radius
        x = self.rng.random() * self.world.canvas.width
        vx = (self.rng.random() - 0.5) * ac.drift
        asteroid = Asteroid(x=x, y=-radius, radius=radius, vx=vx, vy=ac.fall_speed)
        self.world.asteroids.append(asteroid)
        return asteroid

    def spawn_shield(self) -> ShieldPickup | None:
        """Drop a shield pickup unless one is already on screen."""
        if self.world.shield is not None:
            return None

        size = self.config.shield.size
        self.world.shield = ShieldPickup(
            x=self.rng.random() * (self.world.canvas.width - size),
            y=-size,
            radius=size / 2,
        )
        logger.debug("Shield pickup spawned")
        return self.world.shield

    def spawn_stars(self, rng: random.Random) -> None:
        """Fill the decorative starfield from its own generator."""
        sc = self.config.stars
        canvas = self.world.canvas
        self.world.stars = [
            Star(
                x=rng.random() * canvas.width,
                y=rng.random() * canvas.height,
                radius=rng.random() * sc.max_radius,
                speed=rng.random() * sc.speed_range + sc.min_speed,
            )
            for _ in range(sc.count)
        ]
