"""Frame renderer: draws a session's world into a numpy buffer."""

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from blackhole.config.variants import GameConfig
from blackhole.game.session import GameSession
from blackhole.game.world import World
from blackhole.graphics.lensing import lensed_position
from blackhole.graphics.primitives import (
    draw_circle,
    draw_image,
    draw_radial_gradient,
    draw_rect,
    draw_ring,
    fill,
    new_buffer,
)
from blackhole.graphics.sprites import SpriteSheet


class GameRenderer:
    """Draws background, starfield, platforms, pickups, meteors, player and black hole.

    Text (timer, best time, prompts) is produced separately by
    ``graphics.hud`` because fonts belong to the host window.
    """

    GRADIENT_INNER_RADIUS = 20.0
    STAR_MIN_RADIUS = 0.6
    SHIELD_RING_FACTOR = 0.7
    SHIELD_FLASH_PERIOD = 6

    def __init__(self, config: GameConfig, sprites: Optional[SpriteSheet] = None) -> None:
        self.config = config
        self.sprites = sprites
        palette = config.palette
        self._colors = {
            name: palette.rgb(name)
            for name in (
                "background", "platform", "platform_hit", "asteroid", "player",
                "shield_item", "shield_ring", "shield_hit", "star",
            )
        }

    def new_buffer(self, world: World) -> NDArray[np.uint8]:
        return new_buffer(int(world.canvas.width), int(world.canvas.height))

    def render(self, session: GameSession, buffer: NDArray[np.uint8]) -> None:
        world = session.world
        fill(buffer, self._colors["background"])
        self._draw_stars(buffer, world)
        self._draw_platforms(buffer, world)
        self._draw_shield_item(buffer, world)
        self._draw_asteroids(buffer, world)
        self._draw_player(buffer, world)
        self._draw_blackhole(buffer, world)

    def _sprite(self, name: str):
        if self.sprites is None:
            return None
        return self.sprites.get(name)

    def _lens(self, world: World, x: float, y: float) -> tuple[float, float]:
        if not self.config.features.lensing:
            return x, y
        bh = self.config.blackhole
        return lensed_position(x, y, world.blackhole, bh.lens_radius_factor, bh.lens_strength)

    def _draw_stars(self, buffer: NDArray[np.uint8], world: World) -> None:
        for star in world.stars:
            x, y = self._lens(world, star.x, star.y)
            draw_circle(buffer, x, y, max(star.radius, self.STAR_MIN_RADIUS), self._colors["star"])

    def _draw_platforms(self, buffer: NDArray[np.uint8], world: World) -> None:
        sprite = self._sprite("platform")
        hit_frames = self.config.platforms.hit_frames

        for p in world.platforms:
            left, top = self._lens(world, p.x, p.y)
            right, bottom = self._lens(world, p.x + p.width, p.y + p.height)
            width = right - left
            height = bottom - top
            flashing = p.hit_timer > 0 and hit_frames > 0

            image = sprite.scaled(width, height) if sprite else None
            if image is not None:
                draw_image(buffer, image, left, top)
                if flashing:
                    draw_rect(buffer, left, top, width, height, (255, 255, 255),
                              alpha=p.hit_timer / hit_frames * 0.5)
            else:
                color = self._colors["platform_hit"] if flashing else self._colors["platform"]
                draw_rect(buffer, left, top, width, height, color)

    def _draw_shield_item(self, buffer: NDArray[np.uint8], world: World) -> None:
        if world.shield is None:
            return
        cx, cy = world.shield.center
        draw_circle(buffer, cx, cy, world.shield.radius, self._colors["shield_item"])

    def _draw_asteroids(self, buffer: NDArray[np.uint8], world: World) -> None:
        sprite = self._sprite("asteroid")
        for a in world.asteroids:
            image = sprite.scaled(a.radius * 2, a.radius * 2) if sprite else None
            if image is not None:
                draw_image(buffer, image, a.x - a.radius, a.y - a.radius)
            else:
                draw_circle(buffer, a.x, a.y, a.radius, self._colors["asteroid"])

    def _draw_player(self, buffer: NDArray[np.uint8], world: World) -> None:
        player = world.player
        sprite = self._sprite("player")
        image = sprite.scaled(player.width, player.height) if sprite else None
        if image is not None:
            draw_image(buffer, image, player.x, player.y)
        else:
            draw_rect(buffer, player.x, player.y, player.width, player.height, self._colors["player"])

        cx, cy = player.center
        if player.has_shield:
            draw_ring(buffer, cx, cy, player.width * self.SHIELD_RING_FACTOR,
                      self._colors["shield_ring"], thickness=4, alpha=0.8)

        # Blink after the shield soaked a hit
        half = self.SHIELD_FLASH_PERIOD // 2
        if player.shield_hit_timer > 0 and player.shield_hit_timer % self.SHIELD_FLASH_PERIOD < half:
            draw_rect(buffer, player.x, player.y, player.width, player.height,
                      self._colors["shield_hit"], alpha=0.5)

    def _draw_blackhole(self, buffer: NDArray[np.uint8], world: World) -> None:
        bh = world.blackhole
        draw_radial_gradient(
            buffer, bh.x, bh.y,
            self.GRADIENT_INNER_RADIUS, bh.radius,
            self.config.palette.blackhole_stops,
        )
        draw_ring(buffer, bh.x, bh.y, bh.radius, (255, 255, 255), thickness=2, alpha=0.2)
