"""Cosmetic gravitational lensing around the black hole."""

import math

from blackhole.game.entities import BlackHole


def lensed_position(
    x: float,
    y: float,
    hole: BlackHole,
    radius_factor: float = 1.5,
    strength: float = 10.0,
) -> tuple[float, float]:
    """
    Where a background point appears once bent by the hole.

    Points farther than ``radius * radius_factor`` are untouched; closer
    points shift radially by ``strength * (1 - d / reach)`` pixels. Purely
    visual, never fed back into the simulation.
    """
    dx = x - hole.x
    dy = y - hole.y
    dist = math.hypot(dx, dy)
    reach = hole.radius * radius_factor

    if dist > reach or dist == 0:
        return x, y

    distortion = 1 - dist / reach
    k = 1 - (strength * distortion) / dist
    return hole.x + dx * k, hole.y + dy * k
