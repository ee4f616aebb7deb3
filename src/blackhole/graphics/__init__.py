"""Rendering pipeline: numpy primitives, sprites, lensing, renderer and HUD layout."""

from .renderer import GameRenderer
from .hud import HudText, hud_lines
from .lensing import lensed_position
from .sprites import Sprite, SpriteSheet, load_sprite
from .primitives import (
    draw_rect,
    draw_circle,
    draw_ring,
    draw_radial_gradient,
    draw_image,
    fill,
    new_buffer,
)

__all__ = [
    "GameRenderer",
    "HudText",
    "hud_lines",
    "lensed_position",
    "Sprite",
    "SpriteSheet",
    "load_sprite",
    "draw_rect",
    "draw_circle",
    "draw_ring",
    "draw_radial_gradient",
    "draw_image",
    "fill",
    "new_buffer",
]
