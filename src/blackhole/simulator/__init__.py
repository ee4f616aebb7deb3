"""Desktop pygame host for the game."""

from .window import GameWindow, WindowConfig

__all__ = ["GameWindow", "WindowConfig"]
