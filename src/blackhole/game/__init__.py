"""Simulation: entities, physics, collisions, spawning and the session controller."""

from .entities import Player, BlackHole, Platform, Asteroid, ShieldPickup, Star
from .world import Action, Canvas, JumpTimers, World
from .session import Cause, GameOverSummary, GameSession

__all__ = [
    "Player",
    "BlackHole",
    "Platform",
    "Asteroid",
    "ShieldPickup",
    "Star",
    "Action",
    "Canvas",
    "JumpTimers",
    "World",
    "Cause",
    "GameOverSummary",
    "GameSession",
]
