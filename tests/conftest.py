"""Shared fixtures. Everything runs headless."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from blackhole.config.variants import GameConfig, load_variant
from blackhole.core.events import EventBus
from blackhole.game.session import GameSession
from blackhole.game.world import Action, Canvas, World
from blackhole.storage.highscore import HighScoreBoard, MemoryHighScoreStore

FRAME_MS = 1000.0 / 60.0


@pytest.fixture
def shielded() -> GameConfig:
    return load_variant("shielded")


@pytest.fixture
def classic() -> GameConfig:
    return load_variant("classic")


@pytest.fixture
def calm(shielded) -> GameConfig:
    """Shielded rules with no black hole pull and no timed meteors or pickups."""
    return shielded.with_overrides(
        physics={"base_blackhole_strength": 0.0, "blackhole_strength_rate": 0.0},
        asteroids={"min_interval_ms": 1e9, "max_interval_ms": 1e9},
        shield={"spawn_interval_ms": 1e9},
    )


@pytest.fixture
def world(shielded) -> World:
    return World.create(shielded, Canvas())


@pytest.fixture
def make_session():
    """Factory for ready-to-play sessions backed by an in-memory high score."""

    def _make(config: GameConfig, seed: int = 1234, best: float = 0.0, ready: bool = True) -> GameSession:
        session = GameSession(
            config,
            board=HighScoreBoard(MemoryHighScoreStore(best)),
            rng=random.Random(seed),
            fx_rng=random.Random(seed + 1),
            event_bus=EventBus(),
        )
        if ready:
            session.ready()
        return session

    return _make


def start(session: GameSession) -> None:
    """Tap a direction key so the session starts running."""
    session.press(Action.LEFT)
    session.release(Action.LEFT)


def run_frames(session: GameSession, frames: int, delta_ms: float = FRAME_MS) -> None:
    for _ in range(frames):
        session.tick(delta_ms)
