"""Landing, jump buffering and the hit tests."""

import pytest

from blackhole.game import collision
from blackhole.game.collision import HitResult
from blackhole.game.entities import Asteroid, Platform, ShieldPickup


@pytest.fixture
def ledge(world):
    platform = Platform(x=180, y=100, width=70, height=10)
    world.platforms.append(platform)
    return platform


def place_player(world, x, y, vy=0.0):
    world.player.x = x
    world.player.y = y
    world.player.vy = vy


class TestLanding:
    def test_falling_player_lands_on_top(self, world, shielded, ledge):
        place_player(world, 185, 75, vy=2)

        assert collision.check_platform_collision(world, shielded)
        assert world.player.y == ledge.y - world.player.height
        assert world.player.vy == 0
        assert world.player.can_jump
        assert world.timers.coyote == shielded.jump.coyote_frames
        assert ledge.hit_timer == shielded.platforms.hit_frames

    def test_fast_fall_does_not_tunnel_through_thin_platform(self, world, shielded, ledge):
        # Bottom edge already 25 px past the top, still above the platform's bottom
        place_player(world, 185, 95, vy=40)
        assert collision.check_platform_collision(world, shielded)
        assert world.player.bottom == ledge.y

    def test_rising_player_passes_through(self, world, shielded, ledge):
        place_player(world, 185, 75, vy=-5)
        assert not collision.check_platform_collision(world, shielded)
        assert world.player.y == 75

    def test_horizontal_miss(self, world, shielded, ledge):
        place_player(world, 250, 75, vy=2)
        assert not collision.check_platform_collision(world, shielded)

    def test_leaving_ground_keeps_jump_during_coyote(self, world, shielded):
        world.player.can_jump = True
        world.timers.coyote = 3
        collision.check_platform_collision(world, shielded)
        assert world.player.can_jump

        world.timers.coyote = 0
        collision.check_platform_collision(world, shielded)
        assert not world.player.can_jump

    def test_buffered_jump_fires_on_landing(self, world, shielded, ledge):
        place_player(world, 185, 75, vy=2)
        world.timers.buffer = 3

        collision.check_platform_collision(world, shielded)

        assert world.player.vy == world.player.jump_power
        assert not world.player.can_jump
        assert world.timers.coyote == 0
        assert world.timers.buffer == 0


class TestJumpPress:
    def test_ignored_before_start(self, world, shielded):
        world.player.can_jump = True
        assert not collision.press_jump(world, shielded, started=False)
        assert world.timers.buffer == 0
        assert world.player.vy == 0

    def test_grounded_jump_is_immediate(self, world, shielded):
        world.player.can_jump = True
        assert collision.press_jump(world, shielded, started=True)
        assert world.player.vy == -16

    def test_coyote_jump(self, world, shielded):
        world.timers.coyote = 3
        assert collision.press_jump(world, shielded, started=True)
        assert world.player.vy == -16

    def test_without_coyote_feature_press_only_buffers(self, classic, world):
        world.timers.coyote = 3
        assert not collision.press_jump(world, classic, started=True)
        assert world.timers.buffer == classic.jump.buffer_frames

    def test_airborne_press_arms_buffer(self, world, shielded):
        assert not collision.press_jump(world, shielded, started=True)
        assert world.timers.buffer == shielded.jump.buffer_frames


class TestHits:
    def _asteroid_on_player(self, world, radius=15.0):
        cx, cy = world.player.center
        asteroid = Asteroid(x=cx, y=cy, radius=radius, vx=0, vy=4)
        world.asteroids.append(asteroid)
        return asteroid

    def test_asteroid_without_shield_is_fatal(self, world, shielded):
        self._asteroid_on_player(world)
        assert collision.check_asteroid_collision(world, shielded) is HitResult.FATAL

    def test_distant_asteroid_misses(self, world, shielded):
        world.asteroids.append(Asteroid(x=10, y=500, radius=10, vx=0, vy=4))
        assert collision.check_asteroid_collision(world, shielded) is HitResult.MISS

    def test_shield_absorbs_exactly_one_asteroid(self, world, shielded):
        self._asteroid_on_player(world)
        self._asteroid_on_player(world)
        world.player.has_shield = True

        assert collision.check_asteroid_collision(world, shielded) is HitResult.SHIELDED
        assert len(world.asteroids) == 1
        assert not world.player.has_shield
        assert world.player.shield_hit_timer == shielded.shield.hit_frames

        assert collision.check_asteroid_collision(world, shielded) is HitResult.FATAL

    def test_blackhole_boundary(self, world):
        hole = world.blackhole
        half = world.player.width / 2

        world.player.x = hole.x - half
        world.player.y = hole.y - hole.radius - 1 - half
        assert not collision.check_blackhole(world)

        world.player.y = hole.y - hole.radius + 1 - half
        assert collision.check_blackhole(world)

    def test_shield_pickup(self, world):
        cx, cy = world.player.center
        world.shield = ShieldPickup(x=cx - 12.5, y=cy - 12.5, radius=12.5)

        assert collision.check_shield_pickup(world)
        assert world.player.has_shield
        assert world.shield is None
        assert not collision.check_shield_pickup(world)
