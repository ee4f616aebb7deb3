"""Difficulty curves, player integration and entity motion."""

import random

import pytest

from blackhole.config.variants import PlatformConfig
from blackhole.game import physics
from blackhole.game.entities import Asteroid, Platform, Star
from blackhole.game.world import Action


class TestCurves:
    def test_platform_height_thins_linearly_to_floor(self, shielded):
        pc = shielded.platforms
        assert physics.platform_height(0, pc) == pytest.approx(10.0)
        assert physics.platform_height(15, pc) == pytest.approx(6.5)
        assert physics.platform_height(30, pc) == pytest.approx(3.0)
        assert physics.platform_height(500, pc) == pytest.approx(3.0)

    def test_platform_height_is_bounded_and_monotonic(self, classic):
        pc = classic.platforms
        floor = pc.base_height - pc.max_thinning
        previous = pc.base_height
        for step in range(0, 1200):
            height = physics.platform_height(step / 10, pc)
            assert floor <= height <= pc.base_height
            assert height <= previous
            previous = height

    def test_negative_elapsed_clamps_to_base_height(self, shielded):
        assert physics.platform_height(-5, shielded.platforms) == pytest.approx(10.0)

    def test_zero_thinning_duration_uses_floor(self):
        pc = PlatformConfig(thinning_duration=0)
        assert physics.platform_height(0, pc) == pytest.approx(3.0)

    def test_difficulty_rates(self, shielded, classic):
        assert physics.gravity_at(10, shielded.physics) == pytest.approx(0.51)
        assert physics.gravity_at(10, classic.physics) == pytest.approx(0.8)
        assert physics.blackhole_strength_at(2, shielded.physics) == pytest.approx(250000)
        assert physics.fall_speed_at(20, classic.platforms) == pytest.approx(4.0)

    def test_frame_scale(self, shielded, classic):
        assert physics.frame_scale(0.05, classic) == 1.0
        assert physics.frame_scale(0.05, shielded) == pytest.approx(3.0)
        assert physics.frame_scale(1 / 60, shielded) == pytest.approx(1.0)


class TestPull:
    def test_pull_points_at_hole(self, world, shielded):
        world.player.x = 100
        world.player.y = 100
        fx, fy = physics.blackhole_pull(world, 200000, shielded.physics)
        assert fx > 0
        assert fy > 0

    def test_pull_distance_is_floored(self, world, shielded):
        hole = world.blackhole
        world.player.x = hole.x - world.player.width / 2
        world.player.y = hole.y - 10 - world.player.height / 2

        fx, fy = physics.blackhole_pull(world, 200000, shielded.physics)
        # Direction is normalised by the floored distance too
        assert fx == pytest.approx(0.0)
        assert fy == pytest.approx((10 / 25) * 200000 / 625)

    def test_floor_applies_to_both_components(self, world, shielded):
        hole = world.blackhole
        world.player.x = hole.x - 6 - world.player.width / 2
        world.player.y = hole.y - 8 - world.player.height / 2

        fx, fy = physics.blackhole_pull(world, 200000, shielded.physics)
        assert fx == pytest.approx((6 / 25) * 200000 / 625)
        assert fy == pytest.approx((8 / 25) * 200000 / 625)

    def test_pull_outside_floor_is_inverse_square(self, world, shielded):
        hole = world.blackhole
        world.player.x = hole.x - world.player.width / 2
        world.player.y = hole.y - 100 - world.player.height / 2

        fx, fy = physics.blackhole_pull(world, 200000, shielded.physics)
        assert fx == pytest.approx(0.0)
        assert fy == pytest.approx(200000 / 100 ** 2)


class TestPlayerPhysics:
    def test_left_wall_clamps_and_stops(self, world, shielded):
        world.player.x = -5
        world.player.vx = -3
        physics.apply_player_physics(world, shielded, 0, 1.0, started=False)
        assert world.player.x == 0
        assert world.player.vx == 0

    def test_right_wall_clamps_and_stops(self, world, shielded):
        world.player.x = world.canvas.width
        world.held.add(Action.RIGHT)
        physics.apply_player_physics(world, shielded, 0, 1.0, started=False)
        assert world.player.x == world.canvas.width - world.player.width
        assert world.player.vx == 0

    def test_damping_applies_after_integration(self, world, shielded):
        world.player.x = 100
        world.player.vx = 10
        physics.apply_player_physics(world, shielded, 0, 1.0, started=False)
        assert world.player.x == pytest.approx(110)
        assert world.player.vx == pytest.approx(9.8)

    def test_no_gravity_before_start(self, world, shielded):
        y = world.player.y
        physics.apply_player_physics(world, shielded, 0, 1.0, started=False)
        assert world.player.y == y
        assert world.player.vy == 0

    def test_gravity_and_pull_scale_with_frame_time(self, world, shielded):
        physics.apply_player_physics(world, shielded, 0, 1.0, started=True)
        one_frame = world.player.vy / shielded.physics.friction_y

        world.player.vy = 0
        world.player.vx = 0
        physics.apply_player_physics(world, shielded, 0, 2.0, started=True)
        two_frames = world.player.vy / shielded.physics.friction_y

        assert one_frame > 0.5
        assert two_frames == pytest.approx(one_frame * 2, rel=0.05)

    def test_steering_is_not_scaled(self, world, shielded):
        world.player.x = 100
        world.held.add(Action.LEFT)
        physics.apply_player_physics(world, shielded, 0, 3.0, started=False)
        assert world.player.vx == pytest.approx(-0.3 * 0.98)


class TestEntityMotion:
    def test_platforms_fall_and_prune(self, world, shielded):
        kept = Platform(x=0, y=640, width=70, height=10, hit_timer=4)
        dropped = Platform(x=0, y=649, width=70, height=10)
        world.platforms.extend([kept, dropped])

        physics.advance_platforms(world, shielded, 0, 1.0)

        assert world.platforms == [kept]
        assert kept.y == pytest.approx(643)
        assert kept.hit_timer == 3

    def test_hit_timer_stays_per_frame(self, world, shielded):
        platform = Platform(x=0, y=0, width=70, height=10, hit_timer=4)
        world.platforms.append(platform)
        physics.advance_platforms(world, shielded, 0, 3.0)
        assert platform.y == pytest.approx(9)
        assert platform.hit_timer == 3

    def test_asteroids_move_and_prune(self, world):
        inside = Asteroid(x=100, y=100, radius=10, vx=1, vy=4)
        gone_left = Asteroid(x=-9, y=100, radius=10, vx=-2, vy=4)
        gone_below = Asteroid(x=100, y=608, radius=10, vx=0, vy=4)
        world.asteroids.extend([inside, gone_left, gone_below])

        physics.advance_asteroids(world, 1.0)

        assert world.asteroids == [inside]
        assert (inside.x, inside.y) == (101, 104)

    def test_stars_wrap_to_top(self, world):
        star = Star(x=50, y=599.9, radius=1, speed=0.3)
        world.stars.append(star)
        physics.advance_stars(world, random.Random(3))
        assert star.y == 0
        assert 0 <= star.x <= world.canvas.width

    def test_shield_hit_timer_decays_per_frame(self, world):
        world.player.shield_hit_timer = 2
        physics.decay_player_effects(world)
        physics.decay_player_effects(world)
        physics.decay_player_effects(world)
        assert world.player.shield_hit_timer == 0
