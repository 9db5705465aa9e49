"""Tests for snake chains, gems and spawning factories."""

import math
import random

import pytest

from ouroboros.config import EngineConfig
from ouroboros.enemies import Snake
from ouroboros.gems import Gem, gem_color, GEM_HOMING_SPEED
from ouroboros.player import Player
from ouroboros.render import NEON_GREEN, NEON_BLUE, NEON_RED
from ouroboros.spawner import (
    spawn_interval, spawn_point, create_regular_snake, create_boss_snake, BOSS_RADIUS
)


def _heads(snake):
    return [seg for seg in snake.segments if seg.is_head]


class TestSnakeShape:

    def test_only_first_segment_is_head(self):
        snake = Snake(0, 0, 5, 10, 1, 5, 7)
        assert _heads(snake) == [snake.segments[0]]

    def test_segments_trail_behind_head(self):
        snake = Snake(100, 50, 3, 10, 1, 5, 7)
        assert [seg.x for seg in snake.segments] == [100, 80, 60]

    def test_from_segments_promotes_first(self):
        original = Snake(0, 0, 4, 10, 2.5, 8, 7, is_boss=True)
        tail = original.segments[2:]
        fragment = Snake.from_segments(tail, original)
        assert _heads(fragment) == [tail[0]]
        assert fragment.speed == 2.5
        assert fragment.damage == 8
        assert fragment.is_boss

    def test_empty_snake_is_dead(self):
        snake = Snake(0, 0, 1, 10, 1, 5, 7)
        snake.segments = []
        assert snake.is_dead
        assert snake.head is None


class TestSnakeUpdate:

    def test_head_seeks_player(self):
        player = Player()
        player.x = 500
        snake = Snake(0, 0, 1, 10, 2, 5, 7)
        snake.update(player, enemy_speed_multiplier=0.5)
        assert snake.segments[0].x == pytest.approx(1.0)

    def test_follower_pulled_half_the_excess(self):
        player = Player()
        player.x = 10000
        snake = Snake(0, 0, 2, 10, 0, 5, 7)
        snake.segments[1].x = -50
        snake.update(player)
        # target gap is 12 + 12 - 2 = 22, excess 28, half of it applied
        assert snake.segments[1].x == pytest.approx(-36)

    def test_simultaneous_contacts_apply_once(self):
        player = Player()
        snake = Snake(0, 0, 3, 10, 0, 10, 7)
        dealt = snake.update(player, now_ms=0)
        assert dealt == 10
        assert player.hp == 90

    def test_body_contact_deals_half(self):
        player = Player()
        player.x = -20
        snake = Snake(40, 0, 4, 10, 0, 10, 7)
        # segments at 40, 20, 0, -20: the head is out of reach
        dealt = snake.update(player, now_ms=0)
        assert dealt == 5


class TestGem:

    def test_color_bands(self):
        assert gem_color(1) == NEON_GREEN
        assert gem_color(5) == NEON_BLUE
        assert gem_color(20) == NEON_RED

    def test_idle_until_inside_pickup_radius(self):
        player = Player()
        gem = Gem(200, 0, 1)
        assert not gem.update(player)
        assert not gem.collected
        assert gem.x == 200

    def test_homes_then_consumed(self):
        player = Player()
        gem = Gem(50, 0, 5)
        assert not gem.update(player)
        assert gem.collected
        assert not gem.update(player)
        assert gem.x == pytest.approx(50 - GEM_HOMING_SPEED)

        for _ in range(10):
            if gem.update(player, exp_multiplier=2.0):
                break
        assert player.exp == 10


class TestSpawner:

    def test_interval_shrinks_and_floors(self):
        config = EngineConfig()
        assert spawn_interval(0, config) == 120
        assert spawn_interval(100, config) == 70
        assert spawn_interval(10000, config) == 30

    def test_spawn_point_outside_viewport(self):
        player = Player()
        x, y = spawn_point(random.Random(3), player, (1280, 720), 100)
        assert math.hypot(x, y) == pytest.approx(math.hypot(1280, 720) / 2 + 100)

    def test_regular_snake_scales_with_time(self):
        snake = create_regular_snake(random.Random(1), 0, 0, game_time=90, strength=1.5)
        assert len(snake.segments) == 6
        assert snake.segments[0].hp == pytest.approx((10 + 45) * 1.5)
        assert snake.damage == pytest.approx((5 + 2) * 1.5)
        assert 1.5 <= snake.speed <= 2.5

    def test_regular_snake_length_capped(self):
        snake = create_regular_snake(random.Random(1), 0, 0, game_time=100000)
        assert len(snake.segments) == EngineConfig().max_snake_length

    def test_boss_grows_with_index(self):
        first = create_boss_snake(random.Random(1), 0, 0, game_time=60, boss_index=0)
        third = create_boss_snake(random.Random(1), 0, 0, game_time=60, boss_index=2)
        assert first.is_boss
        assert len(first.segments) == 12
        assert len(third.segments) == 16
        assert first.segments[0].hp == pytest.approx(280 + 540)
        assert third.segments[0].hp == pytest.approx(280 + 540 + 360)
        assert first.segments[0].radius == BOSS_RADIUS
