"""Shared fixtures: a recording surface, a fixed RNG and engine builders."""

import random

import pytest

from ouroboros.engine import Engine
from ouroboros.enemies import Snake


class RecordingSurface:
    """Stands in for GameRenderer and records every draw call."""

    def __init__(self, width: int = 128, game_height: int = 36):
        self.width = width
        self.game_height = game_height
        self.height = game_height + 3
        self.calls = []

    def begin_frame(self):
        self.calls.clear()

    def put(self, x, y, char, fg_color=7):
        self.calls.append(('put', x, y, char, fg_color))

    def put_string(self, x, y, text, fg_color=7):
        self.calls.append(('put_string', x, y, text, fg_color))

    def put_braille_pixel(self, px, py, color=255):
        self.calls.append(('braille', px, py, color))


class FixedRandom(random.Random):
    """Deterministic gameplay RNG. `random()` always returns `value`."""

    def __init__(self, value: float = 0.99):
        super().__init__(1234)
        self.value = value

    def random(self):
        return self.value


def make_engine(surface=None, rng_value: float = 0.99, **kwargs) -> Engine:
    """A playing engine with no crits (rng 0.99 never rolls under 10%)."""
    engine = Engine(surface=surface, rng=FixedRandom(rng_value), **kwargs)
    engine.start()
    return engine


def place_snake(engine, x: float, y: float, length: int = 3, hp: float = 10,
                speed: float = 0.0, damage: float = 5.0) -> Snake:
    """Add a stationary snake to the engine."""
    snake = Snake(x, y, length, hp, speed, damage, 7)
    engine.snakes.append(snake)
    return snake


@pytest.fixture
def engine():
    return make_engine()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def drawn_engine(surface):
    return make_engine(surface=surface)
