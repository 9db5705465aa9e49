"""
Enemy Spawning
===============
Spawn cadence, spawn positions and the regular / boss snake factories.
All randomness comes from the caller's RNG so spawns are reproducible.
"""

import math
from typing import Tuple

from .config import EngineConfig
from .enemies import Snake
from .render import NEON_PURPLE, NEON_PINK, NEON_ORANGE, EMERALD, BLOOD_RED


# =============================================================================
# PALETTE
# =============================================================================

SNAKE_COLORS = [NEON_PURPLE, NEON_PINK, NEON_ORANGE, EMERALD]
BOSS_COLOR = BLOOD_RED
BOSS_RADIUS = 18.0


# =============================================================================
# CADENCE
# =============================================================================

def spawn_interval(game_time: float, config: EngineConfig) -> float:
    """Ticks between regular spawns. Shrinks linearly, floored."""
    return max(config.spawn_interval_min,
               config.spawn_interval_start - game_time * config.spawn_interval_decay)


def spawn_point(rng, player, viewport: Tuple[float, float],
                padding: float) -> Tuple[float, float]:
    """Random point on a circle just outside the visible area."""
    angle = rng.random() * math.pi * 2
    dist = math.hypot(viewport[0], viewport[1]) / 2 + padding
    return (player.x + math.cos(angle) * dist,
            player.y + math.sin(angle) * dist)


# =============================================================================
# FACTORIES
# =============================================================================

def create_regular_snake(rng, x: float, y: float, game_time: float,
                         strength: float = 1.0,
                         config: EngineConfig = EngineConfig()) -> Snake:
    """
    A regular snake scaled by elapsed time and enemy strength.

    Length grows by one every 30s but stops at `config.max_snake_length`.
    This is a deliberate departure from unbounded growth: very long chains
    make the spring follow pass and every per-segment scan slow to a crawl
    in late game.
    """
    length = min(config.max_snake_length, 3 + int(game_time // 30))
    hp = (10 + game_time * 0.5) * strength
    speed = 1.5 + rng.random()
    damage = (5 + int(game_time // 60) * 2) * strength
    color = SNAKE_COLORS[rng.randrange(len(SNAKE_COLORS))]
    return Snake(x, y, length, hp, speed, damage, color)


def create_boss_snake(rng, x: float, y: float, game_time: float,
                      boss_index: int, strength: float = 1.0) -> Snake:
    """
    A boss snake. Each boss already spawned this session makes the
    next one longer and tougher.
    """
    length = 12 + min(16, boss_index * 2)
    hp = (280 + game_time * 9 + boss_index * 180) * strength
    speed = 1.9 + rng.random() * 0.5
    damage = (24 + int(game_time // 60) * 4 + boss_index * 5) * strength
    return Snake(x, y, length, hp, speed, damage, BOSS_COLOR,
                 radius=BOSS_RADIUS, is_boss=True)
