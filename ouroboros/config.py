"""
Game Configuration
===================
Balance constants and per-engine tunables.
"""

from dataclasses import dataclass


# =============================================================================
# TIMING
# =============================================================================

TARGET_FPS = 60
FRAME_TIME = 1.0 / TARGET_FPS
MAX_STEPS_PER_FRAME = 4


# =============================================================================
# ATTACK ECONOMY
# =============================================================================
# Every distinct weapon kind past the first slows all weapons down.

ATTACK_PENALTY_PER_KIND = 0.12
MIN_ATTACK_SPEED = 0.15
MIN_COOLDOWN_FRAMES = 3
MAX_WEAPON_LEVEL = 8
CRIT_CHANCE = 0.1
CRIT_MULTIPLIER = 2


# =============================================================================
# REWARDS
# =============================================================================

HEAD_GEM_EXP = 5
BODY_GEM_EXP = 1
RECOVER_HEAL_RATIO = 0.25
LEVEL_UP_CHOICES = 3


# =============================================================================
# TERMINAL PROJECTION
# =============================================================================
# One terminal cell covers this many world pixels. Cells are roughly
# twice as tall as they are wide.

CELL_WIDTH_PX = 10
CELL_HEIGHT_PX = 20
GRID_SPACING_PX = 100
MIN_WIDTH = 80
MIN_HEIGHT = 24


@dataclass(frozen=True)
class EngineConfig:
    """Immutable tunables for one engine instance."""

    # Viewport used when no surface is attached
    viewport_width: int = 1280
    viewport_height: int = 720

    # Regular spawns
    spawn_interval_start: float = 120.0     # ticks between spawns at t=0
    spawn_interval_min: float = 30.0
    spawn_interval_decay: float = 0.5       # ticks shaved off per second played
    spawn_padding: float = 100.0
    max_snake_length: int = 40

    # Bosses
    boss_spawn_interval: float = 60.0       # seconds
    boss_spawn_padding: float = 240.0

    # Combat
    crit_chance: float = CRIT_CHANCE
