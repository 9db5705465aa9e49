"""
Shared Data Types
==================
Plain dataclasses passed between the engine, weapons and the UI.
No behavior beyond small derived values.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple

from .config import MIN_COOLDOWN_FRAMES


class Mode(Enum):
    """Engine state machine modes."""
    MENU = auto()
    PLAYING = auto()
    LEVELUP = auto()
    GAMEOVER = auto()


# =============================================================================
# TICK CONTEXT
# =============================================================================

@dataclass(frozen=True)
class TickContext:
    """Engine-wide values computed once per tick and handed to every weapon."""
    frame: int = 0
    now_ms: float = 0.0
    attack_speed: float = 1.0
    attack_cooldown_multiplier: float = 1.0
    enemy_speed_multiplier: float = 1.0
    exp_multiplier: float = 1.0
    enemy_strength_multiplier: float = 1.0

    def cooldown(self, base_frames: float) -> int:
        """Effective cooldown in ticks after the attack-speed penalty and time dilation."""
        scaled = base_frames / self.attack_speed * self.attack_cooldown_multiplier
        return int(max(MIN_COOLDOWN_FRAMES, scaled) + 0.5)


# =============================================================================
# COMBAT EVENTS
# =============================================================================

@dataclass
class SegmentDamaged:
    """A segment took damage. `amount` includes any critical bonus."""
    snake: object
    segment: object
    amount: float
    source_id: Optional[str] = None


@dataclass
class SegmentDestroyed:
    """A segment's hp reached zero. Fired before the chain is split."""
    snake: object
    segment: object
    source_id: Optional[str] = None


@dataclass
class PlayerDamaged:
    """The player lost hp this tick."""
    amount: float


# =============================================================================
# UI SNAPSHOT
# =============================================================================

@dataclass(frozen=True)
class WeaponInfo:
    id: str
    name: str
    level: int
    max_level: int
    description: str


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of engine state for the HUD and menus."""
    mode: Mode
    game_time: float
    hp: float
    max_hp: float
    exp: float
    exp_to_next_level: int
    level: int
    attack_penalty: float
    weapons: Tuple[WeaponInfo, ...] = field(default_factory=tuple)
    enemy_count: int = 0
    boss_count: int = 0
    time_dilated: bool = False
