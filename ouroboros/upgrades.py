"""
Upgrade System
===============
Level-up choice building and application.

Held weapons below max level are offered as upgrades; weapons not yet
held (and whose `requires` passes) are offered as new. Any empty slot
is filled with a flat heal.
"""

from dataclasses import dataclass
from typing import List, Optional, Type

from .config import LEVEL_UP_CHOICES, RECOVER_HEAL_RATIO
from .weapons import ALL_WEAPON_TYPES, MagicWand, Weapon


UPGRADE_POOL: List[Type[Weapon]] = list(ALL_WEAPON_TYPES)

KIND_UPGRADE = 'upgrade'
KIND_NEW = 'new'
KIND_RECOVER = 'recover'


# =============================================================================
# CHOICES
# =============================================================================

@dataclass(frozen=True)
class UpgradeChoice:
    kind: str
    weapon: Optional[Weapon] = None
    weapon_cls: Optional[Type[Weapon]] = None
    heal_ratio: float = 0.0
    title: str = ''
    description: str = ''


RECOVER = UpgradeChoice(
    kind=KIND_RECOVER,
    heal_ratio=RECOVER_HEAL_RATIO,
    title='Recover',
    description=f'Restore {int(RECOVER_HEAL_RATIO * 100)}% of max HP.',
)


def create_starting_weapon() -> Weapon:
    return MagicWand()


def _candidates(engine, pool) -> List[UpgradeChoice]:
    candidates = []
    for weapon_cls in pool:
        held = engine.get_weapon(weapon_cls.id)
        if held is not None:
            if held.level < held.max_level:
                candidates.append(UpgradeChoice(
                    kind=KIND_UPGRADE, weapon=held, weapon_cls=weapon_cls,
                    title=f'{held.name} Lv {held.level + 1}',
                    description=held.description,
                ))
            continue

        if weapon_cls.requires(engine):
            preview = weapon_cls()
            candidates.append(UpgradeChoice(
                kind=KIND_NEW, weapon_cls=weapon_cls,
                title=f'New: {preview.name}',
                description=preview.description,
            ))
    return candidates


def build_level_up_choices(engine, count: int = LEVEL_UP_CHOICES,
                           pool=None) -> List[UpgradeChoice]:
    """
    Build exactly `count` level-up choices.

    Candidates are drawn uniformly without replacement from the
    engine's gameplay RNG. A short pool is padded with RECOVER.
    """
    candidates = _candidates(engine, UPGRADE_POOL if pool is None else pool)

    choices = []
    while candidates and len(choices) < count:
        choices.append(candidates.pop(engine.rng.randrange(len(candidates))))

    while len(choices) < count:
        choices.append(RECOVER)
    return choices


def apply_choice(engine, choice: UpgradeChoice):
    """Apply one level-up choice to the engine's roster or player."""
    if choice.kind == KIND_UPGRADE and choice.weapon is not None:
        choice.weapon.level_up()
    elif choice.kind == KIND_NEW and choice.weapon_cls is not None:
        engine.add_weapon(choice.weapon_cls())
    elif choice.kind == KIND_RECOVER:
        player = engine.player
        player.heal(player.max_hp * choice.heal_ratio)
