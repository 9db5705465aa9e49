"""
Weapon System
==============
Every weapon kind the player can hold, plus the targeting helpers
they share.

Weapons act on their own: each one scans the world in `update`, routes
all damage through `engine.damage_segment`, and may react to combat
events through the `on_*` hooks. A weapon never edits segment hp itself.
"""

from dataclasses import dataclass
from typing import List, Optional
import math

from .components import Mode, SegmentDamaged, SegmentDestroyed, PlayerDamaged
from .config import MAX_WEAPON_LEVEL
from .vector import distance, normalize
from .render import (
    NEON_BLUE, NEON_PINK, NEON_PURPLE, NEON_GREEN, EMERALD, SKY,
    GRAY_MED, WHITE,
    put_world_char, put_world_text, plot_ring
)


# =============================================================================
# SHARED STATE TYPES
# =============================================================================

@dataclass
class SegmentRef:
    snake: object
    segment: object


@dataclass
class Projectile:
    x: float
    y: float
    vx: float
    vy: float
    life: int
    bounces_left: int = 0
    last_hit: Optional[object] = None


@dataclass
class Zone:
    """A damaging ground patch with its own tick cadence."""
    x: float
    y: float
    life: int
    tick: int = 0


@dataclass
class ScheduledLaunch:
    """A projectile launch due at a future game-clock time."""
    due_ms: float
    epoch: int = 0


# =============================================================================
# TARGETING
# =============================================================================

def find_nearest_segment(engine, x: float, y: float,
                         max_dist: float = math.inf,
                         heads_only: bool = False,
                         exclude=None) -> Optional[SegmentRef]:
    """Nearest live segment strictly closer than `max_dist`."""
    nearest = None
    best = max_dist
    for snake in engine.active_snakes:
        for segment in snake.segments:
            if segment is exclude:
                continue
            if heads_only and not segment.is_head:
                continue
            dist = distance(x, y, segment.x, segment.y)
            if dist < best:
                best = dist
                nearest = SegmentRef(snake, segment)
    return nearest


def segments_in_radius(engine, x: float, y: float, radius: float) -> List[SegmentRef]:
    """Snapshot of every segment overlapping a circle."""
    hits = []
    for snake in engine.active_snakes:
        for segment in list(snake.segments):
            if distance(x, y, segment.x, segment.y) <= radius + segment.radius:
                hits.append(SegmentRef(snake, segment))
    return hits


def first_segment_hit(engine, x: float, y: float, pad: float,
                      exclude=None) -> Optional[SegmentRef]:
    """First segment (in roster order) touching a point."""
    for snake in engine.active_snakes:
        for segment in snake.segments:
            if segment is exclude:
                continue
            if distance(x, y, segment.x, segment.y) < segment.radius + pad:
                return SegmentRef(snake, segment)
    return None


# =============================================================================
# WEAPON CONTRACT
# =============================================================================

class Weapon:
    """
    Common contract for every weapon kind.

    Holds only the fields every kind shares; each subclass owns its
    own projectiles, zones, timers and counters.
    """
    id = 'weapon'
    name = 'Weapon'
    tags = ()
    max_level = MAX_WEAPON_LEVEL

    def __init__(self):
        self.level = 1

    @property
    def description(self) -> str:
        return ''

    @classmethod
    def requires(cls, engine) -> bool:
        """Whether this kind may be offered as a new weapon."""
        return True

    def update(self, engine, ctx):
        pass

    def draw(self, surface, camera, engine):
        pass

    def level_up(self):
        """Gain a level. Does nothing at max level."""
        if self.level >= self.max_level:
            return
        self.level += 1
        self._grow()

    def _grow(self):
        """Per-level stat growth."""

    def on_segment_damaged(self, engine, event: SegmentDamaged):
        pass

    def on_segment_destroyed(self, engine, event: SegmentDestroyed):
        pass

    def on_player_damaged(self, engine, event: PlayerDamaged):
        pass


# =============================================================================
# DIRECT FIRE
# =============================================================================

class MagicWand(Weapon):
    """Homing bolts at the nearest segment, staggered for multi-shot levels."""
    id = 'magic-wand'
    name = 'Magic Wand'
    tags = ('offense', 'projectile')

    RANGE = 420
    SPEED = 8
    LIFETIME = 100
    STAGGER_MS = 120

    def __init__(self):
        super().__init__()
        self.cooldown = 60
        self.timer = 0
        self.damage = 10
        self.projectiles: List[Projectile] = []
        self.pending: List[ScheduledLaunch] = []

    @property
    def shots(self) -> int:
        return 1 + self.level // 3

    @property
    def description(self) -> str:
        return f'Fires {self.shots} projectile(s). Dmg: {self.damage}'

    def update(self, engine, ctx):
        self.timer -= 1
        if self.timer <= 0:
            self.timer = ctx.cooldown(self.cooldown)
            self.fire(engine, ctx)

        self._drain_launches(engine, ctx)
        self._advance(engine)

    def fire(self, engine, ctx):
        """Queue one launch per shot, STAGGER_MS apart."""
        if engine.mode is not Mode.PLAYING:
            return
        player = engine.player
        if find_nearest_segment(engine, player.x, player.y, self.RANGE) is None:
            return
        for i in range(self.shots):
            self.pending.append(ScheduledLaunch(
                ctx.now_ms + i * self.STAGGER_MS, engine.pause_epoch
            ))

    def _drain_launches(self, engine, ctx):
        # Anything queued before a pause never fires
        self.pending = [launch for launch in self.pending
                        if launch.epoch == engine.pause_epoch]
        due = [launch for launch in self.pending if launch.due_ms <= ctx.now_ms]
        if not due:
            return
        self.pending = [launch for launch in self.pending if launch.due_ms > ctx.now_ms]

        player = engine.player
        for _ in due:
            if engine.mode is not Mode.PLAYING:
                continue
            # Re-aim at launch time; the original target may be gone
            target = find_nearest_segment(engine, player.x, player.y, self.RANGE)
            if target is None:
                continue
            dx, dy = normalize(target.segment.x - player.x, target.segment.y - player.y)
            self.projectiles.append(Projectile(
                player.x, player.y, dx * self.SPEED, dy * self.SPEED, self.LIFETIME
            ))

    def _advance(self, engine):
        alive = []
        for proj in self.projectiles:
            proj.x += proj.vx
            proj.y += proj.vy
            proj.life -= 1

            hit = first_segment_hit(engine, proj.x, proj.y, 5)
            if hit is not None:
                engine.damage_segment(hit.snake, hit.segment, self.damage, self.id)
                continue
            if proj.life > 0:
                alive.append(proj)
        self.projectiles = alive

    def draw(self, surface, camera, engine):
        for proj in self.projectiles:
            put_world_char(surface, proj.x, proj.y, camera, '•', NEON_BLUE)

    def _grow(self):
        self.damage += 5
        self.cooldown = max(15, self.cooldown - 5)


class RicochetArc(Weapon):
    """A bolt that bounces to the next nearest segment after each hit."""
    id = 'ricochet-arc'
    name = 'Ricochet Arc'
    tags = ('offense', 'projectile')

    RANGE = 600
    BOUNCE_RANGE = 320
    SPEED = 9
    LIFETIME = 120

    def __init__(self):
        super().__init__()
        self.cooldown = 90
        self.timer = 0
        self.damage = 14
        self.projectiles: List[Projectile] = []

    @property
    def bounces(self) -> int:
        return 1 + self.level // 2

    @property
    def description(self) -> str:
        return f'Arc shot with {self.bounces} bounce(s). Dmg: {self.damage}'

    def update(self, engine, ctx):
        self.timer -= 1
        if self.timer <= 0:
            self.timer = ctx.cooldown(self.cooldown)
            self.fire(engine)

        alive = []
        for proj in self.projectiles:
            proj.x += proj.vx
            proj.y += proj.vy
            proj.life -= 1

            hit = first_segment_hit(engine, proj.x, proj.y, 5, exclude=proj.last_hit)
            if hit is None:
                if proj.life > 0:
                    alive.append(proj)
                continue

            engine.damage_segment(hit.snake, hit.segment, self.damage, self.id)
            if proj.bounces_left > 0:
                nxt = find_nearest_segment(engine, hit.segment.x, hit.segment.y,
                                           self.BOUNCE_RANGE, exclude=hit.segment)
                if nxt is not None:
                    dx, dy = normalize(nxt.segment.x - proj.x, nxt.segment.y - proj.y)
                    proj.vx = dx * self.SPEED
                    proj.vy = dy * self.SPEED
                    proj.bounces_left -= 1
                    proj.last_hit = hit.segment
                    alive.append(proj)
        self.projectiles = alive

    def fire(self, engine):
        player = engine.player
        target = find_nearest_segment(engine, player.x, player.y, self.RANGE)
        if target is None:
            return
        dx, dy = normalize(target.segment.x - player.x, target.segment.y - player.y)
        self.projectiles.append(Projectile(
            player.x, player.y, dx * self.SPEED, dy * self.SPEED, self.LIFETIME,
            bounces_left=self.bounces,
        ))

    def draw(self, surface, camera, engine):
        for proj in self.projectiles:
            put_world_char(surface, proj.x, proj.y, camera, '◦', NEON_PURPLE)

    def _grow(self):
        self.damage += 4
        self.cooldown = max(40, self.cooldown - 5)


class Headhunter(Weapon):
    """Snipes the nearest head. A kill detonates around the corpse."""
    id = 'headhunter'
    name = 'Headhunter'
    tags = ('offense', 'burst')

    RANGE = 1000

    def __init__(self):
        super().__init__()
        self.cooldown = 120
        self.timer = 0
        self.damage = 18
        self.explosion_radius = 70
        self.explosion_damage = 12

    @property
    def description(self) -> str:
        return (f'Auto-snipes snake heads. Dmg: {self.damage}. '
                f'Head kill explodes for {self.explosion_damage}.')

    def update(self, engine, ctx):
        self.timer -= 1
        if self.timer > 0:
            return
        self.timer = ctx.cooldown(self.cooldown)

        player = engine.player
        target = find_nearest_segment(engine, player.x, player.y, self.RANGE, heads_only=True)
        if target is None:
            return

        was_alive = target.segment.hp > 0
        engine.damage_segment(target.snake, target.segment, self.damage, self.id)
        if not (was_alive and target.segment.hp <= 0):
            return

        for ref in segments_in_radius(engine, target.segment.x, target.segment.y,
                                      self.explosion_radius):
            if ref.segment is not target.segment:
                engine.damage_segment(ref.snake, ref.segment, self.explosion_damage, self.id)

    def _grow(self):
        self.damage += 7
        self.cooldown = max(50, self.cooldown - 8)
        self.explosion_damage += 4


# =============================================================================
# AREA AND ORBIT
# =============================================================================

class Garlic(Weapon):
    """Damages everything near the player each cycle."""
    id = 'garlic'
    name = 'Garlic'
    tags = ('offense', 'aoe')

    def __init__(self):
        super().__init__()
        self.cooldown = 30
        self.timer = 0
        self.damage = 5
        self.radius = 70

    @property
    def description(self) -> str:
        return f'AoE aura. Radius: {self.radius}, Dmg: {self.damage}'

    def update(self, engine, ctx):
        self.timer -= 1
        if self.timer > 0:
            return
        self.timer = ctx.cooldown(self.cooldown)
        player = engine.player
        for ref in segments_in_radius(engine, player.x, player.y, self.radius):
            engine.damage_segment(ref.snake, ref.segment, self.damage, self.id)

    def draw(self, surface, camera, engine):
        pulse = (engine.frame // 9) % 2 == 0
        plot_ring(surface, engine.player.x, engine.player.y, self.radius, camera,
                  WHITE if pulse else GRAY_MED)

    def _grow(self):
        self.damage += 3
        self.radius += 15
        self.cooldown = max(10, self.cooldown - 2)


class Orbitals(Weapon):
    """
    Satellites circling the player.

    Each satellite keeps its own last-hit time on every segment, so two
    satellites can both land on the same segment inside one hit gap.
    """
    id = 'orbitals'
    name = 'Orbitals'
    tags = ('offense', 'orbit')

    SATELLITE_RADIUS = 12
    BASE_HIT_GAP_MS = 400

    def __init__(self):
        super().__init__()
        self.damage = 12
        self.distance = 90
        self.speed = 0.04
        self.angle = 0.0

    @property
    def count(self) -> int:
        return 1 + self.level // 2

    @property
    def description(self) -> str:
        return f'{self.count} orbiting projectiles. Dmg: {self.damage}'

    def satellite_positions(self, player):
        positions = []
        for i in range(self.count):
            angle = self.angle + i * math.pi * 2 / self.count
            positions.append((i,
                              player.x + math.cos(angle) * self.distance,
                              player.y + math.sin(angle) * self.distance))
        return positions

    def update(self, engine, ctx):
        self.angle += self.speed * ctx.attack_speed / ctx.attack_cooldown_multiplier
        hit_gap = self.BASE_HIT_GAP_MS * ctx.attack_cooldown_multiplier / ctx.attack_speed

        for index, ox, oy in self.satellite_positions(engine.player):
            for ref in segments_in_radius(engine, ox, oy, self.SATELLITE_RADIUS):
                last = ref.segment.last_orbit_hit.get(index)
                if last is not None and ctx.now_ms - last <= hit_gap:
                    continue
                ref.segment.last_orbit_hit[index] = ctx.now_ms
                engine.damage_segment(ref.snake, ref.segment, self.damage, self.id)

    def draw(self, surface, camera, engine):
        for _, ox, oy in self.satellite_positions(engine.player):
            put_world_char(surface, ox, oy, camera, '*', NEON_PINK)

    def _grow(self):
        self.damage += 6
        self.speed += 0.005


class OrbitalResonance(Weapon):
    """Stacks on Orbitals hits and releases a nova at the threshold."""
    id = 'orbital-resonance'
    name = 'Orbital Resonance'
    tags = ('offense', 'synergy')

    def __init__(self):
        super().__init__()
        self.stacks = 0

    @classmethod
    def requires(cls, engine) -> bool:
        return engine.has_weapon(Orbitals.id)

    @property
    def threshold(self) -> int:
        return max(3, 6 - (self.level - 1) // 3)

    @property
    def nova_radius(self) -> int:
        return 120 + (self.level - 1) * 12

    @property
    def nova_damage(self) -> int:
        return 16 + (self.level - 1) * 5

    @property
    def description(self) -> str:
        return (f'Orbital hits stack resonance. {self.threshold} stacks = '
                f'nova ({self.nova_damage} dmg).')

    def on_segment_damaged(self, engine, event):
        if event.source_id != Orbitals.id:
            return
        self.stacks += 1
        if self.stacks < self.threshold:
            return
        self.stacks = 0
        player = engine.player
        for ref in segments_in_radius(engine, player.x, player.y, self.nova_radius):
            engine.damage_segment(ref.snake, ref.segment, self.nova_damage, self.id)

    def draw(self, surface, camera, engine):
        if self.stacks <= 0:
            return
        player = engine.player
        put_world_text(surface, player.x + 40, player.y - 30, camera,
                       f'Res {self.stacks}/{self.threshold}', NEON_PINK)


# =============================================================================
# CHAIN REACTIONS AND ZONES
# =============================================================================

class TailFuse(Weapon):
    """A dying body segment burns the next few segments down the chain."""
    id = 'tail-fuse'
    name = 'Tail Fuse'
    tags = ('offense', 'chain')

    @property
    def chain_damage(self) -> int:
        return 10 + (self.level - 1) * 5

    @property
    def chain_count(self) -> int:
        return 1 + (self.level - 1) // 2

    @property
    def description(self) -> str:
        return (f'Body segment death chains {self.chain_count} segment(s). '
                f'Dmg: {self.chain_damage}.')

    def on_segment_destroyed(self, engine, event):
        if event.segment.is_head:
            return
        segments = event.snake.segments
        if event.segment not in segments:
            return
        index = segments.index(event.segment)
        for i in range(1, self.chain_count + 1):
            # Re-read each step: a chained kill splits the chain behind it
            segments = event.snake.segments
            if index + i >= len(segments):
                break
            engine.damage_segment(event.snake, segments[index + i],
                                  self.chain_damage, self.id)


class BloodTrail(Weapon):
    """Moving leaves toxic pools behind the player."""
    id = 'blood-trail'
    name = 'Blood Trail'
    tags = ('offense', 'zone')

    MAX_POOLS = 24
    TICK_INTERVAL = 20

    def __init__(self):
        super().__init__()
        self.spawn_interval = 16
        self.spawn_timer = 0
        self.last_x = 0.0
        self.last_y = 0.0
        self.pools: List[Zone] = []

    @property
    def pool_life(self) -> int:
        return 120 + (self.level - 1) * 10

    @property
    def pool_radius(self) -> int:
        return 28 + (self.level - 1) * 3

    @property
    def tick_damage(self) -> int:
        return 4 + (self.level - 1)

    @property
    def description(self) -> str:
        return f'Moving leaves toxic pools. Radius: {self.pool_radius}, Dmg: {self.tick_damage}.'

    def update(self, engine, ctx):
        player = engine.player
        moved = distance(self.last_x, self.last_y, player.x, player.y) > 1
        self.last_x = player.x
        self.last_y = player.y

        self.spawn_timer -= 1
        if moved and self.spawn_timer <= 0:
            self.spawn_timer = ctx.cooldown(self.spawn_interval)
            self.pools.append(Zone(player.x, player.y, self.pool_life))
            if len(self.pools) > self.MAX_POOLS:
                del self.pools[0]

        tick_reset = ctx.cooldown(self.TICK_INTERVAL)
        for pool in list(self.pools):
            pool.life -= 1
            pool.tick -= 1
            if pool.tick <= 0:
                pool.tick = tick_reset
                for ref in segments_in_radius(engine, pool.x, pool.y, self.pool_radius):
                    engine.damage_segment(ref.snake, ref.segment, self.tick_damage, self.id)
        self.pools = [pool for pool in self.pools if pool.life > 0]

    def draw(self, surface, camera, engine):
        for pool in self.pools:
            plot_ring(surface, pool.x, pool.y, self.pool_radius, camera, NEON_GREEN)

    def _grow(self):
        self.spawn_interval = max(8, self.spawn_interval - 1)


class CorpseBloom(Weapon):
    """Every destroyed segment sprouts a thorn patch."""
    id = 'corpse-bloom'
    name = 'Corpse Bloom'
    tags = ('offense', 'zone')

    MAX_ZONES = 6
    TICK_INTERVAL = 15

    def __init__(self):
        super().__init__()
        self.zones: List[Zone] = []

    @property
    def zone_life(self) -> int:
        return 180 + (self.level - 1) * 20

    @property
    def zone_radius(self) -> int:
        return 32 + (self.level - 1) * 3

    @property
    def zone_damage(self) -> int:
        return 3 + (self.level - 1)

    @property
    def description(self) -> str:
        return f'Killed segments sprout thorns. Radius: {self.zone_radius}, Dmg: {self.zone_damage}.'

    def update(self, engine, ctx):
        tick_reset = ctx.cooldown(self.TICK_INTERVAL)
        # Kills inside this loop sprout new zones, so walk a copy
        for zone in list(self.zones):
            zone.life -= 1
            zone.tick -= 1
            if zone.tick <= 0:
                zone.tick = tick_reset
                for ref in segments_in_radius(engine, zone.x, zone.y, self.zone_radius):
                    engine.damage_segment(ref.snake, ref.segment, self.zone_damage, self.id)
        self.zones = [zone for zone in self.zones if zone.life > 0]

    def on_segment_destroyed(self, engine, event):
        self.zones.append(Zone(event.segment.x, event.segment.y, self.zone_life))
        if len(self.zones) > self.MAX_ZONES:
            del self.zones[0]

    def draw(self, surface, camera, engine):
        for zone in self.zones:
            plot_ring(surface, zone.x, zone.y, self.zone_radius, camera, EMERALD)


# =============================================================================
# UTILITY AND REACTIVE
# =============================================================================

class MagnetPulse(Weapon):
    """Vacuums nearby gems and pulses damage on its own cooldown."""
    id = 'magnet-pulse'
    name = 'Magnet Pulse'
    tags = ('utility', 'offense')

    PULSE_FX_FRAMES = 20

    def __init__(self):
        super().__init__()
        self.cooldown = 300
        self.timer = 0
        self.pulse_fx = 0

    @property
    def pull_radius(self) -> int:
        return 140 + (self.level - 1) * 20

    @property
    def pulse_radius(self) -> int:
        return 110 + (self.level - 1) * 10

    @property
    def pulse_damage(self) -> int:
        return 10 + (self.level - 1) * 4

    @property
    def description(self) -> str:
        return f'Periodically vacuums gems and pulses {self.pulse_damage} dmg.'

    def update(self, engine, ctx):
        self.timer -= 1
        if self.timer <= 0:
            self.timer = ctx.cooldown(self.cooldown)
            self.pulse_fx = self.PULSE_FX_FRAMES
            player = engine.player

            for gem in engine.gems:
                if distance(gem.x, gem.y, player.x, player.y) <= self.pull_radius:
                    gem.collected = True

            for ref in segments_in_radius(engine, player.x, player.y, self.pulse_radius):
                engine.damage_segment(ref.snake, ref.segment, self.pulse_damage, self.id)

        if self.pulse_fx > 0:
            self.pulse_fx -= 1

    def draw(self, surface, camera, engine):
        if self.pulse_fx <= 0:
            return
        t = self.pulse_fx / self.PULSE_FX_FRAMES
        plot_ring(surface, engine.player.x, engine.player.y,
                  self.pulse_radius * (1 - t * 0.6), camera, SKY)

    def _grow(self):
        self.cooldown = max(160, self.cooldown - 20)


class EmergencyShield(Weapon):
    """Taking a hit heals and grants a short extra invulnerability."""
    id = 'emergency-shield'
    name = 'Emergency Shield'
    tags = ('defense', 'reactive')

    def __init__(self):
        super().__init__()
        self.last_trigger = -math.inf

    @property
    def cooldown_ms(self) -> int:
        return max(8000, 18000 - (self.level - 1) * 1000)

    @property
    def heal_amount(self) -> int:
        return 10 + (self.level - 1) * 6

    @property
    def extra_invuln_ms(self) -> int:
        return 300 + (self.level - 1) * 80

    @property
    def description(self) -> str:
        return (f'On hit: heal {self.heal_amount} + {self.extra_invuln_ms}ms shield '
                f'({round(self.cooldown_ms / 1000)}s CD).')

    def on_player_damaged(self, engine, event):
        now = engine.now_ms
        if now - self.last_trigger < self.cooldown_ms:
            return
        self.last_trigger = now
        engine.player.heal(self.heal_amount)
        engine.player.extend_invulnerability(now + self.extra_invuln_ms)

    def draw(self, surface, camera, engine):
        player = engine.player
        if engine.now_ms < player.extra_invuln_until:
            plot_ring(surface, player.x, player.y, player.radius + 8, camera, SKY)


class TimeDilation(Weapon):
    """Taking a hit slows every enemy and speeds up every weapon for a moment."""
    id = 'time-dilation'
    name = 'Time Dilation'
    tags = ('control', 'reactive')

    COOLDOWN_MS = 14000
    ATTACK_COOLDOWN_MUL = 0.75

    def __init__(self):
        super().__init__()
        self.last_trigger = -math.inf

    @property
    def duration_ms(self) -> int:
        return 1200 + (self.level - 1) * 250

    @property
    def enemy_speed_mul(self) -> float:
        return max(0.45, 0.65 - (self.level - 1) * 0.03)

    @property
    def description(self) -> str:
        return (f'On hit: {self.duration_ms / 1000:.1f}s slow-time '
                f'(enemy x{self.enemy_speed_mul:.2f}).')

    def on_player_damaged(self, engine, event):
        now = engine.now_ms
        if now - self.last_trigger < self.COOLDOWN_MS:
            return
        self.last_trigger = now
        engine.activate_time_dilation(self.duration_ms, self.enemy_speed_mul,
                                      self.ATTACK_COOLDOWN_MUL)

    def draw(self, surface, camera, engine):
        if engine.now_ms > engine.time_dilation_until:
            return
        player = engine.player
        plot_ring(surface, player.x, player.y, player.radius + 20, camera, SKY)


class GreedPact(Weapon):
    """More exp from gems, tougher enemies. Read by the engine, no update."""
    id = 'greed-pact'
    name = 'Greed Pact'
    tags = ('economy', 'risk')

    @property
    def exp_multiplier(self) -> float:
        return 1 + self.level * 0.12

    @property
    def enemy_multiplier(self) -> float:
        return 1 + self.level * 0.08

    @property
    def description(self) -> str:
        return (f'EXP x{self.exp_multiplier:.2f} but enemies scale '
                f'x{self.enemy_multiplier:.2f}.')


# =============================================================================
# REGISTRY
# =============================================================================

ALL_WEAPON_TYPES = [
    MagicWand,
    Garlic,
    Orbitals,
    Headhunter,
    TailFuse,
    BloodTrail,
    MagnetPulse,
    RicochetArc,
    OrbitalResonance,
    EmergencyShield,
    TimeDilation,
    GreedPact,
    CorpseBloom,
]

WEAPONS_BY_ID = {cls.id: cls for cls in ALL_WEAPON_TYPES}
