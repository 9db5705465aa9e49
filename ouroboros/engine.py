"""
Simulation Engine
==================
Owns the player, enemies, gems, effects and weapon roster, and runs the
fixed-step update that ties them together.

Tick order:
    time dilation expiry -> player -> game over / level up -> spawning
    -> weapons -> snakes -> player-damage events -> gems -> effects
    -> merge fragments

`damage_segment` is the only way segment hp changes. It fans combat
events out to the weapon roster and splits snakes when an interior
segment dies.
"""

import logging
import math
import random
from typing import Callable, List, Optional, Tuple

from .components import (
    Mode, TickContext, SegmentDamaged, SegmentDestroyed, PlayerDamaged,
    WeaponInfo, GameSnapshot
)
from .config import (
    EngineConfig, ATTACK_PENALTY_PER_KIND, MIN_ATTACK_SPEED, CRIT_MULTIPLIER,
    HEAD_GEM_EXP, BODY_GEM_EXP, CELL_WIDTH_PX, CELL_HEIGHT_PX, GRID_SPACING_PX
)
from .enemies import Snake
from .gems import Gem
from .particles import DamageNumber, spawn_hit_burst
from .player import Player
from .render import GRAY_DARKER
from .spawner import spawn_interval, spawn_point, create_regular_snake, create_boss_snake
from .upgrades import build_level_up_choices, apply_choice, create_starting_weapon
from .weapons import GreedPact

logger = logging.getLogger(__name__)


class Engine:
    """
    The simulation core.

    `surface` is any object with the GameRenderer drawing methods. With
    no surface attached the engine still simulates but `draw` and
    `restart` do nothing.
    """

    def __init__(self, surface=None,
                 on_level_up: Optional[Callable[[], None]] = None,
                 on_game_over: Optional[Callable[[], None]] = None,
                 config: Optional[EngineConfig] = None,
                 rng: Optional[random.Random] = None):
        self.surface = surface
        self.on_level_up = on_level_up
        self.on_game_over = on_game_over
        self.config = config or EngineConfig()
        # Gameplay rolls only; cosmetic effects use the module-level random
        self.rng = rng if rng is not None else random.Random()

        self.running = False
        self.mode = Mode.MENU
        # Bumped on every pause; queued launches from an older epoch are dropped
        self.pause_epoch = 0
        self.player = Player()
        self._reset_session()

    def _reset_session(self):
        self.player.reset()
        self.game_time = 0.0
        self.frame = 0
        self.intent: Tuple[float, float] = (0.0, 0.0)

        self.snakes: List[Snake] = []
        self._spawned_snakes: List[Snake] = []
        self.gems: List[Gem] = []
        self.particles = []
        self.damage_numbers = []
        self.weapons = [create_starting_weapon()]
        self.level_up_choices = []

        self.spawn_timer = 0
        self.next_boss_time = self.config.boss_spawn_interval
        self.boss_count = 0

        self.time_dilation_until = -math.inf
        self.time_dilation_enemy_speed_mul = 1.0
        self.time_dilation_attack_mul = 1.0

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self):
        """Mark the engine running and leave the menu for a fresh session."""
        self.running = True
        if self.mode is Mode.MENU:
            self._reset_session()
            self._set_mode(Mode.PLAYING)

    def stop(self):
        self.running = False

    def restart(self):
        """Reinitialise everything and resume play. Needs a surface."""
        if self.surface is None:
            return
        self._reset_session()
        self.running = True
        self._set_mode(Mode.PLAYING)

    def _set_mode(self, mode: Mode):
        if mode is self.mode:
            return
        logger.info('Mode %s -> %s at t=%.1fs', self.mode.name, mode.name, self.game_time)
        self.mode = mode

    def _enter_level_up(self):
        self.pause_epoch += 1
        self.level_up_choices = build_level_up_choices(self)
        logger.info('Player reached level %d', self.player.level)
        self._set_mode(Mode.LEVELUP)
        if self.on_level_up is not None:
            self.on_level_up()

    def _enter_game_over(self):
        if self.mode is Mode.GAMEOVER:
            return
        self.pause_epoch += 1
        self._set_mode(Mode.GAMEOVER)
        if self.on_game_over is not None:
            self.on_game_over()

    def choose_upgrade(self, choice):
        """Apply a level-up choice and resume. Ignored outside the level-up menu."""
        if self.mode is not Mode.LEVELUP:
            return
        apply_choice(self, choice)
        self.level_up_choices = []
        self._set_mode(Mode.PLAYING)

    def set_movement_intent(self, dx: float, dy: float):
        self.intent = (dx, dy)

    # =========================================================================
    # TIME
    # =========================================================================

    @property
    def now_ms(self) -> float:
        """Game-clock milliseconds. Frozen while not playing."""
        return self.game_time * 1000.0

    def tick(self, dt: float):
        """Advance (if playing) and render one frame."""
        self.step(dt)
        self.draw()

    def step(self, dt: float):
        """Advance the simulation by `dt` seconds. Only runs while playing."""
        if self.mode is not Mode.PLAYING:
            return
        self.game_time += dt
        self.frame += 1
        self.update()

    def update(self):
        player = self.player
        now = self.now_ms

        if now > self.time_dilation_until:
            self.time_dilation_enemy_speed_mul = 1.0
            self.time_dilation_attack_mul = 1.0

        player.update(self.intent)

        if player.hp <= 0:
            self._enter_game_over()
            return

        # One prompt per tick no matter how many levels were gained
        if player.check_level_up():
            self._enter_level_up()

        self._update_spawning()

        ctx = self.build_tick_context()
        for weapon in list(self.weapons):
            weapon.update(self, ctx)

        for snake in list(self.snakes):
            dealt = snake.update(player, ctx.enemy_speed_multiplier, now)
            if dealt > 0:
                self.notify_player_damaged(dealt)
        self.snakes = [snake for snake in self.snakes if snake.segments]

        if player.hp <= 0:
            self.commit_fragments()
            self._enter_game_over()
            return

        self.gems = [gem for gem in self.gems
                     if not gem.update(player, ctx.exp_multiplier)]

        for particle in self.particles:
            particle.update()
        self.particles = [p for p in self.particles if p.life > 0]

        for number in self.damage_numbers:
            number.update()
        self.damage_numbers = [n for n in self.damage_numbers if n.life > 0]

        self.commit_fragments()

    # =========================================================================
    # SPAWNING
    # =========================================================================

    def _update_spawning(self):
        self.spawn_timer += 1
        if self.spawn_timer > spawn_interval(self.game_time, self.config):
            self.spawn_timer = 0
            self.spawn_snake()

        # A long stall queues every crossed gate instead of skipping them
        while self.game_time >= self.next_boss_time:
            self.spawn_boss()
            self.next_boss_time += self.config.boss_spawn_interval

    def spawn_snake(self) -> Snake:
        x, y = spawn_point(self.rng, self.player, self.viewport, self.config.spawn_padding)
        snake = create_regular_snake(self.rng, x, y, self.game_time,
                                     self.enemy_strength_multiplier(), self.config)
        self.snakes.append(snake)
        return snake

    def spawn_boss(self) -> Snake:
        x, y = spawn_point(self.rng, self.player, self.viewport,
                           self.config.boss_spawn_padding)
        snake = create_boss_snake(self.rng, x, y, self.game_time, self.boss_count,
                                  self.enemy_strength_multiplier())
        self.snakes.append(snake)
        self.boss_count += 1
        logger.info('Boss #%d spawned at t=%.1fs (%d segments, hp %.0f)',
                    self.boss_count, self.game_time, len(snake.segments),
                    snake.segments[0].hp)
        return snake

    # =========================================================================
    # COMBAT
    # =========================================================================

    def damage_segment(self, snake, segment, amount: float, source_id: Optional[str] = None):
        """
        Deal damage to one segment.

        Dead segments and non-positive amounts are ignored. A kill fires
        the destroyed event, splits the owning chain and drops a gem.
        """
        if amount <= 0 or segment.hp <= 0:
            return

        owner = self._owner_of(segment, snake) or snake

        is_crit = self.rng.random() < self.config.crit_chance
        if is_crit:
            amount *= CRIT_MULTIPLIER

        segment.hp -= amount
        killed = segment.hp <= 0

        self.damage_numbers.append(DamageNumber(segment.x, segment.y, amount, is_crit))
        spawn_hit_burst(self.particles, segment.x, segment.y, segment.color)

        event = SegmentDamaged(owner, segment, amount, source_id)
        for weapon in list(self.weapons):
            weapon.on_segment_damaged(self, event)

        if killed:
            self._destroy_segment(owner, segment, source_id)

    def _destroy_segment(self, snake, segment, source_id):
        was_head = segment.is_head

        event = SegmentDestroyed(snake, segment, source_id)
        for weapon in list(self.weapons):
            weapon.on_segment_destroyed(self, event)

        # Hooks may already have split the chain this segment lived in
        owner = self._owner_of(segment, snake)
        if owner is None:
            return

        index = owner.segments.index(segment)
        front = owner.segments[:index]
        tail = owner.segments[index + 1:]

        owner.segments = front
        if front:
            front[0].is_head = True
        if tail:
            self._spawned_snakes.append(Snake.from_segments(tail, owner))
            logger.debug('Snake split at %d: %d + %d segments',
                         index, len(front), len(tail))

        self.gems.append(Gem(segment.x, segment.y,
                             HEAD_GEM_EXP if was_head else BODY_GEM_EXP))

    @property
    def active_snakes(self) -> List[Snake]:
        """Every live chain, including ones split off this tick."""
        return self.snakes + self._spawned_snakes

    def _owner_of(self, segment, hint=None) -> Optional[Snake]:
        if hint is not None and segment in hint.segments:
            return hint
        for snake in self.active_snakes:
            if segment in snake.segments:
                return snake
        return None

    def commit_fragments(self):
        """Merge snakes split off this tick into the main roster."""
        if self._spawned_snakes:
            self.snakes.extend(self._spawned_snakes)
            self._spawned_snakes = []
        self.snakes = [snake for snake in self.snakes if snake.segments]

    def notify_player_damaged(self, amount: float):
        event = PlayerDamaged(amount)
        for weapon in list(self.weapons):
            weapon.on_player_damaged(self, event)

    def activate_time_dilation(self, duration_ms: float, enemy_speed_mul: float,
                               attack_cooldown_mul: float):
        """
        Start or refresh slow-time.

        The later deadline wins, while the multipliers always take the
        newest trigger's values.
        """
        self.time_dilation_until = max(self.time_dilation_until, self.now_ms + duration_ms)
        self.time_dilation_enemy_speed_mul = enemy_speed_mul
        self.time_dilation_attack_mul = attack_cooldown_mul

    @property
    def time_dilated(self) -> bool:
        return self.now_ms <= self.time_dilation_until

    # =========================================================================
    # ROSTER
    # =========================================================================

    def get_weapon(self, weapon_id: str):
        for weapon in self.weapons:
            if weapon.id == weapon_id:
                return weapon
        return None

    def has_weapon(self, weapon_id: str) -> bool:
        return self.get_weapon(weapon_id) is not None

    def get_weapon_level(self, weapon_id: str) -> int:
        weapon = self.get_weapon(weapon_id)
        return weapon.level if weapon is not None else 0

    def add_weapon(self, weapon):
        """Add a weapon kind. A kind already held levels up instead."""
        held = self.get_weapon(weapon.id)
        if held is not None:
            held.level_up()
            return held
        self.weapons.append(weapon)
        logger.info('Acquired %s (%d kinds held)', weapon.name, len(self.weapons))
        return weapon

    # =========================================================================
    # ECONOMY
    # =========================================================================

    def attack_penalty_multiplier(self, kinds: Optional[int] = None) -> float:
        """Cooldown stretch from holding `kinds` weapon kinds (default: current roster)."""
        if kinds is None:
            kinds = len(self.weapons)
        return 1 + max(0, kinds - 1) * ATTACK_PENALTY_PER_KIND

    def effective_attack_speed(self, kinds: Optional[int] = None) -> float:
        return max(MIN_ATTACK_SPEED, 1 / self.attack_penalty_multiplier(kinds))

    def exp_multiplier(self) -> float:
        pact = self.get_weapon(GreedPact.id)
        return pact.exp_multiplier if pact is not None else 1.0

    def enemy_strength_multiplier(self) -> float:
        pact = self.get_weapon(GreedPact.id)
        return pact.enemy_multiplier if pact is not None else 1.0

    def build_tick_context(self) -> TickContext:
        return TickContext(
            frame=self.frame,
            now_ms=self.now_ms,
            attack_speed=self.effective_attack_speed(),
            attack_cooldown_multiplier=self.time_dilation_attack_mul,
            enemy_speed_multiplier=self.time_dilation_enemy_speed_mul,
            exp_multiplier=self.exp_multiplier(),
            enemy_strength_multiplier=self.enemy_strength_multiplier(),
        )

    # =========================================================================
    # VIEW
    # =========================================================================

    @property
    def viewport(self) -> Tuple[float, float]:
        """Visible world size in pixels."""
        if self.surface is None:
            return self.config.viewport_width, self.config.viewport_height
        return (self.surface.width * CELL_WIDTH_PX,
                self.surface.game_height * CELL_HEIGHT_PX)

    @property
    def camera(self) -> Tuple[float, float]:
        width, height = self.viewport
        return self.player.x - width / 2, self.player.y - height / 2

    def snapshot(self) -> GameSnapshot:
        player = self.player
        return GameSnapshot(
            mode=self.mode,
            game_time=self.game_time,
            hp=player.hp,
            max_hp=player.max_hp,
            exp=player.exp,
            exp_to_next_level=player.exp_to_next_level,
            level=player.level,
            attack_penalty=self.attack_penalty_multiplier(),
            weapons=tuple(
                WeaponInfo(w.id, w.name, w.level, w.max_level, w.description)
                for w in self.weapons
            ),
            enemy_count=len(self.snakes),
            boss_count=sum(1 for snake in self.snakes if snake.is_boss),
            time_dilated=self.time_dilated,
        )

    def draw(self):
        """Paint the world. Layer order: grid, gems, snakes, weapons, player, effects."""
        surface = self.surface
        if surface is None:
            return
        camera = self.camera

        self._draw_grid(camera)

        for gem in self.gems:
            gem.draw(surface, camera)
        for snake in self.snakes:
            snake.draw(surface, camera)
        for weapon in self.weapons:
            weapon.draw(surface, camera, self)
        self.player.draw(surface, camera, self.now_ms)
        for particle in self.particles:
            particle.draw(surface, camera)
        for number in self.damage_numbers:
            number.draw(surface, camera)

    def _draw_grid(self, camera):
        width, height = self.viewport
        gx0 = math.ceil(camera[0] / GRID_SPACING_PX) * GRID_SPACING_PX
        gy0 = math.ceil(camera[1] / GRID_SPACING_PX) * GRID_SPACING_PX
        for gy in range(int(gy0), int(camera[1] + height), GRID_SPACING_PX):
            for gx in range(int(gx0), int(camera[0] + width), GRID_SPACING_PX):
                col = int((gx - camera[0]) / CELL_WIDTH_PX)
                row = int((gy - camera[1]) / CELL_HEIGHT_PX)
                self.surface.put(col, row, '+', GRAY_DARKER)
