"""
Player Module
==============
The player entity and keyboard input handling.
"""

from typing import Optional, Tuple
import math

from .vector import clamp_magnitude
from .render import (
    NEON_CYAN, NEON_RED, GRAY_DARKER, WHITE,
    put_world_char, plot_ring
)


NEVER = float('-inf')


class Player:
    """
    The player-controlled entity.

    Timestamps are game-clock milliseconds supplied by the engine, so the
    invulnerability window freezes along with the simulation when paused.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Restore every field to its new-session value."""
        self.x = 0.0
        self.y = 0.0
        self.intent_x = 0.0
        self.intent_y = 0.0
        self.speed = 4.0
        self.radius = 16.0
        self.max_hp = 100.0
        self.hp = 100.0
        self.exp = 0.0
        self.level = 1
        self.exp_to_next_level = 10
        self.pickup_radius = 80.0
        self.last_damage_time = NEVER
        self.invuln_duration = 500.0
        self.extra_invuln_until = NEVER

    def update(self, intent: Tuple[float, float] = (0.0, 0.0)):
        """Move by the movement intent. Magnitude is capped at 1."""
        self.intent_x, self.intent_y = clamp_magnitude(intent[0], intent[1])
        self.x += self.intent_x * self.speed
        self.y += self.intent_y * self.speed

    def is_invulnerable(self, now_ms: float) -> bool:
        if now_ms < self.extra_invuln_until:
            return True
        return now_ms - self.last_damage_time <= self.invuln_duration

    def take_damage(self, amount: float, now_ms: float) -> float:
        """
        Apply damage unless inside an invulnerability window.

        Returns the damage actually applied (0 when blocked).
        """
        if amount <= 0 or self.is_invulnerable(now_ms):
            return 0.0
        applied = min(amount, self.hp)
        self.hp = max(0.0, self.hp - amount)
        self.last_damage_time = now_ms
        return applied

    def extend_invulnerability(self, until_ms: float):
        """Grant extra invulnerability; never shortens an existing window."""
        self.extra_invuln_until = max(self.extra_invuln_until, until_ms)

    def heal(self, amount: float):
        self.hp = min(self.max_hp, self.hp + max(0.0, amount))

    def gain_exp(self, amount: float):
        self.exp += amount

    def check_level_up(self) -> bool:
        """
        Consume exp into levels. Each level raises the threshold by 1.5x.

        Returns True if at least one level was gained.
        """
        leveled = False
        while self.exp >= self.exp_to_next_level:
            self.exp -= self.exp_to_next_level
            self.level += 1
            self.exp_to_next_level = int(self.exp_to_next_level * 1.5)
            leveled = True
        return leveled

    def draw(self, surface, camera, now_ms: float = 0.0):
        plot_ring(surface, self.x, self.y, self.pickup_radius, camera, GRAY_DARKER)

        # Blink every 100ms while invulnerable
        color = NEON_CYAN
        if self.is_invulnerable(now_ms) and self.last_damage_time != NEVER:
            if int(now_ms // 100) % 2 == 0:
                color = NEON_RED
        put_world_char(surface, self.x, self.y, camera, '@', color if self.hp > 0 else WHITE)


class InputHandler:
    """
    Turns terminal key presses into a debounced movement intent.

    Terminals don't report key-up events, so movement keys stay "held"
    for a few frames after each press.
    """

    MOVEMENT_KEYS = {
        'w': (0, -1), 's': (0, 1), 'a': (-1, 0), 'd': (1, 0),
        'KEY_UP': (0, -1), 'KEY_DOWN': (0, 1),
        'KEY_LEFT': (-1, 0), 'KEY_RIGHT': (1, 0),
    }

    def __init__(self, hold_duration: int = 12):
        self.keys_held: dict = {}
        self.hold_duration = hold_duration

        self._quit_triggered = False
        self._confirm_triggered = False
        self._restart_triggered = False
        self._toggle_fps = False
        self._choice: Optional[int] = None

    def process_key(self, key) -> None:
        """Process a single key press from blessed's inkey()."""
        if key is None or not key:
            return

        key_str = key.lower() if not key.is_sequence else ''
        name = key.name if key.is_sequence else key_str

        if key_str == 'q' or name == 'KEY_ESCAPE':
            self._quit_triggered = True
            return

        if name in self.MOVEMENT_KEYS:
            self.keys_held[name] = self.hold_duration
        elif key_str in ('1', '2', '3'):
            self._choice = int(key_str) - 1
        elif key_str == 'r':
            self._restart_triggered = True
        elif key_str == 'f' or name == 'KEY_F1':
            self._toggle_fps = True

        # Any key counts as "press any key"
        self._confirm_triggered = True

    def update(self) -> None:
        """Update key hold timers (call once per frame)."""
        expired = []
        for key, frames in self.keys_held.items():
            self.keys_held[key] = frames - 1
            if self.keys_held[key] <= 0:
                expired.append(key)
        for key in expired:
            del self.keys_held[key]

    def get_movement_vector(self) -> Tuple[float, float]:
        """Current movement intent. Diagonals are normalized."""
        dx, dy = 0.0, 0.0
        for key in self.keys_held:
            kx, ky = self.MOVEMENT_KEYS[key]
            dx += kx
            dy += ky
        dx = max(-1.0, min(1.0, dx))
        dy = max(-1.0, min(1.0, dy))

        if dx != 0 and dy != 0:
            length = math.sqrt(dx * dx + dy * dy)
            dx /= length
            dy /= length

        return dx, dy

    def consume_quit(self) -> bool:
        triggered = self._quit_triggered
        self._quit_triggered = False
        return triggered

    def consume_confirm(self) -> bool:
        triggered = self._confirm_triggered
        self._confirm_triggered = False
        return triggered

    def consume_restart(self) -> bool:
        triggered = self._restart_triggered
        self._restart_triggered = False
        return triggered

    def consume_toggle_fps(self) -> bool:
        triggered = self._toggle_fps
        self._toggle_fps = False
        return triggered

    def consume_choice(self) -> Optional[int]:
        """Menu choice index picked with 1-3, or None."""
        choice = self._choice
        self._choice = None
        return choice
