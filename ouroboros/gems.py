"""
Experience Gems
================
Dropped by destroyed segments. Idle until the player comes within
pickup range, then homes in and is consumed on contact.
"""

from .vector import distance, normalize
from .render import NEON_GREEN, NEON_BLUE, NEON_RED, put_world_char

GEM_HOMING_SPEED = 10.0


def gem_color(exp: float) -> int:
    """Color band for a gem's exp tier."""
    if exp < 5:
        return NEON_GREEN
    if exp < 20:
        return NEON_BLUE
    return NEON_RED


class Gem:

    def __init__(self, x: float, y: float, exp: float):
        self.x = x
        self.y = y
        self.exp = exp
        self.radius = 4.0
        self.color = gem_color(exp)
        self.collected = False  # True once homing toward the player

    def update(self, player, exp_multiplier: float = 1.0) -> bool:
        """Advance one tick. Returns True when consumed."""
        dist = distance(self.x, self.y, player.x, player.y)
        if not self.collected:
            if dist < player.pickup_radius:
                self.collected = True
            return False

        if dist < player.radius:
            player.gain_exp(self.exp * exp_multiplier)
            return True

        dx, dy = normalize(player.x - self.x, player.y - self.y)
        self.x += dx * GEM_HOMING_SPEED
        self.y += dy * GEM_HOMING_SPEED
        return False

    def draw(self, surface, camera):
        put_world_char(surface, self.x, self.y, camera, '◆', self.color)
