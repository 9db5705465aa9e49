"""
Visual Effects
===============
Hit sparks and floating damage numbers. Purely cosmetic: they draw
from the module-level random generator so they never disturb the
engine's gameplay rolls.
"""

import random
import math
from typing import List

from .render import NEON_YELLOW, WHITE, put_world_text, to_screen


class Particle:
    """A braille spark drifting outward and fading."""

    def __init__(self, x: float, y: float, color: int, speed: float = 2.0):
        self.x = x
        self.y = y
        angle = random.uniform(0, math.pi * 2)
        s = random.uniform(0, speed)
        self.vx = math.cos(angle) * s
        self.vy = math.sin(angle) * s
        self.max_life = random.randint(20, 40)
        self.life = self.max_life
        self.color = color

    def update(self):
        self.x += self.vx
        self.y += self.vy
        self.life -= 1

    def draw(self, surface, camera):
        sx, sy = to_screen(self.x, self.y, camera)
        surface.put_braille_pixel(sx, sy, self.color)


class DamageNumber:
    """Floating damage readout. Crits render in yellow."""

    def __init__(self, x: float, y: float, value: float, is_crit: bool = False):
        self.x = x + random.uniform(-10, 10)
        self.y = y + random.uniform(-10, 10)
        self.value = int(value)
        self.max_life = 30
        self.life = self.max_life
        self.is_crit = is_crit

    def update(self):
        self.y -= 1
        self.life -= 1

    def draw(self, surface, camera):
        text = f'{self.value}!' if self.is_crit else str(self.value)
        put_world_text(surface, self.x, self.y, camera, text,
                       NEON_YELLOW if self.is_crit else WHITE)


def spawn_hit_burst(particles: List[Particle], x: float, y: float,
                    color: int, count: int = 3, speed: float = 3.0):
    """Append a small burst of sparks at a hit location."""
    for _ in range(count):
        particles.append(Particle(x, y, color, speed))
