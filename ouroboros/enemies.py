"""
Snake Enemies
==============
Segment chains that chase the player.

Only the head steers; every other segment is pulled toward the one
in front of it, which gives the chain its lagging, organic motion.
"""

from typing import Dict, List

from .vector import distance, normalize
from .render import BLOOD_RED, NEON_RED, GRAY_MED, put_world_char


class Segment:
    """One circular body unit of a snake."""

    def __init__(self, x: float, y: float, hp: float, radius: float, color: int):
        self.x = x
        self.y = y
        self.hp = hp
        self.max_hp = hp
        self.radius = radius
        self.color = color
        self.is_head = False
        # satellite index -> last hit timestamp (ms)
        self.last_orbit_hit: Dict[int, float] = {}

    def draw(self, surface, camera):
        if self.is_head:
            put_world_char(surface, self.x, self.y, camera, '@', NEON_RED)
            return
        # Wounded segments fade toward gray
        color = self.color if self.hp >= self.max_hp * 0.5 else GRAY_MED
        put_world_char(surface, self.x, self.y, camera, 'o', color)


class Snake:
    """An ordered chain of segments, head first."""

    def __init__(self, x: float, y: float, length: int, hp: float, speed: float,
                 damage: float, color: int, radius: float = 12.0,
                 is_boss: bool = False):
        self.speed = speed
        self.damage = damage
        self.is_boss = is_boss
        self.segments: List[Segment] = []
        for i in range(length):
            seg = Segment(x - i * 20, y, hp, radius, color)
            seg.is_head = i == 0
            self.segments.append(seg)

    @classmethod
    def from_segments(cls, segments: List[Segment], template: 'Snake') -> 'Snake':
        """Build a snake around existing segments, inheriting template stats."""
        snake = cls(0, 0, 0, 0, template.speed, template.damage, 0,
                    is_boss=template.is_boss)
        snake.segments = segments
        for i, seg in enumerate(segments):
            seg.is_head = i == 0
        return snake

    @property
    def is_dead(self) -> bool:
        return not self.segments

    @property
    def head(self):
        return self.segments[0] if self.segments else None

    def update(self, player, enemy_speed_multiplier: float = 1.0,
               now_ms: float = 0.0) -> float:
        """
        Advance the chain one tick.

        Returns the total damage actually applied to the player.
        """
        if not self.segments:
            return 0.0

        dealt = 0.0

        head = self.segments[0]
        dx, dy = normalize(player.x - head.x, player.y - head.y)
        step = self.speed * enemy_speed_multiplier
        head.x += dx * step
        head.y += dy * step

        if distance(head.x, head.y, player.x, player.y) < head.radius + player.radius:
            dealt += player.take_damage(self.damage, now_ms)

        for i in range(1, len(self.segments)):
            leader = self.segments[i - 1]
            follower = self.segments[i]
            gap = distance(leader.x, leader.y, follower.x, follower.y)
            # Slight overlap between neighbours
            target = leader.radius + follower.radius - 2

            if gap > target:
                fx, fy = normalize(leader.x - follower.x, leader.y - follower.y)
                follower.x += fx * (gap - target) * 0.5
                follower.y += fy * (gap - target) * 0.5

            if distance(follower.x, follower.y, player.x, player.y) < follower.radius + player.radius:
                dealt += player.take_damage(self.damage * 0.5, now_ms)

        return dealt

    def draw(self, surface, camera):
        # Tail first so the head ends up on top
        for seg in reversed(self.segments):
            seg.draw(surface, camera)
        if self.is_boss and self.segments:
            head = self.segments[0]
            put_world_char(surface, head.x, head.y - head.radius - 10, camera, 'V', BLOOD_RED)
