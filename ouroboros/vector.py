"""
Vector Helpers
===============
Distance and direction math shared by every spatial computation.
"""

import math
from typing import Tuple


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(ax - bx, ay - by)


def normalize(dx: float, dy: float) -> Tuple[float, float]:
    """Unit vector in the direction of (dx, dy). Zero vector stays zero."""
    length = math.hypot(dx, dy)
    if length == 0:
        return 0.0, 0.0
    return dx / length, dy / length


def clamp_magnitude(dx: float, dy: float, limit: float = 1.0) -> Tuple[float, float]:
    """Scale (dx, dy) down so its length never exceeds `limit`."""
    length = math.hypot(dx, dy)
    if length <= limit or length == 0:
        return dx, dy
    return dx / length * limit, dy / length * limit
