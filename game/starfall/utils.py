"""
Utility functions for game mechanics
"""

from __future__ import annotations
import logging
import math
import random
from typing import Optional, Union

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap (touching does not count)"""
    return math.hypot(x1 - x2, y1 - y2) < r1 + r2


def collides(a, b) -> bool:
    """
    Distance-based hit test between two entities.

    Every collidable entity exposes ``x``, ``y`` and ``radius``. Bullets are
    rectangles but are tested as circles of diameter ``width``.
    """
    return circle_collide(a.x, a.y, a.radius, b.x, b.y, b.radius)


def make_rng(seed: Optional[Union[int, random.Random]] = None) -> random.Random:
    """Return a private random source; an existing Random is passed through"""
    if isinstance(seed, random.Random):
        return seed
    return random.Random(seed)


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Set up root logging once for scripts and the launcher"""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=_LOG_FORMAT)
