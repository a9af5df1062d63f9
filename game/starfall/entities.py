"""
Game entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum


class EnemyKind(Enum):
    """Enemy category: glyph drawn on screen and points awarded on a kill"""
    INVADER = ("👾", 10)
    ALIEN = ("👽", 15)
    ROBOT = ("🤖", 20)
    OGRE = ("👹", 25)
    SKULL = ("☠️", 25)

    def __init__(self, glyph: str, points: int):
        self.glyph = glyph
        self.points = points

    @property
    def color_key(self) -> str:
        return self.name.lower()


@dataclass
class Player:
    """Player ship. `y` stays fixed for the whole session."""
    x: float
    y: float
    size: float = 40.0
    speed: float = 7.0

    @property
    def radius(self) -> float:
        return self.size / 2


@dataclass
class Bullet:
    """Upward projectile drawn as a vertical bar"""
    x: float
    y: float
    speed: float = 10.0
    width: float = 4.0
    height: float = 15.0
    alive: bool = True

    @property
    def radius(self) -> float:
        # Treated as a circle of diameter `width` for hit tests
        return self.width / 2


@dataclass
class Enemy:
    """Descending enemy sprite"""
    x: float
    y: float
    kind: EnemyKind
    speed: float
    size: float = 30.0
    alive: bool = True

    @property
    def radius(self) -> float:
        return self.size / 2

    @property
    def points(self) -> int:
        return self.kind.points


@dataclass
class Star:
    """Background star, wraps vertically forever"""
    x: float
    y: float
    size: float
    speed: float
