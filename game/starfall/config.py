"""
Game configuration for Starfall
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

# Gameplay constants (pixels, pixels per frame, milliseconds)
GAME_CONFIG: Dict[str, Any] = {
    "width": 800,
    "height": 600,
    "fps": 60,
    "start_lives": 3,
    "player_size": 40,
    "player_speed": 7.0,
    "player_offset": 60,  # player sits this far above the bottom edge
    "shoot_delay_ms": 300.0,
    "bullet_speed": 10.0,
    "bullet_width": 4.0,
    "bullet_height": 15.0,
    "enemy_size": 30,
    "enemy_speed_range": (2.0, 5.0),
    "enemy_spawn_y": -40.0,
    "enemy_spawn_margin": 20.0,
    "enemy_despawn_margin": 50.0,
    "spawn_chance": 0.02,
    "star_count": 100,
    "star_size_range": (1.0, 3.0),
    "star_speed_range": (1.0, 4.0),
}

COLORS: Dict[str, Tuple[int, int, int]] = {
    "background": (0, 0, 0),
    "star": (255, 255, 255),
    "player": (52, 152, 219),   # #3498db
    "bullet": (241, 196, 15),   # #f1c40f
    "hud": (236, 240, 241),
    "overlay": (10, 10, 20),
    "button": (46, 204, 113),
    # Per-kind glyph tints
    "invader": (155, 89, 182),
    "alien": (46, 204, 113),
    "robot": (149, 165, 166),
    "ogre": (231, 76, 60),
    "skull": (236, 240, 241),
}

_RANGE_KEYS = ("enemy_speed_range", "star_size_range", "star_speed_range")
_POSITIVE_KEYS = ("width", "height", "fps", "start_lives", "player_size", "enemy_size")


@dataclass(frozen=True)
class GameConfig:
    """Validated, immutable view of GAME_CONFIG"""
    width: int
    height: int
    fps: int
    start_lives: int
    player_size: float
    player_speed: float
    player_offset: float
    shoot_delay_ms: float
    bullet_speed: float
    bullet_width: float
    bullet_height: float
    enemy_size: float
    enemy_speed_range: Tuple[float, float]
    enemy_spawn_y: float
    enemy_spawn_margin: float
    enemy_despawn_margin: float
    spawn_chance: float
    star_count: int
    star_size_range: Tuple[float, float]
    star_speed_range: Tuple[float, float]

    @classmethod
    def from_dict(cls, overrides: Optional[Dict[str, Any]] = None) -> "GameConfig":
        """
        Build a config from GAME_CONFIG merged with overrides.

        :raises ValueError: On unknown keys or out-of-range values.
        """
        data = dict(GAME_CONFIG)
        for key, value in (overrides or {}).items():
            if key not in data:
                raise ValueError(f"Unknown game config key: {key!r}")
            data[key] = value

        for key in _POSITIVE_KEYS:
            if data[key] <= 0:
                raise ValueError(f"{key} must be positive, got {data[key]!r}")
        if not 0.0 <= data["spawn_chance"] <= 1.0:
            raise ValueError(f"spawn_chance must be in [0, 1], got {data['spawn_chance']!r}")
        if data["star_count"] < 0:
            raise ValueError(f"star_count must be >= 0, got {data['star_count']!r}")
        for key in _RANGE_KEYS:
            lo, hi = data[key]
            if lo > hi:
                raise ValueError(f"{key} is inverted: {data[key]!r}")
            data[key] = (float(lo), float(hi))
        if 2 * data["enemy_spawn_margin"] >= data["width"]:
            raise ValueError("enemy_spawn_margin leaves no playable width")

        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def player_y(self) -> float:
        return self.height - self.player_offset

    @property
    def frame_ms(self) -> float:
        """Milliseconds per display refresh"""
        return 1000.0 / self.fps
