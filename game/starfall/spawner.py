"""
Entity construction: enemies, bullets and the star pool
"""

from __future__ import annotations

import logging
import random
from typing import List

from .config import GameConfig
from .entities import Bullet, Enemy, EnemyKind, Player, Star

logger = logging.getLogger(__name__)

ENEMY_KINDS = list(EnemyKind)


def spawn_enemy(config: GameConfig, rng: random.Random) -> Enemy:
    """New enemy just above the top edge, inside the inset playable width"""
    kind = rng.choice(ENEMY_KINDS)
    margin = config.enemy_spawn_margin
    x = rng.uniform(margin, config.width - margin)
    speed = rng.uniform(*config.enemy_speed_range)

    logger.debug("Spawned %s at x=%.1f speed=%.2f", kind.name, x, speed)
    return Enemy(x=x, y=config.enemy_spawn_y, kind=kind, speed=speed, size=config.enemy_size)


def make_bullet(player: Player, config: GameConfig) -> Bullet:
    """Bullet leaving the ship's nose"""
    return Bullet(
        x=player.x,
        y=player.y - player.size / 2,
        speed=config.bullet_speed,
        width=config.bullet_width,
        height=config.bullet_height,
    )


def make_stars(config: GameConfig, rng: random.Random) -> List[Star]:
    """Fixed-size star pool scattered over the whole surface"""
    return [
        Star(
            x=rng.uniform(0, config.width),
            y=rng.uniform(0, config.height),
            size=rng.uniform(*config.star_size_range),
            speed=rng.uniform(*config.star_speed_range),
        )
        for _ in range(config.star_count)
    ]
