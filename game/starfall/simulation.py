"""
Session state and the per-frame update step
-------------------------------------------
All gameplay rules live here. A frame is one call to `step`:

1. move the player from the held controls
2. fire if the cooldown allows
3. advance bullets, resolve bullet/enemy hits
4. advance enemies, resolve enemy/player hits
5. maybe spawn an enemy
6. scroll the starfield

Movement is per frame, not per second: hosts call `step` once per display
refresh. Timestamps are milliseconds and only gate the fire cooldown.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .config import GameConfig
from .controls import Control, InputTracker
from .entities import Bullet, Enemy, Player, Star
from .spawner import make_bullet, make_stars, spawn_enemy
from .utils import clamp, collides, make_rng

logger = logging.getLogger(__name__)


@dataclass
class FrameEvents:
    """What happened during one update step"""
    shots: int = 0
    kills: int = 0
    points: int = 0
    lives_lost: int = 0
    spawned: int = 0
    game_over: bool = False


@dataclass
class GameState:
    """Everything the update step mutates and the renderer reads"""
    config: GameConfig
    player: Player
    stars: List[Star]
    bullets: List[Bullet] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    score: int = 0
    lives: int = 3
    running: bool = True
    last_shot: float = 0.0  # timestamp (ms) of the previous shot
    final_score: Optional[int] = None


def _new_player(config: GameConfig) -> Player:
    return Player(
        x=config.width / 2,
        y=config.player_y,
        size=config.player_size,
        speed=config.player_speed,
    )


def new_game(config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> GameState:
    """Fresh session with a newly scattered starfield"""
    config = config or GameConfig.from_dict()
    rng = make_rng(rng)
    return GameState(
        config=config,
        player=_new_player(config),
        stars=make_stars(config, rng),
        lives=config.start_lives,
    )


def reset_game(state: GameState) -> GameState:
    """Restore session values and entity collections; the starfield is kept"""
    config = state.config
    state.player = _new_player(config)
    state.bullets = []
    state.enemies = []
    state.score = 0
    state.lives = config.start_lives
    state.running = True
    state.last_shot = 0.0
    state.final_score = None
    return state


def step(
    state: GameState,
    controls: InputTracker,
    timestamp: float,
    rng: random.Random,
) -> FrameEvents:
    """Advance the game by one frame. A finished game is left untouched."""
    events = FrameEvents()
    if not state.running:
        return events

    held = controls.snapshot()

    _move_player(state, held)
    _fire(state, held, timestamp, events)
    _update_bullets(state, events)
    _update_enemies(state, events)
    _spawn_logic(state, rng, events)
    _update_stars(state, rng)

    return events


# ----------------------------
# Core mechanics
# ----------------------------

def _move_player(state: GameState, held) -> None:
    player = state.player
    half = player.size / 2
    if held[Control.MOVE_LEFT]:
        player.x -= player.speed
    if held[Control.MOVE_RIGHT]:
        player.x += player.speed
    player.x = clamp(player.x, half, state.config.width - half)


def _fire(state: GameState, held, timestamp: float, events: FrameEvents) -> None:
    if not held[Control.FIRE]:
        return
    if timestamp - state.last_shot <= state.config.shoot_delay_ms:
        return

    state.bullets.append(make_bullet(state.player, state.config))
    state.last_shot = timestamp
    events.shots += 1


def _update_bullets(state: GameState, events: FrameEvents) -> None:
    # Newest bullet resolves first
    for b in reversed(state.bullets):
        b.y -= b.speed

        # Left through the top edge
        if b.y < 0:
            b.alive = False
            continue

        # First enemy hit stops the bullet
        for e in reversed(state.enemies):
            if not e.alive:
                continue
            if collides(b, e):
                e.alive = False
                b.alive = False
                state.score += e.points
                events.kills += 1
                events.points += e.points
                break

    state.bullets = [b for b in state.bullets if b.alive]
    state.enemies = [e for e in state.enemies if e.alive]


def _update_enemies(state: GameState, events: FrameEvents) -> None:
    limit = state.config.height + state.config.enemy_despawn_margin

    for e in state.enemies:
        e.y += e.speed

        if e.y > limit:
            e.alive = False
            continue

        if collides(e, state.player):
            e.alive = False
            # Lives stop at zero; later contacts in the final frame are free
            if state.running:
                state.lives -= 1
                events.lives_lost += 1
                logger.info("Life lost, %d remaining", state.lives)
                if state.lives <= 0:
                    _game_over(state, events)

    state.enemies = [e for e in state.enemies if e.alive]


def _game_over(state: GameState, events: FrameEvents) -> None:
    state.lives = 0
    state.running = False
    state.final_score = state.score
    events.game_over = True
    logger.info("Game over, final score %d", state.score)


def _spawn_logic(state: GameState, rng: random.Random, events: FrameEvents) -> None:
    if rng.random() < state.config.spawn_chance:
        state.enemies.append(spawn_enemy(state.config, rng))
        events.spawned += 1


def _update_stars(state: GameState, rng: random.Random) -> None:
    height = state.config.height
    for star in state.stars:
        star.y += star.speed
        if star.y > height:
            star.y = 0.0
            star.x = rng.uniform(0, state.config.width)
