"""
ShooterEnv - Starfall as a Gymnasium environment
------------------------------------------------
- Same simulation as the playable game (`simulation.step`)
- Gymnasium API, headless by default
- Discrete MultiDiscrete action space: [move(3), fire(2)]
- Vector observation: player state + top-K nearest enemies
- Reward from points scored, lives lost, shots fired and time

Install:
    pip install gymnasium numpy arcade

Quick test:
    python -m game.starfall.shooter_env
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import GameConfig
from .controls import Control, InputTracker
from .entities import EnemyKind
from .render import render_frame
from .simulation import FrameEvents, GameState, new_game, step
from .utils import clamp, make_rng

DEFAULT_REWARD = {
    "R_POINT": 0.1,
    "R_LIFE": 5.0,
    "R_SHOT": 0.01,
    "R_TIME": 0.001,
    "R_GAME_OVER": 10.0,
}

MAX_POINTS = max(kind.points for kind in EnemyKind)


class ShooterEnv(gym.Env):
    """Starfall shooter environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        max_steps: int = 3600,
        k_enemies: int = 5,
        reward_config: Optional[Dict[str, float]] = None,
        **game_overrides: Any,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode: {render_mode!r}")
        self.render_mode = render_mode

        self.config = GameConfig.from_dict(game_overrides)
        self.max_steps = max_steps
        self.k_enemies = k_enemies

        self.reward_config = dict(DEFAULT_REWARD)
        if reward_config:
            self.reward_config.update(
                {k: v for k, v in reward_config.items() if k in DEFAULT_REWARD}
            )

        # Action space:
        # move: 0 stay, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Observation space (vector)
        # Player: x(1) shot readiness(1) lives(1)
        # Each enemy: rel pos(2) speed(1) points(1)
        obs_dim = 3 + self.k_enemies * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.controls = InputTracker()
        self.state: Optional[GameState] = None
        self._rng = None
        self._clock_ms = 0.0
        self._step_count = 0
        self._totals: Dict[str, int] = {}

        self._window = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        self._rng = make_rng(int(self.np_random.integers(0, 2**31 - 1)))

        self.state = new_game(self.config, self._rng)
        self.controls.release_all()
        # Start one cooldown in so the first shot is available immediately
        self._clock_ms = self.config.shoot_delay_ms
        self._step_count = 0
        self._totals = {"kills": 0, "shots": 0, "lives_lost": 0}

        return self._get_obs(), self._get_info()

    def step(self, action):
        if self.state is None:
            raise RuntimeError("Call reset() before step()")

        move, fire = int(action[0]), int(action[1])
        self.controls.set_held(Control.MOVE_LEFT, move == 1)
        self.controls.set_held(Control.MOVE_RIGHT, move == 2)
        self.controls.set_held(Control.FIRE, fire == 1)

        self._clock_ms += self.config.frame_ms
        events = step(self.state, self.controls, self._clock_ms, self._rng)

        self._totals["kills"] += events.kills
        self._totals["shots"] += events.shots
        self._totals["lives_lost"] += events.lives_lost

        reward = self._compute_reward(events)

        terminated = not self.state.running
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        state = self.state
        cfg = self.config
        p = state.player

        readiness = (self._clock_ms - state.last_shot) / max(1e-6, cfg.shoot_delay_ms)
        obs_parts = [
            (p.x / cfg.width) * 2 - 1,
            clamp(readiness, 0.0, 1.0) * 2 - 1,
            (state.lives / cfg.start_lives) * 2 - 1,
        ]

        max_speed = max(1e-6, cfg.enemy_speed_range[1])
        enemies_sorted = sorted(
            state.enemies,
            key=lambda e: (e.x - p.x) ** 2 + (e.y - p.y) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.x - p.x) / cfg.width, -1, 1),
                    clamp((e.y - p.y) / cfg.height, -1, 1),
                    clamp(e.speed / max_speed, -1, 1),
                    e.points / MAX_POINTS,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events: FrameEvents) -> float:
        rc = self.reward_config
        reward = 0.0

        reward += rc["R_POINT"] * events.points
        reward -= rc["R_LIFE"] * events.lives_lost
        reward -= rc["R_SHOT"] * events.shots
        reward -= rc["R_TIME"]

        if events.game_over:
            reward -= rc["R_GAME_OVER"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.state.score,
            "lives": self.state.lives,
            "num_enemies": len(self.state.enemies),
            "num_bullets": len(self.state.bullets),
            "step": self._step_count,
            **self._totals,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None or self.state is None:
            return None

        if self._window is None:
            from .window import FrameWindow
            self._window = FrameWindow(self.config, title="Starfall - ShooterEnv")

        window = self._window
        render_frame(self.state, window.frame)
        window.hud.show_score(self.state.score)
        window.hud.show_lives(self.state.lives)
        if self.state.running:
            window.hud.hide_game_over()
        else:
            window.hud.show_game_over(self.state.final_score)

        window.dispatch_events()
        window.on_draw()
        window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random episode for testing"""
    env = ShooterEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to stop early.")

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render:
            time.sleep(1 / env.metadata["render_fps"])

    print(f"Random episode return: {total:.2f} (score {info['score']}, steps {info['step']})")

    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
