import numpy as np
import pytest

from game.starfall.entities import Bullet, Enemy, EnemyKind
from game.starfall.shooter_env import ShooterEnv


@pytest.fixture
def env():
    env = ShooterEnv(max_steps=200, k_enemies=3)
    yield env
    env.close()


def test_reset_returns_observation_in_space(env):
    obs, info = env.reset(seed=0)
    assert obs.shape == (3 + 3 * 4,)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0
    assert info["lives"] == 3
    assert info["step"] == 0


def test_step_before_reset_raises(env):
    with pytest.raises(RuntimeError):
        env.step(np.array([0, 0]))


def test_unsupported_render_mode():
    with pytest.raises(ValueError):
        ShooterEnv(render_mode="rgb_array")


def test_unknown_game_override():
    with pytest.raises(ValueError):
        ShooterEnv(gravity=9.8)


def test_actions_drive_the_player(env):
    env.reset(seed=0)
    x0 = env.state.player.x
    env.step(np.array([1, 0]))
    assert env.state.player.x == x0 - env.config.player_speed
    env.step(np.array([2, 0]))
    env.step(np.array([2, 0]))
    assert env.state.player.x == x0 + env.config.player_speed


def test_first_shot_is_immediate(env):
    env.reset(seed=0)
    _, _, _, _, info = env.step(np.array([0, 1]))
    assert info["shots"] == 1
    assert info["num_bullets"] == 1


def test_same_seed_same_rollout():
    def rollout(seed):
        env = ShooterEnv(max_steps=300, spawn_chance=0.1)
        env.reset(seed=seed)
        env.action_space.seed(seed)
        obs_seq = []
        for _ in range(300):
            obs, _, terminated, truncated, _ = env.step(env.action_space.sample())
            obs_seq.append(obs)
            if terminated or truncated:
                break
        return np.stack(obs_seq)

    np.testing.assert_array_equal(rollout(11), rollout(11))


def test_truncates_at_max_steps():
    env = ShooterEnv(max_steps=5, spawn_chance=0.0)
    env.reset(seed=1)
    truncated = False
    for i in range(5):
        _, _, terminated, truncated, info = env.step(np.array([0, 0]))
        assert not terminated
    assert truncated
    assert info["step"] == 5


def test_game_over_terminates_with_penalty(env):
    env.reset(seed=0)
    env.state.lives = 1
    p = env.state.player
    env.state.enemies.append(Enemy(x=p.x, y=p.y, kind=EnemyKind.OGRE, speed=0.0))

    _, reward, terminated, _, info = env.step(np.array([0, 0]))

    assert terminated
    assert info["lives"] == 0
    rc = env.reward_config
    assert reward == pytest.approx(-rc["R_LIFE"] - rc["R_TIME"] - rc["R_GAME_OVER"])


def test_kill_reward(env):
    env.reset(seed=0)
    env.state.enemies = [Enemy(x=100, y=200, kind=EnemyKind.ALIEN, speed=0.0)]
    env.state.bullets = [Bullet(x=100, y=210)]

    _, reward, _, _, info = env.step(np.array([0, 0]))

    assert info["kills"] == 1
    assert info["score"] == 15
    assert reward > 0


def test_nearest_enemy_comes_first(env):
    env.reset(seed=0)
    p = env.state.player
    env.state.enemies = [
        Enemy(x=p.x + 300, y=100, kind=EnemyKind.INVADER, speed=0.0),
        Enemy(x=p.x - 40, y=p.y - 200, kind=EnemyKind.SKULL, speed=0.0),
    ]
    obs = env._get_obs()
    assert obs[3] == pytest.approx(-40 / env.config.width)
    assert obs[6] == pytest.approx(1.0)  # 25 points is the maximum
    assert obs[10] == pytest.approx(10 / 25)


def test_render_none_is_noop(env):
    env.reset(seed=0)
    assert env.render() is None
